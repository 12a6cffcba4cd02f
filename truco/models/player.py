"""Player model."""

from pydantic import BaseModel, Field

from .card import RankedCard
from .game_state import team_for_seat


class Player(BaseModel):
    """Seat state."""

    seat: int  # 1-4
    name: str = "Player"
    is_human: bool = False

    # Cards leave the hand as they are played
    hand: list[RankedCard] = Field(default_factory=list)

    @property
    def team(self) -> int:
        """Team index (0 for odd seats, 1 for even seats)."""
        return team_for_seat(self.seat)

    def hand_count(self) -> int:
        """Get number of cards in hand."""
        return len(self.hand)

    def play(self, index: int) -> RankedCard:
        """Remove and return the card at ``index`` (0-based)."""
        return self.hand.pop(index)

    def __str__(self) -> str:
        kind = "human" if self.is_human else "cpu"
        return f"Player{self.seat}[{self.name}] ({kind})"

    def __repr__(self) -> str:
        return (
            f"Player(seat={self.seat}, name={self.name!r}, "
            f"human={self.is_human}, cards={len(self.hand)})"
        )
