"""Game state models."""

from pydantic import BaseModel, Field

from .card import Card, Rank, RankedCard

NUM_TEAMS = 2
ROUNDS_TO_WIN = 2

TEAM_SEATS = {
    0: "players 1 and 3",
    1: "players 2 and 4",
}


class PlayedCard(BaseModel, frozen=True):
    """A card committed to a round by a seat."""

    seat: int
    card: RankedCard

    @property
    def power(self) -> int:
        return self.card.power


class RoundResult(BaseModel, frozen=True):
    """Outcome of a single round."""

    round_number: int
    winner: int  # Seat number 1-4
    played_cards: list[PlayedCard]  # In play order
    play_order: list[int]

    @property
    def winning_card(self) -> PlayedCard:
        for played in self.played_cards:
            if played.seat == self.winner:
                return played
        raise ValueError(f"Winner {self.winner} did not play in this round")


class GameState(BaseModel):
    """Overall game state."""

    # Trump
    vira: Card | None = None
    manilha: Rank | None = None

    # Progress
    round_number: int = 0
    starting_seat: int = 1
    team_wins: list[int] = Field(default_factory=lambda: [0] * NUM_TEAMS)
    results: list[RoundResult] = Field(default_factory=list)

    winning_team: int | None = None  # Team number 1 or 2 once decided

    def record_round(self, result: RoundResult) -> int:
        """Apply a round outcome.

        The winner's team gets one win and the winner starts the next round.

        Returns:
            Team index (0 or 1) that won the round.
        """
        team = team_for_seat(result.winner)
        self.team_wins[team] += 1
        self.starting_seat = result.winner
        self.results.append(result)
        return team

    def leading_team(self) -> int | None:
        """Get the team index that has already won the game, if any."""
        for team, wins in enumerate(self.team_wins):
            if wins >= ROUNDS_TO_WIN:
                return team
        return None

    def is_over(self) -> bool:
        return self.winning_team is not None

    def reset_for_new_game(self) -> None:
        """Reset state for a new game."""
        self.vira = None
        self.manilha = None
        self.round_number = 0
        self.starting_seat = 1
        self.team_wins = [0] * NUM_TEAMS
        self.results = []
        self.winning_team = None

    def __str__(self) -> str:
        parts = [f"Round {self.round_number}"]
        if self.vira is not None:
            parts.append(f"vira {self.vira!r}")
        parts.append(f"score {self.team_wins[0]}-{self.team_wins[1]}")
        parts.append(f"Player {self.starting_seat} starts")
        return " ".join(parts)


def team_for_seat(seat: int) -> int:
    """Map a seat number to its team index (seats 1 and 3 are team 0)."""
    return 0 if seat % 2 == 1 else 1
