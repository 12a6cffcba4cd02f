"""Base strategy class for seats.

Defines the interface that every seat controller must implement.
"""

from abc import ABC, abstractmethod

from truco.models.game_state import GameState
from truco.models.player import Player


class Strategy(ABC):
    """Abstract base class for seat strategies.

    A strategy only chooses which card to play; removing the card from the
    hand is done by the round resolver.
    """

    @abstractmethod
    def select_card(self, player: Player, state: GameState) -> int:
        """Select the card to play.

        Args:
            player: Seat to play, with its current hand
            state: Current game state

        Returns:
            0-based index into ``player.hand``
        """
        pass
