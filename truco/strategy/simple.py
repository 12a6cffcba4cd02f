"""Automated seat strategy."""

from truco.models.game_state import GameState
from truco.models.player import Player
from truco.strategy.base import Strategy


class LastCardStrategy(Strategy):
    """Always play the last card of the hand.

    Not the strongest card: the choice ignores power entirely.
    """

    def select_card(self, player: Player, state: GameState) -> int:
        if not player.hand:
            raise ValueError(f"Player {player.seat} has no cards to play")
        return len(player.hand) - 1
