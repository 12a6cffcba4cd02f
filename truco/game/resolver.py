"""Round resolution."""

from __future__ import annotations

import logging
from typing import Callable

from truco.models.game_state import GameState, PlayedCard, RoundResult
from truco.models.player import Player
from truco.strategy.base import Strategy

logger = logging.getLogger(__name__)


def play_order(starting_seat: int, num_players: int = 4) -> list[int]:
    """Get the seats in play order for a round.

    Seats are numbered from 1 and wrap around, e.g. starting at 3 with four
    players gives [3, 4, 1, 2].
    """
    return [(starting_seat + i - 1) % num_players + 1 for i in range(num_players)]


def winning_index(played: list[PlayedCard]) -> int:
    """Get the position of the winning card in play order.

    The first card reaching the highest power wins; a later card with the
    same power does not take the round.
    """
    if not played:
        raise ValueError("No cards were played")

    best = 0
    for i, card in enumerate(played):
        if card.power > played[best].power:
            best = i
    return best


class RoundResolver:
    """Collects one card per seat and decides the round winner."""

    def __init__(self, strategies: dict[int, Strategy]):
        """Initialize resolver.

        Args:
            strategies: Strategy for each seat number
        """
        self.strategies = strategies

        self._on_card_played: Callable[[PlayedCard], None] | None = None

    def set_callbacks(
        self,
        on_card_played: Callable[[PlayedCard], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_card_played: Called after each card leaves a hand
        """
        self._on_card_played = on_card_played

    def play_round(
        self,
        players: list[Player],
        starting_seat: int,
        state: GameState | None = None,
        round_number: int = 1,
    ) -> RoundResult:
        """Play one round.

        Args:
            players: All seats, each with its hand
            starting_seat: Seat that plays first
            state: Current game state, passed to strategies
            round_number: Round number for the result

        Returns:
            RoundResult with the winner and cards in play order
        """
        if state is None:
            state = GameState()
        by_seat = {p.seat: p for p in players}
        order = play_order(starting_seat, len(players))
        played: list[PlayedCard] = []

        for seat in order:
            player = by_seat[seat]
            index = self.strategies[seat].select_card(player, state)
            card = PlayedCard(seat=seat, card=player.play(index))
            played.append(card)
            logger.debug(f"Player {seat} played {card.card!r}")

            if self._on_card_played:
                self._on_card_played(card)

        winner = order[winning_index(played)]
        logger.info(f"Round {round_number} won by player {winner}")

        return RoundResult(
            round_number=round_number,
            winner=winner,
            played_cards=played,
            play_order=order,
        )
