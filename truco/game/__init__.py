"""Game logic."""

from .dealer import EmptyPoolError, deal, draw_random, eligible_cards, shuffle
from .engine import GameEngine, build_strategies
from .ranking import card_power, manilha_rank, rank_cards, rank_hands
from .resolver import RoundResolver, play_order, winning_index

__all__ = [
    "EmptyPoolError",
    "GameEngine",
    "RoundResolver",
    "build_strategies",
    "card_power",
    "deal",
    "draw_random",
    "eligible_cards",
    "manilha_rank",
    "play_order",
    "rank_cards",
    "rank_hands",
    "shuffle",
    "winning_index",
]
