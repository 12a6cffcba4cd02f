"""Game models."""

from .card import RANKS, SUITS, Card, RankedCard, Rank, Suit, create_deck
from .game_state import GameState, PlayedCard, RoundResult, team_for_seat
from .player import Player

__all__ = [
    "RANKS",
    "SUITS",
    "Card",
    "RankedCard",
    "Rank",
    "Suit",
    "create_deck",
    "Player",
    "GameState",
    "PlayedCard",
    "RoundResult",
    "team_for_seat",
]
