"""Card models."""

from enum import Enum

from pydantic import BaseModel


class Rank(str, Enum):
    """Card rank.

    Only six ranks are used; the 24-card deck has no 4, 5, 6 or 7.
    """

    ACE = "A"
    TWO = "2"
    THREE = "3"
    QUEEN = "Q"
    JACK = "J"
    KING = "K"


class Suit(str, Enum):
    """Card suit."""

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"


SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

# Deck construction order
RANKS = [Rank.ACE, Rank.TWO, Rank.THREE, Rank.QUEEN, Rank.JACK, Rank.KING]
SUITS = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]


class Card(BaseModel, frozen=True):
    """Single card representation."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.value} of {self.suit.value}"

    def __repr__(self) -> str:
        return f"{self.rank.value}{SUIT_SYMBOLS[self.suit]}"


class RankedCard(BaseModel, frozen=True):
    """A card annotated with its power for the current game."""

    card: Card
    power: int

    @property
    def rank(self) -> Rank:
        return self.card.rank

    @property
    def suit(self) -> Suit:
        return self.card.suit

    def __str__(self) -> str:
        return f"{self.card} (power: {self.power})"

    def __repr__(self) -> str:
        return f"{self.card!r}:{self.power}"


def create_deck() -> list[Card]:
    """Create the ordered 24-card deck.

    Ranks are the outer loop and suits the inner loop, so the deck starts
    with the four aces and ends with the four kings.
    """
    return [Card(rank=rank, suit=suit) for rank in RANKS for suit in SUITS]
