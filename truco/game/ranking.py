"""Card power ranking.

The vira (trump indicator) selects the manilha rank: the rank that follows
the vira's rank in ``MANILHA_CYCLE``, wrapping from 3 back to Q. Manilhas
beat every other card and are ordered among themselves by suit. All other
cards use a fixed rank order where suit does not matter.

Power values:
    manilha:      clubs 10, hearts 9, spades 8, diamonds 7
    non-manilha:  3=6, 2=5, A=4, K=3, J=2, Q=1
"""

from truco.models.card import Card, Rank, RankedCard, Suit

MANILHA_CYCLE = [Rank.QUEEN, Rank.JACK, Rank.KING, Rank.ACE, Rank.TWO, Rank.THREE]

# Strongest first
MANILHA_SUIT_PRIORITY = [Suit.CLUBS, Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS]

# Strongest first; 7-4 are not in the 24-card deck
FIXED_ORDER = ["3", "2", "A", "K", "J", "Q", "7", "6", "5", "4"]

MANILHA_BASE_POWER = 10
FIXED_BASE_POWER = 6
FIXED_MAX_INDEX = 5


def manilha_rank(vira: Card) -> Rank | None:
    """Get the manilha rank for a vira.

    Returns:
        The rank after the vira's rank in the cycle, or None if the vira's
        rank is not part of the cycle.
    """
    if vira.rank not in MANILHA_CYCLE:
        return None
    index = MANILHA_CYCLE.index(vira.rank)
    return MANILHA_CYCLE[(index + 1) % len(MANILHA_CYCLE)]


def card_power(vira: Card, card: Card) -> int:
    """Get the power of a card. Higher is stronger."""
    if card.rank == manilha_rank(vira):
        return MANILHA_BASE_POWER - MANILHA_SUIT_PRIORITY.index(card.suit)

    if card.rank.value not in FIXED_ORDER:
        return 0
    index = FIXED_ORDER.index(card.rank.value)
    return FIXED_BASE_POWER - min(index, FIXED_MAX_INDEX)


def rank_cards(vira: Card, cards: list[Card]) -> list[RankedCard]:
    """Annotate cards with their power, keeping their order."""
    return [RankedCard(card=card, power=card_power(vira, card)) for card in cards]


def rank_hands(vira: Card, hands: list[list[Card]]) -> list[list[RankedCard]]:
    """Annotate every dealt hand with card powers."""
    return [rank_cards(vira, hand) for hand in hands]
