"""Formatters for game log output."""

from truco.models.card import Card, RankedCard, Suit
from truco.models.player import Player

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.SPADES: "S",
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
}


def format_card(card: Card | RankedCard) -> str:
    """Format a single card to string.

    Args:
        card: Card to format, with or without power.

    Returns:
        Formatted string (e.g., "QS" for the queen of spades).
    """
    if isinstance(card, RankedCard):
        card = card.card
    return f"{card.rank.value}{SUIT_CODES[card.suit]}"


def format_cards(cards: list[Card] | list[RankedCard]) -> str:
    """Format cards to comma-separated string, keeping their order.

    Returns:
        Comma-separated card strings (e.g., "QS,3H,JC").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_hands(players: list[Player]) -> dict[str, str]:
    """Format all players' hands to dict.

    Returns:
        Dict mapping seat (as string) to formatted hand string.
    """
    return {str(p.seat): format_cards(p.hand) for p in players}
