"""Shuffling and dealing."""

import logging
import random

from truco.models.card import Card

logger = logging.getLogger(__name__)


class EmptyPoolError(RuntimeError):
    """Raised when more cards are requested than the pool holds."""


def shuffle(cards: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of ``cards``.

    The swap partner ``j`` is drawn from ``[0, i)``, never ``i`` itself, so
    every card leaves its position. This is not a uniform permutation.

    Args:
        cards: Cards to shuffle. Not modified.
        rng: Random source (module-level random if not provided).

    Returns:
        New list with the same cards in shuffled order.
    """
    rng = rng or random.Random()
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def draw_random(pool: list[Card], rng: random.Random | None = None) -> Card:
    """Remove and return one random card from ``pool``.

    Raises:
        EmptyPoolError: If the pool is empty.
    """
    if not pool:
        raise EmptyPoolError("Cannot draw from an empty pool")
    rng = rng or random.Random()
    return pool.pop(rng.randrange(len(pool)))


def eligible_cards(deck: list[Card], vira: Card) -> list[Card]:
    """Get the cards that may be dealt once the vira is known.

    Every card sharing the vira's rank or its suit is left out, not only the
    vira itself.
    """
    return [
        card for card in deck if card.rank != vira.rank and card.suit != vira.suit
    ]


def deal(
    deck: list[Card],
    vira: Card,
    num_players: int,
    hand_size: int,
    rng: random.Random | None = None,
) -> list[list[Card]]:
    """Deal hands without replacement.

    Args:
        deck: Remaining deck. Not modified.
        vira: Trump indicator.
        num_players: Number of hands to deal.
        hand_size: Cards per hand.
        rng: Random source.

    Returns:
        One list of cards per player, in seat order.

    Raises:
        EmptyPoolError: If the filtered pool is too small for the deal.
    """
    pool = eligible_cards(deck, vira)
    needed = num_players * hand_size
    if needed > len(pool):
        raise EmptyPoolError(
            f"Need {needed} cards for {num_players} players, "
            f"only {len(pool)} left after removing vira {vira!r}"
        )

    hands = [[draw_random(pool, rng) for _ in range(hand_size)] for _ in range(num_players)]

    logger.debug(f"Dealt {needed} cards, {len(pool)} left in pool")
    return hands
