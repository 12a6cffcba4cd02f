"""Seat strategies."""

from truco.strategy.base import Strategy
from truco.strategy.human import (
    HumanStrategy,
    InvalidSelectionInput,
    SelectionRetriesExceeded,
    parse_selection,
)
from truco.strategy.simple import LastCardStrategy

__all__ = [
    "Strategy",
    "HumanStrategy",
    "InvalidSelectionInput",
    "LastCardStrategy",
    "SelectionRetriesExceeded",
    "parse_selection",
]
