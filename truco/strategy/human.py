"""Console-driven strategy for the human seat."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from truco.config import DEFAULT_PROMPT
from truco.models.game_state import GameState
from truco.models.player import Player
from truco.strategy.base import Strategy

if TYPE_CHECKING:
    from truco.utils.logger import GameDisplay

logger = logging.getLogger(__name__)


class InvalidSelectionInput(ValueError):
    """Answer is not an integer within the hand's 1-based range."""


class SelectionRetriesExceeded(RuntimeError):
    """Too many invalid answers in a row."""


def parse_selection(answer: str, hand_size: int) -> int:
    """Parse a 1-based card number.

    Args:
        answer: Raw console answer
        hand_size: Number of cards currently in hand

    Returns:
        0-based hand index

    Raises:
        InvalidSelectionInput: If the answer is not a number in range
    """
    try:
        number = int(answer.strip())
    except ValueError:
        raise InvalidSelectionInput(f"Not a number: {answer!r}") from None

    if not 1 <= number <= hand_size:
        raise InvalidSelectionInput(f"Choose between 1 and {hand_size}, got {number}")
    return number - 1


class HumanStrategy(Strategy):
    """Ask the console which card to play.

    The prompt is repeated with identical text until a valid answer is given,
    or until ``max_retries`` invalid answers when a cap is configured.
    """

    def __init__(
        self,
        display: GameDisplay | None = None,
        ask: Callable[[str], str] = input,
        prompt: str = DEFAULT_PROMPT,
        max_retries: int | None = None,
    ):
        """Initialize strategy.

        Args:
            display: Display used to show the hand (nothing shown if None)
            ask: Function that shows a prompt and returns the answer
            prompt: Prompt text
            max_retries: Invalid answers tolerated; None for no limit
        """
        self.display = display
        self.ask = ask
        self.prompt = prompt
        self.max_retries = max_retries

    def select_card(self, player: Player, state: GameState) -> int:
        if self.display:
            self.display.print_hand(player)

        failures = 0
        while True:
            answer = self.ask(self.prompt)
            try:
                return parse_selection(answer, player.hand_count())
            except InvalidSelectionInput as e:
                failures += 1
                logger.debug(f"Rejected selection ({failures}): {e}")
                if self.max_retries is not None and failures > self.max_retries:
                    raise SelectionRetriesExceeded(
                        f"No valid card selected after {failures} attempts"
                    ) from e
