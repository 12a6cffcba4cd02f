"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from truco.models.game_state import GameState, PlayedCard, RoundResult
from truco.models.player import Player

from .formatters import format_card, format_hands


class GameLogConfig(BaseModel):
    """Configuration for a single game log file."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, state: GameState, players: list[Player]) -> None:
        """Log game start with the vira and the dealt hands.

        Args:
            state: Game state right after dealing.
            players: Seats with their initial hands.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "vira": format_card(state.vira) if state.vira else None,
            "manilha": state.manilha.value if state.manilha else None,
            "hands": format_hands(players),
            "human": [p.seat for p in players if p.is_human],
            "first_player": state.starting_seat,
        })

    def log_card_played(self, round_num: int, played: PlayedCard) -> None:
        """Log a single card leaving a hand.

        Args:
            round_num: Round number.
            played: Card with the seat that played it.
        """
        self._write({
            "type": "card_played",
            "round": round_num,
            "player": played.seat,
            "card": format_card(played.card),
            "power": played.power,
        })

    def log_round_end(self, result: RoundResult, state: GameState) -> None:
        """Log the outcome of a round.

        Args:
            result: Round result.
            state: Game state after the round was recorded.
        """
        self._write({
            "type": "round_end",
            "round": result.round_number,
            "order": result.play_order,
            "cards": [format_card(p.card) for p in result.played_cards],
            "winner": result.winner,
            "team_wins": list(state.team_wins),
        })

    def log_game_end(self, winning_team: int, state: GameState) -> None:
        """Log game end with results.

        Args:
            winning_team: Team number 1 or 2.
            state: Final game state.
        """
        self._write({
            "type": "game_end",
            "rounds_played": len(state.results),
            "team_wins": list(state.team_wins),
            "winning_team": winning_team,
        })
