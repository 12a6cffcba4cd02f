"""Main entry point for the Truco console game."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from truco.config import Config, load_config
from truco.game.engine import GameEngine, build_strategies
from truco.logging import GameLogConfig, GameLogger
from truco.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, seed: int | None = None) -> str:
    """Generate log filename with timestamp and seed.

    Format: {ISO timestamp}[_seed{seed}].jsonl

    Args:
        log_dir: Directory for log files.
        seed: Random seed of the game, if fixed.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    suffix = f"_seed{seed}" if seed is not None else ""
    return str(Path(log_dir) / f"{timestamp}{suffix}.jsonl")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Four-player Truco against three computer players"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show computer players' hands in output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        help="Invalid card choices allowed before giving up (default: unlimited)",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to the loaded config."""
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True
    if args.max_retries is not None:
        config.input.max_retries = args.max_retries
    if args.game_log is not None:
        config.game_log.enabled = True
        config.game_log.output_path = str(args.game_log)
    return config


def main(
    argv: list[str] | None = None,
    ask: Callable[[str], str] | None = None,
) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (sys.argv if None)
        ask: Input function for the human seat (builtin input if None)

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)
    config = apply_overrides(load_config(args.config), args)

    setup_logging(config.logging.level)

    display = GameDisplay(show_hands=config.logging.show_hands)

    if config.game_log.enabled:
        log_path = generate_log_filename(config.game_log.output_path, config.game.seed)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            strategies = build_strategies(config, display, ask or input)
            engine = GameEngine(config, strategies, game_logger)

            def on_round_start(round_number: int, starting_seat: int) -> None:
                display.print_round_start(round_number, starting_seat)
                display.print_hands(engine.players)

            engine.set_callbacks(
                on_game_start=display.print_game_start,
                on_round_start=on_round_start,
                on_card_played=display.print_card_played,
                on_round_end=display.print_round_end,
                on_game_end=lambda team, state: display.print_game_end(team),
            )

            engine.run_game()
            display.print_game_over()

        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"An error occurred: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
