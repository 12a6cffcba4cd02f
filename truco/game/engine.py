"""Game engine for Truco."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from truco.config import Config
from truco.logging import GameLogger
from truco.models.card import create_deck
from truco.models.game_state import ROUNDS_TO_WIN, GameState, PlayedCard, RoundResult
from truco.models.player import Player
from truco.strategy.base import Strategy
from truco.strategy.human import HumanStrategy
from truco.strategy.simple import LastCardStrategy

from .dealer import deal, draw_random, shuffle
from .ranking import manilha_rank, rank_hands
from .resolver import RoundResolver

if TYPE_CHECKING:
    from truco.utils.logger import GameDisplay

logger = logging.getLogger(__name__)


def build_strategies(
    config: Config,
    display: GameDisplay | None = None,
    ask: Callable[[str], str] = input,
) -> dict[int, Strategy]:
    """Create the strategy for every seat.

    The human seat reads from ``ask``; every other seat plays its last card.
    """
    strategies: dict[int, Strategy] = {}
    for seat in range(1, config.game.num_players + 1):
        if seat == config.game.human_seat:
            strategies[seat] = HumanStrategy(
                display=display,
                ask=ask,
                prompt=config.input.prompt,
                max_retries=config.input.max_retries,
            )
        else:
            strategies[seat] = LastCardStrategy()
    return strategies


class GameEngine:
    """Main game engine.

    One engine is one game session: it owns the random source, the seats and
    the game state. Nothing is shared between engines.
    """

    def __init__(
        self,
        config: Config | None = None,
        strategies: dict[int, Strategy] | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            strategies: Strategy per seat (human seat + last-card bots if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source (seeded from config if not provided)
        """
        self.config = config or Config()
        settings = self.config.game

        if settings.hand_size < settings.num_rounds:
            raise ValueError(
                f"hand_size ({settings.hand_size}) must cover "
                f"num_rounds ({settings.num_rounds})"
            )
        if not 1 <= settings.human_seat <= settings.num_players:
            raise ValueError(f"human_seat must be between 1 and {settings.num_players}")

        self.rng = rng or random.Random(settings.seed)
        self.game_logger = game_logger

        self.strategies = strategies or build_strategies(self.config)
        self.resolver = RoundResolver(self.strategies)

        self.state = GameState()
        self.players = [
            Player(
                seat=seat,
                name="You" if seat == settings.human_seat else f"CPU {seat}",
                is_human=seat == settings.human_seat,
            )
            for seat in range(1, settings.num_players + 1)
        ]

        self._on_game_start: Callable[[GameState, list[Player]], None] | None = None
        self._on_round_start: Callable[[int, int], None] | None = None
        self._on_card_played: Callable[[PlayedCard], None] | None = None
        self._on_round_end: Callable[[RoundResult, GameState], None] | None = None
        self._on_game_end: Callable[[int, GameState], None] | None = None

        self.resolver.set_callbacks(on_card_played=self._card_played)

    def set_callbacks(
        self,
        on_game_start: Callable[[GameState, list[Player]], None] | None = None,
        on_round_start: Callable[[int, int], None] | None = None,
        on_card_played: Callable[[PlayedCard], None] | None = None,
        on_round_end: Callable[[RoundResult, GameState], None] | None = None,
        on_game_end: Callable[[int, GameState], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_game_start: Called after dealing (state, players)
            on_round_start: Called before each round (round_number, starting_seat)
            on_card_played: Called for every card played
            on_round_end: Called after each round (result, state)
            on_game_end: Called once the winner is known (winning_team, state)
        """
        self._on_game_start = on_game_start
        self._on_round_start = on_round_start
        self._on_card_played = on_card_played
        self._on_round_end = on_round_end
        self._on_game_end = on_game_end

    def run_game(self) -> int:
        """Run a single game.

        Returns:
            Winning team number: 1 for players 1 and 3, 2 for players 2 and 4
        """
        self._init_game()

        if self.game_logger:
            self.game_logger.log_game_start(self.state, self.players)
        if self._on_game_start:
            self._on_game_start(self.state, self.players)

        for round_number in range(1, self.config.game.num_rounds + 1):
            self.state.round_number = round_number
            logger.info(
                f"Starting round {round_number}, player {self.state.starting_seat} leads"
            )
            if self._on_round_start:
                self._on_round_start(round_number, self.state.starting_seat)

            result = self.resolver.play_round(
                self.players,
                self.state.starting_seat,
                self.state,
                round_number,
            )
            team = self.state.record_round(result)

            if self.game_logger:
                self.game_logger.log_round_end(result, self.state)
            if self._on_round_end:
                self._on_round_end(result, self.state)

            if self.state.team_wins[team] == ROUNDS_TO_WIN:
                return self._finish(team + 1)

        # Unreachable with one winner per round and three rounds
        winning_team = 1 if self.state.team_wins[0] > self.state.team_wins[1] else 2
        return self._finish(winning_team)

    def _init_game(self) -> None:
        """Shuffle, draw the vira and deal ranked hands."""
        self.state.reset_for_new_game()
        settings = self.config.game

        deck = shuffle(create_deck(), self.rng)
        vira = draw_random(deck, self.rng)
        hands = deal(deck, vira, settings.num_players, settings.hand_size, self.rng)

        self.state.vira = vira
        self.state.manilha = manilha_rank(vira)

        for player, hand in zip(self.players, rank_hands(vira, hands)):
            player.hand = hand

        manilha = self.state.manilha.value if self.state.manilha else "-"
        logger.info(f"Game initialized, vira {vira!r}, manilha {manilha}")

    def _card_played(self, played: PlayedCard) -> None:
        if self.game_logger:
            self.game_logger.log_card_played(self.state.round_number, played)
        if self._on_card_played:
            self._on_card_played(played)

    def _finish(self, winning_team: int) -> int:
        self.state.winning_team = winning_team
        logger.info(f"Team {winning_team} wins, score {self.state.team_wins}")

        if self.game_logger:
            self.game_logger.log_game_end(winning_team, self.state)
        if self._on_game_end:
            self._on_game_end(winning_team, self.state)

        return winning_team
