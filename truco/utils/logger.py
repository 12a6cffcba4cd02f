"""Logging utilities and game state display."""

import logging
import sys
from typing import TYPE_CHECKING

from truco.models.game_state import TEAM_SEATS

if TYPE_CHECKING:
    from truco.models.game_state import GameState, PlayedCard, RoundResult
    from truco.models.player import Player


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def team_description(team: int) -> str:
    """Describe a team number (1 or 2) by its seats."""
    return TEAM_SEATS[team - 1]


class GameDisplay:
    """Display game state to stdout."""

    def __init__(self, show_hands: bool = False):
        """Initialize display.

        Args:
            show_hands: Whether to reveal the automated players' hands
        """
        self.show_hands = show_hands

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def print_game_start(self, state: "GameState", players: list["Player"]) -> None:
        """Print the vira and the human's dealt hand."""
        self.print_separator()
        print(f"The vira is: {state.vira}")
        if state.manilha is not None:
            print(f"Manilha: {state.manilha.value}")
        for player in players:
            if player.is_human:
                print(f"Your cards: {', '.join(str(c) for c in player.hand)}")
        self.print_separator()

    def print_round_start(self, round_number: int, starting_seat: int) -> None:
        """Print round header."""
        print(f"\nRound {round_number}:")
        print(f"Player {starting_seat} starts the round.")

    def print_hand(self, player: "Player") -> None:
        """Print a hand enumerated from 1."""
        print("\nYour cards:")
        for index, card in enumerate(player.hand, 1):
            print(f"{index}: {card.rank.value} of {card.suit.value} (power: {card.power})")

    def print_hands(self, players: list["Player"]) -> None:
        """Print the automated players' hands (if show_hands is enabled)."""
        if not self.show_hands:
            return

        print("\nHands:")
        for player in players:
            if player.is_human:
                continue
            cards = ", ".join(repr(c) for c in player.hand) or "[empty]"
            print(f"  P{player.seat}: {cards}")

    def print_card_played(self, played: "PlayedCard") -> None:
        """Print a played card."""
        card = played.card
        print(
            f"Player {played.seat} played: {card.rank.value} of {card.suit.value} "
            f"(power: {card.power})"
        )

    def print_round_end(self, result: "RoundResult", state: "GameState") -> None:
        """Print round summary."""
        cards = ", ".join(f"P{p.seat} {p.card!r}" for p in result.played_cards)
        print(f"Played cards: {cards}")
        print(f"Round winner: Player {result.winner}")
        print(f"Score: team 1 {state.team_wins[0]} x {state.team_wins[1]} team 2")

    def print_game_end(self, winning_team: int) -> None:
        """Print the winning team."""
        print(f"\nTeam {winning_team} ({team_description(winning_team)}) won the game!")

    def print_game_over(self) -> None:
        """Print final line."""
        print("Game over!")
