"""Tests for game state models."""

import pytest

from truco.models.card import Card, RankedCard, Rank, Suit
from truco.models.game_state import GameState, PlayedCard, RoundResult, team_for_seat
from truco.models.player import Player


def result(winner: int, round_number: int = 1) -> RoundResult:
    card = RankedCard(card=Card(rank=Rank.ACE, suit=Suit.CLUBS), power=4)
    return RoundResult(
        round_number=round_number,
        winner=winner,
        played_cards=[PlayedCard(seat=winner, card=card)],
        play_order=[winner],
    )


class TestTeams:
    """Tests for team mapping."""

    @pytest.mark.parametrize("seat,team", [(1, 0), (2, 1), (3, 0), (4, 1)])
    def test_team_for_seat(self, seat, team):
        """Test odd seats are team 0 and even seats team 1."""
        assert team_for_seat(seat) == team

    def test_player_team(self):
        """Test the player shortcut."""
        assert Player(seat=3).team == 0
        assert Player(seat=4).team == 1


class TestGameState:
    """Tests for GameState class."""

    def test_initial(self):
        """Test a fresh state."""
        state = GameState()
        assert state.team_wins == [0, 0]
        assert state.starting_seat == 1
        assert not state.is_over()
        assert state.leading_team() is None

    @pytest.mark.parametrize("winner", [1, 2, 3, 4])
    def test_record_round(self, winner):
        """Test recording credits the team and moves the start seat."""
        state = GameState()
        team = state.record_round(result(winner))

        assert team == team_for_seat(winner)
        assert state.team_wins[team] == 1
        assert state.starting_seat == winner
        assert len(state.results) == 1

    def test_partners_share_wins(self):
        """Test wins by seats 1 and 3 add up for the same team."""
        state = GameState()
        state.record_round(result(1))
        state.record_round(result(3, 2))

        assert state.team_wins == [2, 0]
        assert state.leading_team() == 0

    def test_reset(self):
        """Test resetting for a new game."""
        state = GameState()
        state.record_round(result(2))
        state.winning_team = 2

        state.reset_for_new_game()

        assert state.team_wins == [0, 0]
        assert state.results == []
        assert state.starting_seat == 1
        assert not state.is_over()

    def test_states_independent(self):
        """Test that win counters are not shared between states."""
        first = GameState()
        first.record_round(result(1))
        assert GameState().team_wins == [0, 0]
