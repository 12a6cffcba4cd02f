"""Tests for card power ranking."""

import pytest

from truco.game.ranking import card_power, manilha_rank, rank_cards, rank_hands
from truco.models.card import Card, RankedCard, Rank, Suit, create_deck


def make_card(rank: str, suit: str) -> Card:
    return Card(rank=Rank(rank), suit=Suit(suit))


class TestManilhaRank:
    """Tests for manilha_rank function."""

    @pytest.mark.parametrize(
        "vira_rank,expected",
        [
            ("Q", "J"),
            ("J", "K"),
            ("K", "A"),
            ("A", "2"),
            ("2", "3"),
            ("3", "Q"),  # Wraps around
        ],
    )
    def test_next_rank(self, vira_rank, expected):
        """Test the manilha is the rank after the vira."""
        vira = make_card(vira_rank, "hearts")
        assert manilha_rank(vira) == Rank(expected)

    def test_suit_irrelevant(self):
        """Test that the vira's suit does not change the manilha."""
        manilhas = {manilha_rank(make_card("K", suit.value)) for suit in Suit}
        assert manilhas == {Rank.ACE}


class TestCardPower:
    """Tests for card_power function."""

    def test_manilha_suit_order(self):
        """Test manilhas are ordered clubs > hearts > spades > diamonds."""
        vira = make_card("Q", "spades")

        assert card_power(vira, make_card("J", "clubs")) == 10
        assert card_power(vira, make_card("J", "hearts")) == 9
        assert card_power(vira, make_card("J", "spades")) == 8
        assert card_power(vira, make_card("J", "diamonds")) == 7

    def test_fixed_order(self):
        """Test non-manilha powers follow 3 > 2 > A > K > J > Q."""
        # Vira 2 makes 3 the manilha, so use vira J (manilha K) for 3
        vira = make_card("2", "clubs")
        assert card_power(vira, make_card("2", "hearts")) == 5
        assert card_power(vira, make_card("A", "hearts")) == 4
        assert card_power(vira, make_card("K", "hearts")) == 3
        assert card_power(vira, make_card("J", "hearts")) == 2
        assert card_power(vira, make_card("Q", "hearts")) == 1

        vira = make_card("J", "clubs")
        assert card_power(vira, make_card("3", "hearts")) == 6

    def test_suit_irrelevant_outside_manilha(self):
        """Test that non-manilha cards of the same rank tie."""
        vira = make_card("Q", "spades")
        powers = {card_power(vira, make_card("A", suit.value)) for suit in Suit}
        assert powers == {4}

    def test_vira_rank_not_manilha(self):
        """Test that cards of the vira's own rank use the fixed order."""
        vira = make_card("Q", "spades")
        assert card_power(vira, make_card("Q", "diamonds")) == 1

    def test_example_game(self):
        """Test powers with the queen of spades as vira."""
        vira = make_card("Q", "spades")

        assert manilha_rank(vira) == Rank.JACK
        assert card_power(vira, make_card("J", "clubs")) == 10
        assert card_power(vira, make_card("3", "hearts")) == 6
        assert card_power(vira, make_card("Q", "diamonds")) == 1

    def test_manilha_beats_everything(self):
        """Test every manilha outranks every other card, for every vira."""
        deck = create_deck()
        for vira in deck:
            manilha = manilha_rank(vira)
            manilha_powers = [card_power(vira, c) for c in deck if c.rank == manilha]
            other_powers = [card_power(vira, c) for c in deck if c.rank != manilha]

            assert sorted(manilha_powers) == [7, 8, 9, 10]
            assert all(0 <= p <= 6 for p in other_powers)
            assert min(manilha_powers) > max(other_powers)

    def test_only_ties_are_same_rank(self):
        """Test that equal powers only happen between equal non-manilha ranks."""
        deck = create_deck()
        vira = make_card("K", "diamonds")
        for a in deck:
            for b in deck:
                if a != b and card_power(vira, a) == card_power(vira, b):
                    assert a.rank == b.rank
                    assert a.rank != manilha_rank(vira)


class TestRankHands:
    """Tests for rank_cards and rank_hands functions."""

    def test_rank_cards_keeps_order(self):
        """Test that annotating keeps the card order."""
        vira = make_card("Q", "spades")
        cards = [make_card("Q", "hearts"), make_card("J", "clubs"), make_card("3", "clubs")]

        ranked = rank_cards(vira, cards)

        assert [r.card for r in ranked] == cards
        assert [r.power for r in ranked] == [1, 10, 6]
        assert all(isinstance(r, RankedCard) for r in ranked)

    def test_rank_hands(self):
        """Test annotating several hands."""
        vira = make_card("3", "hearts")
        hands = [[make_card("Q", "clubs")], [make_card("A", "clubs"), make_card("Q", "diamonds")]]

        ranked = rank_hands(vira, hands)

        assert [[r.power for r in hand] for hand in ranked] == [[10], [4, 7]]
