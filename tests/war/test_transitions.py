"""Tests for the pure War decision functions."""

import pytest

from riskwar.war.state import Outcome
from riskwar.war.transitions import compare_cards, resolve_risk


@pytest.mark.parametrize(
    "p1, p2, expected",
    [
        (10, 5, Outcome.PLAYER_1_WIN),
        (5, 10, Outcome.PLAYER_2_WIN),
        (14, 13, Outcome.PLAYER_1_WIN),
        (2, 14, Outcome.PLAYER_2_WIN),
        (7, 7, Outcome.TIE),
    ],
)
def test_compare_cards(cards, p1, p2, expected):
    card1, card2 = cards(p1, p2)
    assert compare_cards(card1, card2) is expected


@pytest.mark.parametrize(
    "winner, dealer, expected",
    [
        (12, 4, Outcome.RISK_NEUTRAL),
        (4, 12, Outcome.RISK_LOSE),
        (9, 9, Outcome.RISK_WIN),
    ],
)
def test_resolve_risk(cards, winner, dealer, expected):
    winner_card, dealer_card = cards(winner, dealer)
    assert resolve_risk(winner_card, dealer_card) is expected
