"""
Pytest configuration for tests at the root level.

This module contains fixtures for building games whose deals are known in
advance.
"""

import random

import pytest

from riskwar.common.card import Card, Rank, Suit
from riskwar.common.deck import Deck
from riskwar.common.supply import CardSupply
from riskwar.events import EventEmitter
from riskwar.war.game_master import GameMaster


def cards_of(*values):
    """Build cards of the given War values, cycling through the suits."""
    suits = list(Suit)
    return [Card(suits[i % len(suits)], Rank(value)) for i, value in enumerate(values)]


def stacked_deck(*values):
    """A deck that deals cards of the given values in the given order."""
    return Deck(list(reversed(cards_of(*values))))


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def make_game(emitter):
    """Factory for a registered game dealing the given values first."""

    def _make_game(*values, cash=100, p2_name="Bob"):
        rng = random.Random(1234)
        supply = CardSupply(rng=rng, deck=stacked_deck(*values), emitter=emitter)
        game = GameMaster(
            {"starting_cash": cash}, supply=supply, emitter=emitter, rng=rng
        )
        game.register("Alice", p2_name)
        return game

    return _make_game


@pytest.fixture
def cards():
    """The cards_of helper, for tests that build their own hands."""
    return cards_of


@pytest.fixture
def deck_of():
    """The stacked_deck helper, for tests that build their own supplies."""
    return stacked_deck
