import random
from collections import Counter
from unittest.mock import MagicMock

from riskwar.common.card import Card, Rank, Suit
from riskwar.common.deck import Deck
from riskwar.common.supply import CardSupply
from riskwar.events import EngineEventType, EventEmitter


def test_supply_starts_full_and_shuffled():
    supply = CardSupply(rng=random.Random(5))
    assert supply.remaining_count() == 52
    assert supply.deck.cards != Deck().cards
    assert Counter(supply.deck.cards) == Counter(Deck().cards)


def test_deal_reduces_remaining_count():
    supply = CardSupply(rng=random.Random(5))
    card = supply.deal()
    assert isinstance(card, Card)
    assert supply.remaining_count() == 51


def test_stacked_deck_deals_in_order(deck_of):
    supply = CardSupply(deck=deck_of(10, 5, 14))
    assert [supply.deal().rank for _ in range(3)] == [Rank.TEN, Rank.FIVE, Rank.ACE]


def test_exhausted_supply_reshuffles_a_full_deck():
    supply = CardSupply(rng=random.Random(5), deck=Deck([Card(Suit.HEARTS, Rank.TWO)]))
    assert supply.deal() == Card(Suit.HEARTS, Rank.TWO)
    assert supply.remaining_count() == 0

    card = supply.deal()
    assert isinstance(card, Card)
    assert supply.remaining_count() == 51
    assert supply.shuffles == 1


def test_reshuffle_replaces_the_deck():
    empty = Deck([])
    supply = CardSupply(rng=random.Random(5), deck=empty)
    supply.deal()
    assert supply.deck is not empty


def test_reshuffle_emits_shuffle_event():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(EngineEventType.SHUFFLE, callback)

    supply = CardSupply(rng=random.Random(5), deck=Deck([]), emitter=emitter)
    supply.deal()

    callback.assert_called_once_with({"shuffles": 1, "cards_remaining": 52})


def test_supply_never_runs_dry():
    supply = CardSupply(rng=random.Random(5))
    for _ in range(200):
        supply.deal()
    assert supply.shuffles == 3
