"""
The card supply the War phases deal from.

A `CardSupply` wraps a shuffled `Deck`. When the deck runs dry the supply swaps
in a brand new shuffled deck before dealing, so an exhausted deck never fails a
phase, even in the middle of a burn.
"""

import logging
import random
from typing import Optional

from riskwar.common.card import Card
from riskwar.common.deck import Deck
from riskwar.events import EngineEventType, EventEmitter

logger = logging.getLogger(__name__)


class CardSupply:
    """
    Ordered, shuffled supply of cards with implicit reshuffling.

    :param rng: Random generator used for every shuffle
    :param deck: Starting deck, dealt as-is (a fresh shuffled deck if omitted)
    :param emitter: Emitter notified with a SHUFFLE event on each replacement
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        deck: Optional[Deck] = None,
        emitter: Optional[EventEmitter] = None,
    ):
        self.rng = rng or random.Random()
        self.emitter = emitter
        self.shuffles = 0
        self.deck = deck if deck is not None else self._fresh_deck()

    def _fresh_deck(self) -> Deck:
        return Deck().shuffle(self.rng)

    def deal(self) -> Card:
        """
        Deal the top card, replacing an empty deck with a freshly shuffled one first.

        :return: The next card.
        """
        if self.deck.is_empty():
            self.deck = self._fresh_deck()
            self.shuffles += 1
            logger.info("Card supply exhausted, reshuffled a full deck")
            if self.emitter is not None:
                self.emitter.emit(
                    EngineEventType.SHUFFLE,
                    {"shuffles": self.shuffles, "cards_remaining": self.deck.size},
                )
        return self.deck.deal()

    def remaining_count(self) -> int:
        """Number of cards left before the next reshuffle."""
        return self.deck.size

    def __str__(self) -> str:
        return f"Card supply with {self.deck.size} cards"
