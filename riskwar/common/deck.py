"""
This module contains the Deck class, which represents a deck of cards.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.SPADES, Rank.ACE)
>>> deck.size
51
"""

import random
from typing import List, Optional, Union

from riskwar.common.card import Card, Rank, Suit


class Deck:
    """
    A class representing a deck of cards. Cards are dealt from the end of the list.
    """

    # Precompute the default deck
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(self, cards: Union[List[Card], None] = None):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, a default deck will be constructed.
        >>> deck = Deck()
        >>> deck.size
        52
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = cards.copy()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        >>> deck = Deck()
        >>> len(deck.cards)
        52
        """
        return self._default_deck.copy()

    def shuffle(self, rng: Optional[random.Random] = None):
        """
        Shuffle the cards in the deck.

        :param rng: Random generator to shuffle with (the module generator if omitted).
        >>> deck = Deck()
        >>> original_order = deck.cards.copy()
        >>> _ = deck.shuffle()
        >>> set(deck.cards) == set(original_order)
        True
        """
        (rng or random).shuffle(self.cards)
        return self

    def deal(self) -> Card:
        """
        Pop the top card from the deck.

        :return: A card instance.
        :raises IndexError: If the deck is empty.
        """
        return self.cards.pop()

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.

        :return: A string representation of the deck.
        """
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        :return: A string representation of the deck.
        >>> str(Deck())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
