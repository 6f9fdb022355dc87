"""
This module contains the Player class and its CpuPlayer counterpart.

A Player holds a name, a cash balance and the single card it was dealt last.
The card is overwritten each phase. CpuPlayer is the auto-named opponent used
when only one human registers.

Exceptions:
    - `InsufficientFundsError`: Raised when a player does not have enough money to cover a withdrawal.
"""

import random
from typing import Optional, Sequence

from riskwar.common.card import Card


class InsufficientFundsError(Exception):
    """Raised when a player does not have enough money to cover a withdrawal."""

    pass


class Player:
    """
    A player in a game of War.

    :param name: Name of the player
    :param initial_cash: Starting cash balance
    """

    def __init__(self, name: str, initial_cash: int = 1000):
        if initial_cash < 0:
            raise ValueError(f"Starting cash must not be negative: {initial_cash}")
        self.name = name
        self._cash = initial_cash
        self._card: Optional[Card] = None

    @property
    def cash(self) -> int:
        """The player's cash balance."""
        return self._cash

    @property
    def card(self) -> Optional[Card]:
        """The card the player was dealt last, or None before the first deal."""
        return self._card

    def set_card(self, card: Card):
        """
        Replace the card the player holds.

        :param card: The newly dealt card
        """
        self._card = card

    def add_cash(self, amount: int):
        """
        Credit the player's balance.

        :param amount: Non-negative amount to add
        """
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount: {amount}")
        self._cash += amount

    def subtract_cash(self, amount: int):
        """
        Debit the player's balance.

        :param amount: Non-negative amount to remove
        :raises InsufficientFundsError: If the balance would go negative
        """
        if amount < 0:
            raise ValueError(f"Cannot subtract a negative amount: {amount}")
        if amount > self._cash:
            raise InsufficientFundsError(
                f"{self.name} has {self._cash} but needs {amount}."
            )
        self._cash -= amount

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, cash={self._cash})"


class CpuPlayer(Player):
    """
    A computer-controlled opponent whose name is picked for it.

    :param names: Pool of names to pick from
    :param rng: Random generator used to pick the name
    :param initial_cash: Starting cash balance
    :param taken: Names already seated, which the CPU will not reuse
    """

    def __init__(
        self,
        names: Sequence[str],
        rng: Optional[random.Random] = None,
        initial_cash: int = 1000,
        taken: Sequence[str] = (),
    ):
        available = [name for name in names if name not in taken] or list(names)
        super().__init__((rng or random).choice(available), initial_cash)
