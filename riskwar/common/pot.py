"""
This module contains the Pot class, the shared stake both players bet into.
"""


class Pot:
    """
    Accumulated integer stake. The value never drops below zero.

    >>> pot = Pot()
    >>> pot.add_cash(21)
    >>> pot.halve()
    >>> pot.value
    10
    """

    def __init__(self):
        self._value = 0

    @property
    def value(self) -> int:
        """Current stake held in the pot."""
        return self._value

    def add_cash(self, amount: int):
        """
        Add a stake to the pot.

        :param amount: Non-negative amount to add
        :raises ValueError: If the amount is negative
        """
        if amount < 0:
            raise ValueError(f"Cannot add a negative amount to the pot: {amount}")
        self._value += amount

    def clear(self):
        """Empty the pot."""
        self._value = 0

    def halve(self):
        """Halve the pot, rounding down."""
        self._value //= 2

    def double(self):
        """Double the pot."""
        self._value *= 2

    def __repr__(self) -> str:
        return f"Pot({self._value})"
