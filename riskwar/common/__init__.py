"""
Collaborators shared by the War rules engine: cards, decks, the card supply,
players and the pot.
"""

from riskwar.common.actor import CpuPlayer, InsufficientFundsError, Player
from riskwar.common.card import Card, Rank, Suit
from riskwar.common.deck import Deck
from riskwar.common.pot import Pot
from riskwar.common.supply import CardSupply

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "CardSupply",
    "Player",
    "CpuPlayer",
    "InsufficientFundsError",
    "Pot",
]
