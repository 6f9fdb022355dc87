"""
Immutable phase results for the War card game.

Every phase operation on the game master returns one of the frozen dataclasses
below. A result is a snapshot taken at the end of the phase: the caller renders
it and throws it away, and later phases never modify it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from enum import Enum, auto

from riskwar.common.card import Card


class Outcome(Enum):
    """Possible results of a phase."""

    BET_SUCCESS = auto()
    PLAYER_1_BET_FAIL = auto()
    PLAYER_2_BET_FAIL = auto()
    PLAYER_1_WIN = auto()
    PLAYER_2_WIN = auto()
    TIE = auto()
    RISK_NEUTRAL = auto()
    RISK_WIN = auto()  # winnings doubled
    RISK_LOSE = auto()  # winnings halved


def _card_str(card: Optional[Card]) -> Optional[str]:
    return str(card) if card else None


@dataclass(frozen=True)
class BettingPhaseResult:
    """
    Result of the betting phase.

    Attributes:
        outcome: BET_SUCCESS, or the failure marker of the first player who over-bet
        pot_value: Pot after the bets (0 when the bets were rejected)
        player_one_cash: Player one's cash after the phase
        player_two_cash: Player two's cash after the phase
    """

    outcome: Outcome
    pot_value: int
    player_one_cash: int
    player_two_cash: int

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "outcome": self.outcome.name,
            "pot_value": self.pot_value,
            "player_one_cash": self.player_one_cash,
            "player_two_cash": self.player_two_cash,
        }


@dataclass(frozen=True)
class StandoffPhaseResult:
    """
    Result of the standoff phase.

    Attributes:
        outcome: PLAYER_1_WIN, PLAYER_2_WIN or TIE
        pot_value: The pot that was won, or that is held for the war on a tie
        player_one_cash: Player one's cash after the phase
        player_two_cash: Player two's cash after the phase
        player_one_card: Card dealt to player one
        player_two_card: Card dealt to player two
    """

    outcome: Outcome
    pot_value: int
    player_one_cash: int
    player_two_cash: int
    player_one_card: Card
    player_two_card: Card

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the result to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the result
        """
        return {
            "outcome": self.outcome.name,
            "pot_value": self.pot_value,
            "player_one_cash": self.player_one_cash,
            "player_two_cash": self.player_two_cash,
            "player_one_card": _card_str(self.player_one_card),
            "player_two_card": _card_str(self.player_two_card),
        }


@dataclass(frozen=True)
class WarPhaseResult(StandoffPhaseResult):
    """
    Result of a war phase.

    Attributes:
        pot_value: The amount paid to the winner after any risk, or the held pot on a tie
        risk_outcome: RISK_NEUTRAL, RISK_WIN or RISK_LOSE when the winner took the risk
        dealer_card: The dealer's card when either player asked for a risk
    """

    risk_outcome: Optional[Outcome] = None
    dealer_card: Optional[Card] = None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["risk_outcome"] = self.risk_outcome.name if self.risk_outcome else None
        data["dealer_card"] = _card_str(self.dealer_card)
        return data
