"""
Rules engine for War with betting and the risk escalation.

The `riskwar` package tracks two players' cash and cards, a shared pot and a
card supply, and exposes the betting, standoff and war phases a presentation
layer drives after collecting player input.
"""

from riskwar.war.game_master import GameMaster
from riskwar.war.state import (
    BettingPhaseResult,
    Outcome,
    StandoffPhaseResult,
    WarPhaseResult,
)

__all__ = [
    "GameMaster",
    "Outcome",
    "BettingPhaseResult",
    "StandoffPhaseResult",
    "WarPhaseResult",
]
