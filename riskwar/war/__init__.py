"""
War with betting and risk: phase results, decision functions and the game master.
"""

from riskwar.war.game_master import GameMaster, InvalidBetError, PhaseOrderError
from riskwar.war.state import (
    BettingPhaseResult,
    Outcome,
    StandoffPhaseResult,
    WarPhaseResult,
)
from riskwar.war.transitions import compare_cards, resolve_risk

__all__ = [
    "GameMaster",
    "InvalidBetError",
    "PhaseOrderError",
    "Outcome",
    "BettingPhaseResult",
    "StandoffPhaseResult",
    "WarPhaseResult",
    "compare_cards",
    "resolve_risk",
]
