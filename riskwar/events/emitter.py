"""
Phase events for a riskwar game session.

Each `GameMaster` owns one `EventEmitter` and publishes what a phase did, such
as bets taken, cards dealt and burned, reshuffles and payouts, so a
presentation layer can narrate a round without inspecting the game master.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Union
import logging
from enum import Enum

logger = logging.getLogger("riskwar.events")


class EventEmitter:
    """
    Dispatches phase events to the handlers subscribed to them.

    Handlers run synchronously, in subscription order, inside the phase call
    that emitted the event. A handler that raises is logged and skipped; the
    phase carries on.
    """

    def __init__(self):
        self._listeners = defaultdict(list)

    def on(self, event_type: Union[str, Enum], callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: An EngineEventType, or its name
            callback: Called with the event's data dict

        Returns:
            A function that removes this subscription
        """
        key = _event_key(event_type)
        self._listeners[key].append(callback)

        def unsubscribe():
            if callback in self._listeners[key]:
                self._listeners[key].remove(callback)

        return unsubscribe

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Pass data to every handler subscribed to event_type.

        Args:
            event_type: An EngineEventType, or its name
            data: Event payload
        """
        key = _event_key(event_type)
        # Copy so a handler may unsubscribe itself mid-dispatch
        for callback in list(self._listeners.get(key, ())):
            try:
                callback(data)
            except Exception as e:
                logger.error(f"Error in event handler for {key}: {e}", exc_info=True)


def _event_key(event_type: Union[str, Enum]) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EngineEventType(Enum):
    """
    Event types published by a riskwar game session.
    """

    # Game lifecycle
    GAME_CREATED = "game_created"
    ROUND_ENDED = "round_ended"

    # Player events
    PLAYER_JOINED = "player_joined"

    # Money events
    MONEY_BET = "money_bet"
    BET_REJECTED = "bet_rejected"
    MONEY_PAYOUT = "money_payout"

    # Card events
    CARD_DEALT = "card_dealt"
    CARDS_BURNED = "cards_burned"
    SHUFFLE = "shuffle"

    # War events
    WAR_STARTED = "war_started"
    RISK_RESOLVED = "risk_resolved"
