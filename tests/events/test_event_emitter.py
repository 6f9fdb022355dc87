"""Tests for the phase event emitter."""

from unittest.mock import MagicMock

from riskwar.events import EventEmitter, EngineEventType


def test_handler_receives_event_data():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(EngineEventType.CARD_DEALT, callback)

    emitter.emit(EngineEventType.CARD_DEALT, {"seat": 1, "card": "A of ♠"})

    callback.assert_called_once_with({"seat": 1, "card": "A of ♠"})


def test_enum_and_name_are_interchangeable():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(EngineEventType.SHUFFLE, callback)

    emitter.emit("SHUFFLE", {})

    callback.assert_called_once_with({})


def test_other_event_types_are_not_delivered():
    emitter = EventEmitter()
    callback = MagicMock()
    emitter.on(EngineEventType.MONEY_PAYOUT, callback)

    emitter.emit(EngineEventType.MONEY_BET, {"bets": [10, 10]})

    callback.assert_not_called()


def test_handlers_run_in_subscription_order():
    emitter = EventEmitter()
    seen = []
    emitter.on(EngineEventType.ROUND_ENDED, lambda data: seen.append("first"))
    emitter.on(EngineEventType.ROUND_ENDED, lambda data: seen.append("second"))

    emitter.emit(EngineEventType.ROUND_ENDED, {})

    assert seen == ["first", "second"]


def test_unsubscribe_stops_delivery():
    emitter = EventEmitter()
    callback = MagicMock()
    unsubscribe = emitter.on(EngineEventType.WAR_STARTED, callback)

    emitter.emit(EngineEventType.WAR_STARTED, {"phase": "standoff"})
    unsubscribe()
    unsubscribe()
    emitter.emit(EngineEventType.WAR_STARTED, {"phase": "war"})

    callback.assert_called_once_with({"phase": "standoff"})


def test_handler_may_unsubscribe_itself():
    emitter = EventEmitter()
    later = MagicMock()
    unsubscribe = []

    def first_only(data):
        unsubscribe[0]()

    unsubscribe.append(emitter.on(EngineEventType.CARDS_BURNED, first_only))
    emitter.on(EngineEventType.CARDS_BURNED, later)

    emitter.emit(EngineEventType.CARDS_BURNED, {"cards": []})
    emitter.emit(EngineEventType.CARDS_BURNED, {"cards": []})

    assert later.call_count == 2


def test_failing_handler_is_logged_and_skipped(caplog):
    emitter = EventEmitter()
    after = MagicMock()

    def broken(data):
        raise ValueError("boom")

    emitter.on(EngineEventType.RISK_RESOLVED, broken)
    emitter.on(EngineEventType.RISK_RESOLVED, after)

    emitter.emit(EngineEventType.RISK_RESOLVED, {})

    after.assert_called_once_with({})
    assert "Error in event handler for RISK_RESOLVED" in caplog.text


def test_failing_handler_does_not_abort_a_phase(make_game, emitter):
    def broken(data):
        raise RuntimeError("renderer crashed")

    emitter.on(EngineEventType.CARD_DEALT, broken)
    game = make_game(10, 5)
    game.place_bets(10, 10)

    result = game.run_standoff()

    assert result.player_one_cash == 110
    assert game.pot.value == 0
