"""
Event system for the riskwar engine.

This package provides the per-session event emitter the game master publishes
phase events on.
"""

from riskwar.events.emitter import EventEmitter, EngineEventType

__all__ = ["EventEmitter", "EngineEventType"]
