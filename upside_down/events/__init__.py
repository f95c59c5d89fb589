"""
Events module for the Upside Down RPG.

This module contains the structured events returned by battles and
encounters, consumed by the presentation layer.
"""

from .event_system import (
    AttackEvent,
    DeathEvent,
    EventType,
    FleeEvent,
    GameEvent,
    HealingEvent,
    InspectEvent,
    ItemFailedEvent,
    ItemUsedEvent,
    MonsterAppearsEvent,
    NarrativeEvent,
    QuietEvent,
    SpecialEvent,
    StunEvent,
    StunnedSkipEvent,
    TrapEvent,
    TreasureEvent,
    TurnStartEvent,
    VictoryEvent,
)

__all__ = [
    "AttackEvent",
    "DeathEvent",
    "EventType",
    "FleeEvent",
    "GameEvent",
    "HealingEvent",
    "InspectEvent",
    "ItemFailedEvent",
    "ItemUsedEvent",
    "MonsterAppearsEvent",
    "NarrativeEvent",
    "QuietEvent",
    "SpecialEvent",
    "StunEvent",
    "StunnedSkipEvent",
    "TrapEvent",
    "TreasureEvent",
    "TurnStartEvent",
    "VictoryEvent",
]
