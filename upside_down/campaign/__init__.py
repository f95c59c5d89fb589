"""
Campaign module for the Upside Down RPG.

This module drives a full run: the encounter dispatcher rolling each overall
turn, and the campaign loop deciding victory and defeat.
"""

from .campaign import (
    BattleEncounter,
    Campaign,
    DecisionProvider,
    Encounter,
    NarrativeEncounter,
    ResolvedEncounter,
)
from .dispatcher import EventDispatcher, NarrativeChoice

__all__ = [
    "BattleEncounter",
    "Campaign",
    "DecisionProvider",
    "Encounter",
    "EventDispatcher",
    "NarrativeChoice",
    "NarrativeEncounter",
    "ResolvedEncounter",
]
