"""
Core system module for the Upside Down RPG.

This module contains the fundamental components and utilities that power the
game, including game constants, the random source, the error hierarchy,
logging setup and display utilities.
"""

from .constants import (
    BattleAction,
    BattleState,
    CampaignResult,
    CombatantType,
    EncounterKind,
    HeroKind,
    ItemCategory,
    MonsterKind,
    NarrativeKind,
)
from .dice import (
    RandomSource,
    ScriptedRandomSource,
)
from .error_handling import (
    GameException,
    InsufficientResource,
    InvalidSelection,
    ItemNotFound,
    ItemNotUsable,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from constants.py
    "BattleAction",
    "BattleState",
    "CampaignResult",
    "CombatantType",
    "EncounterKind",
    "HeroKind",
    "ItemCategory",
    "MonsterKind",
    "NarrativeKind",
    # Import from dice.py
    "RandomSource",
    "ScriptedRandomSource",
    # Import from error_handling.py
    "GameException",
    "InsufficientResource",
    "InvalidSelection",
    "ItemNotFound",
    "ItemNotUsable",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
