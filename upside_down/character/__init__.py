"""
Character system module for the Upside Down RPG.

This module handles heroes and monsters: their archetypes, stats, special
abilities, inventory and display.
"""

from .archetypes import HERO_ARCHETYPES, MONSTER_TEMPLATES, HeroArchetype, MonsterTemplate
from .character_display import CharacterDisplay
from .character_inventory import Inventory
from .combatant import AttackResult, Combatant
from .hero import SPECIAL_ABILITIES, Hero, SpecialOutcome, create_hero
from .monster import Monster, create_monster

__all__ = [
    # Import from archetypes.py
    "HERO_ARCHETYPES",
    "MONSTER_TEMPLATES",
    "HeroArchetype",
    "MonsterTemplate",
    # Import from character_display.py
    "CharacterDisplay",
    # Import from character_inventory.py
    "Inventory",
    # Import from combatant.py
    "AttackResult",
    "Combatant",
    # Import from hero.py
    "SPECIAL_ABILITIES",
    "Hero",
    "SpecialOutcome",
    "create_hero",
    # Import from monster.py
    "Monster",
    "create_monster",
]
