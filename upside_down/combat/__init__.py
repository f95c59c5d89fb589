"""
Combat system module for the Upside Down RPG.

This module handles the battle between the hero and a monster: the turn
loop, escape attempts, stuns and victory rewards.
"""

from .battle import BattleResolver, TurnReport, attempt_flee, flee_chance

__all__ = [
    "BattleResolver",
    "TurnReport",
    "attempt_flee",
    "flee_chance",
]
