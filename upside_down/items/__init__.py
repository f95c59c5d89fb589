"""
Items system module for the Upside Down RPG.

This module contains the item definitions carried in a hero's inventory,
such as healing and mana potions and the cursed sword.
"""

from .item import Item, cursed_sword, healing_potion, mana_potion

__all__ = [
    "Item",
    "cursed_sword",
    "healing_potion",
    "mana_potion",
]
