"""
User interface module for the Upside Down RPG.

This module provides the command-line interface and the narration of game
events, including menus, prompts, and display formatting.
"""

from .cli_interface import PlayerInterface
from .narration import Narrator, storyteller

__all__ = [
    "Narrator",
    "PlayerInterface",
    "storyteller",
]
