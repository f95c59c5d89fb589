"""
Game package for the Upside Down RPG.

This package contains all the core modules for the game, including the
heroes and monsters, the battle resolver, the campaign loop, items and UI.
"""
