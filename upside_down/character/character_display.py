"""
Character display module for the game.

Provides display functionality for combatants, including health, mana and
rage bars and the compact status line shown during battles.
"""

from typing import Any

from core.constants import RAGE_MAX
from core.utils import make_bar


class CharacterDisplay:
    """
    Handles display and formatting for Combatant objects.

    Attributes:
        owner (Any):
            The Combatant instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        """
        Initialize the CharacterDisplay with its owner.

        Args:
            owner (Any):
                The Combatant instance that this display is associated with.

        """
        self.owner = owner

    def get_status_line(
        self,
        show_numbers: bool = True,
        show_bars: bool = False,
    ) -> str:
        """
        Get a formatted status line for the combatant with health, mana and
        rage.

        Args:
            show_numbers (bool): Whether to show numerical values for stats. Defaults to True.
            show_bars (bool): Whether to show bar representations for stats. Defaults to False.

        Returns:
            str: A formatted string representing the combatant's status line.

        """
        owner = self.owner
        # Use dynamic name width based on name length, but cap it
        name_width = min(max(len(owner.name), 8), 16)
        status = f"{owner.char_type.emoji} [bold]{owner.name:<{name_width}}[/] "
        status += f"| [yellow]ATK:{owner.attack:>2} DEF:{owner.defense:>2}[/] "
        status += self._format_stat("HP", owner.hp, owner.hp_max, "green", show_numbers, show_bars)

        # Only heroes carry mana and rage.
        mana_max = getattr(owner, "mana_max", 0)
        if mana_max > 0:
            status += self._format_stat("MP", owner.mana, mana_max, "blue", show_numbers, show_bars)
            status += self._format_stat("RG", owner.rage, RAGE_MAX, "red", show_numbers, show_bars)

        return status.rstrip()

    @staticmethod
    def _format_stat(
        label: str,
        current: int,
        maximum: int,
        color: str,
        show_numbers: bool,
        show_bars: bool,
    ) -> str:
        bar = make_bar(current, maximum, color=color, length=8) if show_bars else ""
        if show_bars and not show_numbers:
            return f"| [{color}]{label}:[/]{bar} "
        return f"| [{color}]{label}:{current:>3}/{maximum}[/]{bar} "
