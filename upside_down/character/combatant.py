"""
Combatant module for the game.

Defines the Combatant base class shared by heroes and monsters: health,
attack and defense, damage taking, healing and the basic attack formula.
"""

from catchery import log_debug
from core.constants import CombatantType
from core.dice import RandomSource
from pydantic import BaseModel, Field

from .character_display import CharacterDisplay


class AttackResult(BaseModel):
    """The result of a single basic attack."""

    roll: int = Field(description="The d20 rolled for the attack.")
    damage: int = Field(ge=0, description="The damage dealt before the target's defense.")
    hp_lost: int = Field(ge=0, description="The HP the target actually lost.")
    bonus: int = Field(default=0, ge=0, description="Bonus damage included in damage.")


class Combatant:
    """
    Represents any entity with health, attack and defense taking part in a
    battle.

    Attributes:
        char_type (CombatantType):
            The side the combatant fights on.
        name (str):
            The name of the combatant.
        hp_max (int):
            The maximum health of the combatant.
        hp (int):
            The current health, always within [0, hp_max].
        attack (int):
            The attack power added to every attack roll.
        defense (int):
            The flat damage reduction applied to every hit taken.

    """

    char_type: CombatantType
    name: str
    hp_max: int
    hp: int
    attack: int
    defense: int
    display: CharacterDisplay

    def __init__(
        self,
        char_type: CombatantType,
        name: str,
        hp_max: int,
        attack: int,
        defense: int,
    ) -> None:
        if hp_max <= 0:
            raise ValueError(f"{name} must have a positive maximum health, got {hp_max}.")
        if attack < 0 or defense < 0:
            raise ValueError(f"{name} must have non-negative attack and defense.")
        self.char_type = char_type
        self.name = name
        self.hp_max = hp_max
        self.hp = hp_max
        self.attack = attack
        self.defense = defense
        self.display = CharacterDisplay(owner=self)

    @property
    def colored_name(self) -> str:
        """Returns the combatant's name colored by its side."""
        return self.char_type.colorize(self.name)

    def is_alive(self) -> bool:
        """Check if the combatant still has health left."""
        return self.hp > 0

    def is_dead(self) -> bool:
        """Check if the combatant has no health left."""
        return self.hp <= 0

    def take_damage(self, amount: int) -> int:
        """
        Applies damage to the combatant, reduced by its defense.

        Args:
            amount (int):
                The incoming damage.

        Returns:
            int:
                The HP actually lost.

        """
        effective = max(0, amount - self.defense)
        before = self.hp
        self.hp = max(0, self.hp - effective)
        log_debug(
            f"{self.name} takes {before - self.hp} damage "
            f"(incoming: {amount}, defense: {self.defense}, hp: {self.hp}/{self.hp_max})"
        )
        return before - self.hp

    def heal(self, amount: int) -> int:
        """
        Heals the combatant, never above its maximum health.

        Args:
            amount (int):
                The amount of health to restore.

        Returns:
            int:
                The HP actually restored.

        """
        before = self.hp
        self.hp = min(self.hp_max, self.hp + amount)
        return self.hp - before

    def roll_damage(self, target: "Combatant", dice: RandomSource, bonus: int = 0) -> tuple[int, int]:
        """
        Rolls a d20 and computes the damage against a target.

        Args:
            target (Combatant):
                The combatant being attacked.
            dice (RandomSource):
                The random source used for the roll.
            bonus (int):
                Extra attack added to the roll.

        Returns:
            tuple[int, int]:
                - The d20 rolled
                - The damage, max(0, roll + attack + bonus - target defense)

        """
        roll = dice.roll(20)
        return roll, max(0, roll + self.attack + bonus - target.defense)

    def basic_attack(self, target: "Combatant", dice: RandomSource) -> AttackResult:
        """
        Performs a basic attack against the target.

        Args:
            target (Combatant):
                The combatant being attacked.
            dice (RandomSource):
                The random source used for the roll.

        Returns:
            AttackResult:
                The roll, the damage dealt and the HP the target lost.

        """
        roll, damage = self.roll_damage(target, dice)
        hp_lost = target.take_damage(damage)
        return AttackResult(roll=roll, damage=damage, hp_lost=hp_lost)

    def get_status_line(self, show_numbers: bool = True, show_bars: bool = False) -> str:
        """Returns a formatted status line for the combatant."""
        return self.display.get_status_line(show_numbers=show_numbers, show_bars=show_bars)

    def __str__(self) -> str:
        return (
            f"{self.name} | HP: {self.hp}/{self.hp_max} "
            f"| ATK: {self.attack} | DEF: {self.defense}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, hp={self.hp}/{self.hp_max})"
