"""
Hero module for the game.

Defines the Hero class controlled by the player and the special abilities of
each hero archetype. Special abilities are plain functions registered by hero
kind, so every hero shares a single `perform_special` call site.
"""

from typing import Callable

from catchery import log_debug
from core.constants import (
    ARCANE_SHIELD_MULT,
    BATTLE_SONG_HP_STEP,
    BATTLE_SONG_RAGE,
    ELEMENTAL_FURY_BONUS,
    ELEMENTAL_FURY_COST,
    HOLY_STRIKE_CRIT_CHANCE,
    HOLY_STRIKE_CRIT_MULT,
    MANA_MAX,
    MANA_RESTORE_DEFAULT,
    RAGE_MAX,
    CombatantType,
    HeroKind,
)
from core.dice import RandomSource
from core.error_handling import InsufficientResource
from pydantic import BaseModel, Field

from .archetypes import HERO_ARCHETYPES, HeroArchetype
from .character_inventory import Inventory
from .combatant import Combatant


class SpecialOutcome(BaseModel):
    """The result of a hero's special ability."""

    ability: str = Field(description="The name of the special ability.")
    success: bool = Field(default=True, description="Whether the ability triggered.")
    damage: int = Field(default=0, ge=0, description="Total damage dealt before defense.")
    hp_lost: int = Field(default=0, ge=0, description="Total HP the target lost.")
    strikes: list[int] = Field(
        default_factory=list,
        description="The damage of every executed strike.",
    )
    critical: bool = Field(default=False, description="Whether the strike was critical.")
    bonus: int = Field(default=0, description="Bonus attack granted by the ability.")
    reason: str = Field(default="", description="Why the ability failed, if it did.")


class Hero(Combatant):
    """
    Represents the player-controlled hero.

    Attributes:
        archetype (HeroArchetype):
            The archetype the hero was created from.
        mana (int):
            The current mana, within [0, mana_max].
        mana_max (int):
            The maximum mana.
        rage (int):
            The current rage, within [0, 100].
        inventory (Inventory):
            The gold and items owned by the hero.

    """

    archetype: HeroArchetype
    mana: int
    mana_max: int
    rage: int
    inventory: Inventory

    def __init__(self, archetype: HeroArchetype) -> None:
        super().__init__(
            char_type=CombatantType.HERO,
            name=archetype.name,
            hp_max=archetype.hp,
            attack=archetype.attack,
            defense=archetype.defense,
        )
        self.archetype = archetype
        self.mana_max = MANA_MAX
        self.mana = MANA_MAX
        self.rage = archetype.starting_rage
        self.inventory = Inventory(
            gold=archetype.starting_gold,
            items=list(archetype.starting_items),
        )

    @property
    def kind(self) -> HeroKind:
        """Returns the kind of the hero."""
        return self.archetype.kind

    @property
    def can_stun(self) -> bool:
        """Whether the hero's special ability may stun its target."""
        return self.archetype.can_stun

    @property
    def special_name(self) -> str:
        """Returns the name of the hero's special ability."""
        return self.archetype.special_name

    def restore_mana(self, amount: int = MANA_RESTORE_DEFAULT) -> int:
        """
        Restores mana, never above the maximum.

        Returns:
            int: The mana actually restored.

        """
        before = self.mana
        self.mana = min(self.mana_max, self.mana + amount)
        return self.mana - before

    def spend_mana(self, cost: int) -> None:
        """Spends mana, never below zero."""
        self.mana = max(0, self.mana - cost)

    def add_rage(self, amount: int) -> None:
        """Adds rage, never above the maximum."""
        self.rage = min(RAGE_MAX, self.rage + amount)

    def reset_rage(self) -> None:
        """Resets rage to zero."""
        self.rage = 0

    def perform_special(self, target: Combatant, dice: RandomSource) -> SpecialOutcome:
        """
        Performs the hero's special ability against the target.

        Args:
            target (Combatant):
                The combatant targeted by the ability.
            dice (RandomSource):
                The random source used for the rolls.

        Returns:
            SpecialOutcome:
                What the ability did. A failed ability leaves both the hero
                and the target untouched.

        """
        try:
            outcome = SPECIAL_ABILITIES[self.kind](self, target, dice)
        except InsufficientResource as e:
            log_debug(f"{self.name} cannot use {self.special_name}", e.context)
            return SpecialOutcome(ability=self.special_name, success=False, reason=e.message)
        log_debug(
            f"{self.name} used {outcome.ability}",
            {"damage": outcome.damage, "hp_lost": outcome.hp_lost, "critical": outcome.critical},
        )
        return outcome


def create_hero(kind: HeroKind) -> Hero:
    """Creates a fresh hero of the given kind."""
    return Hero(HERO_ARCHETYPES[kind])


# ============================================================================
# SPECIAL ABILITIES
# ============================================================================


def arcane_shield(hero: Hero, target: Combatant, dice: RandomSource) -> SpecialOutcome:
    """Wizard: a strike multiplied by 1.5."""
    _, base = hero.roll_damage(target, dice)
    damage = int(base * ARCANE_SHIELD_MULT)
    hp_lost = target.take_damage(damage)
    return SpecialOutcome(
        ability=hero.special_name,
        damage=damage,
        hp_lost=hp_lost,
        strikes=[damage],
    )


def elemental_fury(hero: Hero, target: Combatant, dice: RandomSource) -> SpecialOutcome:
    """Sorcerer: a mana-fueled strike with a flat attack bonus."""
    if hero.mana < ELEMENTAL_FURY_COST:
        raise InsufficientResource("mana", hero.mana, ELEMENTAL_FURY_COST)
    hero.spend_mana(ELEMENTAL_FURY_COST)
    _, damage = hero.roll_damage(target, dice, bonus=ELEMENTAL_FURY_BONUS)
    hp_lost = target.take_damage(damage)
    return SpecialOutcome(
        ability=hero.special_name,
        damage=damage,
        hp_lost=hp_lost,
        strikes=[damage],
        bonus=ELEMENTAL_FURY_BONUS,
    )


def holy_strike(hero: Hero, target: Combatant, dice: RandomSource) -> SpecialOutcome:
    """Knight: a strike with a chance of critical damage."""
    _, base = hero.roll_damage(target, dice)
    critical = dice.chance(HOLY_STRIKE_CRIT_CHANCE)
    damage = int(base * HOLY_STRIKE_CRIT_MULT) if critical else base
    hp_lost = target.take_damage(damage)
    return SpecialOutcome(
        ability=hero.special_name,
        damage=damage,
        hp_lost=hp_lost,
        strikes=[damage],
        critical=critical,
    )


def battle_song(hero: Hero, target: Combatant, dice: RandomSource) -> SpecialOutcome:
    """Bard: a strike that grows stronger the more the hero is wounded."""
    bonus = (hero.hp_max - hero.hp) // BATTLE_SONG_HP_STEP
    _, damage = hero.roll_damage(target, dice, bonus=bonus)
    hp_lost = target.take_damage(damage)
    hero.add_rage(BATTLE_SONG_RAGE)
    return SpecialOutcome(
        ability=hero.special_name,
        damage=damage,
        hp_lost=hp_lost,
        strikes=[damage],
        bonus=bonus,
    )


def rapid_strike(hero: Hero, target: Combatant, dice: RandomSource) -> SpecialOutcome:
    """Zoomer: two quick strikes, the second only if the target survived."""
    strikes: list[int] = []
    hp_lost = 0
    for strike in range(2):
        if strike > 0 and target.is_dead():
            break
        _, damage = hero.roll_damage(target, dice)
        hp_lost += target.take_damage(damage)
        strikes.append(damage)
    return SpecialOutcome(
        ability=hero.special_name,
        damage=sum(strikes),
        hp_lost=hp_lost,
        strikes=strikes,
    )


SpecialAbility = Callable[[Hero, Combatant, RandomSource], SpecialOutcome]

SPECIAL_ABILITIES: dict[HeroKind, SpecialAbility] = {
    HeroKind.WIZARD: arcane_shield,
    HeroKind.SORCERER: elemental_fury,
    HeroKind.KNIGHT: holy_strike,
    HeroKind.BARD: battle_song,
    HeroKind.ZOOMER: rapid_strike,
}
