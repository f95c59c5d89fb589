"""
Monster module for the game.

Defines the Monster class for the creatures of the Upside Down. Every monster
shares the same basic attack, which may carry bonus psychic damage, and has
no special ability.
"""

from catchery import log_debug
from core.constants import PSYCHIC_CHANCE, PSYCHIC_DAMAGE, CombatantType, MonsterKind
from core.dice import RandomSource

from .archetypes import MONSTER_TEMPLATES, MonsterTemplate
from .combatant import AttackResult, Combatant


class Monster(Combatant):
    """
    Represents a computer-controlled monster, optionally a boss.

    Attributes:
        template (MonsterTemplate):
            The template the monster was created from.
        is_boss (bool):
            Whether the monster is a boss.

    """

    template: MonsterTemplate
    is_boss: bool

    def __init__(self, template: MonsterTemplate) -> None:
        super().__init__(
            char_type=CombatantType.BOSS if template.is_boss else CombatantType.MONSTER,
            name=template.name,
            hp_max=template.hp,
            attack=template.attack,
            defense=template.defense,
        )
        self.template = template
        self.is_boss = template.is_boss

    @property
    def kind(self) -> MonsterKind:
        """Returns the kind of the monster."""
        return self.template.kind

    @property
    def description(self) -> str:
        return self.template.description

    def basic_attack(self, target: Combatant, dice: RandomSource) -> AttackResult:
        """
        Performs the monster's attack, with a chance of bonus psychic damage.

        Args:
            target (Combatant):
                The combatant being attacked.
            dice (RandomSource):
                The random source used for the rolls.

        Returns:
            AttackResult:
                The roll, the damage (bonus included) and the HP lost.

        """
        roll, base = self.roll_damage(target, dice)
        bonus = PSYCHIC_DAMAGE if dice.chance(PSYCHIC_CHANCE) else 0
        hp_lost = target.take_damage(base + bonus)
        if bonus:
            log_debug(f"{self.name} unleashes psychic energy", {"bonus": bonus})
        return AttackResult(roll=roll, damage=base + bonus, hp_lost=hp_lost, bonus=bonus)

    def perform_special(self, target: Combatant, dice: RandomSource) -> None:
        """Monsters have no special ability."""


def create_monster(kind: MonsterKind) -> Monster:
    """Creates a fresh monster of the given kind."""
    return Monster(MONSTER_TEMPLATES[kind])
