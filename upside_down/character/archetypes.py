"""
Archetype definitions for heroes and monsters.

Each hero and monster kind is described by a pydantic model carrying its
stats, starting equipment and capability flags. The Hero and Monster classes
are instantiated from these definitions.
"""

from core.constants import HeroKind, MonsterKind
from items.item import Item, healing_potion, mana_potion
from pydantic import BaseModel, ConfigDict, Field


class HeroArchetype(BaseModel):
    """
    Represents a playable hero archetype with its starting stats and
    equipment.
    """

    model_config = ConfigDict(frozen=True)

    kind: HeroKind = Field(
        description="The kind of hero, used to select its special ability.",
    )
    name: str = Field(
        description="The name of the archetype.",
    )
    role: str = Field(
        description="A short description of the archetype's role.",
    )
    special_name: str = Field(
        description="The name of the archetype's special ability.",
    )
    hp: int = Field(
        gt=0,
        description="The maximum health of the hero.",
    )
    attack: int = Field(
        ge=0,
        description="The attack power of the hero.",
    )
    defense: int = Field(
        ge=0,
        description="The defense of the hero.",
    )
    starting_gold: int = Field(
        default=0,
        description="The gold the hero starts with.",
    )
    starting_rage: int = Field(
        default=0,
        ge=0,
        le=100,
        description="The rage the hero starts with.",
    )
    starting_items: tuple[Item, ...] = Field(
        default=(),
        description="The items the hero starts with.",
    )
    can_stun: bool = Field(
        default=False,
        description="Whether the hero's special ability may stun the monster.",
    )


class MonsterTemplate(BaseModel):
    """Represents a monster of the Upside Down with its stats."""

    model_config = ConfigDict(frozen=True)

    kind: MonsterKind = Field(
        description="The kind of monster.",
    )
    name: str = Field(
        description="The name of the monster.",
    )
    description: str = Field(
        default="",
        description="A short description shown when the monster is inspected.",
    )
    hp: int = Field(
        gt=0,
        description="The maximum health of the monster.",
    )
    attack: int = Field(
        ge=0,
        description="The attack power of the monster.",
    )
    defense: int = Field(
        ge=0,
        description="The defense of the monster.",
    )
    is_boss: bool = Field(
        default=False,
        description="Whether the monster is a boss.",
    )


HERO_ARCHETYPES: dict[HeroKind, HeroArchetype] = {
    archetype.kind: archetype
    for archetype in (
        HeroArchetype(
            kind=HeroKind.WIZARD,
            name="Wizard",
            role="Tank/Magic",
            special_name="Arcane Shield",
            hp=120,
            attack=20,
            defense=15,
            starting_gold=20,
            starting_items=(healing_potion(30), healing_potion(30)),
            can_stun=True,
        ),
        HeroArchetype(
            kind=HeroKind.SORCERER,
            name="Sorcerer",
            role="Burst/Elemental",
            special_name="Elemental Fury",
            hp=80,
            attack=25,
            defense=8,
            starting_gold=30,
            starting_items=(healing_potion(20), mana_potion(30)),
        ),
        HeroArchetype(
            kind=HeroKind.KNIGHT,
            name="Knight",
            role="Balanced/Crit",
            special_name="Holy Strike",
            hp=90,
            attack=22,
            defense=10,
            starting_gold=40,
            starting_items=(healing_potion(25),),
        ),
        HeroArchetype(
            kind=HeroKind.BARD,
            name="Bard",
            role="Support/Rage",
            special_name="Battle Song",
            hp=140,
            attack=28,
            defense=12,
            starting_gold=10,
            starting_rage=20,
            starting_items=(healing_potion(40),),
        ),
        HeroArchetype(
            kind=HeroKind.ZOOMER,
            name="Zoomer",
            role="Speed/Multi-hit",
            special_name="Rapid Strike",
            hp=100,
            attack=24,
            defense=9,
            starting_gold=35,
            starting_items=(healing_potion(25), healing_potion(25)),
        ),
    )
}

MONSTER_TEMPLATES: dict[MonsterKind, MonsterTemplate] = {
    template.kind: template
    for template in (
        MonsterTemplate(
            kind=MonsterKind.DEMOBAT,
            name="Demobat",
            description="A bat-like swarm creature from the Upside Down.",
            hp=25,
            attack=12,
            defense=4,
        ),
        MonsterTemplate(
            kind=MonsterKind.DEMODOG,
            name="Demodog",
            description="An adolescent Demogorgon hunting in packs.",
            hp=50,
            attack=16,
            defense=7,
        ),
        MonsterTemplate(
            kind=MonsterKind.FLAYED_ONE,
            name="Flayed One",
            description="A human possessed by the Mind Flayer.",
            hp=80,
            attack=20,
            defense=10,
        ),
        MonsterTemplate(
            kind=MonsterKind.MIND_FLAYER,
            name="Mind Flayer",
            description="The Shadow Monster, ruler of the Upside Down.",
            hp=250,
            attack=35,
            defense=18,
            is_boss=True,
        ),
    )
}
