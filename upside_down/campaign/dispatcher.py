"""
Encounter dispatcher module for the game.

Chooses, for every overall turn, which kind of encounter happens, and
resolves the non-combat encounters: treasure rooms, healing fountains, traps
and narrative choices.
"""

from typing import TypeVar

from catchery import log_debug
from character.hero import Hero
from character.monster import Monster, create_monster
from core.constants import (
    BOSS_TURN_THRESHOLD,
    HEALING_POTION,
    EncounterKind,
    MonsterKind,
    NarrativeKind,
)
from core.dice import RandomSource
from core.error_handling import GameException
from events.event_system import HealingEvent, NarrativeEvent, TrapEvent, TreasureEvent
from items.item import cursed_sword, healing_potion, mana_potion
from pydantic import BaseModel, Field

# Upper bounds (inclusive) of the d100 bands selecting the encounter kind.
ENCOUNTER_BANDS: list[tuple[int, EncounterKind]] = [
    (40, EncounterKind.COMBAT),
    (65, EncounterKind.TREASURE),
    (80, EncounterKind.HEALING),
    (90, EncounterKind.TRAP),
    (100, EncounterKind.NARRATIVE),
]

# Upper bounds (inclusive) of the d100 bands selecting the monster.
MONSTER_BANDS: list[tuple[int, MonsterKind]] = [
    (40, MonsterKind.DEMOBAT),
    (70, MonsterKind.DEMODOG),
    (95, MonsterKind.FLAYED_ONE),
    (100, MonsterKind.MIND_FLAYER),
]

# The d4 result selecting each narrative vignette.
NARRATIVE_ROLLS: dict[int, NarrativeKind] = {
    1: NarrativeKind.TRAVELER,
    2: NarrativeKind.WOUNDED_CREATURE,
    3: NarrativeKind.SHRINE,
    4: NarrativeKind.CURSED_SWORD,
}

TREASURE_POTION_CHANCE = 50
TREASURE_MANA_POTION_CHANCE = 20
FOUNTAIN_HEAL_PERCENT = 40
FOUNTAIN_MANA = 20
TRAVELER_REWARD = 25
TRAVELER_PENALTY = 10
CREATURE_REWARD = 15
SHRINE_COST = 10
SHRINE_HEAL = 20
SHRINE_MANA = 20


T = TypeVar("T")


def _pick_band(roll: int, bands: list[tuple[int, T]]) -> T:
    for upper, value in bands:
        if roll <= upper:
            return value
    return bands[-1][1]


class NarrativeChoice(BaseModel):
    """A narrative vignette waiting for the hero's decision."""

    kind: NarrativeKind = Field(description="The vignette offered to the hero.")


class EventDispatcher:
    """
    Rolls and resolves the encounters of each overall turn.

    Attributes:
        dice (RandomSource):
            The random source shared with the rest of the campaign.

    """

    def __init__(self, dice: RandomSource) -> None:
        self.dice = dice

    def roll_event_kind(self) -> EncounterKind:
        """
        Rolls the kind of encounter for the current turn.

        Returns:
            EncounterKind:
                COMBAT on 1-40, TREASURE on 41-65, HEALING on 66-80, TRAP on
                81-90 and NARRATIVE on 91-100.

        """
        roll = self.dice.roll(100)
        kind = _pick_band(roll, ENCOUNTER_BANDS)
        log_debug(f"Encounter roll {roll} -> {kind}")
        return kind

    def boss_is_due(self, turn: int, boss_defeated: bool) -> bool:
        """Check whether the boss must appear in the next battle."""
        return turn >= BOSS_TURN_THRESHOLD and not boss_defeated

    def spawn_monster(self, turn: int, boss_defeated: bool) -> Monster:
        """
        Spawns the monster for a battle encounter.

        Once the turn threshold is reached and the boss is still alive, the
        boss is spawned without rolling. Otherwise the monster is picked by a
        weighted d100 roll, which may summon the boss early.

        Args:
            turn (int):
                The current overall turn.
            boss_defeated (bool):
                Whether the boss has already been defeated.

        Returns:
            Monster:
                A fresh monster.

        """
        if self.boss_is_due(turn, boss_defeated):
            log_debug("The boss is forced to appear", {"turn": turn})
            return create_monster(MonsterKind.MIND_FLAYER)
        roll = self.dice.roll(100)
        kind = _pick_band(roll, MONSTER_BANDS)
        log_debug(f"Monster roll {roll} -> {kind}", {"turn": turn})
        return create_monster(kind)

    def treasure(self, hero: Hero) -> TreasureEvent:
        """Resolves a treasure room: gold and maybe some potions."""
        gold = self.dice.roll(30) + 20
        hero.inventory.add_gold(gold)
        items = []
        if self.dice.chance(TREASURE_POTION_CHANCE):
            items.append(healing_potion(30))
        if self.dice.chance(TREASURE_MANA_POTION_CHANCE):
            items.append(mana_potion(30))
        for item in items:
            hero.inventory.add_item(item)
        return TreasureEvent(actor=hero, gold=gold, items=items)

    def healing(self, hero: Hero) -> HealingEvent:
        """Resolves a healing fountain: restores HP and mana."""
        amount = hero.hp_max * FOUNTAIN_HEAL_PERCENT // 100 + self.dice.roll(10)
        healed = hero.heal(amount)
        mana = hero.restore_mana(FOUNTAIN_MANA)
        return HealingEvent(actor=hero, amount=amount, healed=healed, mana=mana)

    def trap(self, hero: Hero) -> TrapEvent:
        """
        Resolves a trap.

        A d20 decides the severity: 1-5 is dodged, 6-15 deals 1d10+5 and
        16-20 deals 1d20+15. The hero's defense reduces the damage.
        """
        roll = self.dice.roll(20)
        if roll <= 5:
            return TrapEvent(actor=hero, roll=roll)
        if roll <= 15:
            damage = self.dice.roll(10) + 5
        else:
            damage = self.dice.roll(20) + 15
        hp_lost = hero.take_damage(damage)
        return TrapEvent(actor=hero, roll=roll, damage=damage, hp_lost=hp_lost)

    def narrative(self, hero: Hero) -> tuple[NarrativeKind, NarrativeChoice | None]:
        """
        Rolls a narrative vignette.

        The wounded creature is only offered to a hero holding a healing
        potion, and the shrine only to a hero with at least 10 gold.

        Returns:
            tuple[NarrativeKind, NarrativeChoice | None]:
                - The vignette rolled
                - The choice to offer, or None when the vignette's condition
                  is not met

        """
        kind = NARRATIVE_ROLLS[self.dice.roll(4)]
        if kind == NarrativeKind.WOUNDED_CREATURE and not hero.inventory.has_item(HEALING_POTION):
            return kind, None
        if kind == NarrativeKind.SHRINE and hero.inventory.gold < SHRINE_COST:
            return kind, None
        return kind, NarrativeChoice(kind=kind)

    def resolve_narrative(
        self,
        choice: NarrativeChoice,
        hero: Hero,
        accept: bool,
    ) -> NarrativeEvent:
        """
        Applies the hero's decision on a narrative vignette.

        Args:
            choice (NarrativeChoice):
                The vignette that was offered.
            hero (Hero):
                The hero making the decision.
            accept (bool):
                Whether the hero accepted (helped, healed, sacrificed, took).

        Returns:
            NarrativeEvent:
                What the decision changed.

        """
        event = NarrativeEvent(actor=hero, kind=choice.kind, accepted=accept)
        inventory = hero.inventory
        if choice.kind == NarrativeKind.TRAVELER:
            if accept:
                potion = healing_potion(30)
                inventory.add_gold(TRAVELER_REWARD)
                inventory.add_item(potion)
                event.gold = TRAVELER_REWARD
                event.items_gained.append(potion)
            else:
                # Gold may go negative here.
                inventory.add_gold(-TRAVELER_PENALTY)
                event.gold = -TRAVELER_PENALTY
        elif choice.kind == NarrativeKind.WOUNDED_CREATURE and accept:
            hp_before = hero.hp
            try:
                potion = inventory.use_item(HEALING_POTION, hero)
                event.items_lost.append(potion)
            except GameException as e:
                event.reason = e.message
            event.healed = hero.hp - hp_before
            inventory.add_gold(CREATURE_REWARD)
            event.gold = CREATURE_REWARD
        elif choice.kind == NarrativeKind.SHRINE and accept:
            inventory.add_gold(-SHRINE_COST)
            event.gold = -SHRINE_COST
            event.healed = hero.heal(SHRINE_HEAL)
            event.mana = hero.restore_mana(SHRINE_MANA)
        elif choice.kind == NarrativeKind.CURSED_SWORD and accept:
            # The sword's attack bonus is stored on the item and never applied.
            sword = cursed_sword()
            inventory.add_item(sword)
            event.items_gained.append(sword)
        log_debug(str(event), {"gold": inventory.gold})
        return event
