"""
Tests for the encounter dispatcher: encounter bands, monster spawning and the
non-combat encounters.
"""

from collections import Counter

import pytest
from campaign.dispatcher import EventDispatcher, NarrativeChoice
from character.hero import create_hero
from core.constants import (
    CURSED_SWORD,
    HEALING_POTION,
    MANA_POTION,
    EncounterKind,
    HeroKind,
    MonsterKind,
    NarrativeKind,
)
from core.dice import RandomSource, ScriptedRandomSource


@pytest.fixture
def knight():
    return create_hero(HeroKind.KNIGHT)


def dispatcher_with(*rolls):
    return EventDispatcher(ScriptedRandomSource(rolls))


@pytest.mark.parametrize(
    "roll, expected",
    [
        (1, EncounterKind.COMBAT),
        (40, EncounterKind.COMBAT),
        (41, EncounterKind.TREASURE),
        (65, EncounterKind.TREASURE),
        (66, EncounterKind.HEALING),
        (80, EncounterKind.HEALING),
        (81, EncounterKind.TRAP),
        (90, EncounterKind.TRAP),
        (91, EncounterKind.NARRATIVE),
        (100, EncounterKind.NARRATIVE),
    ],
)
def test_encounter_bands(roll, expected):
    assert dispatcher_with(roll).roll_event_kind() == expected


def test_encounter_distribution():
    dispatcher = EventDispatcher(RandomSource(5))
    trials = 50_000
    counts = Counter(dispatcher.roll_event_kind() for _ in range(trials))
    expected = {
        EncounterKind.COMBAT: 0.40,
        EncounterKind.TREASURE: 0.25,
        EncounterKind.HEALING: 0.15,
        EncounterKind.TRAP: 0.10,
        EncounterKind.NARRATIVE: 0.10,
    }
    for kind, share in expected.items():
        assert abs(counts[kind] / trials - share) < 0.01


@pytest.mark.parametrize(
    "roll, expected",
    [
        (1, MonsterKind.DEMOBAT),
        (40, MonsterKind.DEMOBAT),
        (41, MonsterKind.DEMODOG),
        (70, MonsterKind.DEMODOG),
        (71, MonsterKind.FLAYED_ONE),
        (95, MonsterKind.FLAYED_ONE),
        (96, MonsterKind.MIND_FLAYER),
        (100, MonsterKind.MIND_FLAYER),
    ],
)
def test_monster_bands(roll, expected):
    assert dispatcher_with(roll).spawn_monster(turn=3, boss_defeated=False).kind == expected


def test_boss_is_forced_without_rolling():
    dice = ScriptedRandomSource([])
    dispatcher = EventDispatcher(dice)
    assert dispatcher.boss_is_due(20, boss_defeated=False)
    monster = dispatcher.spawn_monster(turn=20, boss_defeated=False)
    assert monster.is_boss
    assert dice.remaining == 0


def test_boss_is_not_forced_before_the_threshold():
    dispatcher = dispatcher_with(1)
    assert not dispatcher.boss_is_due(19, boss_defeated=False)
    assert dispatcher.spawn_monster(turn=19, boss_defeated=False).kind == MonsterKind.DEMOBAT


def test_boss_is_not_forced_once_defeated():
    dispatcher = dispatcher_with(1)
    assert not dispatcher.boss_is_due(25, boss_defeated=True)
    assert dispatcher.spawn_monster(turn=25, boss_defeated=True).kind == MonsterKind.DEMOBAT


def test_treasure_with_both_potions(knight):
    event = dispatcher_with(10, 50, 20).treasure(knight)
    assert event.gold == 30
    assert [item.name for item in event.items] == [HEALING_POTION, MANA_POTION]
    assert knight.inventory.gold == 70
    assert knight.inventory.count(HEALING_POTION) == 2


def test_treasure_without_potions(knight):
    event = dispatcher_with(30, 51, 21).treasure(knight)
    assert event.gold == 50
    assert event.items == []
    assert len(knight.inventory) == 1


def test_healing_fountain(knight):
    knight.hp = 10
    knight.mana = 50
    event = dispatcher_with(4).healing(knight)
    # 40% of 90, plus the d10.
    assert event.amount == 40
    assert event.healed == 40
    assert event.mana == 20
    assert knight.hp == 50
    assert knight.mana == 70


def test_healing_fountain_is_capped(knight):
    event = dispatcher_with(10).healing(knight)
    assert event.healed == 0
    assert event.mana == 0


def test_trap_dodged(knight):
    dice = ScriptedRandomSource([5])
    event = EventDispatcher(dice).trap(knight)
    assert event.dodged
    assert knight.hp == knight.hp_max
    assert dice.remaining == 0


def test_trap_light_damage(knight):
    event = dispatcher_with(6, 10).trap(knight)
    assert not event.dodged
    assert not event.heavy
    assert event.damage == 15
    assert event.hp_lost == 5


def test_trap_heavy_damage(knight):
    event = dispatcher_with(16, 20).trap(knight)
    assert event.heavy
    assert event.damage == 35
    assert event.hp_lost == 25
    assert knight.hp == 65


@pytest.mark.parametrize(
    "roll, expected",
    [
        (1, NarrativeKind.TRAVELER),
        (2, NarrativeKind.WOUNDED_CREATURE),
        (3, NarrativeKind.SHRINE),
        (4, NarrativeKind.CURSED_SWORD),
    ],
)
def test_narrative_vignettes(knight, roll, expected):
    kind, choice = dispatcher_with(roll).narrative(knight)
    assert kind == expected
    assert choice == NarrativeChoice(kind=expected)


def test_wounded_creature_needs_a_potion(knight):
    knight.inventory.remove_item(HEALING_POTION)
    kind, choice = dispatcher_with(2).narrative(knight)
    assert kind == NarrativeKind.WOUNDED_CREATURE
    assert choice is None


def test_shrine_needs_gold(knight):
    knight.inventory.gold = 9
    kind, choice = dispatcher_with(3).narrative(knight)
    assert kind == NarrativeKind.SHRINE
    assert choice is None


def test_helping_the_traveler(knight):
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.TRAVELER), knight, accept=True
    )
    assert event.gold == 25
    assert knight.inventory.gold == 65
    assert knight.inventory.count(HEALING_POTION) == 2


def test_refusing_the_traveler_can_leave_negative_gold(knight):
    knight.inventory.gold = 5
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.TRAVELER), knight, accept=False
    )
    assert event.gold == -10
    assert knight.inventory.gold == -5


def test_healing_the_wounded_creature_uses_the_potion_on_the_hero(knight):
    knight.hp = 50
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.WOUNDED_CREATURE), knight, accept=True
    )
    assert event.healed == 25
    assert knight.hp == 75
    assert event.gold == 15
    assert knight.inventory.gold == 55
    assert not knight.inventory.has_item(HEALING_POTION)


def test_ignoring_the_wounded_creature(knight):
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.WOUNDED_CREATURE), knight, accept=False
    )
    assert not event.accepted
    assert knight.inventory.gold == 40
    assert knight.inventory.has_item(HEALING_POTION)


def test_shrine_sacrifice(knight):
    knight.hp = 60
    knight.mana = 90
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.SHRINE), knight, accept=True
    )
    assert knight.inventory.gold == 30
    assert event.healed == 20
    assert event.mana == 10


def test_cursed_sword_is_stored_but_not_applied(knight):
    event = dispatcher_with().resolve_narrative(
        NarrativeChoice(kind=NarrativeKind.CURSED_SWORD), knight, accept=True
    )
    assert [item.name for item in event.items_gained] == [CURSED_SWORD]
    assert knight.inventory.has_item(CURSED_SWORD)
    assert knight.attack == 22
