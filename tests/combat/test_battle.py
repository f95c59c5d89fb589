"""
Tests for the battle resolver: turn order, escapes, stuns and rewards.
"""

import pytest
from character.hero import create_hero
from character.monster import create_monster
from combat.battle import BattleResolver, attempt_flee, flee_chance
from core.constants import (
    CURSED_SWORD,
    HEALING_POTION,
    BattleAction,
    BattleState,
    HeroKind,
    MonsterKind,
)
from core.dice import RandomSource, ScriptedRandomSource
from core.error_handling import InvalidSelection
from events.event_system import (
    AttackEvent,
    DeathEvent,
    EventType,
    FleeEvent,
    InspectEvent,
    ItemFailedEvent,
    ItemUsedEvent,
    StunnedSkipEvent,
    VictoryEvent,
)
from items.item import cursed_sword


@pytest.fixture
def knight():
    return create_hero(HeroKind.KNIGHT)


@pytest.fixture
def demobat():
    return create_monster(MonsterKind.DEMOBAT)


def event_types(events):
    return [event.event_type for event in events]


def test_golden_path_knight_against_demobat(knight, demobat):
    dice = ScriptedRandomSource([10, 5, 50])
    resolver = BattleResolver(knight, demobat, dice)

    report = resolver.decide(BattleAction.ATTACK)
    assert report.state == BattleState.PLAYER_TURN
    assert report.consumed_turn
    assert event_types(report.events) == [EventType.ON_ATTACK, EventType.ON_ATTACK]
    assert report.events[0].result.hp_lost == 24
    assert demobat.hp == 1
    # 5 + 12 - 10 = 7, absorbed by the knight's defense.
    assert report.events[1].result.hp_lost == 0
    assert knight.hp == 90

    dice.push(1, 7, 40)
    report = resolver.decide(BattleAction.ATTACK)
    assert report.state == BattleState.PLAYER_WON
    assert demobat.is_dead()
    victory = report.events[-1]
    assert isinstance(victory, VictoryEvent)
    assert victory.gold == 17
    assert victory.healed == 0
    assert [item.name for item in victory.items] == [HEALING_POTION]
    assert knight.inventory.gold == 57
    assert knight.inventory.count(HEALING_POTION) == 2
    assert dice.remaining == 0
    assert resolver.round_number == 2
    assert len(resolver.history) == 4


def test_victory_heals_a_fifth_of_max_health(knight, demobat):
    knight.hp = 50
    demobat.hp = 1
    dice = ScriptedRandomSource([1, 3, 41])
    report = BattleResolver(knight, demobat, dice).decide(BattleAction.ATTACK)
    victory = report.events[-1]
    assert victory.healed == 18
    assert knight.hp == 68
    assert victory.items == []
    assert knight.inventory.gold == 53


def test_boss_victory(knight):
    boss = create_monster(MonsterKind.MIND_FLAYER)
    boss.hp = 1
    # No potion roll after a boss fight.
    dice = ScriptedRandomSource([20, 20])
    resolver = BattleResolver(knight, boss, dice)
    report = resolver.decide(BattleAction.ATTACK)
    assert report.state == BattleState.PLAYER_WON
    assert report.boss_defeated
    assert resolver.boss_defeated
    assert report.events[-1].gold == 120
    assert report.events[-1].boss
    assert dice.remaining == 0


def test_hero_death():
    sorcerer = create_hero(HeroKind.SORCERER)
    sorcerer.hp = 1
    boss = create_monster(MonsterKind.MIND_FLAYER)
    dice = ScriptedRandomSource([1, 1, 100])
    resolver = BattleResolver(sorcerer, boss, dice)
    report = resolver.decide(BattleAction.ATTACK)
    assert report.state == BattleState.PLAYER_DIED
    assert isinstance(report.events[-1], DeathEvent)
    assert report.events[-1].killer is boss
    assert sorcerer.hp == 0
    assert resolver.is_over()
    assert resolver.legal_actions() == []
    with pytest.raises(InvalidSelection):
        resolver.decide(BattleAction.ATTACK)


def test_battle_against_dead_combatant_is_over(knight, demobat):
    demobat.hp = 0
    resolver = BattleResolver(knight, demobat, ScriptedRandomSource([]))
    assert resolver.state == BattleState.PLAYER_WON
    assert resolver.is_over()


def test_legal_actions(knight, demobat):
    resolver = BattleResolver(knight, demobat, ScriptedRandomSource([]))
    assert resolver.legal_actions() == [
        BattleAction.ATTACK,
        BattleAction.SPECIAL,
        BattleAction.USE_ITEM,
        BattleAction.FLEE,
        BattleAction.INSPECT,
    ]
    knight.inventory.remove_item(HEALING_POTION)
    assert BattleAction.USE_ITEM not in resolver.legal_actions()


def test_use_item_with_empty_inventory_is_rejected(knight, demobat):
    knight.inventory.remove_item(HEALING_POTION)
    dice = ScriptedRandomSource([])
    resolver = BattleResolver(knight, demobat, dice)
    with pytest.raises(InvalidSelection):
        resolver.decide(BattleAction.USE_ITEM, HEALING_POTION)
    assert resolver.round_number == 0
    assert resolver.history == []


def test_use_item_without_a_name_is_rejected(knight, demobat):
    resolver = BattleResolver(knight, demobat, ScriptedRandomSource([]))
    with pytest.raises(InvalidSelection):
        resolver.decide(BattleAction.USE_ITEM)


def test_inspect_does_not_consume_the_turn(knight, demobat):
    dice = ScriptedRandomSource([])
    resolver = BattleResolver(knight, demobat, dice)
    report = resolver.decide(BattleAction.INSPECT)
    assert not report.consumed_turn
    assert report.state == BattleState.PLAYER_TURN
    assert isinstance(report.events[0], InspectEvent)
    assert report.events[0].target is demobat
    assert resolver.round_number == 0
    assert knight.hp == knight.hp_max


def test_use_potion_then_monster_attacks(knight, demobat):
    knight.hp = 40
    dice = ScriptedRandomSource([1, 100])
    report = BattleResolver(knight, demobat, dice).decide(BattleAction.USE_ITEM, HEALING_POTION)
    assert isinstance(report.events[0], ItemUsedEvent)
    assert report.events[0].amount == 25
    assert knight.hp == 65
    assert isinstance(report.events[1], AttackEvent)
    assert not knight.inventory.has_item(HEALING_POTION)


def test_failed_item_use_still_consumes_the_turn(knight, demobat):
    knight.inventory.add_item(cursed_sword())
    dice = ScriptedRandomSource([1, 100])
    resolver = BattleResolver(knight, demobat, dice)
    report = resolver.decide(BattleAction.USE_ITEM, CURSED_SWORD)
    assert report.consumed_turn
    assert isinstance(report.events[0], ItemFailedEvent)
    assert report.events[0].item_name == CURSED_SWORD
    assert isinstance(report.events[1], AttackEvent)
    assert knight.inventory.has_item(CURSED_SWORD)
    assert resolver.round_number == 1
    assert dice.remaining == 0


def test_missing_item_still_consumes_the_turn(knight, demobat):
    dice = ScriptedRandomSource([1, 100])
    report = BattleResolver(knight, demobat, dice).decide(BattleAction.USE_ITEM, "elixir")
    assert isinstance(report.events[0], ItemFailedEvent)
    assert report.events[0].reason == "You don't have 'elixir'."
    assert dice.remaining == 0


def test_successful_flee(knight, demobat):
    dice = ScriptedRandomSource([70])
    report = BattleResolver(knight, demobat, dice).decide(BattleAction.FLEE)
    assert report.state == BattleState.PLAYER_FLED
    assert len(report.events) == 1
    assert report.events[0].success
    assert demobat.hp == demobat.hp_max


def test_failed_flee_gives_the_monster_a_free_attack(knight):
    demodog = create_monster(MonsterKind.DEMODOG)
    # Escape roll, free attack with psychic bonus, then the regular attack.
    dice = ScriptedRandomSource([71, 20, 1, 1, 100])
    report = BattleResolver(knight, demodog, dice).decide(BattleAction.FLEE)
    assert report.state == BattleState.PLAYER_TURN
    assert isinstance(report.events[0], FleeEvent)
    assert not report.events[0].success
    assert event_types(report.events[1:]) == [EventType.ON_ATTACK, EventType.ON_ATTACK]
    assert report.events[1].result.bonus == 15
    assert knight.hp == 59
    assert dice.remaining == 0


def test_failed_flee_can_be_fatal(knight):
    knight.hp = 1
    demodog = create_monster(MonsterKind.DEMODOG)
    dice = ScriptedRandomSource([71, 20, 100])
    report = BattleResolver(knight, demodog, dice).decide(BattleAction.FLEE)
    assert report.state == BattleState.PLAYER_DIED
    assert isinstance(report.events[-1], DeathEvent)
    assert dice.remaining == 0


def test_flee_chance_against_boss():
    boss = create_monster(MonsterKind.MIND_FLAYER)
    assert flee_chance(boss) == 20
    assert flee_chance(create_monster(MonsterKind.FLAYED_ONE)) == 70
    assert attempt_flee(boss, ScriptedRandomSource([20]))
    assert not attempt_flee(boss, ScriptedRandomSource([21]))


@pytest.mark.parametrize(
    "kind, expected",
    [
        (MonsterKind.DEMODOG, 0.70),
        (MonsterKind.MIND_FLAYER, 0.20),
    ],
)
def test_flee_rates(kind, expected):
    monster = create_monster(kind)
    dice = RandomSource(31337)
    trials = 100_000
    escapes = sum(attempt_flee(monster, dice) for _ in range(trials))
    assert abs(escapes / trials - expected) < 0.01


def test_wizard_stun_skips_the_monster_turn():
    wizard = create_hero(HeroKind.WIZARD)
    flayed_one = create_monster(MonsterKind.FLAYED_ONE)
    dice = ScriptedRandomSource([20, 25])
    resolver = BattleResolver(wizard, flayed_one, dice)

    report = resolver.decide(BattleAction.SPECIAL)
    assert event_types(report.events) == [
        EventType.ON_SPECIAL,
        EventType.ON_STUN,
        EventType.ON_STUNNED_SKIP,
    ]
    assert isinstance(report.events[-1], StunnedSkipEvent)
    assert flayed_one.hp == 45
    assert wizard.hp == wizard.hp_max
    assert not resolver.stunned

    # The stun lasts a single monster turn.
    dice.push(10, 10, 100)
    report = resolver.decide(BattleAction.ATTACK)
    assert event_types(report.events) == [EventType.ON_ATTACK, EventType.ON_ATTACK]
    assert dice.remaining == 0


def test_wizard_stun_roll_misses():
    wizard = create_hero(HeroKind.WIZARD)
    flayed_one = create_monster(MonsterKind.FLAYED_ONE)
    dice = ScriptedRandomSource([20, 26, 1, 100])
    report = BattleResolver(wizard, flayed_one, dice).decide(BattleAction.SPECIAL)
    assert event_types(report.events) == [EventType.ON_SPECIAL, EventType.ON_ATTACK]


def test_stun_is_rolled_even_after_a_kill(demobat):
    wizard = create_hero(HeroKind.WIZARD)
    dice = ScriptedRandomSource([20, 1, 5, 100])
    report = BattleResolver(wizard, demobat, dice).decide(BattleAction.SPECIAL)
    assert report.state == BattleState.PLAYER_WON
    assert event_types(report.events) == [
        EventType.ON_SPECIAL,
        EventType.ON_STUN,
        EventType.ON_VICTORY,
    ]
    assert dice.remaining == 0


def test_only_stunning_heroes_roll_for_stun(knight):
    flayed_one = create_monster(MonsterKind.FLAYED_ONE)
    # Attack and critical rolls, then straight to the monster's attack.
    dice = ScriptedRandomSource([10, 26, 1, 100])
    report = BattleResolver(knight, flayed_one, dice).decide(BattleAction.SPECIAL)
    assert event_types(report.events) == [EventType.ON_SPECIAL, EventType.ON_ATTACK]
    assert dice.remaining == 0


def test_failed_special_still_consumes_the_turn(demobat):
    sorcerer = create_hero(HeroKind.SORCERER)
    sorcerer.mana = 10
    dice = ScriptedRandomSource([1, 100])
    report = BattleResolver(sorcerer, demobat, dice).decide(BattleAction.SPECIAL)
    assert not report.events[0].outcome.success
    assert report.consumed_turn
    assert isinstance(report.events[1], AttackEvent)
    assert sorcerer.mana == 10
