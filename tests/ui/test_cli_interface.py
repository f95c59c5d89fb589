"""
Tests for the command-line interface, driven by a fake prompt session.
"""

import pytest
from campaign.dispatcher import NarrativeChoice
from character.hero import create_hero
from character.monster import create_monster
from combat.battle import BattleResolver
from core.constants import (
    HEALING_POTION,
    BattleAction,
    EncounterKind,
    HeroKind,
    MonsterKind,
    NarrativeKind,
)
from core.dice import ScriptedRandomSource
from core.error_handling import InvalidSelection
from events.event_system import TurnStartEvent
from ui.cli_interface import PlayerInterface


@pytest.fixture
def session(mocker):
    return mocker.Mock()


@pytest.fixture
def interface(session, mocker):
    return PlayerInterface(session=session, narrator=mocker.Mock())


@pytest.fixture
def resolver():
    return BattleResolver(
        create_hero(HeroKind.KNIGHT),
        create_monster(MonsterKind.DEMOBAT),
        ScriptedRandomSource([]),
    )


@pytest.mark.parametrize("answer, expected", [("1", 0), ("5", 4), (" 3 ", 2), ("12", 11)])
def test_parse_choice(answer, expected):
    assert PlayerInterface.parse_choice(answer, 12) == expected


@pytest.mark.parametrize("answer", ["0", "13", "x", "", "-1", None])
def test_parse_choice_rejects_invalid_answers(answer):
    with pytest.raises(InvalidSelection):
        PlayerInterface.parse_choice(answer, 12)


def test_choose_hero_asks_again_on_invalid_input(interface, session):
    session.prompt.side_effect = ["", "9", "wizard", "3"]
    assert interface.choose_hero() == HeroKind.KNIGHT
    assert session.prompt.call_count == 4


def test_choose_attack(interface, session, resolver):
    session.prompt.side_effect = ["1"]
    assert interface.choose_battle_action(resolver) == (BattleAction.ATTACK, None)


def test_choose_item(interface, session, resolver):
    session.prompt.side_effect = ["3", "1"]
    assert interface.choose_battle_action(resolver) == (BattleAction.USE_ITEM, HEALING_POTION)


def test_backing_out_of_the_item_menu_returns_to_the_actions(interface, session, resolver):
    session.prompt.side_effect = ["3", "q", "4"]
    assert interface.choose_battle_action(resolver) == (BattleAction.FLEE, None)
    assert session.prompt.call_count == 3


def test_actions_follow_the_legal_actions(interface, session, resolver):
    resolver.hero.inventory.remove_item(HEALING_POTION)
    session.prompt.side_effect = ["3"]
    assert interface.choose_battle_action(resolver) == (BattleAction.FLEE, None)


def test_choose_narrative(interface, session):
    session.prompt.side_effect = ["2"]
    assert not interface.choose_narrative(NarrativeChoice(kind=NarrativeKind.SHRINE))
    session.prompt.side_effect = ["1"]
    assert interface.choose_narrative(NarrativeChoice(kind=NarrativeKind.TRAVELER))


def test_confirm(interface, session):
    session.prompt.side_effect = ["maybe", "Y"]
    assert interface.confirm("Play again?")
    session.prompt.side_effect = ["no"]
    assert not interface.confirm("Play again?")


def test_main_menu(interface, session):
    session.prompt.side_effect = ["2"]
    assert not interface.main_menu()


def test_report_renders_through_the_narrator(interface):
    events = []
    interface.report(events)
    interface.narrator.render.assert_called_once_with(events)


def test_report_waits_between_turns(interface, session):
    knight = create_hero(HeroKind.KNIGHT)
    first = [TurnStartEvent(actor=knight, turn_number=1, encounter=EncounterKind.TRAP)]
    second = [TurnStartEvent(actor=knight, turn_number=2, encounter=EncounterKind.TRAP)]
    session.prompt.side_effect = [""]
    interface.report(first)
    assert session.prompt.call_count == 0
    interface.report(second)
    assert session.prompt.call_count == 1
    assert interface.narrator.render.call_count == 2
