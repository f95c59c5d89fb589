"""
Campaign module for the game.

Drives the outer turn sequence of a run: every overall turn the dispatcher
rolls an encounter, battles and narrative choices wait for the player's
decisions, and the run ends when the hero dies or the boss is defeated.
"""

from dataclasses import dataclass, field
from typing import Protocol

from catchery import log_debug, log_warning
from character.hero import Hero
from combat.battle import BattleResolver
from core.constants import BattleAction, CampaignResult, EncounterKind
from core.dice import RandomSource
from core.error_handling import InvalidSelection
from events.event_system import (
    GameEvent,
    MonsterAppearsEvent,
    NarrativeEvent,
    QuietEvent,
    TurnStartEvent,
)

from .dispatcher import EventDispatcher, NarrativeChoice


class DecisionProvider(Protocol):
    """The decisions the campaign needs from whoever is playing."""

    def choose_battle_action(self, resolver: BattleResolver) -> tuple[BattleAction, str | None]:
        """Returns the hero's next battle action, and the item name for USE_ITEM."""
        ...

    def choose_narrative(self, choice: NarrativeChoice) -> bool:
        """Returns whether the hero accepts the narrative vignette."""
        ...

    def report(self, events: list[GameEvent]) -> None:
        """Receives the events produced by the core."""
        ...


@dataclass(kw_only=True)
class Encounter:
    """The encounter of a single overall turn."""

    kind: EncounterKind
    turn: int
    events: list[GameEvent] = field(default_factory=list)


@dataclass(kw_only=True)
class ResolvedEncounter(Encounter):
    """An encounter that needed no decision and is already resolved."""


@dataclass(kw_only=True)
class BattleEncounter(Encounter):
    """A battle waiting for the hero's decisions."""

    resolver: BattleResolver
    forced_boss: bool = False


@dataclass(kw_only=True)
class NarrativeEncounter(Encounter):
    """A narrative vignette waiting for the hero's decision."""

    choice: NarrativeChoice


class Campaign:
    """
    Represents a full run, from the chosen hero to victory or death.

    Attributes:
        hero (Hero):
            The hero owned by the campaign.
        dice (RandomSource):
            The random source shared by every encounter.
        dispatcher (EventDispatcher):
            Rolls and resolves the encounters.
        turn (int):
            The number of overall turns played.
        boss_defeated (bool):
            Whether the boss has been defeated.

    """

    def __init__(self, hero: Hero, dice: RandomSource | None = None) -> None:
        self.dice = dice or RandomSource()
        self.dispatcher = EventDispatcher(self.dice)
        self.hero = hero
        self.turn = 0
        self.boss_defeated = False

    def reset(self, hero: Hero) -> None:
        """Starts a new run with a fresh hero."""
        self.hero = hero
        self.turn = 0
        self.boss_defeated = False

    def is_over(self) -> bool:
        """Check whether the run has ended."""
        return self.hero.is_dead() or self.boss_defeated

    def result(self) -> CampaignResult | None:
        """Returns the outcome of the run, or None while it is still going."""
        if self.boss_defeated:
            return CampaignResult.VICTORY
        if self.hero.is_dead():
            return CampaignResult.DEFEAT
        return None

    def next_encounter(self) -> Encounter:
        """
        Starts the next overall turn and rolls its encounter.

        Treasure rooms, healing fountains and traps are resolved right away.
        Battles and narrative vignettes are returned pending.

        Returns:
            Encounter:
                The encounter of this turn.

        Raises:
            InvalidSelection:
                If the run is already over.

        """
        if self.is_over():
            raise InvalidSelection("The campaign is over.")
        self.turn += 1
        kind = self.dispatcher.roll_event_kind()
        events: list[GameEvent] = [TurnStartEvent(actor=self.hero, turn_number=self.turn, encounter=kind)]
        log_debug(f"Turn {self.turn}: {kind}", {"hp": self.hero.hp, "gold": self.hero.inventory.gold})

        if kind == EncounterKind.COMBAT:
            forced = self.dispatcher.boss_is_due(self.turn, self.boss_defeated)
            monster = self.dispatcher.spawn_monster(self.turn, self.boss_defeated)
            events.append(MonsterAppearsEvent(actor=monster, forced=forced))
            return BattleEncounter(
                kind=kind,
                turn=self.turn,
                events=events,
                resolver=BattleResolver(self.hero, monster, self.dice),
                forced_boss=forced,
            )
        if kind == EncounterKind.TREASURE:
            events.append(self.dispatcher.treasure(self.hero))
        elif kind == EncounterKind.HEALING:
            events.append(self.dispatcher.healing(self.hero))
        elif kind == EncounterKind.TRAP:
            events.append(self.dispatcher.trap(self.hero))
        else:
            vignette, choice = self.dispatcher.narrative(self.hero)
            if choice is not None:
                return NarrativeEncounter(kind=kind, turn=self.turn, events=events, choice=choice)
            events.append(QuietEvent(actor=self.hero, kind=vignette))
        return ResolvedEncounter(kind=kind, turn=self.turn, events=events)

    def resolve_narrative(self, encounter: NarrativeEncounter, accept: bool) -> NarrativeEvent:
        """Applies the hero's decision on a pending narrative vignette."""
        event = self.dispatcher.resolve_narrative(encounter.choice, self.hero, accept)
        encounter.events.append(event)
        return event

    def finish_battle(self, resolver: BattleResolver) -> None:
        """Records the outcome of a finished battle."""
        if resolver.boss_defeated:
            self.boss_defeated = True
            log_debug("The boss has been defeated", {"turn": self.turn})

    def run_battle(self, resolver: BattleResolver, interface: DecisionProvider) -> None:
        """
        Plays a battle to its end, asking the interface for each decision.

        Args:
            resolver (BattleResolver):
                The battle to play.
            interface (DecisionProvider):
                Provides the hero's decisions and receives the events.

        """
        while not resolver.is_over():
            action, item_name = interface.choose_battle_action(resolver)
            try:
                report = resolver.decide(action, item_name)
            except InvalidSelection as e:
                log_warning(f"Rejected battle decision: {e}", {"action": str(action)})
                continue
            interface.report(report.events)
        self.finish_battle(resolver)

    def play_turn(self, interface: DecisionProvider) -> Encounter:
        """
        Plays one overall turn.

        Args:
            interface (DecisionProvider):
                Provides the hero's decisions and receives the events.

        Returns:
            Encounter:
                The encounter played this turn.

        """
        encounter = self.next_encounter()
        interface.report(encounter.events)
        if isinstance(encounter, BattleEncounter):
            self.run_battle(encounter.resolver, interface)
        elif isinstance(encounter, NarrativeEncounter):
            accept = interface.choose_narrative(encounter.choice)
            interface.report([self.resolve_narrative(encounter, accept)])
        return encounter

    def run(self, interface: DecisionProvider) -> CampaignResult:
        """
        Plays turns until the run ends.

        Returns:
            CampaignResult:
                VICTORY if the boss was defeated, DEFEAT if the hero died.

        """
        while not self.is_over():
            self.play_turn(interface)
        result = self.result()
        assert result is not None
        return result
