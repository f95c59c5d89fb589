"""
Narration module for the game.

Renders the structured events returned by the game core as storyteller
lines on the rich console.
"""

from typing import Callable

from character.monster import Monster
from core.constants import CampaignResult, NarrativeKind
from core.utils import cprint, crule
from events.event_system import (
    AttackEvent,
    DeathEvent,
    EventType,
    FleeEvent,
    GameEvent,
    HealingEvent,
    InspectEvent,
    ItemFailedEvent,
    ItemUsedEvent,
    MonsterAppearsEvent,
    NarrativeEvent,
    SpecialEvent,
    StunEvent,
    TrapEvent,
    TreasureEvent,
    TurnStartEvent,
    VictoryEvent,
)


def storyteller(line: str) -> None:
    """Prints a line spoken by the storyteller."""
    cprint(f'📖 [italic cyan]Storyteller: "{line}"[/]')


# What the storyteller says when each monster appears, by band.
SPAWN_LINES: dict[str, str] = {
    "Demobat": "A creature stirs in the shadows...",
    "Demodog": "You hear growling in the distance...",
    "Flayed One": "An eerie presence fills the air...",
}


class Narrator:
    """Renders game events on the console."""

    def __init__(self) -> None:
        self._renderers: dict[EventType, Callable[[GameEvent], None]] = {
            EventType.ON_TURN_START: self._turn_start,
            EventType.ON_MONSTER_APPEARS: self._monster_appears,
            EventType.ON_ATTACK: self._attack,
            EventType.ON_SPECIAL: self._special,
            EventType.ON_STUN: self._stun,
            EventType.ON_STUNNED_SKIP: self._stunned_skip,
            EventType.ON_ITEM_USED: self._item_used,
            EventType.ON_ITEM_FAILED: self._item_failed,
            EventType.ON_FLEE: self._flee,
            EventType.ON_INSPECT: self._inspect,
            EventType.ON_VICTORY: self._victory,
            EventType.ON_DEATH: self._death,
            EventType.ON_TREASURE: self._treasure,
            EventType.ON_HEALING: self._healing,
            EventType.ON_TRAP: self._trap,
            EventType.ON_NARRATIVE: self._narrative,
            EventType.ON_QUIET: self._quiet,
        }

    def render(self, events: list[GameEvent]) -> None:
        """Renders a list of events in order."""
        for event in events:
            self._renderers[event.event_type](event)

    # ============================================================================
    # CAMPAIGN SCREENS
    # ============================================================================

    @staticmethod
    def welcome() -> None:
        storyteller("Greetings, brave adventurer! The realm needs heroes...")

    @staticmethod
    def hero_chosen(name: str) -> None:
        storyteller(f"Ah, {name}! A fine choice indeed...")
        storyteller("Your journey begins now. May fortune favor you!")

    @staticmethod
    def journey_begins() -> None:
        storyteller("And so, your tale begins in the Upside Down...")
        cprint("🚀 Your journey into the Upside Down begins...")

    @staticmethod
    def campaign_over(result: CampaignResult) -> None:
        if result == CampaignResult.VICTORY:
            crule("VICTORY", style="bold green")
            storyteller("INCREDIBLE! You have done the impossible!")
            cprint("[bold green]YOU DEFEATED THE MIND FLAYER![/]")
            cprint("Hawkins is safe! The Upside Down is sealed!")
            storyteller("Your legend will be told for generations!")
        else:
            crule("GAME OVER", style="bold red")
            storyteller("Alas... even heroes fall...")
            cprint("[bold red]The Upside Down consumed you.[/]")
            storyteller("But fear not, for every end is a new beginning...")

    @staticmethod
    def farewell() -> None:
        storyteller("Farewell, brave soul. Until we meet again!")

    # ============================================================================
    # EVENT RENDERERS
    # ============================================================================

    def _turn_start(self, event: GameEvent) -> None:
        assert isinstance(event, TurnStartEvent)
        hero = event.actor
        crule(f"Turn {event.turn_number}", style="bold cyan")
        cprint(hero.get_status_line(show_bars=True))
        cprint(f"💰 Gold: {hero.inventory.gold}")

    def _monster_appears(self, event: GameEvent) -> None:
        assert isinstance(event, MonsterAppearsEvent)
        monster: Monster = event.actor
        cprint("")
        if event.forced:
            storyteller("The air grows cold... darkness approaches...")
            cprint("🌩️  [bold magenta]The Upside Down tears open... THE MIND FLAYER EMERGES![/]")
            storyteller("This is it, hero! The final battle begins!")
        elif monster.is_boss:
            storyteller("Impossible! The Mind Flayer appears early!")
        else:
            storyteller(SPAWN_LINES.get(monster.name, "Something moves in the dark..."))
        crule(f"BATTLE: {monster.colored_name}", style="bold red")
        storyteller("Steel yourself! Battle is upon you!")
        cprint(monster.get_status_line())

    def _attack(self, event: GameEvent) -> None:
        assert isinstance(event, AttackEvent)
        result = event.result
        if isinstance(event.actor, Monster):
            if result.bonus:
                cprint(f"⚡ {event.actor.colored_name} unleashes psychic energy!")
            cprint(f"💢 {event.actor.colored_name} hits you for [bold red]{result.hp_lost}[/] damage!")
        else:
            cprint(f"👊 You hit for [bold]{result.hp_lost}[/] damage!")

    def _special(self, event: GameEvent) -> None:
        assert isinstance(event, SpecialEvent)
        outcome = event.outcome
        hero = event.actor
        if not outcome.success:
            cprint(f"❌ {outcome.reason}")
            return
        title = f"{hero.kind.emoji} {hero.name} used [bold]{outcome.ability.upper()}[/]!"
        if outcome.critical:
            title += " [bold yellow]CRITICAL HIT![/]"
        if len(outcome.strikes) > 1:
            detail = " + ".join(str(s) for s in outcome.strikes) + f" = {outcome.damage}"
        else:
            detail = str(outcome.damage)
        if outcome.bonus:
            detail += f" (+{outcome.bonus} bonus)"
        cprint(f"{title} Dealt {detail} damage!")

    def _stun(self, event: GameEvent) -> None:
        assert isinstance(event, StunEvent)
        cprint(f"🎯 {event.target.colored_name} is [bold yellow]STUNNED[/]!")

    def _stunned_skip(self, event: GameEvent) -> None:
        cprint(f"😵 {event.actor.colored_name} is stunned and skips its turn!")

    def _item_used(self, event: GameEvent) -> None:
        assert isinstance(event, ItemUsedEvent)
        resource = "Mana" if event.item.name.startswith("mana") else "HP"
        cprint(f"{event.item.colored_name}: restored {event.amount} {resource}!")

    def _item_failed(self, event: GameEvent) -> None:
        assert isinstance(event, ItemFailedEvent)
        cprint(f"⚠️  {event.reason}")

    def _flee(self, event: GameEvent) -> None:
        assert isinstance(event, FleeEvent)
        if event.success:
            cprint("🏃 Escaped!")
        else:
            cprint("❌ Escape failed!")

    def _inspect(self, event: GameEvent) -> None:
        assert isinstance(event, InspectEvent)
        monster: Monster = event.target
        crule(monster.colored_name, style="dim")
        cprint(str(monster))
        if monster.description:
            cprint(f"[dim]{monster.description}[/]")

    def _victory(self, event: GameEvent) -> None:
        assert isinstance(event, VictoryEvent)
        storyteller("Victory is yours! Well fought, hero!")
        cprint("🎉 [bold green]Victory![/]")
        cprint(f"💰 Looted {event.gold} gold.")
        cprint(f"✨ Restored {event.healed} HP after battle.")
        for item in event.items:
            cprint(f"Found a {item.colored_name}!")

    def _death(self, event: GameEvent) -> None:
        assert isinstance(event, DeathEvent)
        cprint(f"💀 {event.actor.colored_name} has fallen.")

    def _treasure(self, event: GameEvent) -> None:
        assert isinstance(event, TreasureEvent)
        storyteller("Ah! Fortune smiles upon you!")
        cprint("💎 [bold yellow]Treasure Room![/]")
        cprint(f"💰 Found {event.gold} gold.")
        for item in event.items:
            cprint(f"{item.colored_name}!")

    def _healing(self, event: GameEvent) -> None:
        assert isinstance(event, HealingEvent)
        storyteller("A sacred fountain! Rest and recover...")
        cprint("⛲ [bold blue]Healing Fountain![/]")
        cprint(f"✨ Restored {event.healed} HP and {event.mana} Mana.")

    def _trap(self, event: GameEvent) -> None:
        assert isinstance(event, TrapEvent)
        storyteller("Wait! Something's not right...")
        cprint("⚠️  [bold red]Trap triggered![/]")
        if event.dodged:
            cprint("✅ Dodged!")
        elif event.heavy:
            cprint(f"💥 Heavy damage: {event.hp_lost}!")
        else:
            cprint(f"OUCH! Took {event.hp_lost} damage.")

    def _narrative(self, event: GameEvent) -> None:
        assert isinstance(event, NarrativeEvent)
        if event.reason:
            cprint(event.reason)
        if event.kind == NarrativeKind.TRAVELER:
            if event.accepted:
                cprint(f"📦 Chest: {event.gold}g + potion!")
            else:
                cprint(f"💸 Lost {-event.gold} gold.")
        elif not event.accepted:
            cprint("You walk away.")
        elif event.kind == NarrativeKind.WOUNDED_CREATURE:
            cprint(f"🐾 The wolf blesses you: +{event.gold}g!")
        elif event.kind == NarrativeKind.SHRINE:
            cprint(f"✨ Blessed: +{event.healed} HP, +{event.mana} Mana!")
        else:
            cprint("⚡ You picked up a cursed sword (+5 ATK stored as item).")

    def _quiet(self, event: GameEvent) -> None:
        cprint("🌫️  The path is quiet. Nothing happens.")
