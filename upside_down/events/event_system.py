"""
Event system module for the game.

Defines the structured events produced by the game core. Battles and
encounters never print anything themselves: they return these events, and the
presentation layer renders them.
"""

from enum import Enum
from typing import Any

from character.combatant import AttackResult
from character.hero import SpecialOutcome
from core.constants import EncounterKind, NarrativeKind
from items.item import Item
from pydantic import BaseModel, Field


class EventType(Enum):
    """Enumeration of available event types."""

    ON_TURN_START = "on_turn_start"  # A new overall turn begins
    ON_MONSTER_APPEARS = "on_monster_appears"  # A battle encounter begins

    ON_ATTACK = "on_attack"  # A combatant performs a basic attack
    ON_SPECIAL = "on_special"  # A hero performs its special ability
    ON_STUN = "on_stun"  # A monster becomes stunned
    ON_STUNNED_SKIP = "on_stunned_skip"  # A stunned monster skips its turn
    ON_ITEM_USED = "on_item_used"  # An item was consumed
    ON_ITEM_FAILED = "on_item_failed"  # An item could not be used
    ON_FLEE = "on_flee"  # The hero tried to escape
    ON_INSPECT = "on_inspect"  # The hero inspected the monster
    ON_VICTORY = "on_victory"  # The monster was defeated
    ON_DEATH = "on_death"  # The hero was defeated

    ON_TREASURE = "on_treasure"  # A treasure room was found
    ON_HEALING = "on_healing"  # A healing fountain was found
    ON_TRAP = "on_trap"  # A trap was triggered
    ON_NARRATIVE = "on_narrative"  # A narrative choice was resolved
    ON_QUIET = "on_quiet"  # Nothing happened this turn


class GameEvent(BaseModel):
    """Base class for all game events."""

    event_type: EventType = Field(
        description="The type of event.",
    )
    actor: Any = Field(
        default=None,
        description="The combatant that caused the event, if any.",
    )


class TurnStartEvent(GameEvent):
    """Event data for the beginning of an overall turn."""

    event_type: EventType = Field(
        default=EventType.ON_TURN_START,
        description="The type of event.",
    )
    turn_number: int = Field(description="The overall turn number, starting at 1.")
    encounter: EncounterKind = Field(description="The kind of encounter rolled.")

    def __str__(self) -> str:
        return f"TurnStartEvent(turn={self.turn_number}, encounter={self.encounter})"


class MonsterAppearsEvent(GameEvent):
    """Event data for the beginning of a battle."""

    event_type: EventType = Field(
        default=EventType.ON_MONSTER_APPEARS,
        description="The type of event.",
    )
    forced: bool = Field(
        default=False,
        description="Whether the boss was forced to appear by the turn threshold.",
    )

    def __str__(self) -> str:
        return f"MonsterAppearsEvent({self.actor.name}, forced={self.forced})"


class AttackEvent(GameEvent):
    """Event data for a basic attack."""

    event_type: EventType = Field(
        default=EventType.ON_ATTACK,
        description="The type of event.",
    )
    target: Any = Field(description="The target of the attack.")
    result: AttackResult = Field(description="The outcome of the attack.")

    def __str__(self) -> str:
        return (
            f"AttackEvent({self.actor.name} on {self.target.name}, "
            f"damage={self.result.damage}, hp_lost={self.result.hp_lost})"
        )


class SpecialEvent(GameEvent):
    """Event data for a hero's special ability."""

    event_type: EventType = Field(
        default=EventType.ON_SPECIAL,
        description="The type of event.",
    )
    target: Any = Field(description="The target of the ability.")
    outcome: SpecialOutcome = Field(description="The outcome of the ability.")

    def __str__(self) -> str:
        return (
            f"SpecialEvent({self.actor.name} on {self.target.name}, "
            f"ability={self.outcome.ability}, success={self.outcome.success}, "
            f"damage={self.outcome.damage})"
        )


class StunEvent(GameEvent):
    """Event data for a monster becoming stunned."""

    event_type: EventType = Field(
        default=EventType.ON_STUN,
        description="The type of event.",
    )
    target: Any = Field(description="The stunned monster.")

    def __str__(self) -> str:
        return f"StunEvent({self.target.name})"


class StunnedSkipEvent(GameEvent):
    """Event data for a stunned monster skipping its turn."""

    event_type: EventType = Field(
        default=EventType.ON_STUNNED_SKIP,
        description="The type of event.",
    )

    def __str__(self) -> str:
        return f"StunnedSkipEvent({self.actor.name})"


class ItemUsedEvent(GameEvent):
    """Event data for a consumed item."""

    event_type: EventType = Field(
        default=EventType.ON_ITEM_USED,
        description="The type of event.",
    )
    item: Item = Field(description="The consumed item.")
    amount: int = Field(default=0, description="The HP or mana actually restored.")

    def __str__(self) -> str:
        return f"ItemUsedEvent({self.actor.name}, item={self.item.name}, amount={self.amount})"


class ItemFailedEvent(GameEvent):
    """Event data for an item that could not be used."""

    event_type: EventType = Field(
        default=EventType.ON_ITEM_FAILED,
        description="The type of event.",
    )
    item_name: str = Field(description="The name of the requested item.")
    reason: str = Field(description="Why the item could not be used.")

    def __str__(self) -> str:
        return f"ItemFailedEvent({self.actor.name}, item={self.item_name}, reason={self.reason!r})"


class FleeEvent(GameEvent):
    """Event data for an escape attempt."""

    event_type: EventType = Field(
        default=EventType.ON_FLEE,
        description="The type of event.",
    )
    target: Any = Field(description="The monster the hero tried to escape from.")
    success: bool = Field(description="Whether the escape succeeded.")

    def __str__(self) -> str:
        return f"FleeEvent({self.actor.name} from {self.target.name}, success={self.success})"


class InspectEvent(GameEvent):
    """Event data for the inspection of a monster."""

    event_type: EventType = Field(
        default=EventType.ON_INSPECT,
        description="The type of event.",
    )
    target: Any = Field(description="The inspected monster.")

    def __str__(self) -> str:
        return f"InspectEvent({self.target.name})"


class VictoryEvent(GameEvent):
    """Event data for a defeated monster."""

    event_type: EventType = Field(
        default=EventType.ON_VICTORY,
        description="The type of event.",
    )
    target: Any = Field(description="The defeated monster.")
    gold: int = Field(ge=0, description="The gold looted.")
    healed: int = Field(ge=0, description="The HP restored after the battle.")
    items: list[Item] = Field(default_factory=list, description="The items found.")
    boss: bool = Field(default=False, description="Whether the defeated monster was a boss.")

    def __str__(self) -> str:
        return (
            f"VictoryEvent({self.actor.name} over {self.target.name}, gold={self.gold}, "
            f"healed={self.healed}, items={[item.name for item in self.items]})"
        )


class DeathEvent(GameEvent):
    """Event data for the hero's death."""

    event_type: EventType = Field(
        default=EventType.ON_DEATH,
        description="The type of event.",
    )
    killer: Any = Field(default=None, description="The combatant that dealt the final blow.")

    def __str__(self) -> str:
        return f"DeathEvent({self.actor.name})"


class TreasureEvent(GameEvent):
    """Event data for a treasure room."""

    event_type: EventType = Field(
        default=EventType.ON_TREASURE,
        description="The type of event.",
    )
    gold: int = Field(description="The gold found.")
    items: list[Item] = Field(default_factory=list, description="The items found.")

    def __str__(self) -> str:
        return f"TreasureEvent(gold={self.gold}, items={[item.name for item in self.items]})"


class HealingEvent(GameEvent):
    """Event data for a healing fountain."""

    event_type: EventType = Field(
        default=EventType.ON_HEALING,
        description="The type of event.",
    )
    amount: int = Field(description="The healing rolled.")
    healed: int = Field(description="The HP actually restored.")
    mana: int = Field(description="The mana actually restored.")

    def __str__(self) -> str:
        return f"HealingEvent(amount={self.amount}, healed={self.healed}, mana={self.mana})"


class TrapEvent(GameEvent):
    """Event data for a triggered trap."""

    event_type: EventType = Field(
        default=EventType.ON_TRAP,
        description="The type of event.",
    )
    roll: int = Field(description="The d20 deciding the severity of the trap.")
    damage: int = Field(default=0, ge=0, description="The damage rolled.")
    hp_lost: int = Field(default=0, ge=0, description="The HP actually lost.")

    @property
    def dodged(self) -> bool:
        return self.damage == 0

    @property
    def heavy(self) -> bool:
        return self.roll >= 16

    def __str__(self) -> str:
        return f"TrapEvent(roll={self.roll}, damage={self.damage}, hp_lost={self.hp_lost})"


class NarrativeEvent(GameEvent):
    """Event data for a resolved narrative choice."""

    event_type: EventType = Field(
        default=EventType.ON_NARRATIVE,
        description="The type of event.",
    )
    kind: NarrativeKind = Field(description="The vignette that was offered.")
    accepted: bool = Field(description="Whether the hero accepted.")
    gold: int = Field(default=0, description="The gold gained (negative when lost).")
    healed: int = Field(default=0, description="The HP restored.")
    mana: int = Field(default=0, description="The mana restored.")
    items_gained: list[Item] = Field(default_factory=list, description="The items gained.")
    items_lost: list[Item] = Field(default_factory=list, description="The items spent.")
    reason: str = Field(default="", description="Why part of the vignette failed, if it did.")

    def __str__(self) -> str:
        return (
            f"NarrativeEvent(kind={self.kind}, accepted={self.accepted}, gold={self.gold}, "
            f"healed={self.healed}, mana={self.mana})"
        )


class QuietEvent(GameEvent):
    """Event data for a turn where nothing happened."""

    event_type: EventType = Field(
        default=EventType.ON_QUIET,
        description="The type of event.",
    )
    kind: NarrativeKind | None = Field(
        default=None,
        description="The vignette that could not be offered, if any.",
    )

    def __str__(self) -> str:
        return f"QuietEvent(kind={self.kind})"
