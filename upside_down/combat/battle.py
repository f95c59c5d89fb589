"""
Battle module for the game.

Runs a single encounter between the hero and a monster. The resolver does not
ask for input: it exposes the legal actions, and each call to `decide` plays
the hero's chosen action followed, when the action consumed the turn, by the
monster's response.
"""

from catchery import log_debug, log_warning
from character.hero import Hero
from character.monster import Monster
from core.constants import (
    FLEE_CHANCE,
    FLEE_CHANCE_BOSS,
    STUN_CHANCE,
    VICTORY_GOLD_BONUS,
    VICTORY_GOLD_BONUS_BOSS,
    VICTORY_POTION_CHANCE,
    BattleAction,
    BattleState,
)
from core.dice import RandomSource
from core.error_handling import GameException, InvalidSelection
from events.event_system import (
    AttackEvent,
    DeathEvent,
    FleeEvent,
    GameEvent,
    InspectEvent,
    ItemFailedEvent,
    ItemUsedEvent,
    SpecialEvent,
    StunEvent,
    StunnedSkipEvent,
    VictoryEvent,
)
from items.item import healing_potion
from pydantic import BaseModel, Field


class TurnReport(BaseModel):
    """The outcome of a single player decision."""

    action: BattleAction = Field(description="The action that was played.")
    events: list[GameEvent] = Field(
        default_factory=list,
        description="The events produced, in order.",
    )
    state: BattleState = Field(description="The state of the battle after the decision.")
    consumed_turn: bool = Field(
        default=True,
        description="Whether the decision handed the turn to the monster.",
    )
    boss_defeated: bool = Field(
        default=False,
        description="Whether the decision defeated a boss.",
    )


def flee_chance(monster: Monster) -> int:
    """Returns the chance, in percent, of escaping from the monster."""
    return FLEE_CHANCE_BOSS if monster.is_boss else FLEE_CHANCE


def attempt_flee(monster: Monster, dice: RandomSource) -> bool:
    """Rolls an escape attempt from the monster."""
    return dice.chance(flee_chance(monster))


class BattleResolver:
    """
    Manages the flow of a battle between the hero and a monster.

    Attributes:
        hero (Hero):
            The hero, borrowed for the duration of the battle.
        monster (Monster):
            The monster, borrowed for the duration of the battle.
        dice (RandomSource):
            The random source shared with the rest of the campaign.
        state (BattleState):
            The current state of the battle.
        stunned (bool):
            Whether the monster will skip its next turn.
        round_number (int):
            The number of turn-consuming decisions played so far.
        history (list[GameEvent]):
            Every event produced by the battle.

    """

    def __init__(self, hero: Hero, monster: Monster, dice: RandomSource) -> None:
        self.hero = hero
        self.monster = monster
        self.dice = dice
        self.state = BattleState.PLAYER_TURN
        self.stunned = False
        self.round_number = 0
        self.history: list[GameEvent] = []
        self.boss_defeated = False
        # A battle against an already dead combatant is over before it starts.
        self._check_death()

    def is_over(self) -> bool:
        """Check whether the battle reached a terminal state."""
        return self.state.is_terminal

    def legal_actions(self) -> list[BattleAction]:
        """
        Returns the actions the hero may choose this turn.

        Returns:
            list[BattleAction]:
                The legal actions, empty when the battle is over.

        """
        if self.is_over():
            return []
        actions = [BattleAction.ATTACK, BattleAction.SPECIAL]
        if len(self.hero.inventory) > 0:
            actions.append(BattleAction.USE_ITEM)
        actions.extend([BattleAction.FLEE, BattleAction.INSPECT])
        return actions

    def decide(self, action: BattleAction, item_name: str | None = None) -> TurnReport:
        """
        Plays the hero's decision for this turn.

        Args:
            action (BattleAction):
                The chosen action.
            item_name (str | None):
                The item to use, required by BattleAction.USE_ITEM.

        Returns:
            TurnReport:
                The events produced and the resulting state.

        Raises:
            InvalidSelection:
                If the action is not legal right now. Nothing changes.

        """
        if action not in self.legal_actions():
            log_warning(
                f"Illegal battle action {action}",
                {"state": self.state.name, "context": "battle_decide"},
            )
            raise InvalidSelection(f"{action.display_name} is not available right now.")
        if action == BattleAction.USE_ITEM and not item_name:
            raise InvalidSelection("Choose an item to use.")

        events: list[GameEvent] = []
        if action == BattleAction.INSPECT:
            events.append(InspectEvent(actor=self.hero, target=self.monster))
            return self._report(action, events, consumed_turn=False)

        self.round_number += 1
        log_debug(
            f"Round {self.round_number}: {self.hero.name} chooses {action}",
            {"hero_hp": self.hero.hp, "monster_hp": self.monster.hp},
        )

        if action == BattleAction.ATTACK:
            self._hero_attack(events)
        elif action == BattleAction.SPECIAL:
            self._hero_special(events)
        elif action == BattleAction.USE_ITEM:
            self._hero_use_item(events, item_name or "")
        elif action == BattleAction.FLEE:
            self._hero_flee(events)

        if not self.is_over():
            self._resolve_outcome(events)
        return self._report(action, events)

    # ============================================================================
    # HERO ACTIONS
    # ============================================================================

    def _hero_attack(self, events: list[GameEvent]) -> None:
        result = self.hero.basic_attack(self.monster, self.dice)
        events.append(AttackEvent(actor=self.hero, target=self.monster, result=result))

    def _hero_special(self, events: list[GameEvent]) -> None:
        outcome = self.hero.perform_special(self.monster, self.dice)
        events.append(SpecialEvent(actor=self.hero, target=self.monster, outcome=outcome))
        if self.hero.can_stun and self.dice.chance(STUN_CHANCE):
            self.stunned = True
            events.append(StunEvent(actor=self.hero, target=self.monster))

    def _hero_use_item(self, events: list[GameEvent], item_name: str) -> None:
        hp_before, mana_before = self.hero.hp, self.hero.mana
        try:
            item = self.hero.inventory.use_item(item_name, self.hero)
        except GameException as e:
            # A failed item use still costs the turn.
            events.append(
                ItemFailedEvent(actor=self.hero, item_name=item_name, reason=e.message)
            )
            return
        amount = (self.hero.hp - hp_before) + (self.hero.mana - mana_before)
        events.append(ItemUsedEvent(actor=self.hero, item=item, amount=amount))

    def _hero_flee(self, events: list[GameEvent]) -> None:
        success = attempt_flee(self.monster, self.dice)
        events.append(FleeEvent(actor=self.hero, target=self.monster, success=success))
        if success:
            self._transition(BattleState.PLAYER_FLED)
            return
        # The monster punishes the failed escape with a free attack.
        self._monster_attack(events)

    # ============================================================================
    # OUTCOME RESOLUTION
    # ============================================================================

    def _resolve_outcome(self, events: list[GameEvent]) -> None:
        if self.monster.is_dead():
            self._award_victory(events)
            return
        if self.stunned:
            self.stunned = False
            events.append(StunnedSkipEvent(actor=self.monster))
            return
        self._monster_attack(events)

    def _monster_attack(self, events: list[GameEvent]) -> None:
        result = self.monster.basic_attack(self.hero, self.dice)
        events.append(AttackEvent(actor=self.monster, target=self.hero, result=result))
        if self.hero.is_dead():
            events.append(DeathEvent(actor=self.hero, killer=self.monster))
            self._transition(BattleState.PLAYER_DIED)

    def _award_victory(self, events: list[GameEvent]) -> None:
        bonus = VICTORY_GOLD_BONUS_BOSS if self.monster.is_boss else VICTORY_GOLD_BONUS
        gold = self.dice.roll(20) + bonus
        self.hero.inventory.add_gold(gold)
        healed = self.hero.heal(max(1, self.hero.hp_max // 5))
        items = []
        if not self.monster.is_boss and self.dice.chance(VICTORY_POTION_CHANCE):
            potion = healing_potion(30)
            self.hero.inventory.add_item(potion)
            items.append(potion)
        if self.monster.is_boss:
            self.boss_defeated = True
        events.append(
            VictoryEvent(
                actor=self.hero,
                target=self.monster,
                gold=gold,
                healed=healed,
                items=items,
                boss=self.monster.is_boss,
            )
        )
        self._transition(BattleState.PLAYER_WON)

    def _check_death(self) -> None:
        if self.hero.is_dead():
            self.state = BattleState.PLAYER_DIED
        elif self.monster.is_dead():
            self.state = BattleState.PLAYER_WON

    def _transition(self, state: BattleState) -> None:
        log_debug(
            f"Battle {self.hero.name} vs {self.monster.name}: {self.state} -> {state}",
            {"round": self.round_number},
        )
        self.state = state

    def _report(
        self,
        action: BattleAction,
        events: list[GameEvent],
        consumed_turn: bool = True,
    ) -> TurnReport:
        self.history.extend(events)
        return TurnReport(
            action=action,
            events=events,
            state=self.state,
            consumed_turn=consumed_turn,
            boss_defeated=self.boss_defeated and self.state == BattleState.PLAYER_WON,
        )
