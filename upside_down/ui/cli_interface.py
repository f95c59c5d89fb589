"""
User interface module for the game.

Provides console-based user interface components for playing a campaign,
including prompts, menus, and output formatting.
"""

from typing import Any

from campaign.dispatcher import NarrativeChoice
from catchery import log_debug
from character.archetypes import HERO_ARCHETYPES
from character.hero import Hero
from combat.battle import BattleResolver
from core.constants import BattleAction, HeroKind, NarrativeKind
from core.error_handling import InvalidSelection
from core.utils import ccapture, cprint
from events.event_system import GameEvent, TurnStartEvent
from items.item import Item
from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from .narration import Narrator

# The question, the accept label and the refuse label of each vignette.
NARRATIVE_PROMPTS: dict[NarrativeKind, tuple[str, str, str]] = {
    NarrativeKind.TRAVELER: ('👴 Old traveler: "Help me?"', "Help", "Refuse"),
    NarrativeKind.WOUNDED_CREATURE: ("🐺 A wounded wolf lies on the path. Heal it?", "Yes", "No"),
    NarrativeKind.SHRINE: ("🔮 A shrine. Sacrifice 10 gold?", "Yes", "No"),
    NarrativeKind.CURSED_SWORD: ("⚔️ A cursed sword (+5 ATK). Take it?", "Yes", "No"),
}


class PlayerInterface:
    """
    Command-line interface for the player's decisions during a campaign.

    Provides Rich table-based menus for hero selection, battle actions, item
    selection and narrative choices. Uses prompt_toolkit for interactive
    input with numeric shortcuts and 'q' to go back.

    Attributes:
        session (Any):
            The prompt session answers are read from. Anything with a
            `prompt(message)` method works.
        narrator (Narrator):
            Renders the events reported by the game core.

    """

    def __init__(self, session: Any | None = None, narrator: Narrator | None = None) -> None:
        # one session keeps history
        self.session = session or PromptSession(erase_when_done=True)
        self.narrator = narrator or Narrator()

    # ============================================================================
    # MENUS
    # ============================================================================

    def main_menu(self) -> bool:
        """
        Shows the main menu.

        Returns:
            bool:
                True to start a new game, False to exit.

        """
        table = Table(title="Main Menu", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Option", style="bold")
        table.add_row("1", "Start Game")
        table.add_row("2", "Exit")
        return self._select(table, 2, "Choice > ") == 0

    def choose_hero(self) -> HeroKind:
        """
        Asks the player to pick one of the hero archetypes.

        Returns:
            HeroKind:
                The chosen hero kind.

        """
        archetypes = list(HERO_ARCHETYPES.values())
        table = Table(title="Choose Your Hero", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Hero", style="bold")
        table.add_column("Role", style="magenta")
        table.add_column("HP", justify="right")
        table.add_column("ATK", justify="right")
        table.add_column("DEF", justify="right")
        table.add_column("Special", style="blue")
        for i, archetype in enumerate(archetypes, 1):
            table.add_row(
                str(i),
                f"{archetype.kind.emoji} {archetype.name}",
                archetype.role,
                str(archetype.hp),
                str(archetype.attack),
                str(archetype.defense),
                archetype.special_name,
            )
        index = self._select(table, len(archetypes), "Hero > ")
        return archetypes[index].kind

    def choose_battle_action(self, resolver: BattleResolver) -> tuple[BattleAction, str | None]:
        """
        Asks the player for the hero's next battle action.

        Choosing an item and then going back returns to the action menu
        without spending the turn.

        Args:
            resolver (BattleResolver):
                The battle in progress.

        Returns:
            tuple[BattleAction, str | None]:
                - The chosen action
                - The item name when the action is BattleAction.USE_ITEM

        """
        actions = resolver.legal_actions()
        while True:
            cprint(resolver.hero.get_status_line(show_bars=True))
            cprint(resolver.monster.get_status_line(show_bars=True))
            table = Table(title="Actions", pad_edge=False)
            table.add_column("#", style="cyan")
            table.add_column("Action", style="bold")
            for i, action in enumerate(actions, 1):
                label = action.display_name
                if action == BattleAction.SPECIAL:
                    label = f"Special ({resolver.hero.special_name})"
                table.add_row(str(i), f"{action.emoji} {label}")
            action = actions[self._select(table, len(actions), "Action > ")]
            if action != BattleAction.USE_ITEM:
                return action, None
            item_name = self.choose_item(resolver.hero)
            if item_name is not None:
                return action, item_name

    def choose_item(self, hero: Hero) -> str | None:
        """
        Asks the player which item to use.

        Returns:
            str | None:
                The name of the chosen item, or None if the player went back.

        """
        items: list[Item] = hero.inventory.items
        table = Table(title="Inventory", pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Item", style="bold")
        table.add_column("Category", style="magenta")
        table.add_column("Power", justify="right")
        for i, item in enumerate(items, 1):
            table.add_row(str(i), item.colored_name, item.category.display_name, str(item.magnitude))
        table.add_row()
        table.add_row("q", "Back", "", "")
        index = self._select(table, len(items), "Item > ", allow_back=True)
        if index < 0:
            return None
        return items[index].name

    def choose_narrative(self, choice: NarrativeChoice) -> bool:
        """Asks the player whether to accept a narrative vignette."""
        question, accept, refuse = NARRATIVE_PROMPTS[choice.kind]
        cprint(question)
        table = Table(pad_edge=False, show_header=False)
        table.add_column("#", style="cyan")
        table.add_column("Choice", style="bold")
        table.add_row("1", accept)
        table.add_row("2", refuse)
        return self._select(table, 2, "Choice > ") == 0

    def confirm(self, question: str) -> bool:
        """
        Asks a yes or no question.

        Returns:
            bool:
                True if the player answered yes.

        """
        while True:
            answer = self.session.prompt(ANSI(ccapture(f"{question} (y/n) > ")))
            if isinstance(answer, str) and answer.strip().lower() in ("y", "yes"):
                return True
            if isinstance(answer, str) and answer.strip().lower() in ("n", "no"):
                return False

    def wait_for_enter(self) -> None:
        """Waits until the player presses Enter."""
        self.session.prompt(ANSI(ccapture("[dim]Press Enter to continue...[/]")))

    def report(self, events: list[GameEvent]) -> None:
        """
        Renders the events produced by the game core.

        Every overall turn after the first waits for the player before it is
        shown.
        """
        if events and isinstance(events[0], TurnStartEvent) and events[0].turn_number > 1:
            self.wait_for_enter()
        self.narrator.render(events)

    # ============================================================================
    # INPUT PARSING
    # ============================================================================

    def _select(self, table: Table, count: int, question: str, allow_back: bool = False) -> int:
        """
        Prompts until the player picks one of the numbered rows.

        Args:
            table (Table):
                The menu to show.
            count (int):
                The number of selectable rows, numbered from 1.
            question (str):
                The text shown after the menu.
            allow_back (bool):
                Whether 'q' is accepted to go back.

        Returns:
            int:
                The 0-based index of the chosen row, or -1 if the player went
                back.

        """
        prompt = "\n" + ccapture(table) + "\n" + question
        while True:
            answer = self.session.prompt(ANSI(prompt))
            # Keep asking until the user provides a valid input.
            if not answer:
                continue
            if allow_back and isinstance(answer, str) and answer.strip().lower() == "q":
                return -1
            try:
                return self.parse_choice(answer, count)
            except InvalidSelection as e:
                log_debug(f"Rejected menu input {answer!r}", {"count": count})
                cprint(f"[yellow]{e.message}[/]")

    @classmethod
    def parse_choice(cls, answer: Any, count: int) -> int:
        """
        Converts a numbered menu answer to a 0-based index.

        Args:
            answer (Any):
                User input to parse.
            count (int):
                The number of entries in the menu.

        Returns:
            int:
                The 0-based index of the chosen entry.

        Raises:
            InvalidSelection:
                If the answer is not the number of an entry.

        """
        index = cls.get_digit_choice(answer) - 1
        if 0 <= index < count:
            return index
        raise InvalidSelection(f"Please choose a number between 1 and {count}.", {"answer": answer})

    @staticmethod
    def get_digit_choice(answer: Any) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (Any): User input string to parse.

        Returns:
            int: The integer value of the number, or -1 if invalid input.

        """
        if isinstance(answer, str) and answer.strip().isdigit():
            return int(answer.strip())
        return -1

