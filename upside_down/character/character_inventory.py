"""
Character inventory management module for the game.

Handles the gold and the items carried by a hero, and the consumption of
potions.
"""

from typing import Any

from catchery import log_debug, log_warning
from core.constants import HEALING_POTION, MANA_POTION, ItemCategory
from core.error_handling import ItemNotFound, ItemNotUsable
from items.item import Item


class Inventory:
    """
    Manages the gold and the ordered collection of items owned by a hero.

    Attributes:
        gold (int):
            The gold balance. It has no floor and may become negative.
        items (list[Item]):
            The items carried, in the order they were obtained.

    """

    gold: int
    items: list[Item]

    def __init__(self, gold: int = 0, items: list[Item] | None = None) -> None:
        """
        Initialize the Inventory.

        Args:
            gold (int):
                The starting gold balance.
            items (list[Item] | None):
                The starting items.

        """
        self.gold = gold
        self.items = list(items or [])

    def __len__(self) -> int:
        return len(self.items)

    def add_item(self, item: Item) -> None:
        """
        Add an item at the end of the inventory.

        Args:
            item (Item):
                The item to add. Duplicates are allowed.

        """
        self.items.append(item)

    def add_gold(self, amount: int) -> None:
        """
        Add (or remove, when negative) gold from the balance.

        Args:
            amount (int):
                The gold delta.

        """
        self.gold += amount

    def has_item(self, name: str) -> bool:
        """
        Check whether the inventory holds an item with the given name.

        Args:
            name (str):
                The item name.

        Returns:
            bool:
                True if at least one item with that name is present.

        """
        return any(item.name == name for item in self.items)

    def count(self, name: str) -> int:
        """Return how many items with the given name are held."""
        return sum(item.name == name for item in self.items)

    def remove_item(self, name: str) -> Item:
        """
        Remove the first item with the given name, keeping the others in
        order.

        Args:
            name (str):
                The item name.

        Returns:
            Item:
                The removed item.

        Raises:
            ItemNotFound:
                If no item with that name is held.

        """
        for index, item in enumerate(self.items):
            if item.name == name:
                return self.items.pop(index)
        raise ItemNotFound(name)

    def use_item(self, name: str, hero: Any) -> Item:
        """
        Consume an item on the given hero.

        Healing potions heal the hero and mana potions restore its mana. Any
        other item is put back into the inventory and the use fails.

        Args:
            name (str):
                The name of the item to use.
            hero (Any):
                The Hero the item is used on.

        Returns:
            Item:
                The consumed item.

        Raises:
            ItemNotFound:
                If no item with that name is held. The inventory is unchanged.
            ItemNotUsable:
                If the item cannot be consumed. The item is put back.

        """
        item = self.remove_item(name)
        if item.category == ItemCategory.POTION:
            if item.name == HEALING_POTION:
                healed = hero.heal(item.magnitude)
                log_debug(
                    f"{hero.name} drinks a healing potion",
                    {"magnitude": item.magnitude, "healed": healed},
                )
                return item
            if item.name == MANA_POTION:
                restored = hero.restore_mana(item.magnitude)
                log_debug(
                    f"{hero.name} drinks a mana potion",
                    {"magnitude": item.magnitude, "restored": restored},
                )
                return item
            self.add_item(item)
            log_warning(
                f"{hero.name} tried to drink an unknown potion",
                {"item": item.name, "context": "use_item"},
            )
            raise ItemNotUsable(item.name, "Unknown potion type.")
        self.add_item(item)
        log_warning(
            f"{hero.name} tried to use a non consumable item",
            {"item": item.name, "category": item.category.name, "context": "use_item"},
        )
        raise ItemNotUsable(item.name, f"Can't use '{item.name}' right now.")
