"""
Item module for the game.

Defines the Item model carried in a hero's inventory, together with factory
functions for the standard items found in the Upside Down.
"""

from core.constants import (
    CURSED_SWORD,
    HEALING_POTION,
    MANA_POTION,
    ItemCategory,
)
from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """
    Represents an item that can be stored in an inventory.

    Items are immutable values: two items with the same name are allowed and
    are interchangeable only by name.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        description="The name of the item (e.g. 'healing_potion').",
    )
    category: ItemCategory = Field(
        description="The category of the item.",
    )
    magnitude: int = Field(
        default=0,
        description="The strength of the item (HP healed, mana restored, bonus).",
    )

    @property
    def display_name(self) -> str:
        """Returns the item name in a human readable form."""
        return self.name.replace("_", " ").title()

    @property
    def colored_name(self) -> str:
        """Returns the item name with its category emoji and color."""
        color = "bold green" if self.category == ItemCategory.POTION else "bold yellow"
        return f"{self.category.emoji} [{color}]{self.display_name}[/]"

    def __str__(self) -> str:
        if self.category == ItemCategory.POTION:
            return f"{self.name} ({self.magnitude})"
        return self.name


def healing_potion(magnitude: int = 30) -> Item:
    """Creates a healing potion restoring the given amount of HP."""
    return Item(name=HEALING_POTION, category=ItemCategory.POTION, magnitude=magnitude)


def mana_potion(magnitude: int = 30) -> Item:
    """Creates a mana potion restoring the given amount of mana."""
    return Item(name=MANA_POTION, category=ItemCategory.POTION, magnitude=magnitude)


def cursed_sword() -> Item:
    """Creates the cursed sword offered by the narrative vignette."""
    return Item(name=CURSED_SWORD, category=ItemCategory.WEAPON, magnitude=5)
