"""
Exceptions raised by the game core.

Every error here is recoverable: the battle resolver turns item failures into
a reported (failed) action, the hero turns a lack of mana into a failed
special, and the command-line interface re-prompts on an invalid selection.
"""

from typing import Any


class GameException(Exception):
    """
    Base class for all the game errors.

    Attributes:
        message (str):
            The human readable reason of the failure.
        context (dict[str, Any]):
            Additional information forwarded to the logs.

    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ItemNotFound(GameException):
    """Raised when using or removing an item the inventory does not hold."""

    def __init__(self, item_name: str) -> None:
        super().__init__(f"You don't have '{item_name}'.", {"item": item_name})
        self.item_name = item_name


class ItemNotUsable(GameException):
    """Raised when an item exists but cannot be consumed."""

    def __init__(self, item_name: str, message: str) -> None:
        super().__init__(message, {"item": item_name})
        self.item_name = item_name


class InsufficientResource(GameException):
    """Raised when an ability costs more of a resource than is available."""

    def __init__(self, resource: str, available: int, required: int) -> None:
        super().__init__(
            f"Not enough {resource}! ({available}/{required})",
            {"resource": resource, "available": available, "required": required},
        )
        self.resource = resource
        self.available = available
        self.required = required


class InvalidSelection(GameException):
    """Raised when the caller picks an action or entry that is not allowed."""
