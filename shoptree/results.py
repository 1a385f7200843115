"""Operation results returned by the ShopTree API.

Every expected outcome, including the unhappy ones, comes back as an
OperationResult instead of an exception. Failed operations leave the
list unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .core.entity import Item


class Status(Enum):
    """Outcome of a ShoppingList operation."""
    ADDED = "added"
    ALREADY_EXISTS = "already_exists"
    INVALID_NAME = "invalid_name"
    FOUND = "found"
    NOT_FOUND = "not_found"
    DELETED = "deleted"
    ORDERING_CHANGED = "ordering_changed"


SUCCESS_STATUSES = frozenset({
    Status.ADDED,
    Status.FOUND,
    Status.DELETED,
    Status.ORDERING_CHANGED,
})


@dataclass(frozen=True)
class OperationResult:
    """Result of a single ShoppingList operation.

    Attributes:
        status: What happened
        name: The name as supplied by the caller, stripped
        item: The item involved, when there is one
        message: Human-readable status line
    """

    status: Status
    name: str = ""
    item: Optional[Item] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status in SUCCESS_STATUSES

    def __bool__(self) -> bool:
        return self.ok

    def __str__(self) -> str:
        return self.message or self.status.value
