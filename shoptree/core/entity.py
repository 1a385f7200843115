"""Item record for ShopTree.

An Item is the value stored in both the registry and the tree. It is
immutable once created: removing an item means dropping it by identity,
never editing it in place.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict

from .._common.config import LOWEST_PRIORITY

# Process-wide logical clock used as the final ordering tie-breaker
_clock = itertools.count(1)


def next_tick() -> int:
    """Return the next value of the creation clock."""
    return next(_clock)


def normalize_key(name: str) -> str:
    """Return the identity key for an item name.

    Two names with the same key are the same item, both for the registry
    and for every ordering strategy.
    """
    return name.strip().lower()


def parse_priority(raw: Any, default: int = LOWEST_PRIORITY) -> int:
    """Parse a priority rank, falling back to ``default``.

    Accepts ints, integral floats and numeric strings. Anything else
    (None, blank, non-numeric, zero, negative, fractional) yields the
    default. Never raises.
    """
    if raw is None or isinstance(raw, bool):
        return default

    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return default
        try:
            value = float(raw)
        except ValueError:
            return default
    elif isinstance(raw, (int, float)):
        value = raw
    else:
        return default

    if value != value or value in (float('inf'), float('-inf')):
        return default
    if value != int(value) or value < 1:
        return default
    return int(value)


@dataclass(frozen=True)
class Item:
    """A shopping list entry.

    The name is stripped on creation and the priority goes through
    parse_priority, so ``Item("  Milk ", "2")`` is ``Item("Milk", 2)``.
    ``created_at`` comes from a strictly increasing logical clock, so two
    items created in sequence always compare the same way even if their
    names and priorities tie.
    """

    name: str
    priority: int = LOWEST_PRIORITY
    created_at: int = field(default_factory=next_tick)

    def __post_init__(self):
        object.__setattr__(self, 'name', self.name.strip())
        object.__setattr__(self, 'priority', parse_priority(self.priority))

    @property
    def key(self) -> str:
        """Normalized identity used for duplicate detection."""
        return normalize_key(self.name)

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'priority': self.priority,
            'created_at': self.created_at,
        }

    def __str__(self) -> str:
        return f"{self.name} (P{self.priority})"
