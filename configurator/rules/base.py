"""Abstract base class for all deviation rules.

Every pre-export policy check implements this interface. Rules are:
- Self-contained: each looks for one kind of deviation
- Independent: no rule short-circuits another
- Conditional: each rule decides which saved doors it applies to
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from configurator.models.context import CheckContext
from configurator.models.door import SavedDoor


class DeviationRule(ABC):
    """
    Base class for all deviation rules.

    Subclasses implement `applies()` and at least one of `inspect()`
    (per door) or `summarize()` (once, after every door was inspected).
    The checker walks the list door by door, calling `inspect()` on every
    applicable rule in priority order, then calls `summarize()` on each rule.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'door.color')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Non-default color')."""
        ...

    @abstractmethod
    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        """Return True if this rule should inspect the given door."""
        ...

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        """Messages for a single door."""
        return []

    def summarize(self, context: CheckContext) -> list[str]:
        """List-level messages, emitted after the per-door pass."""
        return []
