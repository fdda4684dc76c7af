"""Check context: accumulates state during a single deviation check pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .catalog import Catalog
from .door import SavedDoor
from .project import ProjectInfo
from .settings import CheckConfig


class CheckContext(BaseModel):
    """
    Holds all state during a single deviation check.

    The analyzer adds labels; rules add messages and bump counters.
    The checker orchestrates the flow.
    """
    # Input
    doors: list[SavedDoor]
    project: ProjectInfo
    catalog: Catalog
    config: CheckConfig = Field(default_factory=CheckConfig)

    # Analysis results (populated by the analyzer)
    labels: dict[str, str] = {}

    # Output (populated by rules)
    messages: list[str] = []
    counters: dict[str, int] = {}

    def add_message(self, message: str) -> None:
        self.messages.append(message)

    def add_messages(self, messages: list[str]) -> None:
        self.messages.extend(messages)

    def bump(self, counter: str) -> None:
        self.counters[counter] = self.counters.get(counter, 0) + 1

    def label_for(self, door: SavedDoor) -> str:
        return self.labels.get(door.id, door.id)
