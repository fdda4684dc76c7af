"""Duplicate storage units and trim materials."""

from __future__ import annotations

from configurator.rules.base import DeviationRule
from configurator.models import CheckContext, SavedDoor, find_name


class DuplicateItemRule(DeviationRule):
    """Same family, width, height and color listed more than once."""

    priority = 80

    def get_id(self) -> str:
        return "list.duplicates"

    def get_name(self) -> str:
        return "Duplicate storage/material items"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        return door.profile.is_storage or door.profile.is_material

    def summarize(self, context: CheckContext) -> list[str]:
        groups: dict[tuple[str, float, float, str], int] = {}
        for door in context.doors:
            if not self.applies(door, context):
                continue
            config = door.config
            signature = (config.door_type.value, config.width, config.height, config.color)
            groups[signature] = groups.get(signature, 0) + 1

        messages: list[str] = []
        for (door_type, _, _, _), count in groups.items():
            if count > 1:
                name = find_name(context.catalog.door_types, door_type)
                messages.append(f"[Duplicate check] {name} appears {count} times in the list")
        return messages
