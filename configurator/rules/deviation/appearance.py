"""Appearance deviations: color, handle and size against project defaults."""

from __future__ import annotations

from configurator.rules.base import DeviationRule
from configurator.models import CheckContext, SavedDoor, find_name


class ColorDeviationRule(DeviationRule):
    """Door color differs from the project default (doors only)."""

    priority = 10

    def get_id(self) -> str:
        return "door.color"

    def get_name(self) -> str:
        return "Non-default color"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        profile = door.profile
        return not profile.is_storage and not profile.is_material

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        if door.config.color == context.project.default_color:
            return []
        color_name = find_name(context.catalog.colors, door.config.color)
        return [f"{context.label_for(door)}: door color is specified as ({color_name})"]


class HandleDeviationRule(DeviationRule):
    """Handle differs from the project default, for families with a visible handle."""

    priority = 20

    def get_id(self) -> str:
        return "door.handle"

    def get_name(self) -> str:
        return "Non-default handle"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        return door.profile.has_handle

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        if door.config.handle == context.project.default_handle:
            return []
        handle_name = find_name(context.catalog.handles, door.config.handle)
        return [f"{context.label_for(door)}: handle is specified as ({handle_name})"]


class CustomSizeRule(DeviationRule):
    """Width or height outside the family's preset sizes."""

    priority = 30

    def get_id(self) -> str:
        return "door.custom_size"

    def get_name(self) -> str:
        return "Custom size"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        return not door.profile.is_material

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        if not door.profile.is_custom_size(door.config.width, door.config.height):
            return []
        return [f"{context.label_for(door)}: door is specified at a custom size"]
