"""Hardware deviations: glass and display-lock counts, wet-room locks."""

from __future__ import annotations

from configurator.rules.base import DeviationRule
from configurator.models import CheckContext, SavedDoor


class GlassCountRule(DeviationRule):
    """Counts glass doors across the list and reports the total once."""

    priority = 40

    def get_id(self) -> str:
        return "list.glass_count"

    def get_name(self) -> str:
        return "Glass door count"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        return door.config.has_glass

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        context.bump(self.get_id())
        return []

    def summarize(self, context: CheckContext) -> list[str]:
        count = context.counters.get(self.get_id(), 0)
        if count == 0:
            return []
        return [f"[Glass doors are specified at ({count}) locations]"]


class DisplayLockCountRule(DeviationRule):
    """Counts display locks across the list and reports the total once."""

    priority = 50

    def get_id(self) -> str:
        return "list.display_lock_count"

    def get_name(self) -> str:
        return "Display lock count"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        return door.config.has_display_lock

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        context.bump(self.get_id())
        return []

    def summarize(self, context: CheckContext) -> list[str]:
        count = context.counters.get(self.get_id(), 0)
        if count == 0:
            return []
        return [f"[Display locks are specified at ({count}) locations]"]


class WetRoomLockRule(DeviationRule):
    """
    Lockable doors into washrooms, dressing rooms and toilets should carry
    the display lock. Reported in brackets, like the list summaries.
    """

    priority = 60

    def get_id(self) -> str:
        return "door.wet_room_lock"

    def get_name(self) -> str:
        return "Missing display lock in wet room"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        if not door.profile.has_lock:
            return False
        room = door.room_name.lower()
        return any(keyword.lower() in room for keyword in context.config.wet_room_keywords)

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        if door.config.has_display_lock:
            return []
        return [f"[{context.label_for(door)}: no display lock selected]"]
