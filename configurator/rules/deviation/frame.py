"""Frame deviations."""

from __future__ import annotations

from configurator.rules.base import DeviationRule
from configurator.models import CheckContext, FrameType, SavedDoor


FULL_HEIGHT = 220.0


class LowHeightFrameRule(DeviationRule):
    """
    A door lower than full height without a three-way frame.

    Height 200 is corrected while editing, but custom heights such as 210
    can still be saved with a two-way frame.
    """

    priority = 70

    def get_id(self) -> str:
        return "door.low_height_frame"

    def get_name(self) -> str:
        return "Low door without three-way frame"

    def applies(self, door: SavedDoor, context: CheckContext) -> bool:
        profile = door.profile
        return not profile.is_storage and not profile.is_material

    def inspect(self, door: SavedDoor, context: CheckContext) -> list[str]:
        config = door.config
        if config.height >= FULL_HEIGHT or config.frame_type == FrameType.THREE_WAY:
            return []
        return [
            f"{context.label_for(door)}: door (H{config.height:g}) "
            f"does not have a three-way frame"
        ]
