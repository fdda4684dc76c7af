"""Configuration normalizer — the transition function run on every field change.

Each door family is a state; a field change is a transition that may cascade
into corrections of other fields so that a configuration is never left in a
combination the family cannot be built with. Most corrections come straight
from the family table; the two storage hard-stops (a forbidden width either
downgrades the family or is refused) are the only exceptional rules.
"""

from __future__ import annotations
import logging
from typing import Any

from configurator.errors import UnknownFieldError
from configurator.models import (
    DoorConfiguration, DoorType, FieldChange, FrameType, HingeSide,
    DEFAULT_COLOR, DEFAULT_HANDLE, NO_GLASS, NO_LOCK,
    profile_for,
)
from configurator.models.family import STORAGE_ENTRY_WIDTH


logger = logging.getLogger(__name__)

# Below this height a three-way frame is structurally required.
THREE_WAY_HEIGHT = 200.0
DOUBLE_LOW_HEIGHTS = (90.0, 120.0)
NON_STORAGE_HEIGHT = 220.0


def resolve_field(field: str) -> str:
    """Accept either the Python field name or its camelCase alias."""
    fields = DoorConfiguration.model_fields
    if field in fields:
        return field
    for name, info in fields.items():
        if info.alias == field:
            return name
    raise UnknownFieldError(field)


def _format_cm(value: float) -> str:
    return f"{value:g}"


class ConfigurationNormalizer:
    """
    Stateless transition function over DoorConfiguration.

    `apply()` returns the corrected configuration together with a rejected
    flag and user-facing notices.
    """

    def apply(self, config: DoorConfiguration, field: str, value: Any) -> FieldChange:
        name = resolve_field(field)
        candidate = DoorConfiguration.model_validate({**config.model_dump(), name: value})

        if name == "width":
            return self._on_width(config, candidate)
        if name == "door_type":
            return self._on_door_type(config, candidate)
        if name == "height":
            return self._on_height(candidate)
        return FieldChange(config=candidate)

    def _on_width(self, previous: DoorConfiguration, candidate: DoorConfiguration) -> FieldChange:
        profile = previous.profile
        width = candidate.width
        if width not in profile.forbidden_widths:
            return FieldChange(config=candidate)

        if profile.downgrade_to is not None:
            target = profile_for(profile.downgrade_to)
            logger.debug(
                "Width %s not built as %s, downgrading to %s",
                width, profile.door_type.value, target.door_type.value,
            )
            return FieldChange(
                config=candidate.model_copy(update={
                    "door_type": target.door_type,
                    "height": target.entry_height,
                }),
                notices=[
                    f"Width {_format_cm(width)} is only available as "
                    f"{target.door_type.value}; the type was changed."
                ],
            )

        logger.warning(
            "Rejected width %s for %s: no manufacturable size",
            width, profile.door_type.value,
        )
        return FieldChange(
            config=previous,
            rejected=True,
            notices=[
                f"No size is available at width {_format_cm(width)} for "
                f"{profile.door_type.value}; please choose another width."
            ],
        )

    def _on_door_type(self, previous: DoorConfiguration, candidate: DoorConfiguration) -> FieldChange:
        old = previous.profile
        new = candidate.profile
        updates: dict[str, Any] = {}
        notices: list[str] = []

        if new.frame_fixed:
            updates["frame_type"] = FrameType.THREE_WAY

        if new.canonical_width is not None:
            updates["width"] = new.canonical_width
        elif new.is_storage:
            if not old.is_storage:
                updates["width"] = STORAGE_ENTRY_WIDTH
            elif candidate.width in new.forbidden_widths:
                updates["width"] = STORAGE_ENTRY_WIDTH
                notices.append(
                    f"Width {_format_cm(candidate.width)} is not available for "
                    f"{new.door_type.value}; width reset to {_format_cm(STORAGE_ENTRY_WIDTH)}."
                )

        if not new.has_glass:
            updates["glass_style"] = NO_GLASS
        if not new.has_handle:
            updates["handle"] = DEFAULT_HANDLE
        if not new.has_lock:
            updates["lock"] = NO_LOCK

        if new.is_material:
            updates["count"] = 1
            updates["color"] = DEFAULT_COLOR

        if old.is_storage and not new.is_storage:
            updates["height"] = NON_STORAGE_HEIGHT
        elif new.is_storage:
            updates["height"] = new.entry_height
            if new.handed:
                updates["hinge_side"] = HingeSide.LEFT

        return FieldChange(config=candidate.model_copy(update=updates), notices=notices)

    def _on_height(self, candidate: DoorConfiguration) -> FieldChange:
        height = candidate.height
        needs_three_way = height == THREE_WAY_HEIGHT or (
            candidate.door_type == DoorType.DOUBLE and height in DOUBLE_LOW_HEIGHTS
        )
        if needs_three_way and candidate.frame_type != FrameType.THREE_WAY:
            return FieldChange(config=candidate.model_copy(update={"frame_type": FrameType.THREE_WAY}))
        return FieldChange(config=candidate)


_default_normalizer = ConfigurationNormalizer()


def apply_field_change(config: DoorConfiguration, field: str, value: Any) -> DoorConfiguration:
    """Apply one field change and return the corrected configuration."""
    return _default_normalizer.apply(config, field, value).config
