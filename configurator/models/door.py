"""Door configuration and saved-door models."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .family import DoorType, FamilyProfile, profile_for


DEFAULT_COLOR = "ww"
DEFAULT_HANDLE = "satin-nickel"
NO_GLASS = "none"
NO_LOCK = "none"
DISPLAY_LOCK = "display-lock"


class FrameType(str, Enum):
    TWO_WAY = "twoWay"
    THREE_WAY = "threeWay"


class HingeSide(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class DoorConfiguration(BaseModel):
    """The working configuration of a single door (an immutable snapshot).

    Dimensions are in centimetres. JSON uses the camelCase field names of
    the persisted project bundle.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    door_type: DoorType = DoorType.UNSELECTED
    color: str = DEFAULT_COLOR
    handle: str = DEFAULT_HANDLE
    glass_style: str = NO_GLASS
    lock: str = NO_LOCK
    width: float = Field(default=80.0, gt=0)
    height: float = Field(default=220.0, gt=0)
    count: int = Field(default=1, ge=1)  # Quantity, materials only
    hinge_side: HingeSide = HingeSide.RIGHT
    frame_type: FrameType = FrameType.TWO_WAY

    @property
    def profile(self) -> FamilyProfile:
        return profile_for(self.door_type)

    @property
    def has_display_lock(self) -> bool:
        return self.lock == DISPLAY_LOCK

    @property
    def has_glass(self) -> bool:
        return self.glass_style != NO_GLASS


class SavedDoor(BaseModel):
    """A configuration added to the project list, with its price frozen."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    config: DoorConfiguration
    price: int
    room_name: str = ""

    @property
    def profile(self) -> FamilyProfile:
        return self.config.profile
