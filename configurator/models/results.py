"""Engine output models handed to callers and document collaborators."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .door import DoorConfiguration


class FieldChange(BaseModel):
    """Outcome of one normalizer transition."""
    config: DoorConfiguration
    rejected: bool = False
    notices: list[str] = []  # User-facing, shown when a change was corrected or refused


class DoorDimensions(BaseModel):
    """Detail-drawing dimensions in millimetres ("-" when not computable)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    frame_outer_w: str = "-"
    frame_inner_w: str = "-"
    door_w: str = "-"
    frame_outer_h: str = "-"
    frame_inner_h: str = "-"
    door_h: str = "-"
    rail_length: str = "-"


class DoorSnapshot(BaseModel):
    """Everything a rendering/document collaborator needs for one door.

    Names are resolved here so collaborators never look up ids or prices.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    label: str
    room_name: str
    config: DoorConfiguration
    price: int
    door_type_name: str
    color_name: str
    frame_type_name: str | None = None   # None for storage/material
    handle_name: str | None = None       # None when the family shows no handle
    glass_name: str | None = None
    lock_name: str | None = None
    hinge_side_label: str | None = None
    detail_drawing_url: str | None = None
    dimensions: DoorDimensions | None = None


class Quotation(BaseModel):
    """Quotation totals for a saved list."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    doors: list[DoorSnapshot]
    doors_total: int
    shipping_cost: int
    subtotal: int
    tax: int
    total: int


class MatrixValidation(BaseModel):
    """Comparison of a price matrix against the reachable key space."""
    missing: list[str] = []   # Reachable keys with no row
    unknown: list[str] = []   # Rows no configuration can reach
    unpriced: list[str] = []  # Rows present but with no positive band at all

    @property
    def is_complete(self) -> bool:
        return not self.missing and not self.unknown


class ExportGate(BaseModel):
    """Pre-export confirmation: every message must be acknowledged."""
    messages: list[str] = []
    acknowledged: list[bool] = Field(default_factory=list)

    def model_post_init(self, __context: object) -> None:
        if len(self.acknowledged) != len(self.messages):
            self.acknowledged = [False] * len(self.messages)

    def acknowledge(self, index: int) -> None:
        self.acknowledged[index] = True

    def acknowledge_all(self) -> None:
        self.acknowledged = [True] * len(self.messages)

    @property
    def is_open(self) -> bool:
        return all(self.acknowledged)
