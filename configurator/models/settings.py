"""Engine settings: catalog, price matrix and document parameters."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .catalog import Catalog, PriceMatrix


class DimensionFormula(BaseModel):
    """Formulas over W/H (millimetres) for one detail-drawing row."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    frame_outer_w: str = ""
    frame_inner_w: str = ""
    door_w: str = ""
    frame_outer_h: str = ""
    frame_inner_h: str = ""
    door_h: str = ""
    rail_length: str = ""


class EngineSettings(BaseModel):
    """Everything the pure engine functions read, passed explicitly.

    Built from the bundled defaults, optionally overlaid with an admin
    override; never mutated in place.
    """
    catalog: Catalog = Field(default_factory=Catalog)
    matrix: PriceMatrix = {}
    shipping_rates: dict[str, int] = {}      # Prefecture -> shipping cost
    dimension_settings: dict[str, DimensionFormula] = {}
    tax_rate: float = 0.10


class CheckConfig(BaseModel):
    """Controls which deviation rules run and what they look for."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
    wet_room_keywords: list[str] = ["washroom", "dressing room", "toilet"]
