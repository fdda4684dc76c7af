"""API request/response schemas."""

from __future__ import annotations
from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from configurator.models import (
    CheckConfig, DoorConfiguration, ProjectInfo, SavedDoor,
)


class _Schema(BaseModel):
    """Wire models use the same camelCase keys as the project bundle."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PriceRequest(_Schema):
    """Request body for the /price endpoint."""
    config: DoorConfiguration


class PriceResponse(_Schema):
    price: int
    matrix_key: str


class NormalizeRequest(_Schema):
    """One field change against a configuration."""
    config: DoorConfiguration = Field(default_factory=DoorConfiguration)
    field: str
    value: Any = None


class CheckRequest(_Schema):
    """Request body for the /check endpoint."""
    doors: list[SavedDoor]
    project_info: ProjectInfo = Field(default_factory=ProjectInfo)
    config: CheckConfig = Field(default_factory=CheckConfig)


class CheckResponse(_Schema):
    messages: list[str]
    door_count: int


class DocumentRequest(_Schema):
    """Saved list plus project info, for snapshots and quotations."""
    doors: list[SavedDoor]
    project_info: ProjectInfo = Field(default_factory=ProjectInfo)


class RuleInfo(BaseModel):
    id: str
    name: str
