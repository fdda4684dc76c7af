"""Project-level metadata and the persisted project bundle."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .door import DEFAULT_COLOR, DEFAULT_HANDLE, SavedDoor


BUNDLE_VERSION = "1.0"


class ProjectInfo(BaseModel):
    """Customer/site metadata plus the defaults deviations are measured against."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_name: str = ""
    construction_location: str = ""
    construction_company: str = ""
    shipping_cost: int = 0
    default_height: float | None = 220.0
    default_color: str | None = DEFAULT_COLOR
    default_handle: str | None = DEFAULT_HANDLE


class ProjectBundle(BaseModel):
    """Snapshot import/export format: {version, timestamp, doors, projectInfo}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    version: str = BUNDLE_VERSION
    timestamp: int  # milliseconds since the epoch
    doors: list[SavedDoor]
    project_info: ProjectInfo
