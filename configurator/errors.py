"""Exceptions raised at the engine's outer boundaries.

Pure pricing/normalization/checking functions never raise for catalog drift;
unknown ids degrade to a sentinel name or a zero price instead.
"""

from __future__ import annotations


class ConfiguratorError(Exception):
    """Base class for all configurator errors."""


class BundleImportError(ConfiguratorError):
    """A persisted project bundle is malformed and was rejected wholesale."""


class UnknownDoorError(ConfiguratorError, KeyError):
    """No saved door with the requested id exists in the list."""

    def __init__(self, door_id: str) -> None:
        super().__init__(door_id)
        self.door_id = door_id

    def __str__(self) -> str:
        return f"No saved door with id '{self.door_id}'"


class UnknownFieldError(ConfiguratorError, ValueError):
    """A field change named a field DoorConfiguration does not have."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Unknown configuration field '{self.field}'"
