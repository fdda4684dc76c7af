"""Editing session — the live configuration plus the saved door list."""

from __future__ import annotations
import logging
from typing import Any

from configurator.errors import ConfiguratorError, UnknownDoorError
from configurator.models import (
    DoorConfiguration, DoorType, EngineSettings, ExportGate, FieldChange,
    ProjectInfo, SavedDoor, DEFAULT_COLOR, DEFAULT_HANDLE, DISPLAY_LOCK,
)
from configurator.core.normalizer import ConfigurationNormalizer
from configurator.core.pricing import compute_total_price
from configurator.core.checker import DeviationChecker
from configurator.core.documents import shipping_cost_for
from configurator.core.bundle import export_bundle, import_bundle


logger = logging.getLogger(__name__)

DEFAULT_HEIGHT = 220.0

# Rooms whose name contains this start with a display lock selected.
LOCKED_ROOM_KEYWORD = "toilet"


class ConfiguratorSession:
    """
    Owns one user's editing state.

    Every field change goes through the normalizer, so the live configuration
    is always one the family can be built with. Saved doors keep the price
    they had when they were added; editing a saved door re-prices it.
    """

    def __init__(
        self,
        settings: EngineSettings,
        project_info: ProjectInfo | None = None,
        checker: DeviationChecker | None = None,
    ) -> None:
        self.settings = settings
        self.project_info = project_info or ProjectInfo()
        self.normalizer = ConfigurationNormalizer()
        self.checker = checker or DeviationChecker()

        self.doors: list[SavedDoor] = []
        self.config = self._fresh_config()
        self.room_name = ""
        self.editing_id: str | None = None
        self._next_id = 1

    # -- live configuration ---------------------------------------------------

    def _fresh_config(self) -> DoorConfiguration:
        info = self.project_info
        return DoorConfiguration(
            door_type=DoorType.UNSELECTED,
            color=info.default_color or DEFAULT_COLOR,
            handle=info.default_handle or DEFAULT_HANDLE,
            height=info.default_height or DEFAULT_HEIGHT,
        )

    def update(self, field: str, value: Any) -> FieldChange:
        """Apply one field change to the live configuration."""
        change = self.normalizer.apply(self.config, field, value)
        self.config = change.config
        return change

    @property
    def price(self) -> int:
        return compute_total_price(self.config, self.settings.catalog, self.settings.matrix)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def start_item(self, room_name: str) -> None:
        """Begin configuring a door for a room."""
        self.room_name = room_name
        if LOCKED_ROOM_KEYWORD in room_name.lower():
            self.update("lock", DISPLAY_LOCK)

    # -- saved list -----------------------------------------------------------

    def _allocate_id(self) -> str:
        taken = {door.id for door in self.doors}
        while f"wd-{self._next_id}" in taken:
            self._next_id += 1
        door_id = f"wd-{self._next_id}"
        self._next_id += 1
        return door_id

    def _index_of(self, door_id: str) -> int:
        for index, door in enumerate(self.doors):
            if door.id == door_id:
                return index
        raise UnknownDoorError(door_id)

    def get(self, door_id: str) -> SavedDoor:
        return self.doors[self._index_of(door_id)]

    def add_to_list(self) -> SavedDoor:
        """
        Freeze the live configuration into the list.

        In edit mode the edited door is replaced in place. Either way the
        editor is reset to the project defaults afterwards.
        """
        if self.config.door_type == DoorType.UNSELECTED or not self.config.profile.is_selectable:
            raise ConfiguratorError("Select a door type before adding it to the list")

        price = self.price
        if self.editing_id is not None:
            index = self._index_of(self.editing_id)
            saved = self.doors[index].model_copy(update={
                "config": self.config, "price": price, "room_name": self.room_name,
            })
            self.doors = [*self.doors[:index], saved, *self.doors[index + 1:]]
            logger.info("Updated %s (%s) at %d", saved.id, saved.config.door_type.value, price)
        else:
            saved = SavedDoor(
                id=self._allocate_id(), config=self.config, price=price,
                room_name=self.room_name,
            )
            self.doors = [*self.doors, saved]
            logger.info("Added %s (%s) at %d", saved.id, saved.config.door_type.value, price)

        self._reset_editor()
        return saved

    def edit(self, door_id: str) -> None:
        """Load a saved door into the editor."""
        door = self.get(door_id)
        self.config = door.config
        self.room_name = door.room_name
        self.editing_id = door_id

    def cancel_edit(self) -> None:
        self._reset_editor()

    def _reset_editor(self) -> None:
        self.editing_id = None
        self.room_name = ""
        self.config = self._fresh_config()

    def delete(self, door_id: str) -> None:
        index = self._index_of(door_id)
        self.doors = [*self.doors[:index], *self.doors[index + 1:]]
        if self.editing_id == door_id:
            self._reset_editor()
        logger.info("Deleted %s", door_id)

    def rename(self, door_id: str, room_name: str) -> SavedDoor:
        """Change the room of a saved door."""
        index = self._index_of(door_id)
        renamed = self.doors[index].model_copy(update={"room_name": room_name})
        self.doors = [*self.doors[:index], renamed, *self.doors[index + 1:]]
        return renamed

    # -- project --------------------------------------------------------------

    def apply_project_info(self, info: ProjectInfo) -> None:
        """Store project info and carry its defaults into the live configuration."""
        self.project_info = info
        if info.default_height:
            self.update("height", info.default_height)
        if info.default_color:
            self.update("color", info.default_color)
        if info.default_handle:
            self.update("handle", info.default_handle)

    def set_construction_location(self, location: str) -> None:
        """Set the site location and the shipping cost that goes with it."""
        self.project_info = self.project_info.model_copy(update={
            "construction_location": location,
            "shipping_cost": shipping_cost_for(location, self.settings.shipping_rates),
        })

    def export_bundle(self) -> dict[str, Any]:
        return export_bundle(self.doors, self.project_info)

    def import_bundle(self, payload: str | bytes | dict[str, Any]) -> None:
        """Replace the list and project info; nothing changes if the bundle is rejected."""
        bundle = import_bundle(payload)
        self.doors = list(bundle.doors)
        self.project_info = bundle.project_info
        self._reset_editor()
        logger.info("Imported bundle with %d doors", len(self.doors))

    # -- export ---------------------------------------------------------------

    def check(self) -> list[str]:
        return self.checker.check(self.doors, self.project_info, self.settings.catalog)

    def prepare_export(self) -> ExportGate:
        """Deviation messages the user must acknowledge before exporting."""
        return ExportGate(messages=self.check())
