"""List analysis — partitioning and labelling of saved doors."""

from __future__ import annotations

from configurator.models import CheckContext, ListPartition, SavedDoor


UNNAMED_ROOM = "Unnamed"

PARTITION_PREFIX = {
    ListPartition.DOOR: "WD",
    ListPartition.STORAGE: "SB",
}
MATERIAL_LABEL = "Material"


def partition_doors(doors: list[SavedDoor]) -> dict[ListPartition, list[SavedDoor]]:
    """Split a list into doors / storage / materials, keeping list order."""
    parts: dict[ListPartition, list[SavedDoor]] = {p: [] for p in ListPartition}
    for door in doors:
        parts[door.profile.partition].append(door)
    return parts


def label_doors(doors: list[SavedDoor]) -> dict[str, str]:
    """
    Labels used in reports: "WD<n> (<room>)" for doors, "SB<n> (<room>)"
    for storage (numbered per partition) and "Material (<room>)".
    """
    labels: dict[str, str] = {}
    for partition, members in partition_doors(doors).items():
        for index, door in enumerate(members, start=1):
            room = door.room_name or UNNAMED_ROOM
            if partition == ListPartition.MATERIAL:
                labels[door.id] = f"{MATERIAL_LABEL} ({room})"
            else:
                labels[door.id] = f"{PARTITION_PREFIX[partition]}{index} ({room})"
    return labels


def sort_for_documents(doors: list[SavedDoor]) -> list[SavedDoor]:
    """Document order: doors, then storage, then materials."""
    parts = partition_doors(doors)
    return [door for partition in ListPartition for door in parts[partition]]


class DoorListAnalyzer:
    """Populates a check context with per-door labels."""

    def analyze(self, context: CheckContext) -> None:
        context.labels = label_doors(context.doors)
