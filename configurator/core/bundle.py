"""Project bundle import/export.

The bundle is the saved project file: {version, timestamp, doors, projectInfo}
with camelCase keys. An import either succeeds completely or is rejected.
"""

from __future__ import annotations
import json
import logging
import time
from typing import Any

from pydantic import ValidationError

from configurator.errors import BundleImportError
from configurator.models import ProjectBundle, ProjectInfo, SavedDoor, BUNDLE_VERSION


logger = logging.getLogger(__name__)


def export_bundle(
    doors: list[SavedDoor],
    project_info: ProjectInfo,
    timestamp: int | None = None,
) -> dict[str, Any]:
    """Serialize the saved list and project info into the bundle format."""
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    bundle = ProjectBundle(
        version=BUNDLE_VERSION,
        timestamp=timestamp,
        doors=doors,
        project_info=project_info,
    )
    return bundle.model_dump(mode="json", by_alias=True)


def import_bundle(payload: str | bytes | dict[str, Any]) -> ProjectBundle:
    """
    Parse and validate a bundle.

    Raises BundleImportError unless `doors` is a list, `projectInfo` is
    present and every entry validates.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Rejected bundle: not valid JSON (%s)", exc)
            raise BundleImportError("Project file is not valid JSON") from exc

    if not isinstance(payload, dict):
        logger.warning("Rejected bundle: top level is %s", type(payload).__name__)
        raise BundleImportError("Project file must be a JSON object")
    if not isinstance(payload.get("doors"), list) or payload.get("projectInfo") is None:
        logger.warning("Rejected bundle: missing doors list or projectInfo")
        raise BundleImportError("Invalid project file: expected a doors list and projectInfo")

    data = dict(payload)
    data.setdefault("version", BUNDLE_VERSION)
    data.setdefault("timestamp", 0)
    try:
        return ProjectBundle.model_validate(data)
    except ValidationError as exc:
        logger.warning("Rejected bundle: %d validation errors", exc.error_count())
        raise BundleImportError(f"Invalid project file: {exc.error_count()} invalid entries") from exc
