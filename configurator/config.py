"""Settings loader for the door configurator.

Default catalog, price matrix, shipping rates and dimension formulas ship as
YAML under `configurator/data/`. An admin override (JSON, as saved by the
admin panel) can be merged on top.

Environment:
    DOOR_CONFIGURATOR_DATA_DIR   alternative directory holding the YAML files
    DOOR_CONFIGURATOR_OVERRIDES  path to an admin override JSON file
    DOOR_CONFIGURATOR_LOG_LEVEL  root log level (default INFO)
"""

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml

from configurator.models import Catalog, DimensionFormula, EngineSettings, MatrixPriceEntry
from configurator.core.overrides import merge_settings


logger = logging.getLogger(__name__)

DATA_DIR_ENV = "DOOR_CONFIGURATOR_DATA_DIR"
OVERRIDES_ENV = "DOOR_CONFIGURATOR_OVERRIDES"
LOG_LEVEL_ENV = "DOOR_CONFIGURATOR_LOG_LEVEL"

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


def _read_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def resolve_data_dir(data_dir: Optional[str] = None) -> Path:
    """Data directory from the argument, the environment, or the packaged defaults."""
    if data_dir is None:
        data_dir = os.environ.get(DATA_DIR_ENV)
    return Path(data_dir) if data_dir else DEFAULT_DATA_DIR


def load_defaults(data_dir: Optional[str] = None) -> EngineSettings:
    """Load and validate the default settings from the YAML data files."""
    root = resolve_data_dir(data_dir)
    catalog = Catalog.model_validate(_read_yaml(root / "catalog.yaml"))
    matrix = {
        key: MatrixPriceEntry.model_validate(row)
        for key, row in _read_yaml(root / "matrix.yaml").items()
    }
    shipping = {str(k): int(v) for k, v in _read_yaml(root / "shipping.yaml").items()}
    dimensions = {
        key: DimensionFormula.model_validate(row)
        for key, row in _read_yaml(root / "dimensions.yaml").items()
    }
    return EngineSettings(
        catalog=catalog,
        matrix=matrix,
        shipping_rates=shipping,
        dimension_settings=dimensions,
    )


def load_overrides(path: str) -> dict[str, Any]:
    """Read an admin override file. A missing file means no override."""
    override_path = Path(path)
    if not override_path.exists():
        logger.warning("Override file %s not found, using defaults", override_path)
        return {}
    with open(override_path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, dict):
        logger.warning("Override file %s is not a JSON object, ignoring it", override_path)
        return {}
    return payload


def load_settings(
    data_dir: Optional[str] = None,
    overrides_path: Optional[str] = None,
) -> EngineSettings:
    """Build a fresh settings snapshot: defaults plus the optional admin override."""
    settings = load_defaults(data_dir)
    if overrides_path is None:
        overrides_path = os.environ.get(OVERRIDES_ENV)
    if overrides_path:
        settings = merge_settings(settings, load_overrides(overrides_path))
        logger.info("Applied admin override from %s", overrides_path)
    logger.info(
        "Loaded settings: %d door types, %d matrix rows, %d shipping rates",
        len(settings.catalog.door_types), len(settings.matrix), len(settings.shipping_rates),
    )
    return settings


@lru_cache(maxsize=1)
def get_settings() -> EngineSettings:
    """Process-wide settings, loaded once."""
    return load_settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from the argument or DOOR_CONFIGURATOR_LOG_LEVEL."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
