"""Admin override merge — overlays saved prices and URLs onto the defaults.

Overrides are matched by option id. Only whitelisted fields are taken over,
and unknown ids in the override are ignored, so a stale override can never
add or remove catalog entries. Merging the same override twice gives the
same result.

Keys are read in the camelCase form the admin panel saves (`priceH2200`,
`priceW80_R`, `subOptions`, `matrixPrices`); the snake_case field names are
accepted as well.
"""

from __future__ import annotations
import logging
from numbers import Real
from typing import Any

from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from configurator.models import (
    Catalog, DimensionFormula, EngineSettings, MatrixPriceEntry, OptionEntry,
)
from configurator.models.catalog import OPTION_SECTIONS


logger = logging.getLogger(__name__)

_WIDTH_BANDS = ("w80", "w120", "w160", "w200")

PRICE_FIELDS: tuple[str, ...] = (
    "price", "price_h2200", "price_h2400", "price_h90", "price_h120",
    *(f"price_{band}" for band in _WIDTH_BANDS),
    *(f"price_{band}_r" for band in _WIDTH_BANDS),
)

URL_FIELDS: tuple[str, ...] = (
    "detail_drawing_url", "detail_drawing_url_r",
    *(f"detail_drawing_url_{band}" for band in _WIDTH_BANDS),
    *(f"detail_drawing_url_{band}_r" for band in _WIDTH_BANDS),
)


def saved_key(field: str) -> str:
    """Admin panel spelling of a field: `price_w80_r` -> `priceW80_R`."""
    if field.endswith("_r"):
        return f"{to_camel(field[:-2])}_R"
    return to_camel(field)


def _lookup(saved: dict[str, Any], field: str) -> tuple[bool, Any]:
    for key in (saved_key(field), field):
        if key in saved:
            return True, saved[key]
    return False, None


def _valid_price(value: Any) -> bool:
    # Prices are whole yen
    return (
        isinstance(value, Real) and not isinstance(value, bool)
        and value >= 0 and float(value).is_integer()
    )


def _overlay(option: OptionEntry, saved: dict[str, Any]) -> dict[str, Any]:
    updates: dict[str, Any] = {}
    for field in PRICE_FIELDS:
        present, value = _lookup(saved, field)
        if not present:
            continue
        if _valid_price(value):
            updates[field] = int(value)
        else:
            logger.warning(
                "Skipping override %s=%r for option %s: not a non-negative whole number",
                field, value, option.id,
            )
    for field in URL_FIELDS:
        _, value = _lookup(saved, field)
        if isinstance(value, str):
            updates[field] = value
    return updates


def merge_options(
    defaults: list[OptionEntry],
    overrides: list[dict[str, Any]] | None,
) -> list[OptionEntry]:
    """Overlay saved values onto a default option tree (one sub-option level)."""
    saved_by_id = {
        item["id"]: item
        for item in overrides or []
        if isinstance(item, dict) and "id" in item
    }

    merged: list[OptionEntry] = []
    for option in defaults:
        saved = saved_by_id.get(option.id)
        if saved is None:
            merged.append(option)
            continue

        updates = _overlay(option, saved)
        if option.sub_options is not None:
            _, saved_subs = _lookup(saved, "sub_options")
            updates["sub_options"] = merge_options(
                option.sub_options,
                saved_subs if isinstance(saved_subs, list) else [],
            )
        merged.append(option.model_copy(update=updates))
    return merged


def _merge_models(defaults: dict, saved: Any, model: type, section: str) -> dict:
    if not isinstance(saved, dict):
        return dict(defaults)
    merged = dict(defaults)
    for key, value in saved.items():
        try:
            merged[key] = model.model_validate(value)
        except ValidationError as exc:
            logger.warning("Skipping %s entry %r: %s", section, key, exc.errors()[0]["msg"])
    return merged


def _merge_rates(defaults: dict[str, int], saved: Any) -> dict[str, int]:
    if not isinstance(saved, dict):
        return dict(defaults)
    merged = dict(defaults)
    for location, rate in saved.items():
        if _valid_price(rate):
            merged[location] = int(rate)
        else:
            logger.warning("Skipping shipping rate %r for %s", rate, location)
    return merged


def merge_settings(defaults: EngineSettings, payload: dict[str, Any]) -> EngineSettings:
    """
    Apply a saved admin override payload to the default settings.

    Option sections are merged with `merge_options`; the matrix, shipping
    rates and dimension formulas are shallow-merged by key. Base price and
    area price always come from the defaults.
    """
    catalog_updates = {
        section: merge_options(getattr(defaults.catalog, section), _lookup(payload, section)[1])
        for section in OPTION_SECTIONS
    }
    catalog: Catalog = defaults.catalog.model_copy(update=catalog_updates)

    return defaults.model_copy(update={
        "catalog": catalog,
        "matrix": _merge_models(
            defaults.matrix, _lookup(payload, "matrix_prices")[1],
            MatrixPriceEntry, "matrix_prices",
        ),
        "shipping_rates": _merge_rates(
            defaults.shipping_rates, _lookup(payload, "shipping_rates")[1],
        ),
        "dimension_settings": _merge_models(
            defaults.dimension_settings, _lookup(payload, "dimension_settings")[1],
            DimensionFormula, "dimension_settings",
        ),
    })
