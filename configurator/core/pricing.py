"""Price resolution — matrix first, catalog fallback, additive components."""

from __future__ import annotations
import logging

from configurator.models import (
    Catalog, DoorConfiguration, HingeSide, PriceMatrix,
    amount, find_price_entry, price_for_height,
)
from configurator.core.matrix import build_matrix_key


logger = logging.getLogger(__name__)


def matrix_family_price(config: DoorConfiguration, matrix: PriceMatrix) -> float | None:
    """Positive matrix price for the configuration's key and height band."""
    key = build_matrix_key(config)
    if not key:
        return None
    entry = matrix.get(key)
    if entry is None:
        return None
    return entry.band_price(config.height)


def catalog_family_price(config: DoorConfiguration, catalog: Catalog) -> float:
    """Family price from the catalog leaf; unknown/group ids price as 0."""
    entry = find_price_entry(catalog.door_types, config.door_type.value)
    if entry is None:
        return 0

    profile = config.profile
    if profile.is_storage:
        handed = profile.handed and config.hinge_side == HingeSide.RIGHT
        banded = entry.width_price(config.width, handed=handed)
        return banded if banded is not None else amount(entry.price)
    if profile.is_material:
        return amount(entry.price) * config.count
    return price_for_height(entry, config.height)


def _finish_price(catalog: Catalog, config: DoorConfiguration) -> float:
    """Color + handle + glass, each height-banded, plus the area term."""
    height = config.height
    return (
        price_for_height(find_price_entry(catalog.colors, config.color), height)
        + price_for_height(find_price_entry(catalog.handles, config.handle), height)
        + price_for_height(find_price_entry(catalog.glass_styles, config.glass_style), height)
        + config.width * height * catalog.price_per_unit_area
    )


def compute_total_price(
    config: DoorConfiguration,
    catalog: Catalog,
    matrix: PriceMatrix,
) -> int:
    """
    Total price of a configuration.

    A positive matrix price already includes frame and lock. Without one,
    the catalog price is used and frame and lock are added separately.
    Materials are priced as unit price times count with no extras.
    """
    base = amount(catalog.base_price)

    family_price = matrix_family_price(config, matrix)
    if family_price is not None:
        logger.debug("Matrix price %s for %s", family_price, build_matrix_key(config))
        return round(base + family_price + _finish_price(catalog, config))

    family_price = catalog_family_price(config, catalog)
    logger.debug("Catalog price %s for %s", family_price, config.door_type.value)

    profile = config.profile
    if profile.is_material:
        return round(base + family_price)

    height = config.height
    frame_price = 0 if profile.is_storage else price_for_height(
        find_price_entry(catalog.frame_types, config.frame_type.value), height,
    )
    lock_price = price_for_height(find_price_entry(catalog.locks, config.lock), height)

    return round(base + family_price + frame_price + lock_price + _finish_price(catalog, config))
