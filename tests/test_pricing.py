"""Tests for total price resolution."""

import pytest

from configurator.core.pricing import compute_total_price
from configurator.models import DoorConfiguration, FrameType, HingeSide, MatrixPriceEntry


def price(catalog, matrix, **kwargs):
    return compute_total_price(DoorConfiguration(**kwargs), catalog, matrix)


def test_matrix_price_includes_frame_and_lock(catalog, matrix):
    total = price(
        catalog, matrix, door_type="hinged", frame_type=FrameType.THREE_WAY,
        lock="display-lock", width=77.8, height=220,
    )
    assert total == 29600


@pytest.mark.parametrize("height,expected", [(200, 24700), (220, 27300), (240, 28200)])
def test_matrix_height_bands(catalog, matrix, height, expected):
    assert price(catalog, matrix, door_type="hinged", width=77.8, height=height) == expected


def test_glass_is_added_on_top_of_matrix_price(catalog, matrix):
    total = price(catalog, matrix, door_type="hinged", width=77.8, height=220, glass_style="clear")
    assert total == 27300 + 25900


def test_zero_matrix_row_falls_back_to_catalog(catalog, matrix):
    total = price(catalog, matrix, door_type="sliding-3", width=242,
                  height=220, frame_type=FrameType.THREE_WAY)
    assert total == 160000


def test_catalog_fallback_adds_lock(catalog):
    total = price(catalog, {}, door_type="hinged", width=77.8, height=220, lock="display-lock")
    assert total == 27300 + 2200


def test_double_low_height_uses_h90_band(catalog, matrix):
    assert price(catalog, matrix, door_type="double", width=73.5, height=90) == 12000
    # double_w120 has no positive band, so the catalog prices it
    assert price(catalog, matrix, door_type="double", width=120, height=120) == 13800


def test_storage_width_pricing(catalog, matrix):
    assert price(catalog, matrix, door_type="storage-80", width=160, height=90) == 44700
    assert price(catalog, matrix, door_type="storage-200-l", width=80, height=200,
                 hinge_side=HingeSide.RIGHT) == 45000


def test_material_price_is_unit_price_times_count(catalog, matrix):
    one = price(catalog, matrix, door_type="material-skirting", count=1)
    three = price(catalog, matrix, door_type="material-skirting", count=3)
    assert one == 900
    assert three == 3 * one


def test_material_ignores_finish_options(catalog, matrix):
    total = price(catalog, matrix, door_type="material-window-sill",
                  glass_style="clear", lock="display-lock")
    assert total == 4000


def test_unknown_and_unselected_price_zero(catalog, matrix):
    assert price(catalog, matrix, door_type="unselected") == 0
    assert price(catalog, matrix, door_type="hinged", color="no-such-color",
                 width=77.8, height=220) == 27300


def test_area_price_and_base_price(catalog, matrix):
    priced = catalog.model_copy(update={"base_price": 1000, "price_per_unit_area": 0.5})
    total = compute_total_price(
        DoorConfiguration(door_type="hinged", width=80, height=220), priced, matrix,
    )
    assert total == 1000 + 27300 + round(80 * 220 * 0.5)


def test_matrix_override_wins_over_catalog(catalog, matrix):
    edited = {**matrix, "folding-2_3w_nl": MatrixPriceEntry(h2200=99999)}
    total = price(catalog, edited, door_type="folding-2", width=73.5,
                  height=220, frame_type=FrameType.THREE_WAY)
    assert total == 99999
