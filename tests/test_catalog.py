"""Tests for catalog lookups and height-band pricing."""

import pytest

from configurator.models import (
    OptionEntry, UNKNOWN_NAME, amount, find_name, find_price_entry,
    positive, price_for_height,
)


@pytest.fixture
def banded():
    return OptionEntry(
        id="x", name="X", price=1, price_h2200=2, price_h2400=3,
        price_h90=4, price_h120=5,
    )


@pytest.mark.parametrize("height,expected", [
    (90, 4), (120, 5), (200, 1), (201, 2), (220, 2), (221, 3), (240, 3),
])
def test_height_band_edges(banded, height, expected):
    assert price_for_height(banded, height) == expected


def test_low_bands_fall_through_when_unset():
    entry = OptionEntry(id="x", name="X", price=10, price_h2200=20, price_h2400=30)
    assert price_for_height(entry, 90) == 10
    assert price_for_height(entry, 120) == 10


def test_missing_entry_prices_zero():
    assert price_for_height(None, 220) == 0


def test_find_name_resolves_sub_options(catalog):
    assert find_name(catalog.door_types, "sliding-inset") == "Inset sliding door"
    assert find_name(catalog.door_types, "hinged") == "Hinged door"


def test_find_name_unknown_id(catalog):
    assert find_name(catalog.door_types, "no-such-door") == UNKNOWN_NAME
    assert find_price_entry(catalog.door_types, "no-such-door") is None


def test_positive_treats_zero_and_bools_as_absent():
    assert positive(0) is None
    assert positive(-5) is None
    assert positive(True) is None
    assert positive("100") is None
    assert positive(None) is None
    assert positive(2200) == 2200
    assert amount(None) == 0


def test_storage_width_price_prefers_handed_variant(catalog):
    entry = find_price_entry(catalog.door_types, "storage-200-l")
    assert entry.width_price(80, handed=True) == 45000
    assert entry.width_price(80, handed=False) == 45000
    assert entry.width_price(120, handed=True) == 0
    assert entry.width_price(100) is None


def test_storage_width_price_uses_plain_band(catalog):
    entry = find_price_entry(catalog.door_types, "storage-80")
    assert entry.width_price(160) == 44700
    assert entry.width_price(200) == 59900
