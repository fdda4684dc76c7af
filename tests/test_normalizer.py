"""Tests for the field-change transition function."""

import pytest

from configurator.core.normalizer import ConfigurationNormalizer, apply_field_change
from configurator.errors import UnknownFieldError
from configurator.models import DoorConfiguration, DoorType, FrameType, HingeSide


@pytest.fixture
def normalizer():
    return ConfigurationNormalizer()


def test_hinged_to_double_resets_width_and_frame():
    hinged = DoorConfiguration(door_type="hinged", width=77.8, glass_style="clear",
                               lock="display-lock", handle="black")
    double = apply_field_change(hinged, "door_type", "double")
    assert double.door_type == DoorType.DOUBLE
    assert double.width == 73.5
    assert double.frame_type == FrameType.THREE_WAY
    assert double.glass_style == "none"
    assert double.lock == "none"
    assert double.handle == "satin-nickel"


def test_storage_full_refuses_width_200(normalizer):
    config = apply_field_change(DoorConfiguration(), "door_type", "storage-200-full")
    assert config.width == 160
    assert config.height == 200

    change = normalizer.apply(config, "width", 200)
    assert change.rejected
    assert change.config.width == 160
    assert change.notices


@pytest.mark.parametrize("door_type", ["storage-200-l", "storage-200-u"])
def test_tall_storage_at_width_80_downgrades_to_floor_type(normalizer, door_type):
    config = apply_field_change(DoorConfiguration(), "door_type", door_type)
    assert config.hinge_side == HingeSide.LEFT
    change = normalizer.apply(config, "width", 80)
    assert not change.rejected
    assert change.config.door_type == DoorType.STORAGE_80
    assert change.config.width == 80
    assert change.config.height == 90
    assert change.notices


def test_switching_storage_family_resets_forbidden_width():
    config = apply_field_change(DoorConfiguration(), "door_type", "storage-80")
    config = apply_field_change(config, "width", 200)
    config = apply_field_change(config, "door_type", "storage-200-full")
    assert config.width == 160


def test_leaving_storage_restores_door_height():
    config = apply_field_change(DoorConfiguration(), "door_type", "storage-80")
    assert config.height == 90
    config = apply_field_change(config, "door_type", "hinged")
    assert config.height == 220
    assert config.width == 77.8


def test_height_200_forces_three_way_frame():
    config = DoorConfiguration(door_type="hinged", width=77.8, frame_type=FrameType.TWO_WAY)
    assert apply_field_change(config, "height", 200).frame_type == FrameType.THREE_WAY
    assert apply_field_change(config, "height", 240).frame_type == FrameType.TWO_WAY


def test_double_low_heights_force_three_way_frame():
    config = DoorConfiguration(door_type="double", width=73.5, frame_type=FrameType.TWO_WAY)
    assert apply_field_change(config, "height", 90).frame_type == FrameType.THREE_WAY


def test_material_entry_resets_count_and_color():
    config = DoorConfiguration(color="co", count=5)
    config = apply_field_change(config, "door_type", "material-skirting")
    assert config.count == 1
    assert config.color == "ww"


def test_multi_panel_sliding_keeps_handle_folding_does_not():
    config = DoorConfiguration(door_type="hinged", handle="black")
    assert apply_field_change(config, "door_type", "sliding-2").handle == "black"
    assert apply_field_change(config, "door_type", "folding-4").handle == "satin-nickel"


@pytest.mark.parametrize("field,value", [
    ("door_type", "double"),
    ("door_type", "storage-200-u"),
    ("width", 85),
    ("height", 200),
    ("lock", "display-lock"),
])
def test_changes_are_idempotent(field, value):
    start = DoorConfiguration(door_type="hinged", width=77.8)
    once = apply_field_change(start, field, value)
    assert apply_field_change(once, field, value) == once


def test_camel_case_field_names_are_accepted():
    config = apply_field_change(DoorConfiguration(), "doorType", "hinged")
    assert config.door_type == DoorType.HINGED


def test_unknown_field_raises():
    with pytest.raises(UnknownFieldError):
        apply_field_change(DoorConfiguration(), "colour", "ww")


def test_input_configuration_is_not_mutated():
    start = DoorConfiguration(door_type="hinged", width=77.8)
    apply_field_change(start, "door_type", "double")
    assert start.door_type == DoorType.HINGED
    assert start.width == 77.8
