"""Tests for matrix key resolution and matrix validation."""

import pytest

from configurator.core.matrix import build_matrix_key, enumerate_matrix_keys, validate_matrix
from configurator.models import DoorConfiguration, FrameType, HingeSide, MatrixPriceEntry


def key(**kwargs):
    return build_matrix_key(DoorConfiguration(**kwargs))


@pytest.mark.parametrize("kwargs,expected", [
    ({"door_type": "hinged", "frame_type": FrameType.THREE_WAY, "lock": "display-lock"}, "hinged_3w_l"),
    ({"door_type": "hinged"}, "hinged_2w_nl"),
    ({"door_type": "sliding-inset", "lock": "display-lock"}, "sliding-inset_2w_l"),
    ({"door_type": "sliding-outset", "width": 77.8}, "sliding-outset_2w_nl"),
    ({"door_type": "sliding-outset", "width": 77.81}, "sliding-outset_2w_c"),
    ({"door_type": "sliding-outset", "width": 77.81, "lock": "display-lock",
      "frame_type": FrameType.THREE_WAY}, "sliding-outset_3w_cl"),
    ({"door_type": "sliding-hikikomi", "lock": "display-lock"}, "sliding-hikikomi_3w_nl"),
    ({"door_type": "sliding-2"}, "sliding-2_3w_nl"),
    ({"door_type": "sliding-kata-2", "hinge_side": HingeSide.LEFT}, "sliding-kata-2_L"),
    ({"door_type": "sliding-kata-3", "hinge_side": HingeSide.RIGHT}, "sliding-kata-3_R"),
    ({"door_type": "double", "width": 73.5}, "double_w73.5"),
    ({"door_type": "double", "width": 120}, "double_w120"),
    ({"door_type": "folding-6"}, "folding-6_3w_nl"),
    ({"door_type": "hinged-storage"}, "hinged-storage_3w_nl"),
])
def test_matrix_keys(kwargs, expected):
    assert key(**kwargs) == expected


@pytest.mark.parametrize("kwargs", [
    {"door_type": "storage-80", "width": 160},
    {"door_type": "material-skirting"},
    {"door_type": "unselected"},
    {"door_type": "sliding"},
    {"door_type": "double", "width": 100},
])
def test_families_without_matrix_row(kwargs):
    assert key(**kwargs) == ""


def test_reachable_keys_match_default_matrix(matrix):
    keys = enumerate_matrix_keys()
    assert len(keys) == 31
    assert len(set(keys)) == 31
    assert set(keys) == set(matrix)


def test_default_matrix_validates(matrix):
    result = validate_matrix(matrix)
    assert result.is_complete
    assert set(result.unpriced) == {"sliding-3_3w_nl", "double_w120"}


def test_validation_reports_missing_and_unknown_rows(matrix):
    edited = dict(matrix)
    del edited["hinged_3w_l"]
    edited["hinged_4w_l"] = MatrixPriceEntry(h2200=1)
    result = validate_matrix(edited)
    assert result.missing == ["hinged_3w_l"]
    assert result.unknown == ["hinged_4w_l"]
    assert not result.is_complete
