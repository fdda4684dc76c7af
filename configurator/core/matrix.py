"""Matrix key resolution — maps a configuration to its price-matrix row.

The key vocabulary is the wire format of the admin price matrix: renaming a
family id means migrating every persisted matrix table.
"""

from __future__ import annotations

from configurator.models import (
    DoorConfiguration, FrameType, HingeSide, MatrixKeyStyle,
    MatrixValidation, PriceMatrix, DISPLAY_LOCK, NO_LOCK,
    profile_for, selectable_families,
)


# Outset sliding doors wider than this are the corner (wider panel) variant.
OUTSET_CORNER_WIDTH = 77.8

# Double doors are priced per literal width.
DOUBLE_WIDTH_KEYS: dict[float, str] = {73.5: "w73.5", 120.0: "w120"}


def _frame_token(config: DoorConfiguration) -> str:
    return "2w" if config.frame_type == FrameType.TWO_WAY else "3w"


def _lock_token(config: DoorConfiguration) -> str:
    return "l" if config.lock == DISPLAY_LOCK else "nl"


def build_matrix_key(config: DoorConfiguration) -> str:
    """
    Return the matrix key for a configuration, or "" when the family is not
    priced from the matrix (storage, materials, unselected, groups, and
    double doors at a non-listed width).
    """
    family = config.door_type.value
    style = profile_for(config.door_type).key_style

    if style == MatrixKeyStyle.LOCK:
        return f"{family}_{_frame_token(config)}_{_lock_token(config)}"

    if style == MatrixKeyStyle.CORNER:
        is_lock = config.lock == DISPLAY_LOCK
        if config.width > OUTSET_CORNER_WIDTH:
            return f"{family}_{_frame_token(config)}_c{'l' if is_lock else ''}"
        return f"{family}_{_frame_token(config)}_{_lock_token(config)}"

    if style == MatrixKeyStyle.FIXED:
        return f"{family}_3w_nl"

    if style == MatrixKeyStyle.HANDED:
        side = "L" if config.hinge_side == HingeSide.LEFT else "R"
        return f"{family}_{side}"

    if style == MatrixKeyStyle.WIDTH:
        suffix = DOUBLE_WIDTH_KEYS.get(config.width)
        return f"{family}_{suffix}" if suffix else ""

    return ""


def enumerate_matrix_keys() -> list[str]:
    """
    Every key reachable from some valid configuration, in table order.

    Enumerates each matrix-priced family over frame type, lock, handedness
    and the widths that change the key.
    """
    keys: list[str] = []
    seen: set[str] = set()

    for profile in selectable_families():
        if profile.key_style == MatrixKeyStyle.NONE:
            continue
        widths = [profile.canonical_width or 80.0]
        if profile.key_style == MatrixKeyStyle.CORNER:
            widths.append(OUTSET_CORNER_WIDTH + 0.01)
        elif profile.key_style == MatrixKeyStyle.WIDTH:
            widths = list(DOUBLE_WIDTH_KEYS)

        for frame in (FrameType.TWO_WAY, FrameType.THREE_WAY):
            for width in widths:
                for lock in (NO_LOCK, DISPLAY_LOCK):
                    for side in (HingeSide.LEFT, HingeSide.RIGHT):
                        config = DoorConfiguration(
                            door_type=profile.door_type, frame_type=frame,
                            width=width, lock=lock, hinge_side=side,
                        )
                        key = build_matrix_key(config)
                        if key and key not in seen:
                            seen.add(key)
                            keys.append(key)
    return keys


def validate_matrix(matrix: PriceMatrix) -> MatrixValidation:
    """Compare an (admin-edited) matrix with the reachable key space."""
    reachable = enumerate_matrix_keys()
    reachable_set = set(reachable)
    return MatrixValidation(
        missing=[k for k in reachable if k not in matrix],
        unknown=sorted(k for k in matrix if k not in reachable_set),
        unpriced=[
            k for k in reachable
            if k in matrix and all(
                matrix[k].band_price(h) is None for h in (90, 120, 200, 220, 240)
            )
        ],
    )
