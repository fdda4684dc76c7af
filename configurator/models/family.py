"""Door families and their capability table.

Every door type id belongs to exactly one FamilyCategory. Per-family data
(canonical width, preset sizes, capability flags, matrix key style) lives in
the FAMILIES table instead of being re-derived from id prefixes.
"""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, ConfigDict


class DoorType(str, Enum):
    UNSELECTED = "unselected"

    HINGED = "hinged"
    HINGED_STORAGE = "hinged-storage"
    DOUBLE = "double"

    SLIDING_SINGLE = "sliding-single"  # group
    SLIDING_INSET = "sliding-inset"
    SLIDING_OUTSET = "sliding-outset"
    SLIDING_HIKIKOMI = "sliding-hikikomi"

    SLIDING = "sliding"  # group
    SLIDING_2 = "sliding-2"
    SLIDING_3 = "sliding-3"
    SLIDING_4 = "sliding-4"
    SLIDING_KATA_2 = "sliding-kata-2"
    SLIDING_KATA_3 = "sliding-kata-3"

    FOLDING = "folding"  # group
    FOLDING_2 = "folding-2"
    FOLDING_4 = "folding-4"
    FOLDING_6 = "folding-6"
    FOLDING_8 = "folding-8"

    STORAGE = "storage"  # group
    STORAGE_80 = "storage-80"
    STORAGE_SEPARATE = "storage-separate"
    STORAGE_200_L = "storage-200-l"
    STORAGE_200_U = "storage-200-u"
    STORAGE_200_FULL = "storage-200-full"

    MATERIAL = "material"  # group
    MATERIAL_SKIRTING = "material-skirting"
    MATERIAL_CORNER_SKIRTING = "material-corner-skirting"
    MATERIAL_WINDOW_SILL = "material-window-sill"


class FamilyCategory(str, Enum):
    UNSELECTED = "unselected"
    GROUP = "group"
    HINGED = "hinged"
    SINGLE_SLIDING = "single_sliding"
    MULTI_SLIDING = "multi_sliding"
    KATA_SLIDING = "kata_sliding"
    DOUBLE = "double"
    FOLDING = "folding"
    HINGED_STORAGE = "hinged_storage"
    STORAGE = "storage"
    MATERIAL = "material"


class ListPartition(str, Enum):
    """Numbering/reporting partition of a saved door list."""
    DOOR = "door"
    STORAGE = "storage"
    MATERIAL = "material"


class MatrixKeyStyle(str, Enum):
    NONE = "none"        # never priced from the matrix
    LOCK = "lock"        # <family>_<frame>_<l|nl>
    CORNER = "corner"    # outset: corner flag plus lock token
    FIXED = "fixed"      # <family>_3w_nl
    HANDED = "handed"    # <family>_<L|R>
    WIDTH = "width"      # literal width match


STANDARD_HEIGHTS = (200.0, 220.0, 240.0)
LOW_HEIGHTS = (90.0, 120.0, 200.0, 220.0, 240.0)
STORAGE_WIDTHS = (80.0, 120.0, 160.0, 200.0)
DEFAULT_WIDTHS = (65.0, 70.0, 75.0, 80.0)
STORAGE_ENTRY_WIDTH = 160.0


class FamilyProfile(BaseModel):
    """Capabilities and size presets of a single door family."""
    model_config = ConfigDict(frozen=True)

    door_type: DoorType
    category: FamilyCategory
    canonical_width: float | None = None  # Snapped to on entering the family
    frame_fixed: bool = False             # Only sold with a three-way frame
    has_glass: bool = False
    has_handle: bool = True               # Handle is visible (and priced/compared)
    has_lock: bool = False
    handed: bool = False                  # Handed (_R) price/drawing variants
    entry_height: float | None = None     # Height applied on entering (storage)
    preset_widths: tuple[float, ...] = DEFAULT_WIDTHS
    preset_heights: tuple[float, ...] | None = STANDARD_HEIGHTS  # None = never custom
    forbidden_widths: tuple[float, ...] = ()     # Widths the family cannot be built at
    downgrade_to: DoorType | None = None          # Family to fall back to on a forbidden width
    key_style: MatrixKeyStyle = MatrixKeyStyle.NONE

    @property
    def is_storage(self) -> bool:
        return self.category == FamilyCategory.STORAGE

    @property
    def is_material(self) -> bool:
        return self.category == FamilyCategory.MATERIAL

    @property
    def is_selectable(self) -> bool:
        return self.category not in (FamilyCategory.UNSELECTED, FamilyCategory.GROUP)

    def is_custom_size(self, width: float, height: float) -> bool:
        """True when the size is not one of the family's presets."""
        if self.is_material:
            return False
        if width not in self.preset_widths:
            return True
        return self.preset_heights is not None and height not in self.preset_heights

    @property
    def partition(self) -> ListPartition:
        if self.is_storage:
            return ListPartition.STORAGE
        if self.is_material:
            return ListPartition.MATERIAL
        return ListPartition.DOOR


def _single_sliding(door_type: DoorType, width: float, presets: tuple[float, ...],
                    key_style: MatrixKeyStyle) -> FamilyProfile:
    return FamilyProfile(
        door_type=door_type, category=FamilyCategory.SINGLE_SLIDING,
        canonical_width=width, has_glass=True, has_lock=True,
        preset_widths=presets, key_style=key_style,
    )


def _panel(door_type: DoorType, category: FamilyCategory, width: float,
           presets: tuple[float, ...], key_style: MatrixKeyStyle,
           has_handle: bool = True) -> FamilyProfile:
    return FamilyProfile(
        door_type=door_type, category=category, canonical_width=width,
        frame_fixed=True, has_handle=has_handle,
        preset_widths=presets, key_style=key_style,
    )


def _storage(door_type: DoorType, entry_height: float, handed: bool = False,
             forbidden: tuple[float, ...] = (),
             downgrade_to: DoorType | None = None) -> FamilyProfile:
    return FamilyProfile(
        door_type=door_type, category=FamilyCategory.STORAGE,
        has_handle=False, handed=handed, entry_height=entry_height,
        preset_widths=STORAGE_WIDTHS, preset_heights=None,
        forbidden_widths=forbidden, downgrade_to=downgrade_to,
    )


def _material(door_type: DoorType) -> FamilyProfile:
    return FamilyProfile(
        door_type=door_type, category=FamilyCategory.MATERIAL,
        has_handle=False, preset_widths=(), preset_heights=None,
    )


def _group(door_type: DoorType) -> FamilyProfile:
    return FamilyProfile(door_type=door_type, category=FamilyCategory.GROUP)


FAMILIES: dict[DoorType, FamilyProfile] = {p.door_type: p for p in [
    FamilyProfile(door_type=DoorType.UNSELECTED, category=FamilyCategory.UNSELECTED),

    FamilyProfile(
        door_type=DoorType.HINGED, category=FamilyCategory.HINGED,
        canonical_width=77.8, has_glass=True, has_lock=True,
        preset_widths=(65.0, 73.5, 75.5, 77.8, 85.0),
        key_style=MatrixKeyStyle.LOCK,
    ),
    FamilyProfile(
        door_type=DoorType.HINGED_STORAGE, category=FamilyCategory.HINGED_STORAGE,
        canonical_width=43.5, frame_fixed=True, has_handle=False,
        preset_widths=(43.5,), preset_heights=LOW_HEIGHTS,
        key_style=MatrixKeyStyle.FIXED,
    ),
    FamilyProfile(
        door_type=DoorType.DOUBLE, category=FamilyCategory.DOUBLE,
        canonical_width=73.5, frame_fixed=True, has_handle=False,
        preset_widths=(73.5, 120.0), preset_heights=LOW_HEIGHTS,
        key_style=MatrixKeyStyle.WIDTH,
    ),

    _group(DoorType.SLIDING_SINGLE),
    _single_sliding(DoorType.SLIDING_INSET, 164.5, (145.0, 164.5), MatrixKeyStyle.LOCK),
    # 77.81 is the preset for the corner (wider panel) installation.
    _single_sliding(DoorType.SLIDING_OUTSET, 77.8, (77.8, 77.81), MatrixKeyStyle.CORNER),
    _single_sliding(DoorType.SLIDING_HIKIKOMI, 164.5, (145.0, 164.5), MatrixKeyStyle.FIXED),

    _group(DoorType.SLIDING),
    _panel(DoorType.SLIDING_2, FamilyCategory.MULTI_SLIDING, 164.5, (145.0, 164.5), MatrixKeyStyle.FIXED),
    _panel(DoorType.SLIDING_3, FamilyCategory.MULTI_SLIDING, 242.0, (242.0,), MatrixKeyStyle.FIXED),
    _panel(DoorType.SLIDING_4, FamilyCategory.MULTI_SLIDING, 324.4, (324.4,), MatrixKeyStyle.FIXED),
    _panel(DoorType.SLIDING_KATA_2, FamilyCategory.KATA_SLIDING, 243.1, (243.1,), MatrixKeyStyle.HANDED),
    _panel(DoorType.SLIDING_KATA_3, FamilyCategory.KATA_SLIDING, 321.5, (321.5,), MatrixKeyStyle.HANDED),

    _group(DoorType.FOLDING),
    _panel(DoorType.FOLDING_2, FamilyCategory.FOLDING, 73.5, (73.5,), MatrixKeyStyle.FIXED, has_handle=False),
    _panel(DoorType.FOLDING_4, FamilyCategory.FOLDING, 164.5, (120.0, 164.5), MatrixKeyStyle.FIXED, has_handle=False),
    _panel(DoorType.FOLDING_6, FamilyCategory.FOLDING, 245.1, (245.1,), MatrixKeyStyle.FIXED, has_handle=False),
    _panel(DoorType.FOLDING_8, FamilyCategory.FOLDING, 325.8, (325.8,), MatrixKeyStyle.FIXED, has_handle=False),

    _group(DoorType.STORAGE),
    _storage(DoorType.STORAGE_80, entry_height=90.0),
    _storage(DoorType.STORAGE_SEPARATE, entry_height=200.0),
    _storage(DoorType.STORAGE_200_L, entry_height=200.0, handed=True,
             forbidden=(80.0,), downgrade_to=DoorType.STORAGE_80),
    _storage(DoorType.STORAGE_200_U, entry_height=200.0, handed=True,
             forbidden=(80.0,), downgrade_to=DoorType.STORAGE_80),
    _storage(DoorType.STORAGE_200_FULL, entry_height=200.0, forbidden=(200.0,)),

    _group(DoorType.MATERIAL),
    _material(DoorType.MATERIAL_SKIRTING),
    _material(DoorType.MATERIAL_CORNER_SKIRTING),
    _material(DoorType.MATERIAL_WINDOW_SILL),
]}


def profile_for(door_type: DoorType | str) -> FamilyProfile:
    """Return the family profile for a door type id."""
    return FAMILIES[DoorType(door_type)]


def selectable_families() -> list[FamilyProfile]:
    """All leaf families a configuration can actually be priced as."""
    return [p for p in FAMILIES.values() if p.is_selectable]
