from .family import (
    DoorType, FamilyCategory, FamilyProfile, ListPartition, MatrixKeyStyle,
    FAMILIES, profile_for, selectable_families,
)
from .catalog import (
    OptionEntry, ColorOption, MatrixPriceEntry, PriceMatrix, Catalog,
    UNKNOWN_NAME, find_name, find_price_entry, price_for_height, positive, amount,
)
from .door import (
    DoorConfiguration, SavedDoor, FrameType, HingeSide,
    DEFAULT_COLOR, DEFAULT_HANDLE, NO_GLASS, NO_LOCK, DISPLAY_LOCK,
)
from .project import ProjectInfo, ProjectBundle, BUNDLE_VERSION
from .settings import EngineSettings, DimensionFormula, CheckConfig
from .results import (
    FieldChange, DoorDimensions, DoorSnapshot, Quotation, MatrixValidation, ExportGate,
)
from .context import CheckContext

__all__ = [
    "DoorType", "FamilyCategory", "FamilyProfile", "ListPartition", "MatrixKeyStyle",
    "FAMILIES", "profile_for", "selectable_families",
    "OptionEntry", "ColorOption", "MatrixPriceEntry", "PriceMatrix", "Catalog",
    "UNKNOWN_NAME", "find_name", "find_price_entry", "price_for_height", "positive", "amount",
    "DoorConfiguration", "SavedDoor", "FrameType", "HingeSide",
    "DEFAULT_COLOR", "DEFAULT_HANDLE", "NO_GLASS", "NO_LOCK", "DISPLAY_LOCK",
    "ProjectInfo", "ProjectBundle", "BUNDLE_VERSION",
    "EngineSettings", "DimensionFormula", "CheckConfig",
    "FieldChange", "DoorDimensions", "DoorSnapshot", "Quotation", "MatrixValidation", "ExportGate",
    "CheckContext",
]
