"""Document support — everything quotations and detail drawings read.

Renderers get fully resolved snapshots (names, prices, URLs, dimensions)
and never look anything up themselves.
"""

from __future__ import annotations
import ast
import math
import operator
from typing import Callable

from configurator.models import (
    DoorConfiguration, DoorDimensions, DoorSnapshot, DoorType, EngineSettings,
    FamilyCategory, FrameType, HingeSide, ProjectInfo, Quotation, SavedDoor,
    DimensionFormula, find_name, find_price_entry,
)
from configurator.core.analyzer import label_doors, sort_for_documents
from configurator.core.matrix import build_matrix_key


NO_VALUE = "-"


# ---------------------------------------------------------------------------
# Quotation
# ---------------------------------------------------------------------------

def shipping_cost_for(location: str, rates: dict[str, int]) -> int:
    """Shipping rate for a construction location; 0 when unknown."""
    return rates.get(location, 0)


def build_quotation(
    doors: list[SavedDoor],
    project_info: ProjectInfo,
    settings: EngineSettings,
) -> Quotation:
    """
    Quotation totals in document order.

    Shipping comes from the project info; consumption tax is rounded down
    to the yen.
    """
    snapshots = build_snapshots(doors, settings)
    doors_total = sum(door.price for door in doors)
    shipping = project_info.shipping_cost or 0
    subtotal = doors_total + shipping
    tax = math.floor(subtotal * settings.tax_rate)
    return Quotation(
        doors=snapshots,
        doors_total=doors_total,
        shipping_cost=shipping,
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
    )


# ---------------------------------------------------------------------------
# Detail drawings
# ---------------------------------------------------------------------------

def resolve_detail_drawing_url(config: DoorConfiguration, settings: EngineSettings) -> str | None:
    """Matrix row URL first, then the family's (width-specific for storage) URL."""
    row = settings.matrix.get(build_matrix_key(config))
    if row is not None and row.url:
        return row.url

    entry = find_price_entry(settings.catalog.door_types, config.door_type.value)
    if entry is None:
        return None
    profile = config.profile
    if profile.is_storage:
        handed = profile.handed and config.hinge_side == HingeSide.RIGHT
        return entry.width_drawing_url(config.width, handed=handed)
    return entry.detail_drawing_url or None


_DIMENSION_PREFIX: dict[DoorType, str] = {
    DoorType.HINGED: "hinged",
    DoorType.HINGED_STORAGE: "hinged_storage",
    DoorType.DOUBLE: "double",
    DoorType.SLIDING_2: "sliding_2",
    DoorType.SLIDING_3: "sliding_3",
    DoorType.SLIDING_4: "sliding_4",
    DoorType.SLIDING_KATA_2: "sliding_kata_2",
    DoorType.SLIDING_KATA_3: "sliding_kata_3",
    DoorType.FOLDING_2: "folding_2",
    DoorType.FOLDING_4: "folding_4",
    DoorType.FOLDING_6: "folding_6",
    DoorType.FOLDING_8: "folding_8",
}


def dimension_key(config: DoorConfiguration) -> str:
    """Row of the dimension table used for a configuration ("" if none)."""
    prefix = _DIMENSION_PREFIX.get(config.door_type)
    if prefix is not None:
        frame = "3way" if config.frame_type == FrameType.THREE_WAY else "2way"
        return f"{prefix}_{frame}"
    if config.door_type == DoorType.SLIDING_OUTSET:
        return "sliding_outset_lock" if config.has_display_lock else "sliding_outset_normal"
    if config.door_type in (DoorType.SLIDING_INSET, DoorType.SLIDING_HIKIKOMI):
        if config.height <= 200:
            return "sliding_inset_h2000_wall"
        return "sliding_inset_h2200_ceiling"
    return ""


_OPERATORS: dict[type, Callable] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
}


def _evaluate(node: ast.AST, names: dict[str, float]) -> float:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body, names)
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)) \
            and not isinstance(node.value, bool):
        return node.value
    if isinstance(node, ast.Name) and node.id in names:
        return names[node.id]
    if isinstance(node, ast.BinOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](
            _evaluate(node.left, names), _evaluate(node.right, names),
        )
    if isinstance(node, ast.UnaryOp) and type(node.op) in _OPERATORS:
        return _OPERATORS[type(node.op)](_evaluate(node.operand, names))
    raise ValueError(f"Unsupported expression: {ast.dump(node)}")


def _format_mm(value: float) -> str:
    # Half-up to one decimal; integral results print without ".0"
    rounded = math.floor(value * 10 + 0.5) / 10
    if rounded.is_integer():
        return str(int(rounded))
    return str(rounded)


def evaluate_formula(formula: str, width_mm: float, height_mm: float) -> str:
    """
    Evaluate a dimension formula such as "W-48" or "(W*2) +16".

    Only numbers, W, H, + - * / and parentheses are accepted; anything else
    (including an empty formula) yields "-".
    """
    if not formula or not formula.strip():
        return NO_VALUE
    try:
        tree = ast.parse(formula.strip().upper(), mode="eval")
        value = _evaluate(tree, {"W": width_mm, "H": height_mm})
    except (SyntaxError, ValueError, ZeroDivisionError):
        return NO_VALUE
    if not math.isfinite(value):
        return NO_VALUE
    return _format_mm(value)


def compute_dimensions(
    config: DoorConfiguration,
    dimension_settings: dict[str, DimensionFormula],
) -> DoorDimensions | None:
    """Detail-drawing dimensions in mm, None when the family has no row."""
    if config.profile.is_material:
        return None
    formula = dimension_settings.get(dimension_key(config))
    if formula is None:
        return None

    width_mm = config.width * 10
    height_mm = config.height * 10
    return DoorDimensions(**{
        field: evaluate_formula(getattr(formula, field), width_mm, height_mm)
        for field in DimensionFormula.model_fields
    })


_POCKET_FAMILIES = (DoorType.SLIDING_INSET, DoorType.SLIDING_OUTSET, DoorType.SLIDING_HIKIKOMI)
_HINGE_FAMILIES = (DoorType.HINGED, DoorType.HINGED_STORAGE, DoorType.FOLDING_2)


def hinge_side_label(config: DoorConfiguration) -> str | None:
    """Wording of the handedness for documents, None when not applicable."""
    right = config.hinge_side == HingeSide.RIGHT
    if config.door_type in _POCKET_FAMILIES:
        return "Right pocket" if right else "Left pocket"
    if config.profile.category == FamilyCategory.KATA_SLIDING:
        return "Right hand" if right else "Left hand"
    if config.profile.is_storage and config.profile.handed:
        return "R type" if right else "L type"
    if config.door_type in _HINGE_FAMILIES:
        # The hinge is on the opposite side from the opening.
        return "Left-hung" if right else "Right-hung"
    return None


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

def build_snapshot(door: SavedDoor, label: str, settings: EngineSettings) -> DoorSnapshot:
    """Resolve one saved door into everything a document needs."""
    config = door.config
    catalog = settings.catalog
    profile = config.profile
    fitted = not profile.is_storage and not profile.is_material

    return DoorSnapshot(
        id=door.id,
        label=label,
        room_name=door.room_name,
        config=config,
        price=door.price,
        door_type_name=find_name(catalog.door_types, config.door_type.value),
        color_name=find_name(catalog.colors, config.color),
        frame_type_name=find_name(catalog.frame_types, config.frame_type.value) if fitted else None,
        handle_name=find_name(catalog.handles, config.handle) if profile.has_handle else None,
        glass_name=find_name(catalog.glass_styles, config.glass_style),
        lock_name=find_name(catalog.locks, config.lock),
        hinge_side_label=hinge_side_label(config),
        detail_drawing_url=resolve_detail_drawing_url(config, settings),
        dimensions=compute_dimensions(config, settings.dimension_settings),
    )


def build_snapshots(doors: list[SavedDoor], settings: EngineSettings) -> list[DoorSnapshot]:
    """Snapshots in document order, labelled as in the check report."""
    labels = label_doors(doors)
    return [
        build_snapshot(door, labels[door.id], settings)
        for door in sort_for_documents(doors)
    ]
