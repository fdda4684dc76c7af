"""Tests for the pre-export deviation check."""

from configurator.core.analyzer import label_doors, sort_for_documents
from configurator.core.checker import DeviationChecker, check_deviations, is_custom_size
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.models import CheckConfig, CheckContext, FrameType, ProjectInfo
from configurator.rules.deviation.appearance import ColorDeviationRule, HandleDeviationRule


def test_clean_list_has_no_messages(make_door, project, catalog):
    doors = [
        make_door(room_name="Bedroom", door_type="hinged", width=77.8, height=220),
        make_door(room_name="Hall", door_type="storage-80", width=160, height=90),
    ]
    assert check_deviations(doors, project, catalog) == []


def test_every_deviation_of_one_door_in_rule_order(make_door, project, catalog):
    door = make_door(
        room_name="Toilet", door_type="hinged", width=90, height=210,
        color="co", handle="black", glass_style="clear",
        frame_type=FrameType.TWO_WAY,
    )
    assert check_deviations([door], project, catalog) == [
        "WD1 (Toilet): door color is specified as (Comfort oak)",
        "WD1 (Toilet): handle is specified as (Matte black)",
        "WD1 (Toilet): door is specified at a custom size",
        "[WD1 (Toilet): no display lock selected]",
        "WD1 (Toilet): door (H210) does not have a three-way frame",
        "[Glass doors are specified at (1) locations]",
    ]


def test_counts_are_summarised_after_per_door_messages(make_door, project, catalog):
    doors = [
        make_door(room_name="Washroom", door_type="hinged", width=77.8, lock="display-lock"),
        make_door(room_name="Study", door_type="sliding-inset", width=164.5,
                  lock="display-lock", glass_style="frosted"),
    ]
    assert check_deviations(doors, project, catalog) == [
        "[Glass doors are specified at (1) locations]",
        "[Display locks are specified at (2) locations]",
    ]


def test_duplicate_storage_units(make_door, project, catalog):
    doors = [
        make_door(room_name="Hall", door_type="storage-80", width=160, height=90),
        make_door(room_name="Hall", door_type="storage-80", width=160, height=90),
        make_door(room_name="Hall", door_type="storage-80", width=120, height=90),
    ]
    assert check_deviations(doors, project, catalog) == [
        "[Duplicate check] Floor type (H90) appears 2 times in the list",
    ]


def test_storage_and_materials_skip_door_rules(make_door, project, catalog):
    doors = [
        make_door(door_type="storage-separate", width=160, height=200, color="dg"),
        make_door(door_type="material-skirting", color="co", count=4),
    ]
    assert check_deviations(doors, project, catalog) == []


def test_missing_project_defaults_always_flag(make_door, catalog):
    project = ProjectInfo(default_color=None, default_handle=None)
    door = make_door(room_name="Bedroom", door_type="hinged", width=77.8)
    messages = check_deviations([door], project, catalog)
    assert messages[:2] == [
        "WD1 (Bedroom): door color is specified as (Pure white)",
        "WD1 (Bedroom): handle is specified as (Satin nickel)",
    ]


def test_disabled_rules_do_not_run(make_door, project, catalog):
    door = make_door(room_name="Bedroom", door_type="hinged", width=77.8, color="co")
    checker = DeviationChecker(create_default_registry())
    config = CheckConfig(disabled_rules=["door.color"])
    assert checker.check([door], project, catalog, config) == []


def test_wet_room_keywords_are_configurable(make_door, project, catalog):
    door = make_door(room_name="Sauna", door_type="hinged", width=77.8)
    checker = DeviationChecker()
    config = CheckConfig(wet_room_keywords=["sauna"])
    assert checker.check([door], project, catalog, config) == [
        "[WD1 (Sauna): no display lock selected]",
    ]


def test_labels_are_numbered_per_partition(make_door):
    doors = [
        make_door(room_name="Hall", door_type="storage-80", width=160),
        make_door(room_name="", door_type="hinged"),
        make_door(room_name="LDK", door_type="material-skirting"),
        make_door(room_name="Bedroom", door_type="double", width=73.5),
        make_door(room_name="Closet", door_type="storage-200-u", width=160),
    ]
    assert list(label_doors(doors).values()) == [
        "WD1 (Unnamed)", "WD2 (Bedroom)", "SB1 (Hall)", "SB2 (Closet)", "Material (LDK)",
    ]
    assert [d.id for d in sort_for_documents(doors)] == ["wd-2", "wd-4", "wd-1", "wd-5", "wd-3"]


def test_is_custom_size(make_door):
    assert not is_custom_size(make_door(door_type="hinged", width=77.8, height=240))
    assert is_custom_size(make_door(door_type="hinged", width=77.8, height=230))
    assert is_custom_size(make_door(door_type="hinged", width=90, height=220))
    assert not is_custom_size(make_door(door_type="double", width=120, height=90))
    assert not is_custom_size(make_door(door_type="hinged-storage", width=43.5, height=120))
    assert is_custom_size(make_door(door_type="sliding-inset", width=164.5, height=120))
    assert not is_custom_size(make_door(door_type="storage-80", width=80, height=123))
    assert is_custom_size(make_door(door_type="storage-80", width=100, height=90))
    assert not is_custom_size(make_door(door_type="material-skirting", width=3, height=1))


def test_registry_orders_rules_by_priority(project, catalog):
    registry = create_default_registry()
    context = CheckContext(doors=[], project=project, catalog=catalog)
    priorities = [rule.priority for rule in registry.get_applicable_rules(context)]
    assert priorities == sorted(priorities)
    assert len(priorities) == len(registry.list_rules()) == 8


def test_registry_keeps_only_enabled_rules(project, catalog):
    registry = RuleRegistry()
    registry.register(HandleDeviationRule())
    registry.register(ColorDeviationRule())
    context = CheckContext(doors=[], project=project, catalog=catalog,
                           config=CheckConfig(enabled_rules=["door.handle", "door.color"]))
    assert [r.get_id() for r in registry.get_applicable_rules(context)] == [
        "door.color", "door.handle",
    ]

    context.config = CheckConfig(enabled_rules=["door.handle"])
    assert [r.get_id() for r in registry.get_applicable_rules(context)] == ["door.handle"]


def test_registering_same_id_replaces_rule():
    registry = RuleRegistry()
    registry.register(ColorDeviationRule())
    replacement = ColorDeviationRule()
    registry.register(replacement)
    assert registry.list_rules() == [replacement]
