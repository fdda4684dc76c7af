"""Deviation checker — runs the policy rules over a saved door list."""

from __future__ import annotations
import logging

from configurator.models import (
    Catalog, CheckConfig, CheckContext, ProjectInfo, SavedDoor,
)
from configurator.core.registry import RuleRegistry, create_default_registry
from configurator.core.analyzer import DoorListAnalyzer


logger = logging.getLogger(__name__)


class DeviationChecker:
    """
    Stateless deviation checker.

    Takes a saved list + project defaults, labels the doors, runs every
    enabled rule and returns human-readable messages. Gating export on the
    messages is the caller's business.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = DoorListAnalyzer()

    def check(
        self,
        doors: list[SavedDoor],
        project: ProjectInfo,
        catalog: Catalog,
        config: CheckConfig | None = None,
    ) -> list[str]:
        if config is None:
            config = CheckConfig()

        context = CheckContext(
            doors=doors,
            project=project,
            catalog=catalog,
            config=config,
        )

        # Analysis phase: labels
        self.analyzer.analyze(context)

        # Per-door pass, rules in priority order
        rules = self.registry.get_applicable_rules(context)
        for door in context.doors:
            for rule in rules:
                if rule.applies(door, context):
                    context.add_messages(rule.inspect(door, context))

        # List-level summaries
        for rule in rules:
            context.add_messages(rule.summarize(context))

        logger.debug("Deviation check over %d doors: %d messages", len(doors), len(context.messages))
        return context.messages


_default_checker: DeviationChecker | None = None


def check_deviations(
    saved_doors: list[SavedDoor],
    project_info: ProjectInfo,
    catalog: Catalog,
) -> list[str]:
    """Deviation messages for a saved list, using the standard rules."""
    global _default_checker
    if _default_checker is None:
        _default_checker = DeviationChecker()
    return _default_checker.check(saved_doors, project_info, catalog)


def is_custom_size(door: SavedDoor) -> bool:
    """True if the door's width or height is outside its family's presets."""
    return door.profile.is_custom_size(door.config.width, door.config.height)
