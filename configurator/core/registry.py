"""Rule registry — stores the deviation rules and selects the ones to run."""

from __future__ import annotations

from configurator.models.context import CheckContext
from configurator.rules.base import DeviationRule


class RuleRegistry:
    """
    Holds every deviation rule known to the checker.

    For a check it hands back the rules the check configuration enables,
    in priority order. Registering a rule with an existing id replaces it.
    """

    def __init__(self) -> None:
        self._rules: dict[str, DeviationRule] = {}

    def register(self, rule: DeviationRule) -> None:
        self._rules[rule.get_id()] = rule

    def list_rules(self) -> list[DeviationRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, context: CheckContext) -> list[DeviationRule]:
        """Enabled rules for this check, lowest priority number first."""
        config = context.config
        candidates = list(self._rules.values())

        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        # sort is stable: equal priorities keep registration order
        return sorted(candidates, key=lambda r: r.priority)


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard deviation rules."""
    from configurator.rules.deviation.appearance import (
        ColorDeviationRule, HandleDeviationRule, CustomSizeRule,
    )
    from configurator.rules.deviation.hardware import (
        GlassCountRule, DisplayLockCountRule, WetRoomLockRule,
    )
    from configurator.rules.deviation.frame import LowHeightFrameRule
    from configurator.rules.deviation.duplicates import DuplicateItemRule

    registry = RuleRegistry()
    for rule in (
        ColorDeviationRule(), HandleDeviationRule(), CustomSizeRule(),
        GlassCountRule(), DisplayLockCountRule(), WetRoomLockRule(),
        LowHeightFrameRule(), DuplicateItemRule(),
    ):
        registry.register(rule)
    return registry
