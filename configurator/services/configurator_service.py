"""High-level configurator service — facade for the API layer."""

from __future__ import annotations
from typing import Any

from configurator.models import (
    CheckConfig, DoorConfiguration, DoorSnapshot, EngineSettings, FieldChange,
    MatrixValidation, ProjectInfo, Quotation, SavedDoor,
)
from configurator.core.checker import DeviationChecker
from configurator.core.documents import build_quotation, build_snapshots
from configurator.core.matrix import build_matrix_key, enumerate_matrix_keys, validate_matrix
from configurator.core.normalizer import ConfigurationNormalizer
from configurator.core.pricing import compute_total_price
from configurator.core.registry import RuleRegistry, create_default_registry


class ConfiguratorService:
    """Stateless operations over explicit inputs, bound to one settings snapshot."""

    def __init__(self, settings: EngineSettings, registry: RuleRegistry | None = None) -> None:
        self.settings = settings
        self.registry = registry or create_default_registry()
        self.checker = DeviationChecker(self.registry)
        self.normalizer = ConfigurationNormalizer()

    def price(self, config: DoorConfiguration) -> int:
        return compute_total_price(config, self.settings.catalog, self.settings.matrix)

    def matrix_key(self, config: DoorConfiguration) -> str:
        return build_matrix_key(config)

    def normalize(self, config: DoorConfiguration, field: str, value: Any) -> FieldChange:
        return self.normalizer.apply(config, field, value)

    def check(
        self,
        doors: list[SavedDoor],
        project_info: ProjectInfo,
        config: CheckConfig | None = None,
    ) -> list[str]:
        return self.checker.check(doors, project_info, self.settings.catalog, config)

    def snapshots(self, doors: list[SavedDoor]) -> list[DoorSnapshot]:
        return build_snapshots(doors, self.settings)

    def quotation(self, doors: list[SavedDoor], project_info: ProjectInfo) -> Quotation:
        return build_quotation(doors, project_info, self.settings)

    def matrix_keys(self) -> list[str]:
        return enumerate_matrix_keys()

    def validate_matrix(self) -> MatrixValidation:
        return validate_matrix(self.settings.matrix)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
