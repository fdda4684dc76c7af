"""FastAPI route definitions."""

from __future__ import annotations
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from configurator.config import get_settings
from configurator.errors import ConfiguratorError
from configurator.models import (
    Catalog, DoorSnapshot, FieldChange, MatrixValidation, Quotation,
)
from configurator.services.configurator_service import ConfiguratorService
from configurator.api.schemas import (
    CheckRequest, CheckResponse, DocumentRequest, NormalizeRequest,
    PriceRequest, PriceResponse, RuleInfo,
)

router = APIRouter()


@lru_cache(maxsize=1)
def get_service() -> ConfiguratorService:
    """Shared service instance over the process-wide settings."""
    return ConfiguratorService(get_settings())


@router.post("/price", response_model=PriceResponse)
async def price(
    request: PriceRequest,
    service: ConfiguratorService = Depends(get_service),
) -> PriceResponse:
    """Total price of a configuration."""
    return PriceResponse(
        price=service.price(request.config),
        matrix_key=service.matrix_key(request.config),
    )


@router.post("/normalize", response_model=FieldChange)
async def normalize(
    request: NormalizeRequest,
    service: ConfiguratorService = Depends(get_service),
) -> FieldChange:
    """Apply one field change and return the corrected configuration."""
    try:
        return service.normalize(request.config, request.field, request.value)
    except ConfiguratorError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.errors(include_url=False)) from exc


@router.post("/check", response_model=CheckResponse)
async def check(
    request: CheckRequest,
    service: ConfiguratorService = Depends(get_service),
) -> CheckResponse:
    """Deviation messages to confirm before exporting the list."""
    messages = service.check(request.doors, request.project_info, request.config)
    return CheckResponse(messages=messages, door_count=len(request.doors))


@router.post("/snapshot", response_model=list[DoorSnapshot])
async def snapshot(
    request: DocumentRequest,
    service: ConfiguratorService = Depends(get_service),
) -> list[DoorSnapshot]:
    """Resolved door snapshots in document order."""
    return service.snapshots(request.doors)


@router.post("/quotation", response_model=Quotation)
async def quotation(
    request: DocumentRequest,
    service: ConfiguratorService = Depends(get_service),
) -> Quotation:
    return service.quotation(request.doors, request.project_info)


@router.get("/matrix/keys", response_model=list[str])
async def matrix_keys(service: ConfiguratorService = Depends(get_service)) -> list[str]:
    """Every matrix key a configuration can resolve to."""
    return service.matrix_keys()


@router.get("/matrix/validation", response_model=MatrixValidation)
async def matrix_validation(
    service: ConfiguratorService = Depends(get_service),
) -> MatrixValidation:
    return service.validate_matrix()


@router.get("/catalog", response_model=Catalog)
async def catalog(service: ConfiguratorService = Depends(get_service)) -> Catalog:
    return service.settings.catalog


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules(service: ConfiguratorService = Depends(get_service)) -> list[RuleInfo]:
    """List all registered deviation rules."""
    return [RuleInfo(**r) for r in service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
