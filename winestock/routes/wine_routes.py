from fastapi import APIRouter, Depends, status, Query
from typing import Any, Dict, Optional

from ..dependencies import get_service_registry
from ..responses import APIResponse
from ..services import ServiceRegistry
from ..schemas import (
    WineSchema, WineCreateSchema, WineUpdateSchema, WineDetailsSchema, WineMetricsSchema,
)

wine_router = APIRouter()

@wine_router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new wine"
)
async def create_wine(
    wine_data: WineCreateSchema,
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Create a wine. ``price`` is sent in reais (e.g. 59.90).
    """
    result = await services.wine_service.create_wine(wine_data)
    return APIResponse.success(data=result, message="Wine created successfully")

@wine_router.get(
    "",
    response_model=Dict[str, Any],
    summary="List the latest wines"
)
async def list_wines(
    search: Optional[str] = Query(None),
    services: ServiceRegistry = Depends(get_service_registry)
):
    result = await services.wine_service.list_wines(search)
    wines = [WineSchema.model_validate(wine).model_dump(mode='json') for wine in result['wines']]
    return APIResponse.success(data={'wines': wines})

@wine_router.get(
    "/metrics",
    response_model=Dict[str, Any],
    summary="Balance on consignment per wine and customer"
)
async def list_wine_metrics(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    search: Optional[str] = Query(None, description="Match on wine or customer name"),
    services: ServiceRegistry = Depends(get_service_registry)
):
    result = await services.wine_service.list_wine_metrics(page=page, page_size=page_size, search_term=search)
    items = [WineMetricsSchema.model_validate(row).model_dump(mode='json') for row in result['items']]
    total = items[0]['total'] if items else 0
    return APIResponse.paginated(data=items, total=total, page=page, per_page=page_size)

@wine_router.get(
    "/{wine_id}",
    response_model=Dict[str, Any],
    summary="Get a single wine by ID"
)
async def get_wine(
    wine_id: str,
    services: ServiceRegistry = Depends(get_service_registry)
):
    wine = await services.wine_service.get_wine(wine_id)
    return APIResponse.success(data=WineSchema.model_validate(wine).model_dump(mode='json'))

@wine_router.get(
    "/{wine_id}/details",
    response_model=Dict[str, Any],
    summary="Wine with its balances on consignment"
)
async def get_wine_details(
    wine_id: str,
    services: ServiceRegistry = Depends(get_service_registry)
):
    wine = await services.wine_service.get_wine_details(wine_id)
    return APIResponse.success(data=WineDetailsSchema.model_validate(wine).model_dump(mode='json'))

@wine_router.put(
    "/{wine_id}",
    response_model=Dict[str, Any],
    summary="Update a wine"
)
async def update_wine(
    wine_id: str,
    wine_data: WineUpdateSchema,
    services: ServiceRegistry = Depends(get_service_registry)
):
    result = await services.wine_service.update_wine(wine_id, wine_data)
    return APIResponse.success(data=result, message="Wine updated successfully")

@wine_router.delete(
    "/{wine_id}",
    response_model=Dict[str, Any],
    summary="Delete a wine"
)
async def delete_wine(
    wine_id: str,
    services: ServiceRegistry = Depends(get_service_registry)
):
    await services.wine_service.delete_wine(wine_id)
    return APIResponse.success(message="Wine deleted successfully")
