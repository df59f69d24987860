from fastapi import APIRouter, Depends, status, Query
from typing import Any, Dict, Optional

from ..dependencies import get_service_registry
from ..responses import APIResponse
from ..services import ServiceRegistry
from ..schemas import (
    CustomerSchema, CustomerCreateSchema, CustomerUpdateSchema,
    CustomerListItemSchema, CustomerSummarySchema,
)

customer_router = APIRouter()

@customer_router.post(
    "",
    response_model=Dict[str, Any],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer"
)
async def create_customer(
    customer_data: CustomerCreateSchema,
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Register a customer. Fails with 409 when document, email or state
    registration already belong to an active customer.
    """
    result = await services.customer_service.create_customer(customer_data)
    return APIResponse.success(data=result, message="Customer created successfully")

@customer_router.get(
    "",
    response_model=Dict[str, Any],
    summary="List active customers"
)
async def list_customers(
    search: Optional[str] = Query(None, description="Case-insensitive match on name"),
    services: ServiceRegistry = Depends(get_service_registry)
):
    customers = await services.customer_service.list_customers(search)
    return APIResponse.success(data=[CustomerListItemSchema.model_validate(c).model_dump() for c in customers])

@customer_router.get(
    "/summary",
    response_model=Dict[str, Any],
    summary="Consignment balance summary per customer"
)
async def list_customers_summary(
    services: ServiceRegistry = Depends(get_service_registry)
):
    summary = await services.customer_service.list_customers_summary()
    return APIResponse.success(data=[CustomerSummarySchema.model_validate(row).model_dump() for row in summary])

@customer_router.get(
    "/{customer_id}",
    response_model=Dict[str, Any],
    summary="Get a single customer by ID"
)
async def get_customer(
    customer_id: str,
    services: ServiceRegistry = Depends(get_service_registry)
):
    customer = await services.customer_service.get_customer_details(customer_id)
    return APIResponse.success(data=CustomerSchema.model_validate(customer).model_dump())

@customer_router.put(
    "/{customer_id}",
    response_model=Dict[str, Any],
    summary="Update a customer"
)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdateSchema,
    services: ServiceRegistry = Depends(get_service_registry)
):
    result = await services.customer_service.update_customer(customer_data, customer_id)
    return APIResponse.success(data=result, message="Customer updated successfully")

@customer_router.delete(
    "/{customer_id}",
    response_model=Dict[str, Any],
    summary="Disable a customer"
)
async def delete_customer(
    customer_id: str,
    services: ServiceRegistry = Depends(get_service_registry)
):
    """
    Soft delete: the customer is disabled and disappears from listings.
    """
    await services.customer_service.delete_customer(customer_id)
    return APIResponse.success(message="Customer disabled successfully")
