"""
Wine Domain Schemas
===================

Schemas for wines, consignment line items and metrics.
Prices here are always in major units (reais); the service converts to cents.
"""

from pydantic import BaseModel, Field, PlainSerializer, field_validator
from typing import Optional, List
from typing_extensions import Annotated
from decimal import Decimal
from datetime import datetime
from .base import BaseSchema, TimestampMixin
from .validators import validate_harvest, validate_non_negative_number, reject_null

# Reais; JSON carries it as a number, never a string
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used='json')]


class WineCreateSchema(BaseSchema):
    name: str = Field(..., min_length=1, max_length=150)
    harvest: Optional[int] = None
    type: str = Field(..., max_length=50)
    price: Decimal
    producer: str = Field(..., max_length=100)
    country: str = Field(..., max_length=60)
    size: str = Field(..., max_length=20)

    @field_validator('harvest')
    def validate_harvest_field(cls, v):
        return validate_harvest(v)

    @field_validator('price')
    def price_non_negative(cls, v):
        return validate_non_negative_number(v)


class WineUpdateSchema(WineCreateSchema):
    """Partial update; only fields that are sent are changed"""
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    type: Optional[str] = Field(None, max_length=50)
    price: Optional[Decimal] = None
    producer: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=60)
    size: Optional[str] = Field(None, max_length=20)

    @field_validator('name', 'type', 'price', 'producer', 'country', 'size')
    def required_fields_not_null(cls, v):
        return reject_null(v)


class WineSchema(BaseSchema, TimestampMixin):
    id: str
    name: str
    harvest: Optional[int] = None
    type: str
    price: Price
    producer: str
    country: str
    size: str


class ConsignedCustomerSchema(BaseModel):
    id: str
    name: str


class ConsignedRefSchema(BaseModel):
    id: str
    customer: ConsignedCustomerSchema


class WineOnConsignedSchema(BaseModel):
    wine_id: str
    consigned_id: str
    balance: int
    consigned: ConsignedRefSchema


class WineDetailsSchema(WineSchema):
    wine_on_consigned: List[WineOnConsignedSchema] = []


class WineMetricsSchema(BaseModel):
    wine_name: str
    wine_id: str
    updated_at: Optional[datetime] = None
    customer_name: str
    total: int
    total_balance: int

