"""
Customer Domain Schemas
=======================

Schemas for Customer and its Address
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime
from .base import BaseSchema, TimestampMixin
from .validators import (
    validate_document, validate_state_registration, validate_phone_number, validate_zip_code,
    reject_null,
)


class AddressSchema(BaseSchema):
    """Postal address embedded in a customer"""
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=50)
    street_address: Optional[str] = Field(None, max_length=200)
    number: Optional[str] = Field(None, max_length=20)
    zip_code: Optional[str] = None
    neighborhood: Optional[str] = Field(None, max_length=100)

    @field_validator('zip_code')
    def validate_zip_code_field(cls, v):
        return validate_zip_code(v)


class CustomerCreateSchema(BaseSchema):
    """Schema for registering a customer"""
    name: str = Field(..., min_length=2, max_length=150)
    document: str
    contact_person: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    cellphone: Optional[str] = None
    business_phone: Optional[str] = None
    state_registration: str
    address: Optional[AddressSchema] = None

    @field_validator('document')
    def validate_document_field(cls, v):
        return validate_document(v)

    @field_validator('state_registration')
    def validate_state_registration_field(cls, v):
        return validate_state_registration(v)

    @field_validator('cellphone', 'business_phone')
    def validate_phone_field(cls, v):
        return validate_phone_number(v)


class CustomerUpdateSchema(CustomerCreateSchema):
    """Schema for updating a customer. Only fields that are sent are changed."""
    name: Optional[str] = Field(None, min_length=2, max_length=150)
    document: Optional[str] = None
    state_registration: Optional[str] = None

    @field_validator('document')
    def validate_document_field(cls, v):
        return validate_document(v) if v is not None else v

    @field_validator('name', 'document', 'state_registration')
    def required_fields_not_null(cls, v):
        return reject_null(v)


class CustomerSchema(BaseSchema, TimestampMixin):
    """Full customer record, address included"""
    id: str
    name: str
    document: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    cellphone: Optional[str] = None
    business_phone: Optional[str] = None
    state_registration: Optional[str] = None
    disabled_at: Optional[datetime] = None
    address: Optional[AddressSchema] = None


class CustomerListItemSchema(BaseSchema):
    id: str
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    cellphone: Optional[str] = None
    business_phone: Optional[str] = None


class CustomerSummarySchema(BaseModel):
    """Balance of one in-progress consignment of a customer"""
    customer_id: str
    customer: str
    consigned_id: str
    total_types: int
    total_balance: int
