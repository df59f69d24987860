"""
User Domain Schemas
===================

Schemas for users, their roles and associated customer
"""

from pydantic import EmailStr, Field, field_validator
from typing import Optional, List
from datetime import datetime
from .base import BaseSchema
from .validators import reject_null


class UserCreateSchema(BaseSchema):
    """Schema for registering a user. ``password`` is plaintext and hashed by the service."""
    email: EmailStr
    name: str = Field(..., min_length=2, max_length=100)
    password: str = Field(..., min_length=6, max_length=72)
    associated_customer_id: Optional[str] = None


class UserUpdateSchema(BaseSchema):
    """Partial update; omitting ``password`` keeps the stored hash."""
    email: Optional[EmailStr] = None
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    password: Optional[str] = Field(None, min_length=6, max_length=72)
    associated_customer_id: Optional[str] = None

    @field_validator('email', 'name')
    def required_fields_not_null(cls, v):
        return reject_null(v)


class RoleSchema(BaseSchema):
    id: str
    name: str


class UserCustomerSchema(BaseSchema):
    id: str
    name: str
    consigned: List[str] = []


class UserSchema(BaseSchema):
    """User detail with flattened roles and customer"""
    id: str
    name: str
    email: str
    roles: List[RoleSchema] = []
    customer: Optional[UserCustomerSchema] = None


class UserListCustomerSchema(BaseSchema):
    id: str
    name: str


class UserListItemSchema(BaseSchema):
    id: str
    name: str
    email: str
    created_at: Optional[datetime] = None
    roles: List[RoleSchema] = []
    customer: Optional[UserListCustomerSchema] = None
