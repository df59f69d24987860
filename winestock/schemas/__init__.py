"""
Schemas Package
===============

Pydantic schemas for validation and serialization
"""

from .base import (
    BaseSchema,
    TimestampMixin,
)

# ==================== CUSTOMER DOMAIN ====================
from .customer import (
    AddressSchema,
    CustomerSchema, CustomerCreateSchema, CustomerUpdateSchema,
    CustomerListItemSchema, CustomerSummarySchema,
)

# ==================== USER DOMAIN ====================
from .user import (
    RoleSchema,
    UserSchema, UserCreateSchema, UserUpdateSchema,
    UserCustomerSchema, UserListItemSchema, UserListCustomerSchema,
)

# ==================== WINE DOMAIN ====================
from .wine import (
    WineSchema, WineCreateSchema, WineUpdateSchema,
    WineDetailsSchema, WineOnConsignedSchema,
    WineMetricsSchema,
)

__all__ = [
    'BaseSchema', 'TimestampMixin',
    'AddressSchema', 'CustomerSchema', 'CustomerCreateSchema', 'CustomerUpdateSchema',
    'CustomerListItemSchema', 'CustomerSummarySchema',
    'RoleSchema', 'UserSchema', 'UserCreateSchema', 'UserUpdateSchema',
    'UserCustomerSchema', 'UserListItemSchema', 'UserListCustomerSchema',
    'WineSchema', 'WineCreateSchema', 'WineUpdateSchema', 'WineDetailsSchema',
    'WineOnConsignedSchema', 'WineMetricsSchema',
]
