"""
Winestock Models Package
========================

Database models for the wine-consignment backend, organized by domain.

Domain Structure:
- Core: Base model and declarative base
- Customer: Customer and its postal Address
- User: User, Role and the UserRole association
- Wine: Wine, Consigned and WineOnConsigned line items
"""

# ==================== CORE IMPORTS ====================

from .base import Base, BaseModel

# ==================== CUSTOMER DOMAIN ====================

from .customer import (
    Customer,
    Address,
)

# ==================== USER DOMAIN ====================

from .user import (
    User,
    Role,
    UserRole,
)

# ==================== WINE & CONSIGNMENT DOMAIN ====================

from .wine import (
    ConsignedStatus,
    Wine,
    Consigned,
    WineOnConsigned,
)

__all__ = [
    'Base', 'BaseModel',
    'Customer', 'Address',
    'User', 'Role', 'UserRole',
    'ConsignedStatus', 'Wine', 'Consigned', 'WineOnConsigned',
]
