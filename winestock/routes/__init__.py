"""
API Routes
==========

Routers for customers, users and wines
"""

from .customer_routes import customer_router
from .user_routes import user_router
from .wine_routes import wine_router

__all__ = ['customer_router', 'user_router', 'wine_router']
