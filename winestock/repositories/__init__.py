"""
Winestock Repositories
======================

Persistence access layer. Each domain service depends on exactly one of these.
"""

from .base import BaseRepository, transactional
from .customer_repository import CustomerRepository
from .user_repository import UserRepository
from .wine_repository import WineRepository

__all__ = [
    'BaseRepository', 'transactional',
    'CustomerRepository', 'UserRepository', 'WineRepository',
]
