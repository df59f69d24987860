"""
Wine Domain Services
====================

Services for Wine management and consignment metrics
"""

from .wine_service import WineService

__all__ = [
    'WineService',
]
