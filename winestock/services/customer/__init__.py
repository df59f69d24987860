"""
Customer Domain Services
========================

Services for Customer management
"""

from .customer_service import CustomerService, project_customer_summary

__all__ = [
    'CustomerService',
    'project_customer_summary',
]
