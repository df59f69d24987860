"""
User Domain Services
====================

Services for User management
"""

from .user_service import UserService, project_roles, project_user, project_user_list_item

__all__ = [
    'UserService',
    'project_roles',
    'project_user',
    'project_user_list_item',
]
