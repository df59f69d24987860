"""
User Service
============

Service for User management. Passwords are hashed with bcrypt before they
reach the repository; the plaintext is never persisted.
"""

from typing import Any, Dict, List, Optional, Union

from ..base import BaseService
from ..exceptions import ConflictError
from ...schemas import UserCreateSchema, UserUpdateSchema
from ...security import PasswordHasher

DEFAULT_HASH_ROUNDS = 6

def project_roles(roles: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """``[{'role': {'id', 'name'}}]`` -> ``[{'id', 'name'}]``"""
    return [{'id': link['role']['id'], 'name': link['role']['name']} for link in roles or []]

def project_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """User detail with flat roles and the customer's consignment ids.

    ``customer.consigned`` goes from ``[{'id'}]`` to ``[id, ...]``; a user with
    no associated customer gets ``customer: None``.
    """
    customer = user.get('customer')
    return {
        'id': user['id'],
        'name': user['name'],
        'email': user['email'],
        'roles': project_roles(user.get('roles')),
        'customer': {
            'id': customer['id'],
            'name': customer['name'],
            'consigned': [consigned['id'] for consigned in customer.get('consigned') or []],
        } if customer else None,
    }

def project_user_list_item(user: Dict[str, Any]) -> Dict[str, Any]:
    customer = user.get('customer')
    return {
        'id': user['id'],
        'name': user['name'],
        'email': user['email'],
        'created_at': user.get('created_at'),
        'roles': project_roles(user.get('roles')),
        'customer': {'id': customer['id'], 'name': customer['name']} if customer else None,
    }

class UserService(BaseService):
    """Service for User management"""

    create_schema = UserCreateSchema
    update_schema = UserUpdateSchema

    def __init__(self, user_repository, password_hasher: PasswordHasher = None,
                 hash_rounds: int = DEFAULT_HASH_ROUNDS):
        super().__init__(user_repository)
        self.password_hasher = password_hasher or PasswordHasher()
        self.hash_rounds = hash_rounds

    async def create_user(self, user: Union[UserCreateSchema, Dict[str, Any]]) -> Dict[str, str]:
        data = self._create_data(user)

        existing = await self.repository.find_by_email(data['email'])
        if existing:
            self.logger.warning(f"Rejected user with duplicated email {data['email']}")
            raise ConflictError(f"A user with email {data['email']} already exists", 'User')

        data['password'] = self.password_hasher.hash(data['password'], self.hash_rounds)

        user_created = await self.repository.create_user(data)
        self.logger.info(f"User {user_created['id']} created")

        return {'user_id': user_created['id']}

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        user = await self.repository.find_by_id(user_id)
        self._get_or_404(user, 'User', user_id)
        return project_user(user)

    async def list_users(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        users = await self.repository.find_many(search_term)
        return [project_user_list_item(user) for user in users or []]

    async def update_user(self, user: Union[UserUpdateSchema, Dict[str, Any]], user_id: str) -> Dict[str, str]:
        """Partial update; a missing password keeps the stored hash"""
        data = self._update_data(user)

        existing = await self.repository.existing_user(user_id, data.get('email'))
        if existing:
            self.logger.warning(f"Rejected update of user {user_id}: email {data['email']} taken")
            raise ConflictError(f"A user with email {data['email']} already exists", 'User')

        user_to_update = await self.repository.find_by_id(user_id)
        self._get_or_404(user_to_update, 'User', user_id)

        if data.get('password'):
            data['password'] = self.password_hasher.hash(data['password'], self.hash_rounds)
        else:
            data.pop('password', None)

        updated_user_id = await self.repository.update_user(user_id, data)
        self.logger.info(f"User {user_id} updated")

        return {'updated_user_id': updated_user_id}

    async def delete_user(self, user_id: str) -> None:
        """Hard delete"""
        user = await self.repository.find_by_id(user_id)
        self._get_or_404(user, 'User', user_id)

        await self.repository.delete_user(user_id)
        self.logger.info(f"User {user_id} deleted")
