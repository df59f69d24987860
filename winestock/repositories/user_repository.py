"""
User Repository
===============

Persistence access for users and their roles.

``find_by_id`` and ``find_many`` keep the association-object nesting of the
tables (``roles: [{'role': {'id', 'name'}}]``); the user service flattens it.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, delete, or_
from sqlalchemy.orm import selectinload

from .base import BaseRepository, transactional
from ..models import User, Role, UserRole, Customer

class UserRepository(BaseRepository):
    """Repository for User, Role and UserRole"""

    search_fields = [User.name]

    @staticmethod
    def _roles(user: User) -> List[Dict[str, Any]]:
        return [{'role': {'id': link.role.id, 'name': link.role.name}} for link in user.roles]

    @transactional
    async def create_user(self, data: Dict[str, Any]) -> Dict[str, Any]:
        user = User(**data)
        self.db_session.add(user)
        await self.db_session.flush()

        self.logger.debug("User %s inserted", user.id)
        return self._columns(user, exclude=('password',))

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        result = await self.db_session.execute(select(User).where(User.email == email))
        return self._columns(result.scalars().first(), exclude=('password',))

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        query = (
            select(User)
            .options(
                selectinload(User.roles).selectinload(UserRole.role),
                selectinload(User.customer).selectinload(Customer.consigned),
            )
            .where(User.id == user_id)
        )
        result = await self.db_session.execute(query)
        user = result.scalars().first()
        if not user:
            return None

        data = self._columns(user, exclude=('password',))
        data['roles'] = self._roles(user)
        data['customer'] = None
        if user.customer is not None:
            data['customer'] = {
                'id': user.customer.id,
                'name': user.customer.name,
                'consigned': [{'id': consigned.id} for consigned in user.customer.consigned],
            }
        return data

    async def find_many(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        """Users without a customer or tied to an active one, newest first"""
        query = (
            select(User)
            .options(
                selectinload(User.roles).selectinload(UserRole.role),
                selectinload(User.customer),
            )
            .where(or_(
                User.associated_customer_id.is_(None),
                User.customer.has(Customer.disabled_at.is_(None)),
            ))
        )
        query = self._apply_search(query, search_term, self.search_fields)
        query = query.order_by(User.created_at.desc())

        result = await self.db_session.execute(query)
        users = []
        for user in result.scalars().all():
            users.append({
                'id': user.id,
                'name': user.name,
                'email': user.email,
                'created_at': user.created_at,
                'roles': self._roles(user),
                'customer': {'id': user.customer.id, 'name': user.customer.name} if user.customer else None,
            })
        return users

    async def existing_user(self, user_id: str, email: Optional[str]) -> Optional[Dict[str, Any]]:
        """Another user already holding ``email``"""
        if not email:
            return None
        result = await self.db_session.execute(
            select(User).where(User.id != user_id, User.email == email).limit(1)
        )
        return self._columns(result.scalars().first(), exclude=('password',))

    @transactional
    async def update_user(self, user_id: str, data: Dict[str, Any]) -> str:
        await self.db_session.execute(
            update(User)
            .where(User.id == user_id)
            .values(**data, updated_at=datetime.utcnow())
        )
        return user_id

    @transactional
    async def delete_user(self, user_id: str) -> None:
        await self.db_session.execute(delete(UserRole).where(UserRole.user_id == user_id))
        await self.db_session.execute(delete(User).where(User.id == user_id))

    @transactional
    async def assign_role(self, user_id: str, role_name: str) -> Dict[str, Any]:
        """Link a role to a user, creating the role when it does not exist yet"""
        result = await self.db_session.execute(select(Role).where(Role.name == role_name))
        role = result.scalars().first()
        if role is None:
            role = Role(name=role_name)
            self.db_session.add(role)
            await self.db_session.flush()

        result = await self.db_session.execute(
            select(UserRole).where(UserRole.user_id == user_id, UserRole.role_id == role.id)
        )
        if result.scalars().first() is None:
            self.db_session.add(UserRole(user_id=user_id, role_id=role.id))
            await self.db_session.flush()

        return {'id': role.id, 'name': role.name}
