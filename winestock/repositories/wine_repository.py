"""
Wine Repository
===============

Persistence access for wines, their consignment line items and metrics.
Prices are read and written in cents.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, delete, func, cast, Integer

from .base import BaseRepository, transactional
from ..models import Wine, WineOnConsigned, Consigned, ConsignedStatus, Customer

LIST_LIMIT = 10

class WineRepository(BaseRepository):
    """Repository for Wine"""

    search_fields = [Wine.name]

    @transactional
    async def create_wine(self, data: Dict[str, Any]) -> Dict[str, Any]:
        wine = Wine(**data)
        self.db_session.add(wine)
        await self.db_session.flush()

        self.logger.debug("Wine %s inserted", wine.id)
        return self._columns(wine)

    async def find_by_id(self, wine_id: str) -> Optional[Dict[str, Any]]:
        wine = await self.db_session.get(Wine, wine_id)
        return self._columns(wine)

    async def find_wine_details(self, wine_id: str) -> Optional[Dict[str, Any]]:
        """Wine columns plus ``wine_on_consigned`` line items of in-progress
        consignments held by active customers::

            [{'wine_id', 'consigned_id', 'balance',
              'consigned': {'id', 'customer': {'id', 'name'}}}]
        """
        wine = await self.db_session.get(Wine, wine_id)
        if not wine:
            return None

        query = (
            select(
                WineOnConsigned.wine_id,
                WineOnConsigned.consigned_id,
                WineOnConsigned.balance,
                Customer.id.label('customer_id'),
                Customer.name.label('customer_name'),
            )
            .join(Consigned, Consigned.id == WineOnConsigned.consigned_id)
            .join(Customer, Customer.id == Consigned.customer_id)
            .where(
                WineOnConsigned.wine_id == wine_id,
                Consigned.status == ConsignedStatus.IN_PROGRESS,
                Customer.disabled_at.is_(None),
            )
            .order_by(Customer.name)
        )
        result = await self.db_session.execute(query)

        data = self._columns(wine)
        data['wine_on_consigned'] = [
            {
                'wine_id': row['wine_id'],
                'consigned_id': row['consigned_id'],
                'balance': row['balance'],
                'consigned': {
                    'id': row['consigned_id'],
                    'customer': {'id': row['customer_id'], 'name': row['customer_name']},
                },
            }
            for row in result.mappings().all()
        ]
        return data

    async def find_many(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        query = select(Wine)
        query = self._apply_search(query, search_term, self.search_fields)
        query = query.order_by(Wine.created_at.desc()).limit(LIST_LIMIT)

        result = await self.db_session.execute(query)
        return [self._columns(wine) for wine in result.scalars().all()]

    @transactional
    async def update_wine(self, wine_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        wine = await self.db_session.get(Wine, wine_id)
        for key, value in data.items():
            setattr(wine, key, value)
        wine.updated_at = datetime.utcnow()
        await self.db_session.flush()
        return self._columns(wine)

    async def wine_metrics(self, page: int, page_size: int,
                           search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        """Balance per (wine, customer) over in-progress consignments of
        active customers. ``total`` is the number of groups before paging."""
        query = (
            select(
                Wine.name.label('wine_name'),
                Wine.id.label('wine_id'),
                Wine.updated_at.label('updated_at'),
                Customer.name.label('customer_name'),
                cast(func.count().over(), Integer).label('total'),
                cast(func.sum(WineOnConsigned.balance), Integer).label('total_balance'),
            )
            .select_from(Wine)
            .join(WineOnConsigned, WineOnConsigned.wine_id == Wine.id)
            .join(Consigned, Consigned.id == WineOnConsigned.consigned_id)
            .join(Customer, Customer.id == Consigned.customer_id)
            .where(
                Consigned.status == ConsignedStatus.IN_PROGRESS,
                Customer.disabled_at.is_(None),
            )
        )
        query = self._apply_search(query, search_term, [Wine.name, Customer.name])

        query = (
            query
            .group_by(Wine.id, Wine.name, Wine.updated_at, Customer.name)
            .order_by(Customer.name, Wine.id)
            .limit(page_size)
            .offset(self._offset(page, page_size))
        )
        result = await self.db_session.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @transactional
    async def delete_wine(self, wine_id: str) -> int:
        """Hard delete; returns the number of removed rows"""
        result = await self.db_session.execute(delete(Wine).where(Wine.id == wine_id))
        return result.rowcount
