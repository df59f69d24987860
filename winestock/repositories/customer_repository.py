"""
Customer Repository
===================

Persistence access for customers, their address and consignment summaries.

Return shapes:
- ``find_by_id``: customer columns plus ``address`` (dict or None)
- ``list_customers``: list of customer column dicts
- ``list_customers_summary``::

    [{'id', 'name',
      'consigned': [{'id', 'wines_on_consigned': [{'balance', 'wine': {'type'}}]}]}]
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, or_
from sqlalchemy.orm import selectinload

from .base import BaseRepository, transactional
from ..models import Customer, Address, Consigned, ConsignedStatus, Wine, WineOnConsigned

ADDRESS_FIELDS = ('city', 'state', 'street_address', 'number', 'zip_code', 'neighborhood')

def _address_is_blank(address: Optional[Dict[str, Any]]) -> bool:
    if not address:
        return True
    return all(not (address.get(field) or '').strip() for field in ADDRESS_FIELDS)

class CustomerRepository(BaseRepository):
    """Repository for Customer"""

    search_fields = [Customer.name]

    def _customer_to_dict(self, customer: Customer) -> Dict[str, Any]:
        data = self._columns(customer)
        data['address'] = self._columns(customer.address, exclude=('id', 'customer_id', 'created_at', 'updated_at'))
        return data

    @transactional
    async def create_customer(self, data: Dict[str, Any]) -> Dict[str, Any]:
        fields = {key: value for key, value in data.items() if key != 'address'}
        address = data.get('address')

        customer = Customer(**fields)
        # Blank addresses coming from forms are not stored
        if not _address_is_blank(address):
            customer.address = Address(**{field: address.get(field) for field in ADDRESS_FIELDS})

        self.db_session.add(customer)
        await self.db_session.flush()

        self.logger.debug("Customer %s inserted", customer.id)
        return self._columns(customer)

    async def existing_customer(self, document: Optional[str] = None, email: Optional[str] = None,
                                state_registration: Optional[str] = None,
                                exclude_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """First active customer sharing any of the supplied unique fields"""
        conditions = []
        if document:
            conditions.append(Customer.document == document)
        if email:
            conditions.append(Customer.email == email)
        if state_registration:
            conditions.append(Customer.state_registration == state_registration)
        if not conditions:
            return None

        query = select(Customer).where(Customer.disabled_at.is_(None), or_(*conditions))
        if exclude_id:
            query = query.where(Customer.id != exclude_id)

        result = await self.db_session.execute(query.limit(1))
        return self._columns(result.scalars().first())

    async def find_by_id(self, customer_id: str) -> Optional[Dict[str, Any]]:
        query = (
            select(Customer)
            .options(selectinload(Customer.address))
            .where(Customer.id == customer_id, Customer.disabled_at.is_(None))
        )
        result = await self.db_session.execute(query)
        customer = result.scalars().first()
        if not customer:
            return None
        return self._customer_to_dict(customer)

    async def list_customers(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        query = select(Customer).where(Customer.disabled_at.is_(None))
        query = self._apply_search(query, search_term, self.search_fields)
        query = query.order_by(Customer.created_at.desc())

        result = await self.db_session.execute(query)
        return [self._columns(customer) for customer in result.scalars().all()]

    async def list_customers_summary(self) -> List[Dict[str, Any]]:
        """Active customers with their in-progress consignments and line items"""
        query = (
            select(
                Customer.id.label('customer_id'),
                Customer.name.label('customer_name'),
                Consigned.id.label('consigned_id'),
                WineOnConsigned.balance,
                Wine.type.label('wine_type'),
            )
            .select_from(Customer)
            .join(Consigned, Consigned.customer_id == Customer.id)
            .outerjoin(WineOnConsigned, WineOnConsigned.consigned_id == Consigned.id)
            .outerjoin(Wine, Wine.id == WineOnConsigned.wine_id)
            .where(
                Customer.disabled_at.is_(None),
                Consigned.status == ConsignedStatus.IN_PROGRESS,
            )
            .order_by(Customer.name, Consigned.created_at, Consigned.id)
        )
        result = await self.db_session.execute(query)

        customers: Dict[str, Dict[str, Any]] = {}
        consignments: Dict[str, Dict[str, Any]] = {}
        for row in result.mappings().all():
            customer = customers.setdefault(row['customer_id'], {
                'id': row['customer_id'],
                'name': row['customer_name'],
                'consigned': [],
            })
            consigned = consignments.get(row['consigned_id'])
            if consigned is None:
                consigned = {'id': row['consigned_id'], 'wines_on_consigned': []}
                consignments[row['consigned_id']] = consigned
                customer['consigned'].append(consigned)
            # Consignments without line items come back from the outer join with NULLs
            if row['balance'] is not None:
                consigned['wines_on_consigned'].append({
                    'balance': row['balance'],
                    'wine': {'type': row['wine_type']},
                })

        return list(customers.values())

    @transactional
    async def update_customer(self, customer_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        query = (
            select(Customer)
            .options(selectinload(Customer.address))
            .where(Customer.id == customer_id)
        )
        result = await self.db_session.execute(query)
        customer = result.scalars().one()

        for key, value in data.items():
            if key == 'address':
                continue
            setattr(customer, key, value)

        address = data.get('address')
        if address is not None:
            if customer.address is not None:
                for field in ADDRESS_FIELDS:
                    if field in address:
                        setattr(customer.address, field, address[field])
            elif not _address_is_blank(address):
                customer.address = Address(**{field: address.get(field) for field in ADDRESS_FIELDS})

        customer.updated_at = datetime.utcnow()
        await self.db_session.flush()
        return self._columns(customer)

    @transactional
    async def disable_customer(self, customer_id: str) -> None:
        await self.db_session.execute(
            update(Customer)
            .where(Customer.id == customer_id)
            .values(disabled_at=datetime.utcnow())
        )
