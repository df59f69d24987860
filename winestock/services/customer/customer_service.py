"""
Customer Service
================

Service for Customer management and consignment summaries.

Customers are soft-deleted: ``delete_customer`` only sets ``disabled_at`` and
the repository leaves disabled customers out of every active query.
"""

from typing import Any, Dict, List, Optional, Union

from ..base import BaseService
from ..exceptions import ConflictError
from ...schemas import CustomerCreateSchema, CustomerUpdateSchema

UNIQUE_FIELDS = (
    ('email', 'email'),
    ('document', 'document'),
    ('state_registration', 'state registration'),
)

LIST_FIELDS = ('id', 'name', 'contact_person', 'email', 'cellphone', 'business_phone')

def project_customer_summary(customer: Dict[str, Any]) -> List[Dict[str, Any]]:
    """One summary row per in-progress consignment of ``customer``.

    Input: ``{'id', 'name', 'consigned': [{'id', 'wines_on_consigned':
    [{'balance', 'wine': {'type'}}]}]}``.
    Output: ``[{'customer_id', 'customer', 'consigned_id', 'total_types',
    'total_balance'}]``. A wine type repeated inside a consignment counts once
    in ``total_types`` and fully in ``total_balance``.
    """
    rows = []
    for consigned in customer.get('consigned') or []:
        items = consigned.get('wines_on_consigned') or []
        rows.append({
            'customer_id': customer['id'],
            'customer': customer['name'],
            'consigned_id': consigned['id'],
            'total_types': len({item['wine']['type'] for item in items}),
            'total_balance': sum(item['balance'] for item in items),
        })
    return rows

class CustomerService(BaseService):
    """Service for Customer management"""

    create_schema = CustomerCreateSchema
    update_schema = CustomerUpdateSchema

    def __init__(self, customer_repository):
        super().__init__(customer_repository)

    async def create_customer(self, customer: Union[CustomerCreateSchema, Dict[str, Any]]) -> Dict[str, str]:
        """Create customer after checking document, email and state registration"""
        data = self._create_data(customer)

        existing = await self.repository.existing_customer(
            document=data.get('document'),
            email=data.get('email'),
            state_registration=data.get('state_registration'),
        )
        if existing:
            self._raise_conflict(existing, data, "Data already registered for another customer")

        new_customer = await self.repository.create_customer(data)
        self.logger.info(f"Customer {new_customer['id']} created")

        return {'customer_id': new_customer['id']}

    async def get_customer_details(self, customer_id: str) -> Dict[str, Any]:
        customer = await self.repository.find_by_id(customer_id)
        return self._get_or_404(customer, 'Customer', customer_id)

    async def list_customers(self, search_term: Optional[str] = None) -> List[Dict[str, Any]]:
        """Active customers, newest first, optionally filtered by name"""
        customers = await self.repository.list_customers(search_term)
        return [{field: customer.get(field) for field in LIST_FIELDS} for customer in customers or []]

    async def list_customers_summary(self) -> List[Dict[str, Any]]:
        customers = await self.repository.list_customers_summary()

        summary = []
        for customer in customers or []:
            summary.extend(project_customer_summary(customer))
        return summary

    async def update_customer(self, customer: Union[CustomerUpdateSchema, Dict[str, Any]],
                              customer_id: str) -> Dict[str, str]:
        """Update customer. Uniqueness is checked before existence, so a
        conflicting payload for an unknown id reports the conflict."""
        data = self._update_data(customer)

        existing = await self.repository.existing_customer(
            document=data.get('document'),
            email=data.get('email'),
            state_registration=data.get('state_registration'),
            exclude_id=customer_id,
        )
        if existing:
            self._raise_conflict(existing, data, "Another customer already has the given data")

        customer_to_update = await self.repository.find_by_id(customer_id)
        self._get_or_404(customer_to_update, 'Customer', customer_id)

        await self.repository.update_customer(customer_id, data)
        self.logger.info(f"Customer {customer_id} updated")

        return {'updated_customer_id': customer_id}

    async def delete_customer(self, customer_id: str) -> None:
        """Soft delete: the record is kept with ``disabled_at`` set"""
        customer = await self.repository.find_by_id(customer_id)
        self._get_or_404(customer, 'Customer', customer_id)

        await self.repository.disable_customer(customer_id)
        self.logger.info(f"Customer {customer_id} disabled")

    def _raise_conflict(self, existing: Dict[str, Any], data: Dict[str, Any], prefix: str):
        duplicated = {
            field: existing.get(field)
            for field, _ in UNIQUE_FIELDS
            if existing.get(field) and existing.get(field) == data.get(field)
        }
        labels = [f"{label}: {existing[field]}" for field, label in UNIQUE_FIELDS if field in duplicated]
        message = f"{prefix}: {', '.join(labels)}" if labels else prefix

        self.logger.warning(message)
        raise ConflictError(message, 'Customer', details={'fields': list(duplicated)})
