"""
Wine Service
============

Service for Wine management. Callers always see prices in reais; the
repository always receives and returns cents (see ``services.pricing``).
"""

from typing import Any, Dict, List, Optional, Union

from ..base import BaseService
from ..exceptions import NotFoundError
from ..pricing import to_cents, from_cents
from ...schemas import WineCreateSchema, WineUpdateSchema

class WineService(BaseService):
    """Service for Wine management"""

    create_schema = WineCreateSchema
    update_schema = WineUpdateSchema

    def __init__(self, wine_repository):
        super().__init__(wine_repository)

    @staticmethod
    def _with_price_in_units(wine: Dict[str, Any]) -> Dict[str, Any]:
        return {**wine, 'price': from_cents(wine['price'])}

    async def create_wine(self, wine: Union[WineCreateSchema, Dict[str, Any]]) -> Dict[str, str]:
        data = self._create_data(wine)
        data['price'] = to_cents(data['price'])

        new_wine = await self.repository.create_wine(data)
        self.logger.info(f"Wine {new_wine['id']} created")

        return {'wine_id': new_wine['id']}

    async def get_wine(self, wine_id: str) -> Dict[str, Any]:
        wine = await self.repository.find_by_id(wine_id)
        self._get_or_404(wine, 'Wine', wine_id)
        return self._with_price_in_units(wine)

    async def get_wine_details(self, wine_id: str) -> Dict[str, Any]:
        """Wine with the line items of in-progress consignments, unmodified"""
        wine_details = await self.repository.find_wine_details(wine_id)
        self._get_or_404(wine_details, 'Wine', wine_id)

        details = self._with_price_in_units(wine_details)
        details['wine_on_consigned'] = wine_details.get('wine_on_consigned') or []
        return details

    async def list_wines(self, search_term: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
        """Newest wines first, at most 10, optionally filtered by name"""
        wines = await self.repository.find_many(search_term)
        return {'wines': [self._with_price_in_units(wine) for wine in wines or []]}

    async def update_wine(self, wine_id: str, wine: Union[WineUpdateSchema, Dict[str, Any]]) -> Dict[str, str]:
        wine_to_update = await self.repository.find_by_id(wine_id)
        self._get_or_404(wine_to_update, 'Wine', wine_id)

        data = self._update_data(wine)
        if 'price' in data:
            data['price'] = to_cents(data['price'])

        wine_updated = await self.repository.update_wine(wine_id, data)
        self.logger.info(f"Wine {wine_id} updated")

        return {'wine_id': wine_updated['id']}

    async def list_wine_metrics(self, page: int = 1, page_size: int = 10,
                                search_term: Optional[str] = None) -> Dict[str, List[Dict[str, Any]]]:
        """Paginated balance per wine and customer; items returned verbatim"""
        items = await self.repository.wine_metrics(page=page, page_size=page_size, search_term=search_term)
        return {'items': items}

    async def delete_wine(self, wine_id: str) -> None:
        """Hard delete, without reading the wine first"""
        deleted = await self.repository.delete_wine(wine_id)
        if not deleted:
            raise NotFoundError('Wine', wine_id)
        self.logger.info(f"Wine {wine_id} deleted")
