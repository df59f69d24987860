"""
Base Service Classes
====================

Base class and utilities for all domain services
"""

from typing import Any, Dict, Optional, Union
import logging

from pydantic import BaseModel, ValidationError as SchemaValidationError

from .exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

class BaseService:
    """Base service: one repository injected through the constructor"""

    # Pydantic schemas used to validate plain-dict input
    create_schema = None
    update_schema = None

    def __init__(self, repository):
        self.repository = repository
        self.logger = logging.getLogger(self.__class__.__name__)

    def _create_data(self, data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
        """Validated create payload. Accepts either a schema instance or a dict."""
        if isinstance(data, BaseModel):
            return data.model_dump()
        return self._validate(self.create_schema, data).model_dump()

    def _update_data(self, data: Union[BaseModel, Dict[str, Any]]) -> Dict[str, Any]:
        """Validated partial payload; fields the caller did not send are left out."""
        if isinstance(data, BaseModel):
            return data.model_dump(exclude_unset=True)
        return self._validate(self.update_schema, data).model_dump(exclude_unset=True)

    def _validate(self, schema, data: Dict[str, Any]) -> BaseModel:
        try:
            return schema.model_validate(data)
        except SchemaValidationError as e:
            fields = ['.'.join(str(part) for part in error['loc']) for error in e.errors()]
            self.logger.warning(f"Rejected {schema.__name__}: {fields}")
            raise ValidationError(
                f"Invalid data for {', '.join(fields)}",
                field=fields[0] if fields else None,
                details={'fields': fields},
            )

    @staticmethod
    def _get_or_404(entity: Optional[Dict[str, Any]], resource_type: str, entity_id: str) -> Dict[str, Any]:
        """Return entity or raise 404 error"""
        if not entity:
            raise NotFoundError(resource_type, entity_id)
        return entity
