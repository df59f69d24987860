"""
Base Pydantic Schemas
=====================

Base classes and common functionality for all schemas (Pydantic V2).
"""

from pydantic import BaseModel, ConfigDict, model_validator
from datetime import datetime, date
from typing import Optional, Any


class BaseSchema(BaseModel):
    """Base schema with common config and whitespace handling."""

    model_config = ConfigDict(
        from_attributes=True,
        extra='ignore',
        json_encoders={
            datetime: lambda v: v.strftime('%Y-%m-%dT%H:%M:%S'),
            date: lambda v: v.strftime('%Y-%m-%d')
        }
    )

    @model_validator(mode='before')
    @classmethod
    def strip_whitespace(cls, data: Any) -> Any:
        """Strip whitespace from string fields before validation."""
        if isinstance(data, dict):
            return {
                key: value.strip() if isinstance(value, str) else value
                for key, value in data.items()
            }
        return data


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

