"""
API Dependencies
================

FastAPI dependencies for the winestock application.
"""

from fastapi import Depends

from .services import ServiceRegistry, create_service_registry
from .database import get_db_session
from .config import settings


async def get_service_registry(db_session=Depends(get_db_session)) -> ServiceRegistry:
    """Service registry bound to the request's database session"""
    return create_service_registry(db_session=db_session, config=settings.model_dump())
