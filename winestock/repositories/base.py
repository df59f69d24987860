"""
Base Repository Classes
=======================

Base class and utilities shared by all repositories. Repositories own every
query against the database and hand plain dicts back to the services.
"""

from typing import Any, Dict, Iterable, List, Optional
from functools import wraps
import logging

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

LIKE_ESCAPE = '\\'

def transactional(func):
    """Decorator for automatic transaction management"""
    @wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            result = await func(self, *args, **kwargs)
            if hasattr(self, 'db_session') and self.db_session:
                await self.db_session.commit()
            return result
        except Exception as e:
            if hasattr(self, 'db_session') and self.db_session:
                await self.db_session.rollback()
            logger.error(f"Transaction failed in {func.__name__}: {str(e)}")
            raise
    return wrapper

class BaseRepository:
    """Base repository bound to one AsyncSession"""

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def _columns(entity, exclude: Iterable[str] = ()) -> Optional[Dict[str, Any]]:
        """Column values of an ORM entity as a dict, relationships left out"""
        if entity is None:
            return None
        return {
            column.key: getattr(entity, column.key)
            for column in entity.__table__.columns
            if column.key not in exclude
        }

    @staticmethod
    def _like_pattern(search_term: str) -> str:
        """Substring pattern with LIKE wildcards in the term escaped"""
        for char in (LIKE_ESCAPE, '%', '_'):
            search_term = search_term.replace(char, LIKE_ESCAPE + char)
        return f'%{search_term}%'

    @classmethod
    def _apply_search(cls, query, search_term: Optional[str], search_fields: List[Any]):
        """Case-insensitive literal substring match over the given columns"""
        if not search_term or not search_fields:
            return query
        pattern = cls._like_pattern(search_term)
        return query.where(or_(*[field.ilike(pattern, escape=LIKE_ESCAPE) for field in search_fields]))

    @staticmethod
    def _offset(page: int, page_size: int) -> int:
        return (page - 1) * page_size
