"""Pytest configuration and fixtures"""
import os

# Settings are read at import time; point them at an in-memory database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from winestock.models import Base
from winestock.repositories import CustomerRepository, UserRepository, WineRepository
from winestock.security import PasswordHasher


@pytest.fixture
def mock_customer_repository():
    """Customer repository double"""
    return AsyncMock(spec=CustomerRepository)


@pytest.fixture
def mock_user_repository():
    """User repository double"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_wine_repository():
    """Wine repository double"""
    return AsyncMock(spec=WineRepository)


@pytest.fixture
def mock_password_hasher():
    hasher = MagicMock(spec=PasswordHasher)
    hasher.hash.return_value = "$2b$06$hashedvalue"
    return hasher


@pytest.fixture
def sample_customer():
    """Sample customer payload"""
    return {
        "name": "Adega Central",
        "document": "12345678000195",
        "email": "contato@adegacentral.com.br",
        "contact_person": "Marina",
        "cellphone": "11987654321",
        "state_registration": "123456789",
    }


@pytest.fixture
def sample_wine():
    """Sample wine payload, price in reais"""
    return {
        "name": "Reserva Malbec",
        "harvest": 2019,
        "type": "Tinto",
        "price": 59.9,
        "producer": "Bodega Andina",
        "country": "Argentina",
        "size": "750ml",
    }


@pytest.fixture
def sample_user():
    """Sample user payload"""
    return {
        "name": "Carlos Souza",
        "email": "carlos@example.com",
        "password": "segredo123",
    }


@pytest_asyncio.fixture
async def session_factory():
    """Session factory over a fresh in-memory SQLite database"""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()
