"""
Winestock Services Module
=========================

Domain services layer. Each service receives its repository through the
constructor; the ServiceRegistry wires them for one database session.
"""

from .base import BaseService
from .exceptions import *

# Customer Domain
from .customer import CustomerService

# User Domain
from .user import UserService

# Wine Domain
from .wine import WineService

from ..repositories import CustomerRepository, UserRepository, WineRepository
from ..security import PasswordHasher

__all__ = [
    # Base Classes
    'BaseService',

    # Exceptions
    'WineStockException', 'ValidationError', 'NotFoundError', 'ConflictError',

    # Domain services
    'CustomerService', 'UserService', 'WineService',

    'ServiceRegistry', 'create_service_registry',
]


class ServiceRegistry:
    """
    Service Registry for dependency injection.
    Builds the repositories on one session and hands each to its service.
    """

    def __init__(self, db_session, config: dict = None):
        self.db_session = db_session
        self.config = config or {}
        self._services = {}

        self._init_domain_services()

    def _init_domain_services(self):
        """Initialize domain services with their repositories"""

        # Customer Domain
        self._services['customer'] = CustomerService(
            customer_repository=CustomerRepository(self.db_session)
        )

        # User Domain
        self._services['user'] = UserService(
            user_repository=UserRepository(self.db_session),
            password_hasher=PasswordHasher(),
            hash_rounds=self.config.get('PASSWORD_HASH_ROUNDS', 6)
        )

        # Wine Domain
        self._services['wine'] = WineService(
            wine_repository=WineRepository(self.db_session)
        )

    def get_service(self, service_name: str):
        """Get service by name"""
        if service_name not in self._services:
            raise ValueError(f"Service '{service_name}' not found")
        return self._services[service_name]

    @property
    def customer_service(self) -> CustomerService:
        return self._services['customer']

    @property
    def user_service(self) -> UserService:
        return self._services['user']

    @property
    def wine_service(self) -> WineService:
        return self._services['wine']


# Factory function for easy service registry creation
def create_service_registry(db_session, config: dict = None) -> ServiceRegistry:
    """Factory function to build a ServiceRegistry"""
    return ServiceRegistry(db_session=db_session, config=config)
