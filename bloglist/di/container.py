# External package imports
from motor.motor_asyncio import AsyncIOMotorDatabase

# Local application imports
from .base_container import BaseContainer
from .providers import (
    BlogProvider,
    DatabaseProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.
    
    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (BlogProvider, UserProvider) - depend on repositories
    """
    
    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        super().__init__()
        self.setup(database)
    
    def setup(self, database: AsyncIOMotorDatabase) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self, database)
        RepositoryProvider.register(self)
        register_use_cases(self)


def register_use_cases(container: BaseContainer) -> None:
    """
    Register every use case against repositories already in the container.
    
    Also used on its own to build containers around non-Mongo repositories.
    """
    BlogProvider.register(container)
    UserProvider.register(container)
