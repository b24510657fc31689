from dao_auth.adapter.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
    InMemoryUserStore,
)
from dao_auth.app.services.unit_of_work import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """
    UnitOfWork over process memory.

    Writes apply as soon as a repository method returns; commit and
    rollback have nothing to do.
    """

    def __init__(self, store: InMemoryUserStore):
        self.store = store

    async def __aenter__(self):
        self.users = InMemoryUserRepository(self.store)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        pass

    async def rollback(self):
        pass
