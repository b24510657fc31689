from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

# Register table models on SQLModel.metadata
from dao_auth.domain.entities import User  # noqa: F401


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
