"""
Bootstrap script - creates the first admin user.

Run once against the SQL database (the API also seeds on startup):
    python bin/create_admin.py

Reads FIRST_ADMIN_NAME, FIRST_ADMIN_EMAIL and FIRST_ADMIN_PASSWORD from
env.yaml. The admin gets a permanent password; nothing is sent by email.
"""

import asyncio
import logging
import os
import sys

_PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from config import ApplicationConfig  # noqa: E402
from dao_auth import depends  # noqa: E402
from dao_auth.adapter.services.database import create_tables  # noqa: E402
from dao_auth.app.use_cases.users import seed_admin  # noqa: E402

logger = logging.getLogger("create_admin")


async def seed() -> int:
    if not ApplicationConfig.FIRST_ADMIN_EMAIL or not ApplicationConfig.FIRST_ADMIN_PASSWORD:
        logger.warning("FIRST_ADMIN_EMAIL or FIRST_ADMIN_PASSWORD not set - nothing to do")
        return 1
    if ApplicationConfig.STORAGE_BACKEND != "sql":
        logger.warning("STORAGE_BACKEND is not 'sql' - the API seeds the in-memory store at startup")
        return 1

    await create_tables(depends.engine)
    try:
        async for uow in depends.get_unit_of_work():
            await seed_admin(uow, depends.get_auth_context(), ApplicationConfig)
    finally:
        await depends.shutdown()
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    sys.exit(asyncio.run(seed()))
