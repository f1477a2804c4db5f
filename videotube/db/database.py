import logging
import sys

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from videotube.config.environments import MONGODB_URI
from videotube.constants import DB_NAME

logger = logging.getLogger(__name__)


async def connect_db(uri: str = MONGODB_URI, db_name: str = DB_NAME) -> AsyncDatabase:
    """
    Open the single MongoDB connection used by the whole process.

    A failed connection is fatal: the error is logged and the process exits
    with status 1. There is no retry.
    """
    try:
        client = AsyncMongoClient(f"{uri}/{db_name}")
        await client.admin.command("ping")
        host = ", ".join(f"{address[0]}:{address[1]}" for address in client.nodes) or "unknown"
        logger.info("MongoDB connected !! DB HOST: %s", host)
        return client[db_name]
    except Exception as e:
        logger.error("MONGODB connection FAILED: %s", e)
        sys.exit(1)


async def close_db(db: AsyncDatabase) -> None:
    await db.client.close()
    logger.info("MongoDB connection closed")
