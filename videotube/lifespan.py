import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from videotube.config.environments import LOG_LEVEL
from videotube.config.logging import setup_logging
from videotube.db.database import connect_db, close_db
from videotube.model.user import UserModel
from videotube.model.video import VideoModel
from videotube.utility.storage import MediaStorage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI):
    # Startup logic
    setup_logging(LOG_LEVEL)
    logger.info("App starting up...")

    db = await connect_db()
    await UserModel(db).create_indexes()
    await VideoModel(db).create_indexes()

    application.state.db = db
    application.state.media_storage = MediaStorage()

    yield
    # Shutdown logic
    await close_db(db)
    logger.info("App shutting down...")
