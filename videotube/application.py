from fastapi import FastAPI

from videotube.lifespan import lifespan
from videotube.middleware.cors import add_cors
from videotube.middleware.error import add_error_handlers
from videotube.api.router import add_router

application = FastAPI(
    title="VideoTube FastAPI Service",
    description="Video sharing backend API documentation",
    version="1.0.0",
    lifespan=lifespan
)

add_cors(application)
add_error_handlers(application)
add_router(application)
