from videotube.api.health import healthcheck
from videotube.api.user import register, login, logout, refresh_token, change_password, me
from videotube.api.video import list as video_list
from videotube.api.router_base import router_user, router_video


def add_router(application):
    application.include_router(healthcheck.router)

    # Route modules register themselves on the shared routers when imported
    application.include_router(router_user)
    application.include_router(router_video)
