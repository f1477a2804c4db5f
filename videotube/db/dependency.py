from fastapi import Depends, Request

from videotube.model.user import UserModel
from videotube.model.video import VideoModel
from videotube.utility.storage import MediaStorage


def get_db(request: Request):
    return request.app.state.db


def get_media_storage(request: Request) -> MediaStorage:
    return request.app.state.media_storage


def get_user_model(db=Depends(get_db)) -> UserModel:
    return UserModel(db)


def get_video_model(db=Depends(get_db)) -> VideoModel:
    return VideoModel(db)
