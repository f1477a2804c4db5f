from typing import Optional

from fastapi import Depends, File, Form, Response, UploadFile

from videotube.api.router_base import router_user as router
from videotube.db.dependency import get_media_storage, get_user_model
from videotube.model.user import UserModel
from videotube.schema.user import RegisterUserRequest
from videotube.service.user import register_user
from videotube.utility.async_handler import async_handler
from videotube.utility.storage import MediaStorage, remove_local_file
from videotube.utility.upload import save_upload_to_temp


@router.post("/register", status_code=201)
@async_handler
async def register(
        response: Response,
        username: str = Form(default=""),
        email: str = Form(default=""),
        password: str = Form(default=""),
        full_name: str = Form(default="", alias="fullName"),
        avatar: Optional[UploadFile] = File(default=None),
        cover_image: Optional[UploadFile] = File(default=None, alias="coverImage"),
        users: UserModel = Depends(get_user_model),
        storage: MediaStorage = Depends(get_media_storage)
):
    data = RegisterUserRequest(username=username, email=email, password=password, full_name=full_name)

    avatar_local_path = None
    cover_image_local_path = None

    try:
        avatar_local_path = await save_upload_to_temp(avatar)
        cover_image_local_path = await save_upload_to_temp(cover_image)
        result = await register_user(data, avatar_local_path, cover_image_local_path, users, storage)
    finally:
        # Rejected requests never reach the upload step
        for local_path in (avatar_local_path, cover_image_local_path):
            if local_path:
                remove_local_file(local_path)

    response.status_code = result.status_code
    return result.to_dict()
