from fastapi import Depends

from videotube.api.router_base import router_user as router
from videotube.db.dependency import get_user_model
from videotube.middleware.auth import verify_jwt
from videotube.model.user import UserDocument, UserModel
from videotube.schema.user import ChangePasswordRequest
from videotube.service.user import change_password
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler


@router.post("/change-password")
@async_handler
async def change_current_password(
        data: ChangePasswordRequest,
        current_user: UserDocument = Depends(verify_jwt),
        users: UserModel = Depends(get_user_model)
):
    await change_password(current_user.id, data.old_password, data.new_password, users)

    return ApiResponse(200, {}, "Password changed successfully").to_dict()
