from fastapi import Depends, Response

from videotube.api.router_base import router_user as router
from videotube.db.dependency import get_user_model
from videotube.middleware.auth import verify_jwt
from videotube.model.user import UserDocument, UserModel
from videotube.service.user import logout_user
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler
from videotube.utility.cookie import clear_auth_cookies


@router.post("/logout")
@async_handler
async def logout(
        response: Response,
        current_user: UserDocument = Depends(verify_jwt),
        users: UserModel = Depends(get_user_model)
):
    await logout_user(current_user, users)

    clear_auth_cookies(response)

    return ApiResponse(200, {}, "User logged Out").to_dict()
