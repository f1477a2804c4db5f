from fastapi import Depends, Response

from videotube.api.router_base import router_user as router
from videotube.db.dependency import get_user_model
from videotube.model.user import UserModel
from videotube.schema.user import LoginRequest
from videotube.service.user import login_user
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler
from videotube.utility.cookie import set_auth_cookies


@router.post("/login")
@async_handler
async def login(
        response: Response,
        data: LoginRequest,
        users: UserModel = Depends(get_user_model)
):
    user, access_token, refresh_token = await login_user(data, users)

    set_auth_cookies(response, access_token, refresh_token)

    return ApiResponse(
        200,
        {
            "user": user.to_public(),
            "accessToken": access_token,
            "refreshToken": refresh_token,
        },
        "User logged In Successfully"
    ).to_dict()
