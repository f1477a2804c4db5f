from typing import Optional

from fastapi import Body, Depends, Request, Response

from videotube.api.router_base import router_user as router
from videotube.constants import REFRESH_TOKEN_COOKIE
from videotube.db.dependency import get_user_model
from videotube.model.user import UserModel
from videotube.schema.user import RefreshTokenRequest
from videotube.service.user import refresh_access_token
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler
from videotube.utility.cookie import set_auth_cookies


@router.post("/refresh-token")
@async_handler
async def refresh_token(
        request: Request,
        response: Response,
        data: Optional[RefreshTokenRequest] = Body(default=None),
        users: UserModel = Depends(get_user_model)
):
    incoming_refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE) or (data.refresh_token if data else None)

    access_token, new_refresh_token = await refresh_access_token(incoming_refresh_token, users)

    set_auth_cookies(response, access_token, new_refresh_token)

    return ApiResponse(
        200,
        {"accessToken": access_token, "refreshToken": new_refresh_token},
        "Access token refreshed"
    ).to_dict()
