from fastapi import Depends

from videotube.api.router_base import router_user as router
from videotube.middleware.auth import verify_jwt
from videotube.model.user import UserDocument
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler


@router.get("/current-user")
@async_handler
async def get_current_user(current_user: UserDocument = Depends(verify_jwt)):
    return ApiResponse(200, current_user.to_public(), "Current user fetched successfully").to_dict()
