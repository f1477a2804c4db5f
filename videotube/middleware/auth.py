from typing import Optional

from fastapi import Depends, Request

from videotube.config.environments import ACCESS_TOKEN_SECRET
from videotube.constants import ACCESS_TOKEN_COOKIE
from videotube.db.dependency import get_user_model
from videotube.model.user import UserDocument, UserModel, SENSITIVE_FIELDS
from videotube.utility.api_error import ApiError
from videotube.utility.security import decode_token


def _extract_access_token(request: Request) -> Optional[str]:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token

    authorization = request.headers.get("Authorization", "")
    if authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return None


async def verify_jwt(request: Request, users: UserModel = Depends(get_user_model)) -> UserDocument:
    token = _extract_access_token(request)
    if not token:
        raise ApiError(401, "Unauthorized request")

    claims = decode_token(token, ACCESS_TOKEN_SECRET)
    if not claims:
        raise ApiError(401, "Invalid access token")

    user = await users.find_by_id(claims.get("_id"), exclude=SENSITIVE_FIELDS)
    if not user:
        raise ApiError(401, "Invalid access token")

    return user
