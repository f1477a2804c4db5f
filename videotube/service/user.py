import logging
from typing import Optional

from pymongo.errors import DuplicateKeyError

from videotube.config.environments import REFRESH_TOKEN_SECRET
from videotube.model.user import UserDocument, UserModel, SENSITIVE_FIELDS
from videotube.schema.user import RegisterUserRequest, LoginRequest
from videotube.utility.api_error import ApiError
from videotube.utility.api_response import ApiResponse
from videotube.utility.security import decode_token
from videotube.utility.storage import MediaStorage

logger = logging.getLogger(__name__)


async def register_user(
        data: RegisterUserRequest,
        avatar_local_path: Optional[str],
        cover_image_local_path: Optional[str],
        users: UserModel,
        storage: MediaStorage
) -> ApiResponse:
    if data.has_blank_field():
        raise ApiError(400, "All Fields are Required")

    username = data.username.strip().lower()
    email = data.email.strip().lower()

    existing_user = await users.find_one({"$or": [{"username": username}, {"email": email}]})
    if existing_user:
        raise ApiError(409, "User with email or username already exists")

    if not avatar_local_path:
        raise ApiError(400, "Avatar file is required")

    avatar = await storage.upload(avatar_local_path)
    cover_image = await storage.upload(cover_image_local_path) if cover_image_local_path else None

    if not avatar:
        raise ApiError(400, "Avatar file is required")

    try:
        user = await users.create(
            full_name=data.full_name,
            avatar=avatar["url"],
            cover_image=cover_image["url"] if cover_image else "",
            email=email,
            password=data.password,
            username=username,
        )
    except DuplicateKeyError:
        # Lost a race with a concurrent registration
        raise ApiError(409, "User with email or username already exists")

    created_user = await users.find_by_id(user.id, exclude=SENSITIVE_FIELDS)
    if not created_user:
        raise ApiError(500, "Something went wrong while registering the user")

    logger.info("Registered user %s", created_user.username)
    return ApiResponse(201, created_user.to_public(), "User registered Successfully")


async def generate_access_and_refresh_tokens(users: UserModel, user: UserDocument) -> tuple[str, str]:
    access_token = user.generate_access_token()
    refresh_token = user.generate_refresh_token()
    await users.update_by_id(user.id, refresh_token=refresh_token)
    return access_token, refresh_token


async def login_user(data: LoginRequest, users: UserModel) -> tuple[UserDocument, str, str]:
    if not data.username and not data.email:
        raise ApiError(400, "username or email is required")

    conditions = []
    if data.username:
        conditions.append({"username": data.username.strip().lower()})
    if data.email:
        conditions.append({"email": data.email.strip().lower()})

    user = await users.find_one({"$or": conditions})
    if not user:
        raise ApiError(404, "User does not exist")

    if not await user.is_password_correct(data.password):
        raise ApiError(401, "Invalid user credentials")

    access_token, refresh_token = await generate_access_and_refresh_tokens(users, user)
    logged_in_user = await users.find_by_id(user.id, exclude=SENSITIVE_FIELDS)
    return logged_in_user, access_token, refresh_token


async def logout_user(user: UserDocument, users: UserModel) -> None:
    await users.update_by_id(user.id, refresh_token=None)


async def refresh_access_token(incoming_refresh_token: Optional[str], users: UserModel) -> tuple[str, str]:
    if not incoming_refresh_token:
        raise ApiError(401, "Unauthorized request")

    claims = decode_token(incoming_refresh_token, REFRESH_TOKEN_SECRET)
    if not claims:
        raise ApiError(401, "Invalid refresh token")

    user = await users.find_by_id(claims.get("_id"))
    if not user:
        raise ApiError(401, "Invalid refresh token")

    if incoming_refresh_token != user.refresh_token:
        raise ApiError(401, "Refresh token is expired or used")

    return await generate_access_and_refresh_tokens(users, user)


async def change_password(user_id: str, old_password: str, new_password: str, users: UserModel) -> None:
    user = await users.find_by_id(user_id)
    if not user:
        raise ApiError(404, "User does not exist")

    if not await user.is_password_correct(old_password):
        raise ApiError(400, "Invalid old password")

    if not new_password.strip():
        raise ApiError(400, "New password is required")

    await users.update_by_id(user.id, password=new_password)
