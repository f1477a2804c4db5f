from typing import Optional

from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    """Text fields of the registration form; missing fields arrive empty."""

    username: str = ""
    email: str = ""
    password: str = ""
    full_name: str = Field(default="", alias="fullName")

    model_config = {"populate_by_name": True}

    def has_blank_field(self) -> bool:
        return any(field.strip() == "" for field in [self.full_name, self.email, self.username, self.password])


class LoginRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: str


class RefreshTokenRequest(BaseModel):
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")

    model_config = {"populate_by_name": True}


class ChangePasswordRequest(BaseModel):
    old_password: str = Field(alias="oldPassword")
    new_password: str = Field(alias="newPassword")

    model_config = {"populate_by_name": True}
