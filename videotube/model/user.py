from datetime import datetime
from typing import List, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import Field, field_validator
from pydantic.alias_generators import to_camel
from pymongo import ReturnDocument

from videotube.config.environments import (
    ACCESS_TOKEN_SECRET,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    REFRESH_TOKEN_SECRET,
    REFRESH_TOKEN_EXPIRE_MINUTES,
)
from videotube.model.base import MongoModel, ObjectIdStr, to_object_id
from videotube.utility.security import hash_password, verify_password, create_token
from videotube.utility.time import utc_now

SENSITIVE_FIELDS = ("password", "refreshToken")


class UserDocument(MongoModel):
    id: Optional[ObjectIdStr] = Field(default=None, alias="_id")
    username: str
    email: str
    full_name: str
    avatar: str
    cover_image: Optional[str] = None
    watch_history: List[ObjectIdStr] = Field(default_factory=list)
    password: Optional[str] = None
    refresh_token: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("username", "email")
    @classmethod
    def normalize_identity(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, value: str) -> str:
        return value.strip()

    async def is_password_correct(self, password: str) -> bool:
        return await run_in_threadpool(verify_password, password, self.password)

    def generate_access_token(self) -> str:
        return create_token(
            {
                "_id": self.id,
                "email": self.email,
                "username": self.username,
                "fullName": self.full_name,
            },
            ACCESS_TOKEN_SECRET,
            ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def generate_refresh_token(self) -> str:
        return create_token({"_id": self.id}, REFRESH_TOKEN_SECRET, REFRESH_TOKEN_EXPIRE_MINUTES)

    def to_public(self) -> dict:
        return self.to_response(exclude={"password", "refresh_token"})


class UserModel:
    """The ``users`` collection: lookups, creation and updates of UserDocument."""

    collection_name = "users"

    def __init__(self, db):
        self.collection = db[self.collection_name]

    async def create_indexes(self):
        await self.collection.create_index("username", unique=True)
        await self.collection.create_index("email", unique=True)
        await self.collection.create_index("fullName")

    @staticmethod
    def _projection(exclude):
        return {field: 0 for field in exclude} or None

    @staticmethod
    async def _pre_save(document: dict) -> dict:
        # Only a password that is being written gets hashed
        if document.get("password") is not None:
            document["password"] = await run_in_threadpool(hash_password, document["password"])
        if "watchHistory" in document:
            document["watchHistory"] = [to_object_id(video_id) for video_id in document["watchHistory"]]
        return document

    async def find_one(self, query: dict, exclude=()) -> Optional[UserDocument]:
        document = await self.collection.find_one(query, self._projection(exclude))
        if document is None:
            return None
        return UserDocument.model_validate(document)

    async def find_by_id(self, user_id, exclude=()) -> Optional[UserDocument]:
        try:
            object_id = to_object_id(user_id)
        except ValueError:
            return None
        return await self.find_one({"_id": object_id}, exclude)

    async def create(self, **fields) -> UserDocument:
        if not fields.get("password"):
            raise ValueError("password is required")

        user = UserDocument(**fields)
        document = user.model_dump(by_alias=True, exclude={"id"})
        now = utc_now()
        document["createdAt"] = now
        document["updatedAt"] = now
        document = await self._pre_save(document)

        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return UserDocument.model_validate(document)

    async def update_by_id(self, user_id, exclude=(), **changes) -> Optional[UserDocument]:
        """
        Apply ``changes`` (snake_case field names) to one user.

        A change to None removes the field. Returns the updated document, or
        None when no user has this id.
        """
        to_set = {}
        to_unset = {}
        for name, value in changes.items():
            if value is None:
                to_unset[to_camel(name)] = 1
            else:
                to_set[to_camel(name)] = value

        to_set = await self._pre_save(to_set)
        to_set["updatedAt"] = utc_now()

        update = {"$set": to_set}
        if to_unset:
            update["$unset"] = to_unset

        document = await self.collection.find_one_and_update(
            {"_id": to_object_id(user_id)},
            update,
            projection=self._projection(exclude),
            return_document=ReturnDocument.AFTER,
        )
        if document is None:
            return None
        return UserDocument.model_validate(document)
