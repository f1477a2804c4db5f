import asyncio
import copy
import os
import tempfile
from types import SimpleNamespace

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-secret")
os.environ.setdefault("REFRESH_TOKEN_SECRET", "test-refresh-secret")
os.environ.setdefault("SUPABASE_PROJECT_URL", "https://project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "service-key")
os.environ.setdefault("TEMP_UPLOAD_DIR", tempfile.mkdtemp(prefix="videotube-temp-"))
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from videotube.application import application
from videotube.db.dependency import get_db, get_media_storage
from videotube.model.user import UserModel
from videotube.model.video import VideoModel


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents

    async def to_list(self, length=None):
        return list(self.documents)


class FakeCollection:
    """In-memory stand-in for the parts of AsyncCollection the models use."""

    def __init__(self):
        self.documents = []
        self.unique_fields = set()
        self.indexes = []
        self.pipelines = []
        self.aggregate_result = []

    async def create_index(self, key, unique=False):
        self.indexes.append((key, unique))
        if unique:
            self.unique_fields.add(key)
        return f"{key}_1"

    def _matches(self, document, query):
        for key, value in query.items():
            if key == "$or":
                if not any(self._matches(document, condition) for condition in value):
                    return False
            elif document.get(key) != value:
                return False
        return True

    @staticmethod
    def _project(document, projection):
        document = copy.deepcopy(document)
        for field in projection or {}:
            document.pop(field, None)
        return document

    async def find_one(self, query, projection=None):
        # Yield like a real round trip so concurrent callers interleave
        await asyncio.sleep(0)
        for document in self.documents:
            if self._matches(document, query):
                return self._project(document, projection)
        return None

    async def insert_one(self, document):
        await asyncio.sleep(0)
        for field in self.unique_fields:
            if any(existing.get(field) == document.get(field) for existing in self.documents):
                raise DuplicateKeyError(f"E11000 duplicate key error collection dup key: {field}")
        stored = copy.deepcopy(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"], acknowledged=True)

    async def find_one_and_update(self, query, update, projection=None, return_document=None):
        await asyncio.sleep(0)
        for document in self.documents:
            if self._matches(document, query):
                document.update(update.get("$set", {}))
                for field in update.get("$unset", {}):
                    document.pop(field, None)
                return self._project(document, projection)
        return None

    async def aggregate(self, pipeline):
        self.pipelines.append(pipeline)
        return FakeCursor(self.aggregate_result)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeMediaStorage:
    """Answers like MediaStorage.upload; queue failures with ``failures``."""

    def __init__(self):
        self.uploaded = []
        self.failures = []

    async def upload(self, local_file_path):
        if not local_file_path:
            return None
        fail = self.failures.pop(0) if self.failures else False
        if fail:
            return None
        self.uploaded.append(local_file_path)
        return {"url": f"https://cdn.example.com/{os.path.basename(local_file_path)}"}


@pytest.fixture
def fake_db():
    db = FakeDatabase()
    # What UserModel.create_indexes sets up on a real server
    db["users"].unique_fields.update({"username", "email"})
    return db


@pytest.fixture
def users(fake_db):
    return UserModel(fake_db)


@pytest.fixture
def videos(fake_db):
    return VideoModel(fake_db)


@pytest.fixture
def media_storage():
    return FakeMediaStorage()


@pytest.fixture
def client(fake_db, media_storage):
    application.dependency_overrides[get_db] = lambda: fake_db
    application.dependency_overrides[get_media_storage] = lambda: media_storage
    # No context manager: the lifespan (real MongoDB connection) is skipped
    yield TestClient(application)
    application.dependency_overrides.clear()


@pytest.fixture
def avatar_file():
    return ("avatar.png", b"\x89PNG\r\n\x1a\nfake-avatar", "image/png")


@pytest.fixture
def register_form():
    return {
        "username": "JohnDoe",
        "email": "John@Example.com",
        "password": "s3cret-pass",
        "fullName": "John Doe",
    }
