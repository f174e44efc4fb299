"""
Shared fixtures for PIS API tests

Configuration is pinned before any application module is imported, and the
Mongo client is replaced by an in-memory database so tests run without a server.
"""
import copy
import os
from io import BytesIO

import pytest
from PIL import Image

os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["MONGO_URL"] = "mongodb://localhost:27017"
os.environ["DB_NAME"] = "pis_test"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "test-admin-pass"
os.environ["RESEND_API_KEY"] = ""
os.environ["PHOTOGRAPHER_NAME"] = "Test Photography"
os.environ["DEFAULT_LOCALE"] = "zh-CN"


class FakeResult:
    def __init__(self, matched_count=0, deleted_count=0, inserted_id=None):
        self.matched_count = matched_count
        self.modified_count = matched_count
        self.deleted_count = deleted_count
        self.inserted_id = inserted_id


def matches(doc: dict, query: dict) -> bool:
    for key, cond in query.items():
        value = doc.get(key)
        if isinstance(cond, dict) and cond and all(op.startswith("$") for op in cond):
            if "$in" in cond and value not in cond["$in"]:
                return False
            if "$ne" in cond and value == cond["$ne"]:
                return False
        elif value != cond:
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs
        self._skip = 0
        self._limit = 0

    def sort(self, key, direction=1):
        self._docs.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    def skip(self, count):
        self._skip = count
        return self

    def limit(self, count):
        self._limit = count
        return self

    def _results(self):
        docs = self._docs[self._skip:]
        if self._limit:
            docs = docs[:self._limit]
        return [copy.deepcopy(d) for d in docs]

    async def to_list(self, length=None):
        docs = self._results()
        return docs[:length] if length else docs

    def __aiter__(self):
        self._iter = iter(self._results())
        return self

    async def __anext__(self):
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    """Subset of the motor collection API used by the application"""

    def __init__(self):
        self.docs = []

    async def create_index(self, *args, **kwargs):
        return None

    async def insert_one(self, doc):
        self.docs.append(copy.deepcopy(doc))
        return FakeResult(inserted_id=doc.get("id"))

    async def find_one(self, query=None, projection=None):
        for doc in self.docs:
            if matches(doc, query or {}):
                return copy.deepcopy(doc)
        return None

    def find(self, query=None, projection=None):
        return FakeCursor([d for d in self.docs if matches(d, query or {})])

    async def count_documents(self, query):
        return len([d for d in self.docs if matches(d, query)])

    async def update_one(self, query, update, upsert=False):
        for doc in self.docs:
            if matches(doc, query):
                doc.update(copy.deepcopy(update.get("$set", {})))
                return FakeResult(matched_count=1)
        if upsert:
            new_doc = {k: v for k, v in query.items() if not isinstance(v, dict)}
            new_doc.update(copy.deepcopy(update.get("$set", {})))
            self.docs.append(new_doc)
        return FakeResult()

    async def delete_one(self, query):
        for i, doc in enumerate(self.docs):
            if matches(doc, query):
                del self.docs[i]
                return FakeResult(deleted_count=1)
        return FakeResult()

    async def delete_many(self, query):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not matches(d, query)]
        return FakeResult(deleted_count=before - len(self.docs))


class FakeDatabase:
    def __init__(self):
        self._collections = {}

    def __getitem__(self, name):
        return self._collections.setdefault(name, FakeCollection())

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return self[name]

    def clear(self):
        self._collections.clear()


class FakeMotorClient:
    database = FakeDatabase()

    def __init__(self, *args, **kwargs):
        pass

    def __getitem__(self, name):
        return self.database

    def close(self):
        pass


import motor.motor_asyncio  # noqa: E402
motor.motor_asyncio.AsyncIOMotorClient = FakeMotorClient

from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture(autouse=True)
def fake_db():
    """Empty in-memory database for every test"""
    FakeMotorClient.database.clear()
    yield FakeMotorClient.database
    FakeMotorClient.database.clear()


@pytest.fixture
def client():
    from server import app
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client):
    """Authorization header for the configured admin"""
    response = client.post("/api/admin/login", json={
        "username": "admin",
        "password": "test-admin-pass"
    })
    assert response.status_code == 200, f"Admin login failed: {response.text}"
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def make_watermark():
    """Factory for valid watermark dicts"""
    def create(watermark_id, **fields):
        watermark = {
            "id": watermark_id,
            "type": "text",
            "text": f"© {watermark_id}",
            "opacity": 0.5,
            "position": "bottom-right",
            "margin": 5,
            "enabled": True,
        }
        watermark.update(fields)
        return watermark
    return create


@pytest.fixture
def test_image_factory():
    """Factory to create in-memory test images"""
    def create_image(color='black', size=(200, 100), fmt='JPEG'):
        img = Image.new('RGB', size, color=color)
        img_bytes = BytesIO()
        img.save(img_bytes, format=fmt)
        img_bytes.seek(0)
        return img_bytes
    return create_image
