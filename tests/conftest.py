"""
Test configuration and fixtures for pytest.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from employee_api.main import create_app


def _matches(document, query):
    return all(document.get(key) == value for key, value in query.items())


class InMemoryCursor:
    """Async cursor over a list of documents."""

    def __init__(self, documents):
        self._documents = documents

    def sort(self, keys):
        for field, direction in reversed(keys):
            self._documents.sort(key=lambda doc: doc[field], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return [copy.deepcopy(doc) for doc in self._documents[:length]]


class InMemoryCollection:
    """Subset of AsyncIOMotorCollection used by the repositories."""

    def __init__(self, name):
        self.name = name
        self.documents = []

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    async def find_one(self, query):
        for doc in self.documents:
            if _matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, query=None):
        return InMemoryCursor([doc for doc in self.documents if _matches(doc, query or {})])

    async def delete_one(self, query):
        for index, doc in enumerate(self.documents):
            if _matches(doc, query):
                del self.documents[index]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class InMemoryDatabase:
    """Subset of AsyncIOMotorDatabase: collections by name."""

    def __init__(self):
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(name)
        return self._collections[name]


@pytest.fixture
def db():
    return InMemoryDatabase()


@pytest.fixture
def app(db):
    return create_app(database=db)


@pytest.fixture
async def client(app):
    """Async HTTP client bound to the in-process app."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def employee_payload():
    return {
        "name": "Asha",
        "designation": "Engineer",
        "department": "R&D",
        "salary": 95000
    }
