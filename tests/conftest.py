"""Shared fixtures: an in-memory stand-in for the MongoDB client."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from bson import ObjectId


class FakeCollection:
    def __init__(self, docs=None):
        self.docs = [dict(d) for d in (docs or [])]

    def find(self, filter=None):
        assert filter == {}, "only unfiltered queries are expected"
        return iter([dict(d) for d in self.docs])

    def insert_one(self, doc):
        doc = dict(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeClient:
    def __init__(self):
        self.databases = {}
        self.admin = MagicMock()
        self.admin.command.return_value = {"ok": 1.0}
        self.closed = False

    def __getitem__(self, name):
        return self.databases.setdefault(name, FakeDatabase())

    def close(self):
        self.closed = True


@pytest.fixture
def clean_env(monkeypatch):
    """Drop any connection overrides picked up from the shell or a .env file."""
    for var in ("MONGODB_USER", "MONGODB_HOST", "MONGODB_DBNAME",
                "MONGODB_OPTIONS", "NOTES_MONGO_DEBUG"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def fake_db(fake_client):
    return fake_client["noteApp"]
