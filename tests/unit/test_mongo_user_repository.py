"""
Unit tests for MongoUserRepository against a mocked Motor collection.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from device_inventory.core.exceptions import ConflictError
from device_inventory.domain.models.user import User
from device_inventory.infrastructure.db.mongo_user_repository import MongoUserRepository

USER_ID = ObjectId("65f0c0ffee0000000000beef")


@pytest.fixture
def collection():
    mock = MagicMock()
    mock.find_one = AsyncMock(return_value=None)
    mock.insert_one = AsyncMock(return_value=MagicMock(inserted_id=USER_ID))
    return mock


@pytest.fixture
def repository(collection):
    return MongoUserRepository(collection)


class TestFindByUsername:

    @pytest.mark.asyncio
    async def test_password_excluded_by_default(self, repository, collection):
        collection.find_one.return_value = {"_id": USER_ID, "username": "alice", "role": "user"}

        user = await repository.find_by_username(" alice ")

        assert user.id == str(USER_ID)
        assert user.hashed_password is None
        collection.find_one.assert_awaited_once_with({"username": "alice"}, {"password": 0})

    @pytest.mark.asyncio
    async def test_password_loaded_on_request(self, repository, collection):
        collection.find_one.return_value = {"_id": USER_ID, "username": "alice", "password": "$2b$hash"}

        user = await repository.find_by_username("alice", include_password=True)

        assert user.hashed_password == "$2b$hash"
        collection.find_one.assert_awaited_once_with({"username": "alice"}, None)

    @pytest.mark.asyncio
    async def test_unknown_user(self, repository):
        assert await repository.find_by_username("ghost") is None


class TestFindById:

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none(self, repository, collection):
        assert await repository.find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_found(self, repository, collection):
        collection.find_one.return_value = {"_id": USER_ID, "username": "alice", "role": "admin"}
        user = await repository.find_by_id(str(USER_ID))
        assert user.role == "admin"


class TestSave:

    @pytest.mark.asyncio
    async def test_save_strips_password_from_result(self, repository, collection):
        user = User(id=None, username="alice", hashed_password="$2b$hash")

        saved = await repository.save(user)

        assert saved.id == str(USER_ID)
        assert saved.hashed_password is None
        document = collection.insert_one.call_args.args[0]
        assert document["password"] == "$2b$hash"
        assert "email" not in document
        assert document["createdAt"] == document["updatedAt"]

    @pytest.mark.asyncio
    async def test_duplicate_username(self, repository, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000", 11000, {"keyPattern": {"username": 1}}
        )
        with pytest.raises(ConflictError) as exc_info:
            await repository.save(User(id=None, username="alice", hashed_password="h"))
        assert exc_info.value.message == "Username already exists"

    @pytest.mark.asyncio
    async def test_duplicate_email(self, repository, collection):
        collection.insert_one.side_effect = DuplicateKeyError(
            "E11000", 11000, {"keyPattern": {"email": 1}}
        )
        with pytest.raises(ConflictError) as exc_info:
            await repository.save(User(id=None, username="bob", email="a@b.io", hashed_password="h"))
        assert exc_info.value.message == "Email already registered"
