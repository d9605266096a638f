# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import ConflictError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...utils.datetime_utils import ensure_utc, utc_now

# Default projection: the password hash only leaves the database on request
_WITHOUT_PASSWORD = {UserFields.PASSWORD: 0}


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection

    async def find_by_username(self, username: str, include_password: bool = False) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for (surrounding whitespace ignored)
            include_password: Load the password hash for credential verification

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        projection = None if include_password else _WITHOUT_PASSWORD
        try:
            document = await self.user_collection.find_one(
                {UserFields.USERNAME: username.strip()},
                projection,
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by username: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, ValueError, TypeError):
            return None

        try:
            document = await self.user_collection.find_one(
                {UserFields.MONGO_ID: object_id},
                _WITHOUT_PASSWORD,
            )
        except PyMongoError as e:
            raise RuntimeError(f"Error finding user by ID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model carrying the password hash

        Returns:
            Saved User with ID set and the hash stripped

        Raises:
            ConflictError: If the username or email is already registered
        """
        if not user:
            raise ValueError("User cannot be None")

        document = self._user_to_dict(user)
        now = utc_now()
        document[UserFields.CREATED_AT] = now
        document[UserFields.UPDATED_AT] = now

        try:
            result = await self.user_collection.insert_one(document)
        except DuplicateKeyError as e:
            key_pattern = (e.details or {}).get("keyPattern", {})
            if UserFields.EMAIL in key_pattern:
                raise ConflictError("Email already registered") from e
            raise ConflictError("Username already exists") from e

        document[UserFields.MONGO_ID] = result.inserted_id
        document.pop(UserFields.PASSWORD, None)
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            role=document.get(UserFields.ROLE, "user"),
            email=document.get(UserFields.EMAIL),
            hashed_password=document.get(UserFields.PASSWORD),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )

    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document

        Args:
            user: User domain model

        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.USERNAME: user.username,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role,
        }
        # Sparse unique index: leave the field out rather than storing null
        if user.email:
            user_dict[UserFields.EMAIL] = user.email
        return user_dict
