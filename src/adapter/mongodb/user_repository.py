"""MongoDB implementation of UserRepository."""

import uuid
from datetime import date, datetime, time, timezone
from logging import getLogger
from typing import Any

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb.connection import USERS_COLLECTION_NAME
from domain.model.errors import DuplicateAccountError, StoreUnavailableError
from domain.model.user import PROFILE_FIELDS, Profile, User

logger = getLogger(__name__)


def _to_mongo_value(value: Any) -> Any:
    """BSON has no date-only type; store dates as UTC midnight."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    return value


def _to_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    return value


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        profile_values = {name: doc.get(name) for name in PROFILE_FIELDS}
        profile_values['date_of_birth'] = _to_date(profile_values['date_of_birth'])
        return User(
            id=doc['_id'],
            email=doc['email'],
            password_hash=doc['password_hash'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            profile=Profile(**profile_values),
            verification_code=doc.get('verification_code'),
            verification_code_expires_at=doc.get('verification_code_expires_at'),
            is_confirmed=bool(doc.get('is_confirmed', False)),
            token_version=doc.get('token_version', 0),
            last_login=doc.get('last_login'),
        )

    def _store_error(self, action: str, email: str, e: PyMongoError) -> StoreUnavailableError:
        logger.error(f"Failed to {action}", extra={"email": email, "error": str(e)})
        return StoreUnavailableError(f"Failed to {action}")

    def create(self, email: str, password_hash: str, profile: Profile) -> User:
        """Insert a new unconfirmed account and return it."""
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'email': email,
            'password_hash': password_hash,
            **{name: _to_mongo_value(getattr(profile, name)) for name in PROFILE_FIELDS},
            'verification_code': None,
            'verification_code_expires_at': None,
            'is_confirmed': False,
            'token_version': 0,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise DuplicateAccountError("Email already registered")
        except PyMongoError as e:
            raise self._store_error("create user", email, e) from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        """Find an account by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            raise self._store_error("get user by email", email, e) from e
        return self._to_domain(doc) if doc else None

    def update_profile(
        self,
        email: str,
        changes: dict[str, Any],
        verification_code: str,
        code_expires_at: datetime,
    ) -> User | None:
        """Apply profile changes and the new verification code in a single document write."""
        now = datetime.now(timezone.utc)
        update = {name: _to_mongo_value(value) for name, value in changes.items() if name in PROFILE_FIELDS}
        update.update({
            'verification_code': verification_code,
            'verification_code_expires_at': code_expires_at,
            'updated_at': now,
        })
        try:
            doc = self.collection.find_one_and_update(
                {'email': email},
                {'$set': update},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._store_error("update profile", email, e) from e

        if not doc:
            return None
        logger.debug("Profile updated", extra={"email": email, "fields": sorted(changes)})
        return self._to_domain(doc)

    def mark_confirmed(self, email: str, verification_code: str) -> bool:
        """Set the confirmed flag and clear the pending code, if it is still verification_code."""
        try:
            result = self.collection.update_one(
                {'email': email, 'verification_code': verification_code},
                {
                    '$set': {'is_confirmed': True, 'updated_at': datetime.now(timezone.utc)},
                    '$unset': {'verification_code': '', 'verification_code_expires_at': ''},
                },
            )
        except PyMongoError as e:
            raise self._store_error("confirm user", email, e) from e
        return result.matched_count > 0

    def bump_token_version(self, email: str) -> int | None:
        """Increment the token epoch so older tokens are rejected."""
        try:
            doc = self.collection.find_one_and_update(
                {'email': email},
                {'$inc': {'token_version': 1}},
                projection={'token_version': 1},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._store_error("revoke tokens", email, e) from e
        return doc['token_version'] if doc else None

    def update_last_login(self, email: str) -> bool:
        """Update the last login timestamp for a user. Return True if successful."""
        try:
            now = datetime.now(timezone.utc)
            result = self.collection.update_one(
                {'email': email},
                {'$set': {'last_login': now, 'updated_at': now}}
            )
            if result.modified_count > 0:
                logger.debug("Updated last_login", extra={"email": email})
                return True
            return False
        except PyMongoError as e:
            logger.error("Failed to update last_login", extra={"email": email, "error": str(e)})
            return False
