"""
User model for the auth database.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, Field

from authdb.database.databases.auth_db import EMAIL_PATTERN, PASSWORD_HASH_MIN_LENGTH


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserType(str, Enum):
    """User account types."""
    EMPLOYEE = "EMPLOYEE"
    ADMIN = "ADMIN"


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    BLOCKED = "BLOCKED"


class User(BaseModel):
    """
    User document model for the users collection.

    Mirrors the collection's $jsonSchema validator so a document can be
    checked before it reaches the store.
    """
    id: Optional[ObjectId] = Field(None, alias="_id", description="MongoDB document id")
    email: str = Field(..., pattern=EMAIL_PATTERN, description="Unique email address")
    password_hash: str = Field(
        ...,
        alias="passwordHash",
        min_length=PASSWORD_HASH_MIN_LENGTH,
        description="Bcrypt hashed password",
    )
    user_type: UserType = Field(..., alias="userType", description="Account type")
    status: UserStatus = Field(default=UserStatus.ACTIVE, description="Account status")
    created_at: datetime = Field(
        default_factory=_utcnow,
        alias="createdAt",
        description="Account creation timestamp",
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        alias="updatedAt",
        description="Last modification timestamp",
    )

    class Config:
        populate_by_name = True
        use_enum_values = True
        validate_assignment = True
        arbitrary_types_allowed = True

    def set_status(self, status: UserStatus) -> None:
        """Change the account status and bump updatedAt."""
        self.status = status
        self.updated_at = _utcnow()

    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored field names, without the id."""
        return self.model_dump(by_alias=True, exclude={"id"})
