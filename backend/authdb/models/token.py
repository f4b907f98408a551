"""
Refresh token model for the auth database.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, Field


class Token(BaseModel):
    """
    Refresh token document model for the tokens collection.

    Expired documents are removed by the store's TTL monitor, which runs
    periodically, so readers should still check is_expired().
    """
    id: Optional[ObjectId] = Field(None, alias="_id", description="MongoDB document id")
    user_id: ObjectId = Field(..., alias="userId", description="Owning user")
    refresh_token: str = Field(..., alias="refreshToken", description="Opaque refresh token")
    expires_at: datetime = Field(..., alias="expiresAt", description="Expiry timestamp")
    created_at: Optional[datetime] = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Issue timestamp",
    )

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Check whether the token is past its expiry."""
        now = now or datetime.now(timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return now > expires_at

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)
