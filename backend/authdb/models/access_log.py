"""
Access log model for the auth database.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, Field


class AccessLog(BaseModel):
    """Append-only access log entry for the access_logs collection."""
    id: Optional[ObjectId] = Field(None, alias="_id", description="MongoDB document id")
    date_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="dateTime",
        description="When the access happened",
    )
    ip: str = Field(..., description="Client IP address")
    user_id: Optional[ObjectId] = Field(None, alias="userId", description="User, when known")
    user_agent: Optional[str] = Field(None, alias="userAgent")
    success: Optional[bool] = Field(None, description="Whether the attempt succeeded")
    reason: Optional[str] = Field(None, description="Failure reason, if any")

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)
