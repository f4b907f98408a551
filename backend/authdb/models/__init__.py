"""
Document models for the auth database collections.
"""
from authdb.models.user import User, UserStatus, UserType
from authdb.models.token import Token
from authdb.models.access_log import AccessLog

__all__ = ["User", "UserStatus", "UserType", "Token", "AccessLog"]
