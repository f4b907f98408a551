"""
Security utilities for the seed administrator credential.
"""
import logging

from passlib.context import CryptContext

from authdb.config import Settings
from authdb.database.databases.auth_db import PASSWORD_HASH_MIN_LENGTH

logger = logging.getLogger(__name__)

# Password hashing context using bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# bcrypt digest of "admin123", for local development only
DEV_ADMIN_PASSWORD_HASH = "$2a$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/LeG.XLyq5F8U5Mz5y"


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using bcrypt.
    
    Args:
        plain_password: The plain text password to hash
        
    Returns:
        Hashed password string
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.
    
    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against
        
    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def resolve_admin_password_hash(settings: Settings) -> str:
    """
    Pick the password hash for the seed administrator.

    Precedence: ADMIN_PASSWORD_HASH, then ADMIN_PASSWORD (hashed here),
    then the development hash.

    Raises:
        ValueError: If a supplied hash is too short to pass the users validator
    """
    if settings.admin_password_hash:
        if len(settings.admin_password_hash) < PASSWORD_HASH_MIN_LENGTH:
            raise ValueError(
                f"ADMIN_PASSWORD_HASH must be at least {PASSWORD_HASH_MIN_LENGTH} characters"
            )
        return settings.admin_password_hash

    if settings.admin_password:
        return hash_password(settings.admin_password)

    logger.warning(
        "No ADMIN_PASSWORD or ADMIN_PASSWORD_HASH set; seeding the development "
        "admin credential. Do not use this in production."
    )
    return DEV_ADMIN_PASSWORD_HASH
