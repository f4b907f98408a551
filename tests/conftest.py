"""
Global test fixtures for the auth database provisioner.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Settings pointing at an isolated test database
- Sample documents for the auth collections
"""

import sys
from datetime import datetime, timezone, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from bson import ObjectId

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# A valid 60 character bcrypt digest
VALID_PASSWORD_HASH = "$2b$12$LQv3c1yqBWVHxkd0LHAkCOYz6TtxMQJqhN8/X4.qOZ3q7K9V6X6Hy"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings():
    """Settings for an isolated test database, ignoring the environment."""
    from authdb.config import Settings

    return Settings(
        _env_file=None,
        mongodb_uri="mongodb://localhost:27017",
        auth_db_name="selco_auth_test",
        app_db_user="selco_auth_test_user",
        app_db_password="test_password",
        admin_email="admin@example.com",
        admin_password_hash=VALID_PASSWORD_HASH,
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached Settings so environment patches take effect."""
    from authdb.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth database."""
    db = mock_async_mongo_client["selco_auth_test"]
    yield db


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def valid_password_hash() -> str:
    return VALID_PASSWORD_HASH


@pytest.fixture
def user_document() -> dict:
    """A complete user document as stored in MongoDB."""
    now = datetime.now(timezone.utc)
    return {
        "email": "employee@example.com",
        "passwordHash": VALID_PASSWORD_HASH,
        "userType": "EMPLOYEE",
        "status": "ACTIVE",
        "createdAt": now,
        "updatedAt": now,
    }


@pytest.fixture
def token_document() -> dict:
    """A refresh token document that expires in one hour."""
    now = datetime.now(timezone.utc)
    return {
        "userId": ObjectId("507f1f77bcf86cd799439011"),
        "refreshToken": "refresh-token-value",
        "expiresAt": now + timedelta(hours=1),
        "createdAt": now,
    }


@pytest.fixture
def access_log_document() -> dict:
    """A successful login access log entry."""
    return {
        "dateTime": datetime.now(timezone.utc),
        "ip": "10.0.0.1",
        "userId": ObjectId("507f1f77bcf86cd799439011"),
        "userAgent": "pytest",
        "success": True,
    }
