"""
Auth database configuration.
Stores user identity, refresh tokens and the access audit trail.

Structure:
- users: User accounts (unique email)
- tokens: Refresh tokens, removed by a TTL index once expired
- access_logs: Append-only login/access audit trail
"""

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
PASSWORD_HASH_MIN_LENGTH = 60

USER_TYPES = ["EMPLOYEE", "ADMIN"]
USER_STATUSES = ["ACTIVE", "INACTIVE", "BLOCKED"]

# Roles granted to the application credential, scoped to the auth database
APP_USER_ROLE = "readWrite"


class Collections:
    """Collection names in the auth database."""
    USERS = "users"
    TOKENS = "tokens"
    ACCESS_LOGS = "access_logs"

    # $jsonSchema validators for each collection
    VALIDATORS = {
        "users": {
            "$jsonSchema": {
                "bsonType": "object",
                "required": ["email", "passwordHash", "userType", "status"],
                "properties": {
                    "email": {
                        "bsonType": "string",
                        "pattern": EMAIL_PATTERN,
                    },
                    "passwordHash": {
                        "bsonType": "string",
                        "minLength": PASSWORD_HASH_MIN_LENGTH,
                    },
                    "userType": {
                        "bsonType": "string",
                        "enum": USER_TYPES,
                    },
                    "status": {
                        "bsonType": "string",
                        "enum": USER_STATUSES,
                    },
                    "createdAt": {"bsonType": "date"},
                    "updatedAt": {"bsonType": "date"},
                },
            }
        },
        "tokens": {
            "$jsonSchema": {
                "bsonType": "object",
                "required": ["userId", "refreshToken", "expiresAt"],
                "properties": {
                    "userId": {"bsonType": "objectId"},
                    "refreshToken": {"bsonType": "string"},
                    "expiresAt": {"bsonType": "date"},
                    "createdAt": {"bsonType": "date"},
                },
            }
        },
        "access_logs": {
            "$jsonSchema": {
                "bsonType": "object",
                "required": ["dateTime", "ip"],
                "properties": {
                    "userId": {"bsonType": "objectId"},
                    "dateTime": {"bsonType": "date"},
                    "ip": {"bsonType": "string"},
                    "userAgent": {"bsonType": "string"},
                    "success": {"bsonType": "bool"},
                    "reason": {"bsonType": "string"},
                },
            }
        },
    }

    # Index definitions for each collection
    INDEXES = {
        "users": [
            {"keys": [("email", 1)], "name": "email_unique", "unique": True},
            {"keys": [("status", 1)], "name": "status"},
        ],
        "tokens": [
            {"keys": [("userId", 1)], "name": "userId"},
            # Zero retention: documents go as soon as expiresAt passes
            {"keys": [("expiresAt", 1)], "name": "expiresAt_ttl", "expireAfterSeconds": 0},
        ],
        "access_logs": [
            {"keys": [("userId", 1)], "name": "userId"},
            {"keys": [("dateTime", -1)], "name": "dateTime_desc"},
        ],
    }
