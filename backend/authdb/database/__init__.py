"""
Database module - MongoDB connection and auth database definitions.
"""
from authdb.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
)
from authdb.database.databases import auth_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "auth_db",
]
