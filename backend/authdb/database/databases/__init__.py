"""
Database definitions and collection constants.
"""
from authdb.database.databases import auth_db

__all__ = ["auth_db"]
