"""
Core module - Password hashing and seed credential handling.
"""
from authdb.core.security import (
    hash_password,
    verify_password,
    resolve_admin_password_hash,
)

__all__ = [
    "hash_password",
    "verify_password",
    "resolve_admin_password_hash",
]
