"""
Auth database provisioning.
Ensures the application credential, validated collections, indexes and the
seed administrator exist. Every step is safe to run again on an already
provisioned database.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pydantic import BaseModel, Field
from pymongo.errors import DuplicateKeyError, OperationFailure

from authdb.config import Settings, get_settings
from authdb.core.security import resolve_admin_password_hash
from authdb.database.databases.auth_db import APP_USER_ROLE, Collections
from authdb.models.user import User, UserStatus, UserType

logger = logging.getLogger(__name__)

# createUser failure codes meaning the user is already there
# (51003 UserAlreadyExists, 11000 on older servers)
USER_EXISTS_CODES = {51003, 11000}


class ProvisionReport(BaseModel):
    """Outcome of a provisioning run."""
    db_name: str = Field(..., description="Provisioned database")
    app_user_created: bool = Field(default=False, description="Credential created in this run")
    collections_created: list[str] = Field(default_factory=list)
    collections_updated: list[str] = Field(
        default_factory=list,
        description="Existing collections whose validator was re-applied",
    )
    indexes: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Index names ensured per collection",
    )
    admin_seeded: bool = Field(default=False, description="Seed admin inserted in this run")


async def ensure_app_user(db: AsyncIOMotorDatabase, username: str, password: str) -> bool:
    """
    Ensure the application credential exists with readWrite on this database only.

    Returns:
        True if the user was created, False if it already existed

    Raises:
        OperationFailure: On any failure other than "user already exists"
    """
    info = await db.command("usersInfo", username)
    if info.get("users"):
        logger.info(f"Application user '{username}' already exists")
        return False

    try:
        await db.command(
            "createUser",
            username,
            pwd=password,
            roles=[{"role": APP_USER_ROLE, "db": db.name}],
        )
    except OperationFailure as e:
        if e.code in USER_EXISTS_CODES:
            logger.info(f"Application user '{username}' was created concurrently")
            return False
        raise

    logger.info(f"Created application user '{username}' ({APP_USER_ROLE} on {db.name})")
    return True


async def ensure_collections(
    db: AsyncIOMotorDatabase,
    validation_level: str = "strict",
    validation_action: str = "error",
) -> tuple[list[str], list[str]]:
    """
    Ensure every auth collection exists with its $jsonSchema validator.

    Missing collections are created; existing ones get the validator
    re-applied with collMod.

    Returns:
        (created, updated) collection names
    """
    existing = set(await db.list_collection_names())
    created: list[str] = []
    updated: list[str] = []

    for name, validator in Collections.VALIDATORS.items():
        if name in existing:
            await db.command(
                "collMod",
                name,
                validator=validator,
                validationLevel=validation_level,
                validationAction=validation_action,
            )
            logger.info(f"Collection '{name}' exists, validator re-applied")
            updated.append(name)
        else:
            await db.create_collection(
                name,
                validator=validator,
                validationLevel=validation_level,
                validationAction=validation_action,
            )
            logger.info(f"Created collection '{name}'")
            created.append(name)

    return created, updated


async def ensure_indexes(db: AsyncIOMotorDatabase) -> dict[str, list[str]]:
    """
    Create the indexes for the auth collections.

    Creating an index that already exists with the same options is a no-op
    on the server. An existing index with conflicting options raises.
    """
    ensured: dict[str, list[str]] = {}

    for collection_name, indexes in Collections.INDEXES.items():
        collection = db[collection_name]
        names = []
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            names.append(await collection.create_index(keys, **kwargs))
        ensured[collection_name] = names
        logger.info(f"Indexes ensured on '{collection_name}': {', '.join(names)}")

    return ensured


async def seed_admin(db: AsyncIOMotorDatabase, email: str, password_hash: str) -> bool:
    """
    Insert the seed administrator.

    The unique email index rejects a second insert; that duplicate key
    error means the admin is already seeded.

    Returns:
        True if inserted, False if it was already there
    """
    admin = User(
        email=email,
        password_hash=password_hash,
        user_type=UserType.ADMIN,
        status=UserStatus.ACTIVE,
    )

    try:
        await db[Collections.USERS].insert_one(admin.to_document())
    except DuplicateKeyError:
        logger.info(f"Admin user '{email}' already seeded")
        return False

    logger.info(f"Seeded admin user '{email}'")
    return True


async def inspect_footprint(db: AsyncIOMotorDatabase, app_user: str) -> dict[str, Any]:
    """
    Read back what provisioning leaves in the database.

    Returns:
        Dict with keys: app_user, collections (name -> validator/indexes),
        admin_users
    """
    info = await db.command("usersInfo", app_user)

    cursor = await db.list_collections()
    specs = {spec["name"]: spec async for spec in cursor}

    collections: dict[str, Any] = {}
    for name in Collections.VALIDATORS:
        spec = specs.get(name)
        if spec is None:
            continue
        index_info = await db[name].index_information()
        collections[name] = {
            "validator": "validator" in spec.get("options", {}),
            "indexes": sorted(k for k in index_info if k != "_id_"),
        }

    admin_users = await db[Collections.USERS].count_documents({"userType": UserType.ADMIN.value})

    return {
        "app_user": bool(info.get("users")),
        "collections": collections,
        "admin_users": admin_users,
    }


async def provision(
    client: AsyncIOMotorClient,
    settings: Optional[Settings] = None,
) -> ProvisionReport:
    """
    Provision the auth database.

    Steps, in order:
    - Ensure the application credential
    - Ensure validated collections
    - Ensure indexes
    - Seed the administrator

    Any error other than the expected "already exists" cases propagates.
    """
    settings = settings or get_settings()
    db = client[settings.auth_db_name]
    report = ProvisionReport(db_name=db.name)

    report.app_user_created = await ensure_app_user(
        db, settings.app_db_user, settings.app_db_password
    )

    created, updated = await ensure_collections(
        db,
        validation_level=settings.validation_level,
        validation_action=settings.validation_action,
    )
    report.collections_created = created
    report.collections_updated = updated

    report.indexes = await ensure_indexes(db)

    report.admin_seeded = await seed_admin(
        db, settings.admin_email, resolve_admin_password_hash(settings)
    )

    logger.info(f"Auth database '{db.name}' provisioned successfully")
    return report
