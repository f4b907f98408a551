"""
Auth database provisioning job.

Runs once at container startup, before the auth service accepts traffic.
Creates the application credential, the validated collections, their
indexes and the seed administrator. Safe to run again after a restart.

Usage:
    python -m authdb

Environment Variables:
    MONGODB_URI: MongoDB connection string with admin credentials
    AUTH_DB_NAME: Database to provision (default: selco_auth)
    APP_DB_USER / APP_DB_PASSWORD: Application credential
    ADMIN_EMAIL: Seed administrator email
    ADMIN_PASSWORD or ADMIN_PASSWORD_HASH: Seed administrator credential
    LOG_LEVEL: Logging level (default: INFO)
"""
import asyncio
import logging
import sys

from pydantic import ValidationError

from authdb.config import get_settings
from authdb.database.connections import get_mongo_client, close_connections
from authdb.database.provisioner import inspect_footprint, provision

logger = logging.getLogger("authdb")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def main() -> int:
    """Main entry point."""
    settings = get_settings()

    try:
        client = await get_mongo_client()

        # Fail fast when the server is unreachable
        await client.admin.command("ping")
        logger.info("Connected to MongoDB")

        report = await provision(client, settings)

        footprint = await inspect_footprint(client[report.db_name], settings.app_db_user)
        index_count = sum(len(c["indexes"]) for c in footprint["collections"].values())
        logger.info(
            f"Footprint: app user={footprint['app_user']}, "
            f"collections={len(footprint['collections'])}, "
            f"indexes={index_count}, admin users={footprint['admin_users']}"
        )
    except Exception as e:
        logger.error(f"Provisioning failed: {e}")
        return 1
    finally:
        await close_connections()

    return 0


def run() -> None:
    """Console script entry point."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.log_level)
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
