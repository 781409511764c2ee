"""Operator command line.

Usage:
    python -m src.projectbase.cli create-admin admin@example.com --password secret --name Ops
    python -m src.projectbase.cli init-db
    python -m src.projectbase.cli migrate

Reads DATABASE_URL and JWT_SECRET_KEY from the environment or .env.
"""

import argparse
import asyncio
import sys
from collections.abc import Sequence

from src.projectbase.core.config import get_settings
from src.projectbase.core.db import Datastore, create_all_tables
from src.projectbase.core.logging import get_logger, setup_logging
from src.projectbase.core.migrations import run_migrations_sync
from src.projectbase.repositories import AdminUserRepository
from src.projectbase.services import AdminAuthService

logger = get_logger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Projectbase operator tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_admin = subparsers.add_parser(
        "create-admin",
        help="Create an admin account, or reset its password if the email exists",
    )
    create_admin.add_argument("email")
    create_admin.add_argument("--password", required=True)
    create_admin.add_argument("--name", default=None, help="Defaults to the email's local part")

    subparsers.add_parser("init-db", help="Create all tables directly from the models")
    subparsers.add_parser("migrate", help="Apply Alembic migrations up to head")

    return parser.parse_args(argv)


async def create_admin(datastore: Datastore, email: str, password: str, name: str | None) -> None:
    async with datastore.session() as session:
        service = AdminAuthService(AdminUserRepository(session), session)
        await service.create_admin_user(email, password, name)


async def init_db(datastore: Datastore) -> None:
    await create_all_tables(datastore)
    logger.info("Tables created")


async def run(args: argparse.Namespace) -> None:
    datastore = Datastore.from_settings(get_settings())
    try:
        if args.command == "create-admin":
            await create_admin(datastore, args.email, args.password, args.name)
        elif args.command == "init-db":
            await init_db(datastore)
    finally:
        await datastore.dispose()


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    setup_logging(settings.debug)
    args = parse_args(argv)

    if not settings.database_url:
        print("DATABASE_URL is not configured", file=sys.stderr)
        return 1

    if args.command == "migrate":
        run_migrations_sync()
        return 0

    asyncio.run(run(args))
    return 0


if __name__ == "__main__":
    sys.exit(main())
