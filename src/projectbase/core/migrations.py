"""Alembic migration runner used by the operator CLI."""

from alembic.config import Config

from alembic import command


def run_migrations_sync(revision: str = "head") -> None:
    """Upgrade the configured database to ``revision``.

    Must not be called from a running event loop: the env script starts its own.
    """
    alembic_cfg = Config("alembic.ini")
    command.upgrade(alembic_cfg, revision)
