"""End-user identity service."""

from src.projectbase.core.config import Settings
from src.projectbase.core.db import Datastore
from src.projectbase.core.exceptions import UnavailableError, ValidationError
from src.projectbase.core.logging import get_logger
from src.projectbase.models.public import User
from src.projectbase.repositories import UserRepository
from src.projectbase.schemas.user import UserUpsert

logger = get_logger(__name__)


class UserService:
    """End-user records for the external OAuth flow.

    Works from the datastore handle rather than a request session: login
    paths must keep working when no database is configured.
    """

    def __init__(self, datastore: Datastore, settings: Settings):
        self.datastore = datastore
        self.settings = settings

    async def upsert_user(self, user: UserUpsert) -> None:
        """Insert or update an end user keyed on open_id.

        Silently returns (after logging) when the datastore is unavailable,
        so callers must not assume the write occurred.

        Raises:
            ValidationError: If open_id is empty.
        """
        if not user.open_id:
            raise ValidationError("User openId is required for upsert")

        fields = user.model_dump(exclude_unset=True, exclude={"open_id"})
        if fields.get("role") is not None:
            fields["role"] = user.role.value  # type: ignore[union-attr]

        try:
            async with self.datastore.session() as session:
                repo = UserRepository(session)
                try:
                    await repo.upsert(user.open_id, fields, self.settings.owner_open_id)
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except UnavailableError:
            logger.warning("Cannot upsert user: database not available", open_id=user.open_id)
        except Exception as e:
            logger.error("Failed to upsert user", open_id=user.open_id, error=str(e))
            raise

    async def get_user_by_open_id(self, open_id: str) -> User | None:
        """Get an end user by open_id. Returns None when absent or unavailable."""
        try:
            async with self.datastore.session() as session:
                return await UserRepository(session).get_by_open_id(open_id)
        except UnavailableError:
            logger.warning("Cannot get user: database not available", open_id=open_id)
            return None
