"""Admin identity service - password login for operator accounts."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectbase.core.logging import get_logger
from src.projectbase.core.security import DUMMY_PASSWORD_HASH, hash_password, verify_password
from src.projectbase.models.base import utc_now
from src.projectbase.models.public import AdminUser
from src.projectbase.repositories import AdminUserRepository
from src.projectbase.schemas.auth import AdminSession

logger = get_logger(__name__)


def default_admin_name(email: str) -> str:
    """Local part of the email, used when no display name is given."""
    return email.split("@")[0]


class AdminAuthService:
    """Create, authenticate and look up admin accounts.

    Wrong credentials are never an error: authenticate_admin returns None.
    Only backend failures propagate.
    """

    def __init__(self, admin_repo: AdminUserRepository, session: AsyncSession):
        self.admin_repo = admin_repo
        self.session = session

    async def create_admin_user(self, email: str, password: str, name: str | None = None) -> None:
        """Create an admin account, or reset hash and name if the email exists."""
        password_hash = hash_password(password)
        try:
            await self.admin_repo.upsert_credentials(
                email=email,
                password_hash=password_hash,
                name=name or default_admin_name(email),
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Admin account saved", email=email)

    async def authenticate_admin(self, email: str, password: str) -> AdminSession | None:
        """Verify credentials and return the reduced session record.

        Returns None for unknown emails, inactive accounts and wrong
        passwords. On success last_signed_in is set to now.
        """
        admin = await self.admin_repo.get_by_email(email)

        # Always verify so response timing does not reveal whether the email exists
        password_hash = admin.password_hash if admin else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if admin is None or not admin.is_active or not password_valid:
            return None

        try:
            admin.last_signed_in = utc_now()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return AdminSession(id=admin.id, email=admin.email, name=admin.name)  # type: ignore[arg-type]

    async def get_admin_by_id(self, admin_id: int) -> AdminUser | None:
        """Get an admin account by ID. Returns None for unknown IDs."""
        return await self.admin_repo.get_by_id(admin_id)
