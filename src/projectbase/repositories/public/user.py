"""Repositories for identity entities."""

from typing import Any

from sqlmodel import select

from src.projectbase.core.db import dialect_insert
from src.projectbase.core.exceptions import ValidationError
from src.projectbase.models.base import utc_now
from src.projectbase.models.enums import UserRole
from src.projectbase.models.public import AdminUser, User
from src.projectbase.repositories.base import BaseRepository

# Fields an upsert may overwrite on an existing end user
USER_UPSERT_FIELDS = ("name", "email", "login_method", "role", "last_signed_in")


class UserRepository(BaseRepository[User]):
    """Repository for end users resolved from the external OAuth session."""

    model = User

    async def get_by_open_id(self, open_id: str) -> User | None:
        """Get end user by external-auth identifier."""
        result = await self.session.execute(select(User).where(User.open_id == open_id))
        return result.scalar_one_or_none()

    async def upsert(
        self,
        open_id: str,
        fields: dict[str, Any],
        owner_open_id: str | None = None,
    ) -> None:
        """Insert the user or update the supplied fields, keyed on open_id.

        Only keys present in ``fields`` are written on conflict. When no role
        is supplied and ``open_id`` is the configured owner, role ``admin`` is
        written. If nothing else would change, ``last_signed_in`` is refreshed.

        Raises:
            ValidationError: If open_id is empty.
        """
        if not open_id:
            raise ValidationError("User openId is required for upsert")

        now = utc_now()
        values: dict[str, Any] = {"open_id": open_id}
        update_set: dict[str, Any] = {}

        for field in USER_UPSERT_FIELDS:
            if field in fields and not (field == "last_signed_in" and fields[field] is None):
                values[field] = fields[field]
                update_set[field] = fields[field]

        if "role" not in fields and owner_open_id and open_id == owner_open_id:
            values["role"] = UserRole.ADMIN.value
            update_set["role"] = UserRole.ADMIN.value

        if values.get("last_signed_in") is None:
            values["last_signed_in"] = now
        if not update_set:
            update_set["last_signed_in"] = now
        values.setdefault("role", UserRole.USER.value)
        values["created_at"] = now
        values["updated_at"] = now
        update_set["updated_at"] = now

        stmt = dialect_insert(self.session, User).values(**values)
        stmt = stmt.on_conflict_do_update(index_elements=["open_id"], set_=update_set)
        await self.session.execute(stmt)


class AdminUserRepository(BaseRepository[AdminUser]):
    """Repository for operator accounts."""

    model = AdminUser

    async def get_by_email(self, email: str) -> AdminUser | None:
        """Get admin account by email address."""
        result = await self.session.execute(select(AdminUser).where(AdminUser.email == email))
        return result.scalar_one_or_none()

    async def upsert_credentials(self, email: str, password_hash: str, name: str) -> None:
        """Insert the account or overwrite its hash and name, keyed on email."""
        now = utc_now()
        stmt = dialect_insert(self.session, AdminUser).values(
            email=email,
            password_hash=password_hash,
            name=name,
            is_active=True,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["email"],
            set_={"password_hash": password_hash, "name": name, "updated_at": now},
        )
        await self.session.execute(stmt)
