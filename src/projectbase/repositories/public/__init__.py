"""Identity repositories.

End-user and admin account repositories live here.
Project-scoped repositories go in repositories/tenant/.
"""

from src.projectbase.repositories.public.user import AdminUserRepository, UserRepository

__all__ = [
    "AdminUserRepository",
    "UserRepository",
]
