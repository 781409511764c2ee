"""Identity models.

End users and admin accounts live here.
Project-scoped data models go in models/tenant/.
"""

from src.projectbase.models.public.user import AdminUser, User

__all__ = [
    "AdminUser",
    "User",
]
