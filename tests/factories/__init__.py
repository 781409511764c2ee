"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import AdminUserFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, short_id, utc_now
from tests.factories.project import ApiKeyFactory, ProjectFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, AdminUserFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "short_id",
    "utc_now",
    # Identity
    "AdminUserFactory",
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
    # Projects
    "ApiKeyFactory",
    "ProjectFactory",
]
