from __future__ import annotations

import logging

from sqlalchemy import inspect

from ..core.constants import ADMIN_EMAIL, ADMIN_NAME, ADMIN_PASSWORD, ADMIN_USERNAME
from ..core.enums import Role
from ..extensions import db
from ..users.model import Credential, UserProfile
from ..users.repository import CredentialRepository, UserRepository

logger = logging.getLogger(__name__)


def _import_models() -> None:
    # Registers every table on db.metadata before create_all().
    from ..appointments import model as _appointments  # noqa: F401
    from ..documents import model as _documents  # noqa: F401
    from ..feedback import model as _feedback  # noqa: F401
    from ..messages import model as _messages  # noqa: F401
    from ..tasks import model as _tasks  # noqa: F401
    from ..users import model as _users  # noqa: F401


def apply_schema() -> None:
    """Create missing tables (idempotent). Requires an app context."""
    _import_models()
    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def schema_ready() -> bool:
    """True once the tables the admin seed writes to exist."""
    return {Credential.__tablename__, UserProfile.__tablename__}.issubset(list_tables())


def ensure_admin_account(credentials: CredentialRepository, users: UserRepository) -> bool:
    """Seed the default administrator unless a credential named ``admin`` exists.

    Returns True when the account was created on this call.
    """
    if credentials.exists_by_username(ADMIN_USERNAME):
        logger.debug("Admin account present, skipping seed")
        return False

    logger.info("Creating admin user...")
    credentials.add(
        Credential(username=ADMIN_USERNAME, password=ADMIN_PASSWORD, role=Role.ADMIN.value)
    )
    users.add(
        UserProfile(
            username=ADMIN_USERNAME,
            name=ADMIN_NAME,
            email=ADMIN_EMAIL,
            password=ADMIN_PASSWORD,
            role=Role.ADMIN.value,
        )
    )
    logger.info("Admin user created successfully")
    return True
