import logging
from typing import Optional

import bcrypt

from lingam.app.core.config import Settings
from lingam.app.core.security import Role, ROLE_SCOPES, User

logger = logging.getLogger(__name__)


def hash_password(plain: str) -> str:
    """Hash a password with bcrypt; the result goes in ADMIN_PASSWORD_HASH."""
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(plain.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError as e:
        # Malformed hash in configuration
        logger.error(f"Password verification error: {e}")
        return False


def authenticate_admin(settings: Settings, username: str, password: str) -> Optional[User]:
    """Check the configured back-office credentials."""
    if username != settings.admin_username or not verify_password(password, settings.admin_password_hash):
        logger.warning(f"Failed back-office login for '{username}'")
        return None
    return User(username=username, role=Role.ADMIN, scopes=ROLE_SCOPES[Role.ADMIN])
