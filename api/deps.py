"""Authentication and authorization dependencies shared by the routers."""

from typing import Optional, Type

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.exceptions import AuthenticationError, NotFoundError, PermissionDenied
from core.logger import get_logger
from core.security import can_modify, decode_access_token
from database import models
from database.deps import get_db_write

logger = get_logger("api.deps")

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db_write),
) -> models.User:
    """Resolve the bearer token to a stored user.

    Raises:
        AuthenticationError: If the token is missing, invalid, expired, or
            names a user that no longer exists.
    """
    if credentials is None:
        raise AuthenticationError("Not authorized, no token")
    user_id = decode_access_token(credentials.credentials)
    user = db.get(models.User, user_id)
    if user is None:
        raise AuthenticationError("Not authorized, user not found")
    return user


def require_admin(current_user: models.User = Depends(get_current_user)) -> models.User:
    """Allow the request only for administrators."""
    if not current_user.is_admin:
        logger.warning("User %s denied admin access", current_user.id)
        raise PermissionDenied("Not authorized as an admin")
    return current_user


def get_owned_entry(db: Session, model: Type, entry_id: int, user: models.User):
    """Load a meal or workout the user may act on.

    Raises:
        NotFoundError: If no entry has this id.
        PermissionDenied: If the entry belongs to someone else and the user
            is not an administrator.
    """
    entry = db.get(model, entry_id)
    if entry is None:
        raise NotFoundError(model.__name__, entry_id)
    if not can_modify(user, entry):
        logger.warning("User %s denied access to %s %s", user.id, model.__name__, entry_id)
        raise PermissionDenied()
    return entry
