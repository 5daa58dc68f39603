# cruise_booking/auth.py
from typing import NamedTuple, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from cruise_booking import errors, schemas, security
from cruise_booking.dependencies import get_store
from cruise_booking.store import EntityStore

# Bearer token is optional here; the guards below decide what a missing one means
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


class Access(NamedTuple):
    is_authenticated: bool
    is_admin: bool


def access_for(caller: Optional[schemas.User]) -> Access:
    """Pure predicate: what may this caller do?"""
    if caller is None:
        return Access(is_authenticated=False, is_admin=False)
    return Access(is_authenticated=True, is_admin=bool(caller.is_admin))


# JWT Token Verification and User Retrieval
def get_current_caller(
    token: Optional[str] = Depends(oauth2_scheme),
    store: EntityStore = Depends(get_store),
) -> Optional[schemas.User]:
    """Resolve the bearer token to a user; anything unusable means an anonymous caller."""
    if not token:
        return None
    try:
        payload = security.decode_access_token(token)
        user_id = int(payload.get("sub"))
    except (JWTError, TypeError, ValueError):
        return None
    return store.users.get(user_id)


def get_current_user(caller: Optional[schemas.User] = Depends(get_current_caller)) -> schemas.User:
    if not access_for(caller).is_authenticated:
        raise errors.Unauthorized()
    return caller


# Secure Admin Verification Dependency
def verify_admin_user(caller: Optional[schemas.User] = Depends(get_current_caller)) -> schemas.User:
    access = access_for(caller)
    if not access.is_authenticated:
        raise errors.Unauthorized()
    if not access.is_admin:
        raise errors.Forbidden()
    return caller
