# jobly/auth/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.auth.jwt import decode_access_token
from jobly.core.errors import forbidden, unauthorized
from jobly.core.request_context import set_context

bearer = HTTPBearer(auto_error=False)

def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> dict | None:
    """Token payload when a valid bearer token is sent, else None (anonymous)."""
    if not creds or not creds.credentials:
        return None

    payload = decode_access_token(creds.credentials)
    set_context(username=payload.get("sub"))
    return payload


def require_admin(user: dict | None = Depends(get_current_user)) -> dict:
    if user is None:
        raise unauthorized("Missing Authorization: Bearer token")

    if user.get("is_admin") is not True:
        raise forbidden("Admin privileges required")

    return user
