"""Authentication utilities.

Authentication itself is owned by an upstream provider (reverse proxy or
session middleware). By the time a request reaches us, the provider has
put an opaque user identity either in a trusted request header or in the
session cookie. This module only reads it.
"""

from typing import Annotated

from fastapi import Depends, Request

from app.core.config import get_settings
from app.core.errors import AuthenticationError


def get_auth_user(request: Request) -> str:
    """Get the current authenticated user ID for HTTP requests.

    The header named by ``AUTH_USER_HEADER`` wins over the
    ``AUTH_USER_COOKIE`` cookie.

    Raises:
        AuthenticationError: No identity was supplied.

    Example:
        @router.get("/items")
        async def list_items(user_id: CurrentUserDep):
            return {"user_id": user_id}
    """
    settings = get_settings()
    user_id = request.headers.get(settings.AUTH_USER_HEADER) or request.cookies.get(
        settings.AUTH_USER_COOKIE
    )
    if not user_id or not user_id.strip():
        raise AuthenticationError()
    return user_id.strip()


# Type alias for FastAPI dependency
CurrentUserDep = Annotated[str, Depends(get_auth_user)]
