from typing import Optional

from fastapi import Header

from app.core.exceptions import NotAuthenticated


def require_user_id(user_id: Optional[str]) -> str:
    """
    Guard for every core call that touches a user document.

    Raises:
        NotAuthenticated: No user identifier supplied
    """
    if not user_id or not str(user_id).strip():
        raise NotAuthenticated()
    return str(user_id).strip()


async def get_current_user_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id")
) -> str:
    """
    Dependency to get the authenticated user's identifier.

    Sign-in happens on the client; the gateway forwards the resolved uid.

    Usage in routes:
        user_id: str = Depends(get_current_user_id)
    """
    return require_user_id(x_user_id)
