"""Authentication dependencies.

Usage:
    from seasonteams.api.auth import CurrentUser, OptionalUser

    @router.get("/teams/new")
    def new_team(user: CurrentUser):
        return {"github_handle": user.github_handle}
"""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from seasonteams import get_logger
from seasonteams.api.dependencies import SupabaseDep, UserDAODep
from seasonteams.models import User

logger = get_logger(__name__)

# Bearer token security scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    client: SupabaseDep,
    users: UserDAODep,
) -> User:
    """Verify the bearer token and return the signed-in user.

    Raises:
        HTTPException 401: Missing or invalid token
        HTTPException 403: No user record for the authenticated account
    """
    if credentials is None:
        raise _unauthorized("Missing authorization header")

    try:
        user_response = client.auth.get_user(credentials.credentials)
        if not user_response or not user_response.user:
            raise _unauthorized("Invalid or expired token")
        user_id = str(user_response.user.id)

    except HTTPException:
        raise
    except Exception as e:
        logger.warning("auth_failed", error=str(e))
        raise _unauthorized("Invalid or expired token") from e

    user = users.get_by_id(user_id)
    if user is None:
        logger.error("user_record_missing", user_id=user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not found",
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


async def get_optional_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    client: SupabaseDep,
    users: UserDAODep,
) -> User | None:
    """Get the signed-in user if there is one, None otherwise."""
    if credentials is None:
        return None

    try:
        return await get_current_user(credentials, client, users)
    except HTTPException:
        return None


OptionalUser = Annotated[User | None, Depends(get_optional_user)]
