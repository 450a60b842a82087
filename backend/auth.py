import asyncio
from typing import Any, Callable, Dict

from fastapi import Depends, Header, HTTPException, status

from dependencies import TokenVerifier, get_db, get_token_verifier
from permissions import has_permission
from repositories.users_repository import fetch_user


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.split(" ", 1)
    return parts[1] if len(parts) == 2 else None


async def get_current_uid(
    authorization: str | None = Header(default=None),
    verify: TokenVerifier = Depends(get_token_verifier),
) -> str:
    # Verification failures are not mapped to 401; they surface as 500.
    token = _bearer_token(authorization)
    try:
        decoded = await asyncio.to_thread(verify, token)
        return decoded["uid"]
    except Exception as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc


def require_permission(permission: str) -> Callable[..., Any]:
    async def dependency(
        uid: str = Depends(get_current_uid),
        db=Depends(get_db),
    ) -> Dict[str, Any]:
        try:
            user = await asyncio.to_thread(fetch_user, db, uid)
        except Exception as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
            ) from exc
        if not has_permission(user, permission):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized"
            )
        return user

    return dependency
