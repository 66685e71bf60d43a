"""PIN login endpoints and the session dependency."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import APIRouter, Cookie, HTTPException, Request, Response, status

from fittrack.api.models import PinRequest
from fittrack.services.auth import AUTH_COOKIE_MAX_AGE, AUTH_COOKIE_NAME

if TYPE_CHECKING:
    from fittrack.containers import AppContainer

router = APIRouter(prefix="/api/auth", tags=["auth"])


async def require_session(
    request: Request,
    fittrack_auth: str | None = Cookie(default=None),
) -> UUID:
    """Ensure the request carries a valid session cookie."""
    container: AppContainer = request.app.state.container
    user_id = container.auth_service.user_for_session(fittrack_auth)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )
    return user_id


@router.post("/verify")
async def verify_pin(
    body: PinRequest, request: Request, response: Response
) -> dict[str, object]:
    """Check the PIN and start a session."""
    container: AppContainer = request.app.state.container
    if not body.pin:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="PIN is required"
        )
    if not container.auth_service.verify_pin(body.pin):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid PIN"
        )
    response.set_cookie(
        AUTH_COOKIE_NAME,
        container.auth_service.session_value(),
        max_age=AUTH_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        secure=container.settings.secure_cookies,
        samesite="lax",
    )
    return {"success": True}


@router.post("/logout")
async def logout(response: Response) -> dict[str, object]:
    """End the session."""
    response.delete_cookie(AUTH_COOKIE_NAME, path="/")
    return {"success": True}
