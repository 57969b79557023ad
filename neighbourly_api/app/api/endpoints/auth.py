"""
Authentication endpoints.

``POST /jwt`` turns the posted claims into a signed token stored in an
httpOnly cookie; ``GET /logout`` clears it.  Cross-site cookies are only
possible over HTTPS, so ``secure``/``SameSite=None`` are used in
production and ``SameSite=Strict`` elsewhere.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Response

from neighbourly_api.app.core.config import settings
from neighbourly_api.app.core.security import create_access_token


logger = logging.getLogger(__name__)

router = APIRouter()


def _cookie_options() -> Dict[str, Any]:
    return {
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


@router.post("/jwt")
async def issue_token(response: Response, user: Dict[str, Any] = Body(...)) -> dict:
    """Sign the posted user claims and set them as the ``token`` cookie."""
    token = create_access_token(user)
    response.set_cookie(
        key=settings.token_cookie_name,
        value=token,
        httponly=True,
        **_cookie_options(),
    )
    return {"success": True}


@router.get("/logout")
async def logout(response: Response) -> dict:
    """Expire the ``token`` cookie."""
    response.delete_cookie(
        key=settings.token_cookie_name,
        httponly=True,
        **_cookie_options(),
    )
    logger.info("Logout successful")
    return {"success": True}
