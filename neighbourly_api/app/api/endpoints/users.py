"""
User endpoints.

``PUT /user`` and ``GET /user/{email}`` are open because the web client
calls them right after sign-in, before it has a token cookie.  Listing,
role changes and deletion are admin-only.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from neighbourly_api.app.core.security import verify_admin
from neighbourly_api.app.schemas.results import DeleteRead, UpdateRead
from neighbourly_api.app.schemas.user import UserSave, UserUpdate
from neighbourly_api.app.services.mail_service import WELCOME_MESSAGE, WELCOME_SUBJECT, MailService
from neighbourly_api.app.services.user_service import UserService


router = APIRouter()


@router.put("/user")
def save_user(user: UserSave, background_tasks: BackgroundTasks) -> Any:
    """Save a user on sign-in.

    New users are stored and receive the welcome email.  Returning users
    get their stored document back, unless they are requesting a role
    change, in which case the update result is returned.
    """
    result, created = UserService.save_user(user)
    if created:
        background_tasks.add_task(MailService.send_email, user.email, WELCOME_SUBJECT, WELCOME_MESSAGE)
    return result


@router.get("/user/{email}")
def get_user(email: str) -> Optional[Dict[str, Any]]:
    """Return a user's document (role, status, timestamp ...) or ``null``."""
    return UserService.get_user(email)


@router.get("/users")
def list_users(current_user: dict = Depends(verify_admin)) -> List[Dict[str, Any]]:
    return UserService.list_users()


@router.patch("/users/update/{email}")
def update_user(
    email: str,
    updates: UserUpdate,
    current_user: dict = Depends(verify_admin),
) -> UpdateRead:
    """Change a user's role or status."""
    return UserService.update_user(email, updates.model_dump(exclude_unset=True))


@router.delete("/users/{user_id}")
def delete_user(user_id: str, current_user: dict = Depends(verify_admin)) -> DeleteRead:
    try:
        return UserService.delete_user(user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
