"""
Pydantic models for user documents.

User documents are keyed by ``email``.  Apart from ``role`` and
``status`` the API does not interpret their contents, so the models
accept extra fields and pass them through to the database untouched.
"""

from typing import Optional

from pydantic import BaseModel, Field


ROLE_ADMIN = "admin"
ROLE_WORKER = "worker"
ROLE_RESIDENT = "resident"

STATUS_REQUESTED = "Requested"


class UserSave(BaseModel):
    """Body of ``PUT /user``, sent by the client after every sign-in."""

    email: str = Field(..., examples=["resident@example.com"])
    name: Optional[str] = Field(None, examples=["Jane Doe"])
    image: Optional[str] = None
    role: Optional[str] = Field(None, examples=[ROLE_RESIDENT])
    # ``Requested`` marks a resident asking to become a worker.
    status: Optional[str] = Field(None, examples=["Verified"])

    model_config = {
        "extra": "allow",
    }


class UserUpdate(BaseModel):
    """Body of ``PATCH /users/update/{email}``; typically ``role`` and ``status``."""

    role: Optional[str] = Field(None, examples=[ROLE_WORKER])
    status: Optional[str] = Field(None, examples=["Verified"])

    model_config = {
        "extra": "allow",
    }
