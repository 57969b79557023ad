"""
Pydantic models for service listings.

A listing embeds the worker who offers it; ``worker.email`` is what
``/my-listings/{email}`` filters on.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersonRef(BaseModel):
    """Denormalised copy of a user embedded in another document."""

    name: Optional[str] = None
    email: Optional[str] = Field(None, examples=["worker@example.com"])
    image: Optional[str] = None

    model_config = {
        "extra": "allow",
    }


class ServiceCreate(BaseModel):
    """Body of ``POST /service``."""

    title: Optional[str] = Field(None, examples=["Kitchen sink repair"])
    category: Optional[str] = Field(None, examples=["Plumbing"])
    worker: Optional[PersonRef] = None

    model_config = {
        "extra": "allow",
    }


class ServiceUpdate(BaseModel):
    """Body of ``PUT /service/update/{id}``; every field is optional."""

    title: Optional[str] = None
    category: Optional[str] = None

    model_config = {
        "extra": "allow",
    }
