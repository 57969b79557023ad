"""
Pydantic models for bookings.

A booking embeds the resident who made it, the worker who will do the
job and a copy of the booked service.  The resident and worker emails
are the notification targets.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel

from .service import PersonRef


class BookingCreate(BaseModel):
    """Body of ``POST /booking``."""

    resident: Optional[PersonRef] = None
    worker: Optional[PersonRef] = None
    # Snapshot of the service document; ``service.worker.email`` is
    # what ``/manage-bookings/{email}`` filters on.
    service: Optional[Dict[str, Any]] = None

    model_config = {
        "extra": "allow",
    }
