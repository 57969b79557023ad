"""
Business logic for bookings.

A resident books a listing by posting a booking document that embeds
the resident, the worker and a copy of the service.  Creating a booking
also yields the two notification emails (resident confirmation and
worker heads-up) which the endpoint sends in the background.
"""

import logging
from typing import Any, Dict, List, NamedTuple

from ..core.db import BOOKINGS, get_collection, parse_object_id, serialize_document
from ..schemas.booking import BookingCreate
from ..schemas.results import DeleteRead, InsertRead


logger = logging.getLogger(__name__)


RESIDENT_SUBJECT = "Booking Successfull"
RESIDENT_MESSAGE = (
    "You've successfully booked a service through Neighbourly. "
    "Worker is on the way toward your address. Thank You \U0001F91D"
)
WORKER_SUBJECT = "Yay! You are booked!"
WORKER_MESSAGE = "Hurry Up! Get ready to go {resident_name}'s address. \U0001F973"


class Notification(NamedTuple):
    address: str
    subject: str
    message: str


class BookingService:
    """Service for the ``bookings`` collection."""

    @classmethod
    def create_booking(cls, data: BookingCreate) -> InsertRead:
        result = get_collection(BOOKINGS).insert_one(data.model_dump(exclude_unset=True))
        logger.info(
            "Created booking %s for resident %s",
            result.inserted_id,
            data.resident.email if data.resident else None,
        )
        return InsertRead.from_result(result)

    @classmethod
    def booking_notifications(cls, data: BookingCreate) -> List[Notification]:
        """Build the emails announcing a new booking.

        Recipients without an email address are left out.
        """
        notifications: List[Notification] = []
        resident = data.resident
        worker = data.worker
        if resident and resident.email:
            notifications.append(Notification(resident.email, RESIDENT_SUBJECT, RESIDENT_MESSAGE))
        if worker and worker.email:
            resident_name = (resident.name if resident else None) or "the resident"
            notifications.append(
                Notification(
                    worker.email,
                    WORKER_SUBJECT,
                    WORKER_MESSAGE.format(resident_name=resident_name),
                )
            )
        return notifications

    @classmethod
    def list_resident_bookings(cls, email: str) -> List[Dict[str, Any]]:
        cursor = get_collection(BOOKINGS).find({"resident.email": email})
        return [serialize_document(doc) for doc in cursor]

    @classmethod
    def list_worker_bookings(cls, email: str) -> List[Dict[str, Any]]:
        """Bookings of services offered by the worker with ``email``."""
        cursor = get_collection(BOOKINGS).find({"service.worker.email": email})
        return [serialize_document(doc) for doc in cursor]

    @classmethod
    def delete_booking(cls, booking_id: str) -> DeleteRead:
        result = get_collection(BOOKINGS).delete_one({"_id": parse_object_id(booking_id)})
        logger.info("Deleted booking %s (%s removed)", booking_id, result.deleted_count)
        return DeleteRead.from_result(result)
