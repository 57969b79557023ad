"""
Booking endpoints.

Residents create and cancel bookings and list their own; workers list
the bookings made for their services.  A new booking emails both sides
once the response has been sent.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from neighbourly_api.app.core.security import get_current_user, verify_worker
from neighbourly_api.app.schemas.booking import BookingCreate
from neighbourly_api.app.schemas.results import DeleteRead, InsertRead
from neighbourly_api.app.services.booking_service import BookingService
from neighbourly_api.app.services.mail_service import MailService


router = APIRouter()


@router.post("/booking")
def create_booking(booking: BookingCreate, background_tasks: BackgroundTasks) -> InsertRead:
    """Store a booking and notify the resident and the worker."""
    result = BookingService.create_booking(booking)
    for notification in BookingService.booking_notifications(booking):
        background_tasks.add_task(
            MailService.send_email,
            notification.address,
            notification.subject,
            notification.message,
        )
    return result


@router.get("/my-bookings/{email}")
def list_my_bookings(
    email: str,
    current_user: dict = Depends(get_current_user),
) -> List[Dict[str, Any]]:
    return BookingService.list_resident_bookings(email)


@router.get("/manage-bookings/{email}")
def list_worker_bookings(
    email: str,
    current_user: dict = Depends(verify_worker),
) -> List[Dict[str, Any]]:
    return BookingService.list_worker_bookings(email)


@router.delete("/booking/{booking_id}")
def delete_booking(
    booking_id: str,
    current_user: dict = Depends(get_current_user),
) -> DeleteRead:
    try:
        return BookingService.delete_booking(booking_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
