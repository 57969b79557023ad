"""
Top-level router.

Aggregates the domain routers.  Paths are mounted at the root because
the web client addresses them directly (``/jwt``, ``/user``,
``/services`` ...).
"""

from fastapi import APIRouter

from .endpoints import auth, bookings, services, users


router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, tags=["users"])
router.include_router(services.router, tags=["services"])
router.include_router(bookings.router, tags=["bookings"])
