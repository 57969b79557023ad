"""
Endpoint subpackage.

Each module defines an APIRouter for one domain (auth, users, services,
bookings).  The routers are aggregated in ``api/router.py`` and
included by the main application.
"""
