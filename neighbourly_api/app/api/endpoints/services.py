"""
Service listing endpoints.

Browsing is public.  Creating, editing and deleting listings, and the
"my listings" view, require the caller to be a worker.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from neighbourly_api.app.core.security import verify_worker
from neighbourly_api.app.schemas.results import DeleteRead, InsertRead, UpdateRead
from neighbourly_api.app.schemas.service import ServiceCreate, ServiceUpdate
from neighbourly_api.app.services.listing_service import ListingService


router = APIRouter()


@router.post("/service")
def create_service(
    service: ServiceCreate,
    current_user: dict = Depends(verify_worker),
) -> InsertRead:
    return ListingService.create_listing(service)


@router.get("/services")
def list_services(category: Optional[str] = None) -> List[Dict[str, Any]]:
    """List all services, optionally restricted to one ``category``."""
    return ListingService.list_listings(category)


@router.get("/service/{service_id}")
def get_service(service_id: str) -> Optional[Dict[str, Any]]:
    try:
        return ListingService.get_listing(service_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.get("/my-listings/{email}")
def list_my_services(
    email: str,
    current_user: dict = Depends(verify_worker),
) -> List[Dict[str, Any]]:
    """Services offered by the worker with ``email``."""
    return ListingService.list_worker_listings(email)


@router.delete("/service/{service_id}")
def delete_service(
    service_id: str,
    current_user: dict = Depends(verify_worker),
) -> DeleteRead:
    try:
        return ListingService.delete_listing(service_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.put("/service/update/{service_id}")
def update_service(
    service_id: str,
    service: ServiceUpdate,
    current_user: dict = Depends(verify_worker),
) -> UpdateRead:
    try:
        return ListingService.update_listing(service_id, service)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
