"""
Business logic for service listings.

Listings live in the ``services`` collection.  Workers create, edit and
delete them; anyone can browse them, optionally by category.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.db import SERVICES, get_collection, parse_object_id, serialize_document
from ..schemas.results import DeleteRead, InsertRead, UpdateRead
from ..schemas.service import ServiceCreate, ServiceUpdate


logger = logging.getLogger(__name__)


class ListingService:
    """Service for the ``services`` collection."""

    @classmethod
    def create_listing(cls, data: ServiceCreate) -> InsertRead:
        result = get_collection(SERVICES).insert_one(data.model_dump(exclude_unset=True))
        logger.info("Created service %s", result.inserted_id)
        return InsertRead.from_result(result)

    @classmethod
    def list_listings(cls, category: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return all listings, filtered by ``category`` when given.

        The web client sends the literal string ``"null"`` when no
        category is selected; it is treated as no filter.
        """
        query: Dict[str, Any] = {}
        if category and category != "null":
            query = {"category": category}
        return [serialize_document(doc) for doc in get_collection(SERVICES).find(query)]

    @classmethod
    def get_listing(cls, service_id: str) -> Optional[Dict[str, Any]]:
        """Return one listing or ``None``; raises ``ValueError`` on a malformed id."""
        doc = get_collection(SERVICES).find_one({"_id": parse_object_id(service_id)})
        return serialize_document(doc) if doc else None

    @classmethod
    def list_worker_listings(cls, email: str) -> List[Dict[str, Any]]:
        cursor = get_collection(SERVICES).find({"worker.email": email})
        return [serialize_document(doc) for doc in cursor]

    @classmethod
    def update_listing(cls, service_id: str, data: ServiceUpdate) -> UpdateRead:
        object_id = parse_object_id(service_id)
        changes = data.model_dump(exclude_unset=True)
        changes.pop("_id", None)
        if not changes:
            # Mongo rejects an empty $set; report a no-op match instead
            existing = get_collection(SERVICES).find_one({"_id": object_id}, {"_id": 1})
            return UpdateRead(acknowledged=True, matched_count=int(existing is not None), modified_count=0)
        result = get_collection(SERVICES).update_one({"_id": object_id}, {"$set": changes})
        logger.info("Updated service %s", service_id)
        return UpdateRead.from_result(result)

    @classmethod
    def delete_listing(cls, service_id: str) -> DeleteRead:
        result = get_collection(SERVICES).delete_one({"_id": parse_object_id(service_id)})
        logger.info("Deleted service %s (%s removed)", service_id, result.deleted_count)
        return DeleteRead.from_result(result)
