"""
MongoDB integration.

This module owns the process-wide ``MongoClient`` (created lazily and
closed on shutdown), exposes the three collections by name, creates the
indexes the API relies on (``init_db``) and converts between BSON
``ObjectId`` values and the plain strings used in URLs and JSON.
"""

import logging
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.server_api import ServerApi

from .config import settings


logger = logging.getLogger(__name__)

USERS = "users"
SERVICES = "services"
BOOKINGS = "bookings"

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    """Return the shared client, connecting on first use.

    The Stable API (version 1, strict) is requested so that the server
    rejects commands outside it.
    """
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongodb_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
    return _client


def set_client(client: Optional[MongoClient]) -> None:
    """Replace the shared client (used by tests to inject an in-memory one)."""
    global _client
    _client = client


def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None


def get_database() -> Database:
    return get_client()[settings.database_name]


def get_collection(name: str) -> Collection:
    return get_database()[name]


def init_db() -> None:
    """Create the indexes used by the API.

    ``users.email`` is unique, which backs the save-user upsert.  The
    other indexes cover the per-email listing queries.
    """
    db = get_database()
    db[USERS].create_index([("email", ASCENDING)], unique=True)
    db[SERVICES].create_index([("category", ASCENDING)])
    db[SERVICES].create_index([("worker.email", ASCENDING)])
    db[BOOKINGS].create_index([("resident.email", ASCENDING)])
    db[BOOKINGS].create_index([("service.worker.email", ASCENDING)])
    logger.info("Database %s ready", settings.database_name)


def parse_object_id(value: str) -> ObjectId:
    """Convert a path parameter to an ``ObjectId``.

    Raises ``ValueError`` if ``value`` is not a 24 character hex string.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValueError(f"Invalid id: {value}") from e


def serialize_document(value: Any) -> Any:
    """Recursively replace ``ObjectId`` values with their hex strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, list):
        return [serialize_document(item) for item in value]
    return value
