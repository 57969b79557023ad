"""
Business logic for users.

Users are identified by email.  ``save_user`` is called by the web
client after every sign-in and doubles as registration, login and
"request worker role" depending on what is already stored.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Tuple, Union

from ..core.db import USERS, get_collection, parse_object_id, serialize_document
from ..schemas.results import DeleteRead, UpdateRead
from ..schemas.user import STATUS_REQUESTED, UserSave


logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class UserService:
    """Service for the ``users`` collection."""

    @classmethod
    def save_user(cls, data: UserSave) -> Tuple[Union[Dict[str, Any], UpdateRead], bool]:
        """Register, re-login or flag a role request for a user.

        * Unknown email: the whole payload is upserted with a fresh
          ``timestamp``.
        * Known email with ``status == "Requested"``: only ``status`` is
          updated.
        * Known email otherwise: the stored document is returned as is.

        Returns the result together with a flag telling whether the user
        was created, so the caller can send the welcome email.
        """
        users = get_collection(USERS)
        query = {"email": data.email}
        existing = users.find_one(query)
        if existing:
            if data.status == STATUS_REQUESTED:
                result = users.update_one(query, {"$set": {"status": data.status}})
                logger.info("User %s requested a role change", data.email)
                return UpdateRead.from_result(result), False
            return serialize_document(existing), False

        document = data.model_dump(exclude_unset=True)
        document["timestamp"] = _now_ms()
        result = users.update_one(query, {"$set": document}, upsert=True)
        logger.info("Registered user %s", data.email)
        return UpdateRead.from_result(result), True

    @classmethod
    def get_user(cls, email: str) -> Optional[Dict[str, Any]]:
        """Return the user stored under ``email`` or ``None``."""
        user = get_collection(USERS).find_one({"email": email})
        return serialize_document(user) if user else None

    @classmethod
    def list_users(cls) -> List[Dict[str, Any]]:
        return [serialize_document(user) for user in get_collection(USERS).find()]

    @classmethod
    def update_user(cls, email: str, updates: Dict[str, Any]) -> UpdateRead:
        """Set the given fields (typically ``role``/``status``) on a user.

        ``timestamp`` is refreshed on every update.  A missing user is
        not an error; the result simply reports ``matchedCount == 0``.
        """
        changes = dict(updates)
        changes.pop("_id", None)
        changes["timestamp"] = _now_ms()
        result = get_collection(USERS).update_one({"email": email}, {"$set": changes})
        logger.info("Updated user %s: %s", email, sorted(updates))
        return UpdateRead.from_result(result)

    @classmethod
    def delete_user(cls, user_id: str) -> DeleteRead:
        """Delete a user by document id.

        Raises ``ValueError`` if ``user_id`` is not a valid id.
        """
        object_id = parse_object_id(user_id)
        result = get_collection(USERS).delete_one({"_id": object_id})
        logger.info("Deleted user %s (%s removed)", user_id, result.deleted_count)
        return DeleteRead.from_result(result)
