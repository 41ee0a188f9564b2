"""
User lifecycle: unique email, hashed password, no delete while owning devices
"""
import logging
from typing import Any, Dict, Optional

from werkzeug.security import generate_password_hash

from iot_fleet.services.base import EntityService
from iot_fleet.store import FleetStore
from iot_fleet.validation import ensure_unique, ensure_no_dependents

logger = logging.getLogger(__name__)


class UserService(EntityService):
    def __init__(self, store: FleetStore):
        super().__init__(store, store.users)

    def create(self, fields: Dict[str, Any]):
        ensure_unique(self.collection, "email", fields["email"], code="EMAIL_IN_USE")

        data = dict(fields)
        data["password"] = generate_password_hash(fields["password"])
        user = self.collection.insert(data)
        logger.info(f"Created user {user.email} (#{user.id}, role={user.role})")
        return user

    def update(self, user_id: int, fields: Dict[str, Any]):
        if self.collection.find_by_id(user_id) is None:
            return None

        if "email" in fields:
            ensure_unique(self.collection, "email", fields["email"],
                          exclude_id=user_id, code="EMAIL_IN_USE")

        data = dict(fields)
        if "password" in data:
            data["password"] = generate_password_hash(data["password"])
        user = self.collection.update_by_id(user_id, data)
        logger.info(f"Updated user #{user_id}: {sorted(fields)}")
        return user

    def delete(self, user_id: int) -> Optional[int]:
        if self.collection.find_by_id(user_id) is None:
            return None

        ensure_no_dependents(self.store.devices, "owner_id", user_id, code="USER_HAS_DEVICES")

        self.collection.delete_by_id(user_id)
        logger.info(f"Deleted user #{user_id}")
        return user_id
