import logging
from typing import Any, Dict, Optional

from iot_fleet.services.base import EntityService
from iot_fleet.store import FleetStore
from iot_fleet.validation import ensure_no_dependents, ensure_state

logger = logging.getLogger(__name__)


class ZoneService(EntityService):
    def __init__(self, store: FleetStore):
        super().__init__(store, store.zones)

    def create(self, fields: Dict[str, Any]):
        zone = self.collection.insert(fields)
        logger.info(f"Created zone {zone.name!r} (#{zone.id})")
        return zone

    def update(self, zone_id: int, fields: Dict[str, Any]):
        zone = self.collection.update_by_id(zone_id, fields)
        if zone is not None:
            logger.info(f"Updated zone #{zone_id}: {sorted(fields)}")
        return zone

    def delete(self, zone_id: int) -> Optional[int]:
        """A zone goes only once it is empty and switched off."""
        zone = self.collection.find_by_id(zone_id)
        if zone is None:
            return None

        ensure_no_dependents(self.store.devices, "zone_id", zone_id, code="ZONE_HAS_DEVICES")
        ensure_state(zone, "is_active", False, code="ZONE_IS_ACTIVE")

        self.collection.delete_by_id(zone_id)
        logger.info(f"Deleted zone #{zone_id}")
        return zone_id
