"""
Device lifecycle.

Create and update check, in this order: serial number uniqueness, owner,
zone, then the sensor set. Only supplied fields are checked on update.
"""
import logging
from typing import Any, Dict, Optional

from iot_fleet.services.base import EntityService
from iot_fleet.store import FleetStore
from iot_fleet.validation import ensure_unique, ensure_exists, ensure_all_exist

logger = logging.getLogger(__name__)


class DeviceService(EntityService):
    def __init__(self, store: FleetStore):
        super().__init__(store, store.devices)

    def _validate(self, fields: Dict[str, Any], device_id: Optional[int] = None) -> Dict[str, Any]:
        data = dict(fields)

        if "serial_number" in fields:
            ensure_unique(self.collection, "serial_number", fields["serial_number"],
                          exclude_id=device_id, code="SERIAL_NUMBER_IN_USE")
        if "owner_id" in fields:
            ensure_exists(self.store.users, fields["owner_id"], code="INVALID_USER")
        if "zone_id" in fields:
            ensure_exists(self.store.zones, fields["zone_id"], code="INVALID_ZONE")
        if fields.get("sensors"):
            data["sensors"] = ensure_all_exist(self.store.sensors, fields["sensors"],
                                               code="INVALID_SENSORS")
        return data

    def create(self, fields: Dict[str, Any]):
        device = self.collection.insert(self._validate(fields))
        logger.info(
            f"Created device {device.serial_number} (#{device.id}) "
            f"owner=#{device.owner_id} zone=#{device.zone_id} sensors={device.sensor_ids}"
        )
        return device

    def update(self, device_id: int, fields: Dict[str, Any]):
        if self.collection.find_by_id(device_id) is None:
            return None

        device = self.collection.update_by_id(device_id, self._validate(fields, device_id))
        logger.info(f"Updated device #{device_id}: {sorted(fields)}")
        return device

    def delete(self, device_id: int) -> Optional[int]:
        if self.collection.delete_by_id(device_id) is None:
            return None
        logger.info(f"Deleted device #{device_id}")
        return device_id
