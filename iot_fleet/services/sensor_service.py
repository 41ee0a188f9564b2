import logging
from typing import Any, Dict, Optional

from iot_fleet.services.base import EntityService
from iot_fleet.store import FleetStore
from iot_fleet.validation import ensure_no_dependents, ensure_state

logger = logging.getLogger(__name__)


class SensorService(EntityService):
    def __init__(self, store: FleetStore):
        super().__init__(store, store.sensors)

    def create(self, fields: Dict[str, Any]):
        sensor = self.collection.insert(fields)
        logger.info(f"Created {sensor.type} sensor #{sensor.id} ({sensor.unit})")
        return sensor

    def update(self, sensor_id: int, fields: Dict[str, Any]):
        sensor = self.collection.update_by_id(sensor_id, fields)
        if sensor is not None:
            logger.info(f"Updated sensor #{sensor_id}: {sorted(fields)}")
        return sensor

    def delete(self, sensor_id: int) -> Optional[int]:
        """
        Remove a sensor nothing points at any more.
        Devices are checked before readings, and the active flag last.
        """
        sensor = self.collection.find_by_id(sensor_id)
        if sensor is None:
            return None

        ensure_no_dependents(self.store.devices, "sensors", sensor_id, code="SENSOR_HAS_DEVICES")
        ensure_no_dependents(self.store.readings, "sensor_id", sensor_id, code="SENSOR_HAS_READINGS")
        ensure_state(sensor, "is_active", False, code="SENSOR_IS_ACTIVE")

        self.collection.delete_by_id(sensor_id)
        logger.info(f"Deleted sensor #{sensor_id}")
        return sensor_id
