"""
Sensor readings: the sensor must exist, the value must be a number and a
supplied time must parse. Readings can always be deleted.
"""
import logging
from typing import Any, Dict, Optional

from iot_fleet.services.base import EntityService
from iot_fleet.store import FleetStore
from iot_fleet.validation import ensure_exists, ensure_numeric, ensure_timestamp

logger = logging.getLogger(__name__)


class ReadingService(EntityService):
    def __init__(self, store: FleetStore):
        super().__init__(store, store.readings)

    def _validate(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        data = dict(fields)

        if "sensor_id" in fields:
            ensure_exists(self.store.sensors, fields["sensor_id"], code="INVALID_SENSOR")
        if "value" in fields:
            data["value"] = ensure_numeric(fields["value"], code="VALUE_NOT_A_NUMBER")

        # empty time means "not supplied"; the store stamps creation time
        time = data.pop("time", None)
        if time not in (None, ""):
            data["time"] = ensure_timestamp(time, code="INVALID_DATE")
        return data

    def create(self, fields: Dict[str, Any]):
        reading = self.collection.insert(self._validate(fields))
        logger.debug(f"Stored reading #{reading.id} sensor=#{reading.sensor_id} value={reading.value}")
        return reading

    def update(self, reading_id: int, fields: Dict[str, Any]):
        if self.collection.find_by_id(reading_id) is None:
            return None

        reading = self.collection.update_by_id(reading_id, self._validate(fields))
        logger.info(f"Updated reading #{reading_id}: {sorted(fields)}")
        return reading

    def delete(self, reading_id: int) -> Optional[int]:
        if self.collection.delete_by_id(reading_id) is None:
            return None
        logger.info(f"Deleted reading #{reading_id}")
        return reading_id
