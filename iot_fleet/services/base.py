from typing import Any, List, Optional

from iot_fleet.store import Collection, FleetStore


class EntityService:
    """Read operations shared by every entity service."""

    def __init__(self, store: FleetStore, collection: Collection):
        self.store = store
        self.collection = collection

    def get_all(self) -> List[Any]:
        return self.collection.find_all()

    def get_by_id(self, record_id: int) -> Optional[Any]:
        return self.collection.find_by_id(record_id)
