"""
Collection-style access to the fleet database.

Services talk to the database only through ``Collection`` so the
referential rules never depend on constraints declared in the schema.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, RelationshipProperty

from iot_fleet.database import get_db
from iot_fleet.models import User, Zone, Device, Sensor, Reading

logger = logging.getLogger(__name__)


class Collection:
    """
    Find/count/insert/update/delete over one mapped model.

    Filters are keyword arguments:
        count(zone_id=3)            -> zone_id == 3
        count(id=[1, 2, 3])         -> id IN (1, 2, 3)
        count(sensors=7)            -> list relationship contains sensor 7
    """

    def __init__(self, db: Session, model):
        self.db = db
        self.model = model

    @property
    def name(self) -> str:
        return self.model.__tablename__

    def _criteria(self, filters: Dict[str, Any]) -> list:
        criteria = []
        for field, value in filters.items():
            attr = getattr(self.model, field)
            prop = attr.property
            if isinstance(prop, RelationshipProperty) and prop.uselist:
                target = prop.mapper.class_
                if isinstance(value, (list, tuple, set)):
                    criteria.append(attr.any(target.id.in_(list(value))))
                else:
                    criteria.append(attr.any(target.id == value))
            elif isinstance(value, (list, tuple, set)):
                criteria.append(attr.in_(list(value)))
            else:
                criteria.append(attr == value)
        return criteria

    def _resolve(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Turn id lists for list relationships into mapped objects."""
        resolved = dict(fields)
        for field, value in fields.items():
            prop = getattr(self.model, field).property
            if isinstance(prop, RelationshipProperty) and prop.uselist:
                target = prop.mapper.class_
                ids = list(value or [])
                resolved[field] = (
                    self.db.query(target).filter(target.id.in_(ids)).all() if ids else []
                )
        return resolved

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Integrity error while writing to {self.name}")
            raise

    def find_all(self) -> List[Any]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_by_id(self, record_id: int) -> Optional[Any]:
        return self.db.get(self.model, record_id)

    def find_one(self, **filters) -> Optional[Any]:
        return self.db.query(self.model).filter(*self._criteria(filters)).first()

    def count(self, **filters) -> int:
        return self.db.query(self.model).filter(*self._criteria(filters)).count()

    def insert(self, fields: Dict[str, Any]) -> Any:
        record = self.model(**self._resolve(fields))
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        logger.debug(f"Inserted {self.name} #{record.id}")
        return record

    def update_by_id(self, record_id: int, fields: Dict[str, Any]) -> Optional[Any]:
        record = self.find_by_id(record_id)
        if record is None:
            return None
        for field, value in self._resolve(fields).items():
            setattr(record, field, value)
        self._commit()
        self.db.refresh(record)
        logger.debug(f"Updated {self.name} #{record_id}: {sorted(fields)}")
        return record

    def delete_by_id(self, record_id: int) -> Optional[Any]:
        record = self.find_by_id(record_id)
        if record is None:
            return None
        self.db.delete(record)
        self._commit()
        logger.debug(f"Deleted {self.name} #{record_id}")
        return record


class FleetStore:
    """One collection per entity, all sharing the request's session."""

    def __init__(self, db: Session):
        self.db = db
        self.users = Collection(db, User)
        self.zones = Collection(db, Zone)
        self.devices = Collection(db, Device)
        self.sensors = Collection(db, Sensor)
        self.readings = Collection(db, Reading)


def get_store(db: Session = Depends(get_db)) -> FleetStore:
    return FleetStore(db)
