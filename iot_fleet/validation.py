"""
Referential-integrity checks shared by the entity services.

Every function only reads from the store and raises a domain error on the
first violation. Services call them in a fixed order before any write.
"""
import logging
import math
from datetime import datetime
from typing import Any, Iterable, List, Optional

from pydantic import TypeAdapter, ValidationError

from iot_fleet.exceptions import (
    DuplicateValue,
    ReferenceNotFound,
    DependencyExists,
    InvalidState,
    MalformedValue,
)
from iot_fleet.store import Collection

logger = logging.getLogger(__name__)

_timestamp_adapter = TypeAdapter(datetime)


def ensure_unique(collection: Collection, field: str, value: Any,
                  exclude_id: Optional[int] = None, code: Optional[str] = None) -> None:
    """Fail if another record already holds ``value`` in ``field``."""
    existing = collection.find_one(**{field: value})
    if existing is not None and existing.id != exclude_id:
        logger.info(f"Rejected duplicate {collection.name}.{field}={value!r}")
        raise DuplicateValue(f"{field} '{value}' is already in use", code=code)


def ensure_exists(collection: Collection, record_id: Any, code: Optional[str] = None):
    record = collection.find_by_id(record_id)
    if record is None:
        logger.info(f"Rejected missing reference {collection.name}#{record_id}")
        raise ReferenceNotFound(f"{collection.name} {record_id} does not exist", code=code)
    return record


def ensure_all_exist(collection: Collection, record_ids: Iterable[Any],
                     code: Optional[str] = None) -> List[Any]:
    """
    Check that every id refers to an existing record.

    Repeated ids are collapsed first, so the returned list holds each id once
    and the count comparison is against distinct ids.
    """
    unique_ids = list(dict.fromkeys(record_ids))
    if not unique_ids:
        return unique_ids

    found = collection.count(id=unique_ids)
    if found != len(unique_ids):
        logger.info(f"Rejected {collection.name} set {unique_ids}: only {found} exist")
        raise ReferenceNotFound(
            f"{len(unique_ids) - found} of {len(unique_ids)} {collection.name} do not exist",
            code=code,
        )
    return unique_ids


def ensure_no_dependents(collection: Collection, field: str, record_id: Any,
                         code: Optional[str] = None) -> None:
    dependents = collection.count(**{field: record_id})
    if dependents > 0:
        logger.info(f"Blocked by {dependents} {collection.name} referencing #{record_id} via {field}")
        raise DependencyExists(
            f"{dependents} {collection.name} still reference this record", code=code
        )


def ensure_state(record: Any, flag_field: str, required_value: Any,
                 code: Optional[str] = None) -> None:
    current = getattr(record, flag_field)
    if current != required_value:
        raise InvalidState(
            f"{flag_field} must be {required_value!r} (currently {current!r})", code=code
        )


def ensure_numeric(value: Any, code: Optional[str] = None) -> float:
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedValue(f"value must be a number, got {value!r}", code=code)
    try:
        number = float(value)
    except OverflowError:
        raise MalformedValue("value is too large to store", code=code)
    if not math.isfinite(number):
        raise MalformedValue(f"value must be a number, got {value!r}", code=code)
    return number


def ensure_timestamp(value: Any, code: Optional[str] = None) -> datetime:
    try:
        return _timestamp_adapter.validate_python(value)
    except ValidationError:
        raise MalformedValue(f"'{value}' is not a valid date", code=code)
