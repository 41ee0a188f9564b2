"""Domain errors raised by the validation engine and the entity services.

Every error carries a machine-readable ``code`` and the HTTP status the
transport layer answers with::

    FleetError (500)
    ├── DuplicateValue      (400 - unique field already taken)
    ├── ReferenceNotFound   (400 - referenced entity does not exist)
    ├── DependencyExists    (400 - delete blocked by dependent records)
    ├── InvalidState        (400 - delete blocked by a state flag)
    ├── MalformedValue      (400 - value fails a type/format check)
    └── NotFound            (404 - target entity does not exist)
"""

from __future__ import annotations


class FleetError(Exception):
    """Base class for all fleet domain errors."""

    http_status: int = 500
    default_code: str = "INTERNAL_ERROR"

    def __init__(self, message: str = "", *, code: str | None = None) -> None:
        super().__init__(message or self.__class__.__name__)
        self.code = code or self.default_code


class DuplicateValue(FleetError):
    http_status = 400
    default_code = "DUPLICATE_VALUE"


class ReferenceNotFound(FleetError):
    http_status = 400
    default_code = "REFERENCE_NOT_FOUND"


class DependencyExists(FleetError):
    http_status = 400
    default_code = "DEPENDENCY_EXISTS"


class InvalidState(FleetError):
    http_status = 400
    default_code = "INVALID_STATE"


class MalformedValue(FleetError):
    http_status = 400
    default_code = "MALFORMED_VALUE"


class NotFound(FleetError):
    http_status = 404
    default_code = "NOT_FOUND"
