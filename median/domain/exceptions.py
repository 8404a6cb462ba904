"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass
from enum import Enum


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class MalformedIdentifierError(Exception):
    """Raised when an identifier is not a syntactically valid integer."""

    def __init__(self, raw_id: object):
        self.raw_id = raw_id
        super().__init__(f"Identifier {raw_id!r} is not a valid integer")


@dataclass(frozen=True)
class FieldViolation:
    """A single rejected input field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InputValidationError(Exception):
    """Raised when request input does not match the declared shape."""

    def __init__(self, violations: list[FieldViolation]):
        self.violations = violations
        super().__init__("; ".join(str(v) for v in violations))


class StoreErrorCode(str, Enum):
    """Closed set of classification codes for data-store request failures."""

    UNIQUE_CONSTRAINT_VIOLATION = "unique_constraint_violation"
    FOREIGN_KEY_VIOLATION = "foreign_key_violation"
    NOT_NULL_VIOLATION = "not_null_violation"
    VALUE_TOO_LONG = "value_too_long"
    RECORD_NOT_FOUND = "record_not_found"
    UNCLASSIFIED = "unclassified"


class StoreRequestError(Exception):
    """A data-store failure carrying a classification code.

    Raised by repository adapters in place of driver/ORM exceptions so the
    presentation layer can map failures without knowing the store.
    """

    def __init__(self, code: StoreErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(f"[{code.value}] {message}")
