"""Translation of SQLAlchemy/driver failures into classified StoreRequestErrors.

Only request-level failures (constraint and data errors) are classified.
Connection problems and other SQLAlchemy errors propagate untouched and end
up on the generic 500 path.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from median.domain.exceptions import StoreErrorCode, StoreRequestError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE values (asyncpg / psycopg expose them on the driver error)
_SQLSTATE_CODES: dict[str, StoreErrorCode] = {
    "23505": StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
    "23503": StoreErrorCode.FOREIGN_KEY_VIOLATION,
    "23502": StoreErrorCode.NOT_NULL_VIOLATION,
    "22001": StoreErrorCode.VALUE_TOO_LONG,
}

# SQLite extended result code names (sqlite3 exceptions carry sqlite_errorname)
_SQLITE_CODES: dict[str, StoreErrorCode] = {
    "SQLITE_CONSTRAINT_UNIQUE": StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": StoreErrorCode.FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_NOTNULL": StoreErrorCode.NOT_NULL_VIOLATION,
}

# Fallback when the driver exposes neither of the above
_MESSAGE_MARKERS: tuple[tuple[str, StoreErrorCode], ...] = (
    ("UNIQUE constraint failed", StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION),
    ("duplicate key value violates unique constraint", StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION),
    ("FOREIGN KEY constraint failed", StoreErrorCode.FOREIGN_KEY_VIOLATION),
    ("NOT NULL constraint failed", StoreErrorCode.NOT_NULL_VIOLATION),
)


def classify_driver_error(exc: IntegrityError | DataError) -> StoreErrorCode:
    """Derive a StoreErrorCode from a wrapped DBAPI exception."""
    orig = exc.orig

    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _SQLSTATE_CODES:
        return _SQLSTATE_CODES[sqlstate]

    errorname = getattr(orig, "sqlite_errorname", None)
    if errorname in _SQLITE_CODES:
        return _SQLITE_CODES[errorname]

    text = str(orig if orig is not None else exc)
    for marker, code in _MESSAGE_MARKERS:
        if marker in text:
            return code

    return StoreErrorCode.UNCLASSIFIED


def to_store_error(exc: IntegrityError | DataError) -> StoreRequestError:
    """Wrap a SQLAlchemy DBAPI error as a StoreRequestError."""
    code = classify_driver_error(exc)
    message = str(exc.orig if exc.orig is not None else exc)
    return StoreRequestError(code, message)


@contextmanager
def translate_store_errors() -> Iterator[None]:
    """Re-raise classifiable store failures inside the block as StoreRequestError.

    Usage:
        with translate_store_errors():
            await session.flush()
    """
    try:
        yield
    except (IntegrityError, DataError) as exc:
        error = to_store_error(exc)
        logger.debug("Store request failed (%s): %s", error.code.value, error.message)
        raise error from exc
    except StaleDataError as exc:
        raise StoreRequestError(StoreErrorCode.RECORD_NOT_FOUND, str(exc)) from exc
