"""Error classifier: maps classified store failures to HTTP outcomes.

Invariants:
    - classify_store_error is total: every StoreErrorCode yields exactly one outcome
    - Only UNIQUE_CONSTRAINT_VIOLATION is mapped (409); every other code,
      known or not, takes the generic 500 path
    - Messages exposed to clients never contain newline characters
    - The generic outcome carries no store detail
"""

from dataclasses import dataclass

from fastapi import status
from fastapi.responses import JSONResponse

from median.domain.exceptions import StoreErrorCode, StoreRequestError


@dataclass(frozen=True)
class ErrorOutcome:
    """HTTP status plus the client-safe message for one failure."""

    status_code: int
    message: str | list[str]

    @property
    def is_generic(self) -> bool:
        return self.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_response(self) -> dict:
        return {"statusCode": self.status_code, "message": self.message}

    def to_json_response(self, headers: dict[str, str] | None = None) -> JSONResponse:
        return JSONResponse(
            status_code=self.status_code,
            content=self.to_response(),
            headers=headers,
        )


INTERNAL_SERVER_ERROR = ErrorOutcome(
    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    message="Internal server error",
)


def sanitize_message(message: str) -> str:
    """Strip line breaks so store messages render as a single line."""
    return message.replace("\r", "").replace("\n", "")


def classify_store_error(error: StoreRequestError) -> ErrorOutcome:
    """Map a classified store failure to its HTTP outcome."""
    if error.code is StoreErrorCode.UNIQUE_CONSTRAINT_VIOLATION:
        return ErrorOutcome(
            status_code=status.HTTP_409_CONFLICT,
            message=sanitize_message(error.message),
        )
    # FOREIGN_KEY_VIOLATION, NOT_NULL_VIOLATION, VALUE_TOO_LONG and
    # RECORD_NOT_FOUND are recognised but intentionally left unmapped.
    return INTERNAL_SERVER_ERROR
