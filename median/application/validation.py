"""Input validation for article requests.

Turns raw request data into typed DTOs or a list of field violations.
Nothing here touches the data store.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from median.application.schemas import ArticleCreate, ArticleUpdate
from median.domain.exceptions import (
    FieldViolation,
    InputValidationError,
    MalformedIdentifierError,
)

_INTEGER_TOKEN = re.compile(r"-?[0-9]+")

T = TypeVar("T", bound=BaseModel)


@dataclass
class ValidationResult(Generic[T]):
    """Either a validated payload or the violations that rejected it."""

    value: T | None = None
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> T:
        """Return the payload, raising InputValidationError when rejected."""
        if self.violations or self.value is None:
            raise InputValidationError(self.violations)
        return self.value


def validate_article_input(raw: object) -> ValidationResult[ArticleCreate]:
    """Validate a create-article payload (unknown fields are dropped)."""
    return _validate(ArticleCreate, raw)


def validate_article_update(raw: object) -> ValidationResult[ArticleUpdate]:
    """Validate a partial update payload (unknown fields are dropped)."""
    return _validate(ArticleUpdate, raw)


def parse_article_id(raw: object) -> int:
    """Parse a path identifier, accepting only plain integer tokens.

    ``"42"`` and ``"-7"`` are accepted; ``"4.2"``, ``"1e3"``, ``" 42"`` and
    ``"string-id"`` raise MalformedIdentifierError.
    """
    if isinstance(raw, bool):
        raise MalformedIdentifierError(raw)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and _INTEGER_TOKEN.fullmatch(raw):
        return int(raw)
    raise MalformedIdentifierError(raw)


def _validate(schema: type[T], raw: object) -> ValidationResult[T]:
    if not isinstance(raw, Mapping):
        return ValidationResult(
            violations=[FieldViolation("body", "request body must be a JSON object")]
        )
    try:
        return ValidationResult(value=schema.model_validate(dict(raw)))
    except ValidationError as exc:
        return ValidationResult(violations=_to_violations(exc))


def _to_violations(exc: ValidationError) -> list[FieldViolation]:
    violations = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        violations.append(FieldViolation(location, error["msg"]))
    return violations
