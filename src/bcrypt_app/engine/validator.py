"""Validation of a resolved configuration before hashing."""

import re

from pydantic import BaseModel, Field

from bcrypt_app.models.config import (
    MAX_COST,
    MIN_COST,
    SALT_LENGTH,
    Configuration,
    HashType,
)

_WHOLE_NUMBER = re.compile(r"[0-9]+")


class ValidationResult(BaseModel):
    """A single validation finding."""

    code: str = Field(..., description="Unique code for this finding type")
    field: str = Field(..., description="Configuration field the finding is about")
    message: str = Field(..., description="Human-readable description")


class ValidationReport(BaseModel):
    """Every finding for one configuration."""

    results: list[ValidationResult] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.results

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.results]


def validate_config(config: Configuration) -> ValidationReport:
    """Check cost, type and salt.

    Every check runs even when an earlier one fails, so a single run can
    report all of its problems at once.
    """
    results: list[ValidationResult] = []

    results.extend(_validate_cost(config))
    results.extend(_validate_type(config))
    results.extend(_validate_salt(config))

    return ValidationReport(results=results)


def _validate_cost(config: Configuration) -> list[ValidationResult]:
    cost = config.cost.strip()

    if not _WHOLE_NUMBER.fullmatch(cost):
        return [
            ValidationResult(
                code="COST_NOT_INTEGER",
                field="cost",
                message=f"Cost must be a whole number between {MIN_COST} and {MAX_COST}, "
                f"but got '{config.cost}'",
            )
        ]

    if not MIN_COST <= int(cost) <= MAX_COST:
        return [
            ValidationResult(
                code="COST_OUT_OF_RANGE",
                field="cost",
                message=f"Cost must be between {MIN_COST} and {MAX_COST}, but got {int(cost)}",
            )
        ]

    return []


def _validate_type(config: Configuration) -> list[ValidationResult]:
    allowed = [t.value for t in HashType]
    if config.type in allowed:
        return []

    return [
        ValidationResult(
            code="TYPE_UNKNOWN",
            field="type",
            message=f"Type must be one of {', '.join(allowed)}, but got '{config.type}'",
        )
    ]


def _validate_salt(config: Configuration) -> list[ValidationResult]:
    """The salt is measured in UTF-8 octets, not characters."""
    if config.salt_error is not None:
        return [
            ValidationResult(code="SALT_ENCODING", field="salt", message=config.salt_error)
        ]

    if len(config.salt) == SALT_LENGTH:
        return []

    return [
        ValidationResult(
            code="SALT_LENGTH",
            field="salt",
            message=f"Salt must be exactly {SALT_LENGTH} octets, but got {len(config.salt)}",
        )
    ]
