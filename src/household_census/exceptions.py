"""Exception hierarchy for Household Census.

All census exceptions inherit from HouseholdCensusError. This allows
catching all application errors with a single base class while preserving
specificity for individual error types.
"""

from typing import Any
from uuid import UUID


class HouseholdCensusError(Exception):
    """Base exception for all Household Census errors.

    Includes an error_code for machine-readable reporting and extra context.
    """

    error_code: str = "CENSUS_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Lookup Errors
# =============================================================================


class NotFoundError(HouseholdCensusError):
    """Base exception for references to records that do not exist."""

    error_code = "NOT_FOUND"


class HouseholdNotFoundError(NotFoundError):
    """Raised when a member is added to a household that does not exist."""

    error_code = "HOUSEHOLD_NOT_FOUND"

    def __init__(self, household_id: UUID | str) -> None:
        super().__init__(
            f"Household not found: {household_id}",
            context={"household_id": str(household_id)},
        )
        self.household_id = household_id


# =============================================================================
# Integrity Errors
# =============================================================================


class IntegrityError(HouseholdCensusError):
    """Raised when a registry invariant would be broken."""

    error_code = "INTEGRITY_ERROR"


class DuplicatePersonIdError(IntegrityError):
    """Raised when an allocated id is already used by a head or member."""

    error_code = "DUPLICATE_PERSON_ID"

    def __init__(self, person_id: UUID | str) -> None:
        super().__init__(
            f"Person id already in use: {person_id}",
            context={"person_id": str(person_id)},
        )


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(HouseholdCensusError):
    """Base exception for rejected user input.

    Raised by the input layer before the registry is called; the registry
    itself assumes its preconditions hold.
    """

    error_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        context = dict(context or {})
        if field is not None:
            context.setdefault("field", field)
        super().__init__(message, context=context)
        self.field = field


class MissingFieldError(ValidationError):
    """Raised when a required field is empty."""

    error_code = "MISSING_FIELD"


class InvalidGenderError(ValidationError):
    """Raised when a gender value is not one of the known genders."""

    error_code = "INVALID_GENDER"


class InvalidDateError(ValidationError):
    """Raised when a birth date cannot be parsed."""

    error_code = "INVALID_DATE"


class FutureBirthDateError(ValidationError):
    """Raised when a birth date lies after the current day."""

    error_code = "FUTURE_BIRTH_DATE"


class PersonFormError(ValidationError):
    """Collects every field error of a single submitted person form."""

    error_code = "INVALID_PERSON"

    def __init__(
        self, errors: list[ValidationError], *, line_number: int | None = None
    ) -> None:
        summary = "; ".join(error.message for error in errors)
        if line_number is not None:
            summary = f"line {line_number}: {summary}"
        context: dict[str, Any] = {
            "fields": [error.to_dict() for error in errors],
        }
        if line_number is not None:
            context["line_number"] = line_number
        super().__init__(summary, context=context)
        self.errors = errors
        self.line_number = line_number

    def fields(self) -> list[str]:
        return [error.field for error in self.errors if error.field]


# =============================================================================
# Roster Errors
# =============================================================================


class RosterError(HouseholdCensusError):
    """Base exception for roster import errors."""

    error_code = "ROSTER_ERROR"


class RosterFileNotFoundError(RosterError):
    error_code = "ROSTER_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"Roster file not found: {path}", context={"path": path})


class RosterFormatError(RosterError):
    """Raised when a roster file is missing columns or has a bad row."""

    error_code = "ROSTER_FORMAT_ERROR"

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        context: dict[str, Any] = {}
        if line_number is not None:
            message = f"line {line_number}: {message}"
            context["line_number"] = line_number
        super().__init__(message, context=context)
        self.line_number = line_number
