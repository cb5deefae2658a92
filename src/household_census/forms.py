"""Input validation for people entered into the census.

The registry trusts its callers, so everything typed by a user or read from
a roster passes through validate_person first. Field errors are reported in
the configured language, the way the entry form shows them.
"""

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from household_census.domain.value_objects import Gender
from household_census.exceptions import (
    FutureBirthDateError,
    InvalidDateError,
    InvalidGenderError,
    MissingFieldError,
    PersonFormError,
    ValidationError,
)
from household_census.localization import MARATHI_LABELS, Labels

DATE_FORMATS = [
    "%Y-%m-%d",
    "%d/%m/%Y",
    "%d-%m-%Y",
    "%Y/%m/%d",
]

_GENDER_ALIASES: dict[str, Gender] = {
    "male": Gender.MALE,
    "m": Gender.MALE,
    "female": Gender.FEMALE,
    "f": Gender.FEMALE,
    MARATHI_LABELS.male: Gender.MALE,
    MARATHI_LABELS.female: Gender.FEMALE,
    "महिला": Gender.FEMALE,
}


def parse_gender(value: str) -> Gender:
    """Accept English names, their initials and the Marathi labels."""
    gender = _GENDER_ALIASES.get(value.strip().lower())
    if gender is None:
        raise ValueError(f"unknown gender {value!r}")
    return gender


def parse_date(value: str, formats: Sequence[str] = DATE_FORMATS) -> date:
    text = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"unparseable date {value!r}")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class PersonForm(BaseModel):
    """A validated head-of-household or member entry."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    name: str
    gender: Gender
    date_of_birth: date

    @field_validator("name", mode="before")
    @classmethod
    def name_required(cls, v: Any) -> Any:
        if _is_blank(v):
            raise PydanticCustomError("required", "name is required")
        return v

    @field_validator("gender", mode="before")
    @classmethod
    def coerce_gender(cls, v: Any) -> Any:
        if _is_blank(v):
            raise PydanticCustomError("required", "gender is required")
        if isinstance(v, Gender):
            return v
        try:
            return parse_gender(str(v))
        except ValueError:
            raise PydanticCustomError(
                "invalid_gender", "unknown gender {value}", {"value": str(v)}
            ) from None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def coerce_date_of_birth(cls, v: Any, info: ValidationInfo) -> Any:
        if _is_blank(v):
            raise PydanticCustomError("required", "date of birth is required")
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        formats = (info.context or {}).get("date_formats") or DATE_FORMATS
        try:
            return parse_date(str(v), formats)
        except ValueError:
            raise PydanticCustomError(
                "invalid_date", "unparseable date {value}", {"value": str(v)}
            ) from None

    @field_validator("date_of_birth", mode="after")
    @classmethod
    def not_in_future(cls, v: date, info: ValidationInfo) -> date:
        today = (info.context or {}).get("today")
        if today is not None and v > today:
            raise PydanticCustomError(
                "future_birth_date", "date of birth {value} is after today", {"value": str(v)}
            )
        return v


_REQUIRED_MESSAGES = {
    "name": "name_required",
    "gender": "gender_required",
    "date_of_birth": "date_of_birth_required",
}


def _translate(error: Mapping[str, Any], labels: Labels) -> ValidationError:
    field = str(error["loc"][0]) if error.get("loc") else None
    error_type = error["type"]
    context = {"input": str(error.get("input"))}

    if error_type == "future_birth_date":
        return FutureBirthDateError(
            labels.date_of_birth_in_future, field=field, context=context
        )
    if error_type == "invalid_gender":
        return InvalidGenderError(labels.invalid_gender, field=field, context=context)
    if error_type in ("missing", "required") and field in _REQUIRED_MESSAGES:
        message = getattr(labels, _REQUIRED_MESSAGES[field])
        return MissingFieldError(message, field=field)
    if field == "date_of_birth":
        return InvalidDateError(labels.invalid_date, field=field, context=context)
    return ValidationError(str(error.get("msg", error_type)), field=field, context=context)


def validate_person(
    raw: Mapping[str, Any],
    today: date | datetime,
    labels: Labels = MARATHI_LABELS,
    *,
    date_formats: Sequence[str] | None = None,
    line_number: int | None = None,
) -> PersonForm:
    """Validate one entry before it is handed to the registry.

    Args:
        raw: Mapping with name, gender and date_of_birth values.
        today: The current day; later birth dates are rejected.
        labels: Language used for error messages.
        date_formats: strptime formats tried for string dates.
        line_number: Roster line the entry came from, for error messages.

    Raises:
        PersonFormError: Listing one error per rejected field.
    """
    if isinstance(today, datetime):
        today = today.date()
    try:
        return PersonForm.model_validate(
            dict(raw),
            context={"today": today, "date_formats": date_formats},
        )
    except PydanticValidationError as exc:
        errors = [_translate(error, labels) for error in exc.errors()]
        raise PersonFormError(errors, line_number=line_number) from exc


__all__ = [
    "DATE_FORMATS",
    "PersonForm",
    "parse_date",
    "parse_gender",
    "validate_person",
]
