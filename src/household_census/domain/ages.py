"""Age calculation from a birth date.

Ages are always derived from a reference time supplied by the caller and are
never stored, so a person moves between age bands as the clock advances.
"""

from dataclasses import dataclass
from datetime import date, datetime

from dateutil.relativedelta import relativedelta  # type: ignore[import-untyped]

from household_census.localization import Labels, Locale, get_labels


@dataclass(frozen=True)
class Age:
    years: int
    months: int
    display: str


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def calculate_age(date_of_birth: date, now: date | datetime) -> tuple[int, int]:
    """Return completed whole years and the remaining completed months.

    The months value counts from the last birthday, so it is always 0-11.
    Leap-day birthdays fall on Feb 28 in common years.
    """
    delta = relativedelta(_as_date(now), _as_date(date_of_birth))
    return delta.years, delta.months


def format_age(years: int, months: int, labels: Labels) -> str:
    unit = labels.year_singular if years == 1 else labels.year_plural
    text = f"{years} {unit}"
    if months > 0:
        text += f", {months} {labels.months}"
    return text


def age_of(
    date_of_birth: date,
    now: date | datetime,
    locale: Locale | str = Locale.MARATHI,
) -> Age:
    years, months = calculate_age(date_of_birth, now)
    return Age(
        years=years,
        months=months,
        display=format_age(years, months, get_labels(locale)),
    )


__all__ = [
    "Age",
    "age_of",
    "calculate_age",
    "format_age",
]
