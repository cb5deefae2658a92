"""Plain-text rendering of households and demographic aggregates."""

from collections.abc import Iterable, Sequence
from datetime import date, datetime

from household_census.domain.ages import calculate_age, format_age
from household_census.domain.households import Household, Person
from household_census.domain.value_objects import Gender
from household_census.localization import Labels
from household_census.services.aggregation import DemographicAggregates

RULE_WIDTH = 70


def gender_label(gender: Gender, labels: Labels) -> str:
    return labels.male if gender == Gender.MALE else labels.female


def age_label(person: Person, now: date | datetime, labels: Labels) -> str:
    years, months = calculate_age(person.date_of_birth, now)
    return format_age(years, months, labels)


def _person_columns(person: Person, now: date | datetime, labels: Labels) -> str:
    return (
        f"{person.name} | {age_label(person, now, labels)} | "
        f"{gender_label(person.gender, labels)}"
    )


def render_households(
    households: Sequence[Household], now: date | datetime, labels: Labels
) -> str:
    """House number, name, age and gender for each head, members indented."""
    lines = [
        labels.title,
        "=" * RULE_WIDTH,
        labels.details_heading,
        "-" * RULE_WIDTH,
        f"  {labels.house_number} | {labels.name} | {labels.age} | {labels.gender}",
    ]
    for house_number, household in enumerate(households, start=1):
        lines.append(f"  {house_number:>3} | {_person_columns(household.head, now, labels)}")
        for member in household.members:
            lines.append(f"        - {_person_columns(member, now, labels)}")
    return "\n".join(lines)


def _render_people(
    people: Iterable[Person], now: date | datetime, labels: Labels
) -> list[str]:
    return [f"      {p.name} - {age_label(p, now, labels)}" for p in people]


def render_aggregates(
    aggregates: DemographicAggregates,
    now: date | datetime,
    labels: Labels,
    detail: bool = False,
) -> str:
    """One line per bucket with its count; with detail, list each person."""
    panels = [
        (labels.total_males, aggregates.males),
        (labels.total_females, aggregates.females),
        (labels.age_0_to_5, aggregates.age_0_to_5),
        (labels.age_above_30, aggregates.age_above_30),
        (labels.total_population, aggregates.total),
    ]
    lines = [labels.statistics_heading, "=" * RULE_WIDTH]
    for title, people in panels:
        lines.append(f"  {title}: {len(people)}")
        if detail:
            lines.extend(_render_people(people, now, labels))
    return "\n".join(lines)


__all__ = [
    "age_label",
    "gender_label",
    "render_aggregates",
    "render_households",
]
