"""Demographic aggregation over the whole census population.

Aggregates are a pure function of the households and the reference time.
Nothing is cached: ages cross band boundaries as time passes, and any
registry mutation changes the population.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from household_census.domain.ages import calculate_age
from household_census.domain.households import Household, Person
from household_census.domain.value_objects import Gender

YOUNG_CHILD_MAX_AGE = 5
ADULT_ABOVE_AGE = 30


@dataclass(frozen=True)
class DemographicAggregates:
    """Overlapping population buckets.

    Each bucket holds the registry's own Person objects in population order.
    A person appears in every bucket whose predicate they satisfy.
    """

    males: tuple[Person, ...]
    females: tuple[Person, ...]
    age_0_to_5: tuple[Person, ...]
    age_above_30: tuple[Person, ...]
    total: tuple[Person, ...]

    def counts(self) -> dict[str, int]:
        return {
            "males": len(self.males),
            "females": len(self.females),
            "age_0_to_5": len(self.age_0_to_5),
            "age_above_30": len(self.age_above_30),
            "total": len(self.total),
        }


def flatten_population(households: Iterable[Household]) -> list[Person]:
    """Each household's head followed by its members, households in order."""
    return [person for household in households for person in household.people()]


def compute_aggregates(
    households: Iterable[Household], now: date | datetime
) -> DemographicAggregates:
    total = flatten_population(households)
    ages = {person.id: calculate_age(person.date_of_birth, now)[0] for person in total}

    return DemographicAggregates(
        males=tuple(p for p in total if p.gender == Gender.MALE),
        females=tuple(p for p in total if p.gender == Gender.FEMALE),
        age_0_to_5=tuple(p for p in total if ages[p.id] <= YOUNG_CHILD_MAX_AGE),
        age_above_30=tuple(p for p in total if ages[p.id] > ADULT_ABOVE_AGE),
        total=tuple(total),
    )


__all__ = [
    "ADULT_ABOVE_AGE",
    "YOUNG_CHILD_MAX_AGE",
    "DemographicAggregates",
    "compute_aggregates",
    "flatten_population",
]
