from household_census.domain.ages import Age, age_of, calculate_age, format_age
from household_census.domain.households import Household, Person
from household_census.domain.value_objects import Gender, HouseholdId, PersonId

__all__ = [
    "Age",
    "Gender",
    "Household",
    "HouseholdId",
    "Person",
    "PersonId",
    "age_of",
    "calculate_age",
    "format_age",
]
