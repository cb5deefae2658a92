from household_census.domain.ages import Age, age_of
from household_census.domain.households import Household, Person
from household_census.domain.value_objects import Gender
from household_census.services.aggregation import DemographicAggregates
from household_census.services.census import CensusServiceImpl

__all__ = [
    "Age",
    "CensusServiceImpl",
    "DemographicAggregates",
    "Gender",
    "Household",
    "Person",
    "age_of",
]

__version__ = "0.1.0"
