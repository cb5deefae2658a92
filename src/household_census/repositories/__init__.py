from household_census.repositories.interfaces import HouseholdRepository
from household_census.repositories.memory import InMemoryHouseholdRepository

__all__ = [
    "HouseholdRepository",
    "InMemoryHouseholdRepository",
]
