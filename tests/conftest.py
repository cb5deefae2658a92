from collections.abc import Iterator
from datetime import date

import pytest
import structlog

from household_census.config import get_settings
from household_census.domain.value_objects import Gender
from household_census.logging_config import clear_context
from household_census.repositories.memory import InMemoryHouseholdRepository
from household_census.services.census import CensusServiceImpl


@pytest.fixture(autouse=True)
def reset_global_state() -> Iterator[None]:
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    clear_context()


@pytest.fixture
def household_repo() -> InMemoryHouseholdRepository:
    return InMemoryHouseholdRepository()


@pytest.fixture
def census_service(household_repo: InMemoryHouseholdRepository) -> CensusServiceImpl:
    return CensusServiceImpl(household_repo)


@pytest.fixture
def as_of() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def smith_household(census_service: CensusServiceImpl):
    """Head born 1990 with one daughter born 2023."""
    household_id = census_service.add_head("Anil", Gender.MALE, date(1990, 1, 1))
    census_service.add_member(household_id, "Bina", Gender.FEMALE, date(2023, 1, 1))
    return census_service.get_household(household_id)


@pytest.fixture
def roster_csv(tmp_path):
    content = """household,role,name,gender,dob
1,head,Anil,Male,1990-01-01
1,member,Bina,Female,2023-01-01
2,head,Chitra,Female,1960-07-20
"""
    path = tmp_path / "roster.csv"
    path.write_text(content, encoding="utf-8")
    return path
