from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from uuid import UUID, uuid4

from household_census.domain.ages import Age, age_of
from household_census.domain.households import Household, Person
from household_census.domain.value_objects import Gender
from household_census.exceptions import DuplicatePersonIdError, HouseholdNotFoundError
from household_census.localization import Locale
from household_census.logging_config import get_logger
from household_census.repositories.interfaces import HouseholdRepository
from household_census.services.aggregation import (
    DemographicAggregates,
    compute_aggregates,
)
from household_census.services.interfaces import CensusService

logger = get_logger(__name__)

IdFactory = Callable[[], UUID]


class CensusServiceImpl(CensusService):
    """Household registry operations over a session-owned repository.

    Callers validate input first: names are non-empty and birth dates are
    not in the future. The registry only grows; there is no edit or delete.
    """

    def __init__(
        self,
        household_repo: HouseholdRepository,
        id_factory: IdFactory = uuid4,
        locale: Locale = Locale.MARATHI,
    ) -> None:
        self._household_repo = household_repo
        self._id_factory = id_factory
        self._locale = locale

    def _allocate_id(self) -> UUID:
        person_id = self._id_factory()
        if self._household_repo.get_person(person_id) is not None:
            raise DuplicatePersonIdError(person_id)
        return person_id

    def add_head(self, name: str, gender: Gender, date_of_birth: date) -> UUID:
        head = Person(
            name=name,
            gender=Gender(gender),
            date_of_birth=date_of_birth,
            id=self._allocate_id(),
        )
        household = Household(head=head)
        self._household_repo.add(household)
        logger.info(
            "household_head_added",
            household_id=str(household.id),
            household_count=self._household_repo.count(),
        )
        return household.id

    def add_member(
        self,
        household_id: UUID,
        name: str,
        gender: Gender,
        date_of_birth: date,
    ) -> UUID:
        household = self._household_repo.get(household_id)
        if household is None:
            logger.warning("household_not_found", household_id=str(household_id))
            raise HouseholdNotFoundError(household_id)

        member = Person(
            name=name,
            gender=Gender(gender),
            date_of_birth=date_of_birth,
            id=self._allocate_id(),
        )
        self._household_repo.add_member(household_id, member)
        logger.info(
            "household_member_added",
            household_id=str(household_id),
            member_id=str(member.id),
            household_size=household.size,
        )
        return member.id

    def get_household(self, household_id: UUID) -> Household | None:
        return self._household_repo.get(household_id)

    def list_households(self) -> list[Household]:
        return list(self._household_repo.list_all())

    def household_count(self) -> int:
        return self._household_repo.count()

    def compute_aggregates(self, now: date | datetime) -> DemographicAggregates:
        aggregates = compute_aggregates(self._household_repo.list_all(), now)
        logger.debug("aggregates_computed", as_of=str(now), **aggregates.counts())
        return aggregates

    def age_of(self, date_of_birth: date, now: date | datetime) -> Age:
        return age_of(date_of_birth, now, self._locale)
