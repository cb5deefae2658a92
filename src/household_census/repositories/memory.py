"""In-memory household storage that lives for one census session."""

from collections.abc import Iterable
from uuid import UUID

from household_census.domain.households import Household, Person
from household_census.exceptions import DuplicatePersonIdError, HouseholdNotFoundError
from household_census.repositories.interfaces import HouseholdRepository


class InMemoryHouseholdRepository(HouseholdRepository):
    """Households kept in head insertion order.

    A second index maps every person id (heads and members) to its record
    so id uniqueness can be checked across the whole registry.
    """

    def __init__(self) -> None:
        self._households: dict[UUID, Household] = {}
        self._people: dict[UUID, Person] = {}

    def add(self, household: Household) -> None:
        if household.id in self._people:
            raise DuplicatePersonIdError(household.id)
        for member in household.members:
            if member.id in self._people or member.id == household.id:
                raise DuplicatePersonIdError(member.id)
        self._households[household.id] = household
        for person in household.people():
            self._people[person.id] = person

    def get(self, household_id: UUID) -> Household | None:
        return self._households.get(household_id)

    def list_all(self) -> Iterable[Household]:
        return list(self._households.values())

    def add_member(self, household_id: UUID, member: Person) -> None:
        household = self._households.get(household_id)
        if household is None:
            raise HouseholdNotFoundError(household_id)
        if member.id in self._people:
            raise DuplicatePersonIdError(member.id)
        household.add_member(member)
        self._people[member.id] = member

    def get_person(self, person_id: UUID) -> Person | None:
        return self._people.get(person_id)

    def count(self) -> int:
        return len(self._households)

    def clear(self) -> None:
        self._households.clear()
        self._people.clear()
