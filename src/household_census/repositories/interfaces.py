from abc import ABC, abstractmethod
from collections.abc import Iterable
from uuid import UUID

from household_census.domain.households import Household, Person


class HouseholdRepository(ABC):
    @abstractmethod
    def add(self, household: Household) -> None:
        pass

    @abstractmethod
    def get(self, household_id: UUID) -> Household | None:
        pass

    @abstractmethod
    def list_all(self) -> Iterable[Household]:
        pass

    @abstractmethod
    def add_member(self, household_id: UUID, member: Person) -> None:
        pass

    @abstractmethod
    def get_person(self, person_id: UUID) -> Person | None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass
