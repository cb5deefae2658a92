from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from uuid import UUID

from household_census.domain.ages import Age
from household_census.domain.households import Household
from household_census.domain.value_objects import Gender
from household_census.services.aggregation import DemographicAggregates


class CensusService(ABC):
    @abstractmethod
    def add_head(self, name: str, gender: Gender, date_of_birth: date) -> UUID:
        pass

    @abstractmethod
    def add_member(
        self,
        household_id: UUID,
        name: str,
        gender: Gender,
        date_of_birth: date,
    ) -> UUID:
        pass

    @abstractmethod
    def get_household(self, household_id: UUID) -> Household | None:
        pass

    @abstractmethod
    def list_households(self) -> list[Household]:
        pass

    @abstractmethod
    def household_count(self) -> int:
        pass

    @abstractmethod
    def compute_aggregates(self, now: date | datetime) -> DemographicAggregates:
        pass

    @abstractmethod
    def age_of(self, date_of_birth: date, now: date | datetime) -> Age:
        pass
