"""Household domain model for the census registry."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

from household_census.domain.value_objects import Gender, HouseholdId


@dataclass(frozen=True)
class Person:
    """A head of household or a household member.

    Records are never edited once created; corrections are out of scope.
    """

    name: str
    gender: Gender
    date_of_birth: date
    id: UUID = field(default_factory=uuid4)


@dataclass(eq=False)
class Household:
    """One head of household plus dependents in insertion order.

    The head's id doubles as the household id. Members are only ever
    appended; the head is fixed at creation.
    """

    head: Person
    members: list[Person] = field(default_factory=list)

    @property
    def id(self) -> HouseholdId:
        return self.head.id

    @property
    def name(self) -> str:
        return self.head.name

    @property
    def gender(self) -> Gender:
        return self.head.gender

    @property
    def date_of_birth(self) -> date:
        return self.head.date_of_birth

    def add_member(self, member: Person) -> None:
        self.members.append(member)

    def people(self) -> list[Person]:
        """Head followed by members in their stored order."""
        return [self.head, *self.members]

    @property
    def size(self) -> int:
        return 1 + len(self.members)


__all__ = [
    "Household",
    "Person",
]
