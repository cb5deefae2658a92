from enum import Enum
from uuid import UUID

PersonId = UUID
HouseholdId = UUID


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


__all__ = [
    "Gender",
    "HouseholdId",
    "PersonId",
]
