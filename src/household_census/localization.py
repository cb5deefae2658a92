"""Display labels for the census in each supported language."""

from dataclasses import dataclass
from enum import Enum


class Locale(str, Enum):
    MARATHI = "mr"
    ENGLISH = "en"


@dataclass(frozen=True)
class Labels:
    # Age strings
    year_singular: str
    year_plural: str
    months: str

    # Genders
    male: str
    female: str

    # Aggregate panel titles
    total_males: str
    total_females: str
    age_0_to_5: str
    age_above_30: str
    total_population: str

    # Headings and table columns
    title: str
    details_heading: str
    statistics_heading: str
    house_number: str
    name: str
    age: str
    gender: str

    # Form messages
    name_required: str
    date_of_birth_required: str
    gender_required: str
    date_of_birth_in_future: str
    invalid_date: str
    invalid_gender: str
    head_added: str
    member_added: str
    household_not_found: str


MARATHI_LABELS = Labels(
    year_singular="वर्ष",
    year_plural="वर्षे",
    months="महिने",
    male="पुरुष",
    female="स्त्री",
    total_males="एकूण पुरुष",
    total_females="एकूण महिला",
    age_0_to_5="वय ०-५ वर्ष",
    age_above_30="वय ३० वर्षांपेक्षा जास्त",
    total_population="एकूण लोकसंख्या",
    title="घरगुती माहिती",
    details_heading="सविस्तर माहिती",
    statistics_heading="आकडेवारी",
    house_number="घर क्र.",
    name="नाव",
    age="वय",
    gender="लिंग",
    name_required="कृपया नाव लिहा",
    date_of_birth_required="कृपया जन्मतारीख निवडा",
    gender_required="कृपया लिंग निवडा",
    date_of_birth_in_future="जन्मतारीख भविष्यातील असू शकत नाही",
    invalid_date="अवैध जन्मतारीख",
    invalid_gender="अवैध लिंग",
    head_added="घराचा प्रमुख यशस्वीरित्या जोडला गेला!",
    member_added="कुटुंब सदस्य यशस्वीरित्या जोडला गेला!",
    household_not_found="घर सापडले नाही",
)

ENGLISH_LABELS = Labels(
    year_singular="year",
    year_plural="years",
    months="months",
    male="Male",
    female="Female",
    total_males="Total males",
    total_females="Total females",
    age_0_to_5="Age 0-5 years",
    age_above_30="Age above 30 years",
    total_population="Total population",
    title="Household information",
    details_heading="Details",
    statistics_heading="Statistics",
    house_number="House no.",
    name="Name",
    age="Age",
    gender="Gender",
    name_required="Please enter a name",
    date_of_birth_required="Please choose a date of birth",
    gender_required="Please choose a gender",
    date_of_birth_in_future="Date of birth cannot be in the future",
    invalid_date="Invalid date of birth",
    invalid_gender="Invalid gender",
    head_added="Head of household added successfully!",
    member_added="Family member added successfully!",
    household_not_found="Household not found",
)

_LABELS: dict[Locale, Labels] = {
    Locale.MARATHI: MARATHI_LABELS,
    Locale.ENGLISH: ENGLISH_LABELS,
}


def get_labels(locale: Locale | str = Locale.MARATHI) -> Labels:
    return _LABELS[Locale(locale)]


__all__ = [
    "ENGLISH_LABELS",
    "Labels",
    "Locale",
    "MARATHI_LABELS",
    "get_labels",
]
