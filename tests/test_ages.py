"""Tests for age calculation and age strings."""

from datetime import date, datetime

import pytest

from household_census.domain.ages import Age, age_of, calculate_age, format_age
from household_census.localization import ENGLISH_LABELS, MARATHI_LABELS, Locale


class TestCalculateAge:
    def test_years_and_remainder_months(self):
        assert calculate_age(date(2020, 1, 1), date(2025, 6, 1)) == (5, 5)

    def test_birth_date_equal_to_now(self):
        assert calculate_age(date(2025, 3, 3), date(2025, 3, 3)) == (0, 0)

    def test_day_before_birthday_is_not_a_full_year(self):
        assert calculate_age(date(1995, 6, 15), date(2025, 6, 14)) == (29, 11)

    def test_on_birthday_counts_full_year(self):
        assert calculate_age(date(1995, 6, 15), date(2025, 6, 15)) == (30, 0)

    def test_partial_month_is_not_counted(self):
        assert calculate_age(date(2020, 1, 15), date(2020, 3, 14)) == (0, 1)

    def test_leap_day_birthday_in_common_year(self):
        assert calculate_age(date(2020, 2, 29), date(2021, 2, 28)) == (1, 0)

    def test_accepts_datetime_reference(self):
        assert calculate_age(date(2020, 1, 1), datetime(2025, 6, 1, 23, 59)) == (5, 5)


class TestFormatAge:
    @pytest.mark.parametrize(
        ("years", "months", "expected"),
        [
            (5, 5, "5 वर्षे, 5 महिने"),
            (1, 0, "1 वर्ष"),
            (1, 3, "1 वर्ष, 3 महिने"),
            (0, 0, "0 वर्षे"),
            (42, 0, "42 वर्षे"),
        ],
    )
    def test_marathi(self, years, months, expected):
        assert format_age(years, months, MARATHI_LABELS) == expected

    @pytest.mark.parametrize(
        ("years", "months", "expected"),
        [
            (5, 5, "5 years, 5 months"),
            (1, 0, "1 year"),
            (0, 11, "0 years, 11 months"),
        ],
    )
    def test_english(self, years, months, expected):
        assert format_age(years, months, ENGLISH_LABELS) == expected


class TestAgeOf:
    def test_returns_years_months_and_display(self):
        age = age_of(date(2020, 1, 1), date(2025, 6, 1))

        assert age == Age(years=5, months=5, display="5 वर्षे, 5 महिने")

    def test_display_contains_month_clause(self):
        age = age_of(date(2020, 1, 1), date(2025, 6, 1), Locale.ENGLISH)

        assert "5" in age.display
        assert "months" in age.display

    def test_newborn_has_no_month_clause(self):
        age = age_of(date(2025, 6, 1), date(2025, 6, 1), "en")

        assert age.display == "0 years"

    def test_recomputed_as_reference_advances(self):
        dob = date(2020, 6, 15)

        assert age_of(dob, date(2025, 6, 14)).years == 4
        assert age_of(dob, date(2025, 6, 15)).years == 5
