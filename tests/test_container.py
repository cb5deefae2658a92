from datetime import date
from itertools import count
from uuid import UUID

from household_census.config import Settings
from household_census.container import CensusSession
from household_census.domain.value_objects import Gender
from household_census.localization import ENGLISH_LABELS, MARATHI_LABELS, Locale
from household_census.services.census import CensusServiceImpl


class TestCensusSession:
    def test_starts_empty(self):
        session = CensusSession(settings=Settings())

        assert isinstance(session.census_service, CensusServiceImpl)
        assert session.census_service.household_count() == 0

    def test_service_is_reused(self):
        session = CensusSession(settings=Settings())

        assert session.census_service is session.census_service
        assert session.household_repo is session.household_repo

    def test_sessions_are_isolated(self):
        first = CensusSession(settings=Settings())
        second = CensusSession(settings=Settings())

        first.census_service.add_head("A", Gender.MALE, date(1990, 1, 1))

        assert first.census_service.household_count() == 1
        assert second.census_service.household_count() == 0
        assert first.id != second.id

    def test_close_discards_registry(self):
        with CensusSession(settings=Settings()) as session:
            household_id = session.census_service.add_head("A", Gender.MALE, date(1990, 1, 1))
            assert session.census_service.get_household(household_id) is not None

        assert session.closed
        assert session.household_repo.count() == 0
        assert session.census_service.get_household(household_id) is None

    def test_close_is_idempotent(self):
        session = CensusSession(settings=Settings())

        session.close()
        session.close()

        assert session.closed

    def test_labels_follow_locale(self):
        assert CensusSession(settings=Settings()).labels is MARATHI_LABELS
        english = CensusSession(settings=Settings(locale=Locale.ENGLISH))
        assert english.labels is ENGLISH_LABELS
        assert english.census_service.age_of(date(2024, 1, 1), date(2025, 1, 1)).display == "1 year"

    def test_custom_id_factory(self):
        counter = count(100)
        session = CensusSession(
            settings=Settings(), id_factory=lambda: UUID(int=next(counter))
        )

        household_id = session.census_service.add_head("A", Gender.MALE, date(1990, 1, 1))

        assert household_id == UUID(int=100)
