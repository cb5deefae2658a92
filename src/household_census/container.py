"""Census session: the owner of one registry's lifetime.

A session wires the in-memory repository and the census service together.
The registry starts empty when the session is created and is discarded
when the session is closed; nothing is persisted.

Usage:
    from household_census.container import CensusSession

    with CensusSession() as session:
        household_id = session.census_service.add_head(
            "Asha", Gender.FEMALE, date(1985, 4, 2)
        )
        aggregates = session.census_service.compute_aggregates(date.today())
"""

from functools import cached_property
from uuid import uuid4

from household_census.config import Settings, get_settings
from household_census.localization import Labels, get_labels
from household_census.logging_config import bind_context, get_logger, unbind_context
from household_census.repositories.memory import InMemoryHouseholdRepository
from household_census.services.census import CensusServiceImpl, IdFactory

logger = get_logger(__name__)


class CensusSession:
    """Session-scoped container for the registry and its service.

    Sessions are independent, so tests can create as many isolated
    registries as they need:

        session = CensusSession(settings=Settings(locale=Locale.ENGLISH))
    """

    def __init__(
        self,
        settings: Settings | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._id_factory = id_factory or uuid4
        self.id = uuid4()
        self._closed = False
        logger.debug(
            "census_session_opened",
            session_id=str(self.id),
            locale=self._settings.locale.value,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def labels(self) -> Labels:
        return get_labels(self._settings.locale)

    @property
    def closed(self) -> bool:
        return self._closed

    @cached_property
    def household_repo(self) -> InMemoryHouseholdRepository:
        return InMemoryHouseholdRepository()

    @cached_property
    def census_service(self) -> CensusServiceImpl:
        return CensusServiceImpl(
            self.household_repo,
            id_factory=self._id_factory,
            locale=self._settings.locale,
        )

    def close(self) -> None:
        """Discard the registry. Safe to call more than once."""
        if self._closed:
            return
        households = 0
        if "household_repo" in self.__dict__:
            households = self.household_repo.count()
            self.household_repo.clear()
        self._closed = True
        logger.debug(
            "census_session_closed",
            session_id=str(self.id),
            households_discarded=households,
        )

    def __enter__(self) -> "CensusSession":
        bind_context(session_id=str(self.id))
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
        unbind_context("session_id")
