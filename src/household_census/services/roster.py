"""Feed a parsed roster into the census registry."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime
from uuid import UUID

from household_census.exceptions import HouseholdNotFoundError, RosterFormatError
from household_census.forms import PersonForm, validate_person
from household_census.localization import MARATHI_LABELS, Labels
from household_census.logging_config import get_logger
from household_census.parsers.roster import RosterEntry, RosterRole
from household_census.services.interfaces import CensusService

logger = get_logger(__name__)


def load_roster(
    service: CensusService,
    entries: Sequence[RosterEntry],
    today: date | datetime,
    labels: Labels = MARATHI_LABELS,
    *,
    date_formats: Sequence[str] | None = None,
) -> dict[str, UUID]:
    """Add every roster row to the registry in file order.

    All rows are validated before the first one is added, so a bad roster
    leaves the registry untouched.

    Returns:
        Mapping from roster household key to registry household id.

    Raises:
        PersonFormError: A row failed validation.
        RosterFormatError: A household key has more than one head.
        HouseholdNotFoundError: A member row precedes its household's head.
    """
    validated: list[tuple[RosterEntry, PersonForm]] = []
    heads_seen: set[str] = set()

    for entry in entries:
        form = validate_person(
            entry.person_fields(),
            today,
            labels,
            date_formats=date_formats,
            line_number=entry.line_number,
        )
        if entry.role == RosterRole.HEAD:
            if entry.household in heads_seen:
                raise RosterFormatError(
                    f"household {entry.household!r} already has a head",
                    line_number=entry.line_number,
                )
            heads_seen.add(entry.household)
        elif entry.household not in heads_seen:
            logger.warning(
                "roster_row_rejected",
                line_number=entry.line_number,
                household=entry.household,
            )
            raise HouseholdNotFoundError(entry.household)
        validated.append((entry, form))

    household_ids: dict[str, UUID] = {}
    members = 0
    for entry, form in validated:
        if entry.role == RosterRole.HEAD:
            household_ids[entry.household] = service.add_head(
                form.name, form.gender, form.date_of_birth
            )
        else:
            service.add_member(
                household_ids[entry.household],
                form.name,
                form.gender,
                form.date_of_birth,
            )
            members += 1

    logger.info("roster_loaded", households=len(household_ids), members=members)
    return household_ids
