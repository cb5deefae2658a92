"""File parsers for importing household rosters."""

from household_census.parsers.roster import RosterEntry, RosterParser, RosterRole

__all__ = [
    "RosterEntry",
    "RosterParser",
    "RosterRole",
]
