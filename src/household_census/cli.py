"""Command-line interface for Household Census."""

import argparse
import shlex
import sys
from datetime import date
from pathlib import Path

from household_census import __version__
from household_census.config import LogLevel, Settings, get_settings
from household_census.container import CensusSession
from household_census.exceptions import HouseholdCensusError, PersonFormError
from household_census.forms import DATE_FORMATS, parse_date, validate_person
from household_census.localization import Locale, get_labels
from household_census.logging_config import configure_logging
from household_census.parsers.roster import RosterParser
from household_census.rendering import render_aggregates, render_households
from household_census.services.roster import load_roster

SHELL_HELP = """Commands:
  head NAME GENDER DOB               add a head of household
  member HOUSE_NO NAME GENDER DOB    add a member to household HOUSE_NO
  list                               show households
  stats [detail]                     show demographic counts
  help                               show this help
  quit                               end the session (all entries are discarded)
Quote names containing spaces, e.g. head "Ramesh Patil" Male 1980-05-14"""


def _settings_from_args(args: argparse.Namespace) -> Settings:
    """Apply command-line overrides on top of the environment settings."""
    settings = get_settings()
    updates: dict[str, object] = {}
    locale = getattr(args, "locale", None)
    if locale:
        updates["locale"] = Locale(locale)
    log_level = getattr(args, "log_level", None)
    if log_level:
        updates["log_level"] = LogLevel(log_level.upper())
    return settings.model_copy(update=updates) if updates else settings


def _date_formats(settings: Settings) -> list[str]:
    return [settings.date_format, *[f for f in DATE_FORMATS if f != settings.date_format]]


def _parse_cli_date(value: str, settings: Settings) -> date:
    return parse_date(value, _date_formats(settings))


def _as_of(args: argparse.Namespace, settings: Settings) -> date:
    as_of = getattr(args, "as_of", None)
    return _parse_cli_date(as_of, settings) if as_of else date.today()


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    settings = _settings_from_args(args)
    print(f"{settings.app_name} v{__version__}")
    return 0


def cmd_age(args: argparse.Namespace) -> int:
    """Print the age for a birth date."""
    settings = _settings_from_args(args)
    try:
        as_of = _as_of(args, settings)
        date_of_birth = _parse_cli_date(args.dob, settings)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if date_of_birth > as_of:
        print(f"Error: {get_labels(settings.locale).date_of_birth_in_future}")
        return 1

    with CensusSession(settings=settings) as session:
        age = session.census_service.age_of(date_of_birth, as_of)
    print(age.display)
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Load a roster file and print households and aggregates."""
    settings = _settings_from_args(args)
    roster_path = Path(args.roster)

    try:
        as_of = _as_of(args, settings)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    try:
        entries = RosterParser().parse(roster_path)
        with CensusSession(settings=settings) as session:
            service = session.census_service
            load_roster(
                service,
                entries,
                as_of,
                session.labels,
                date_formats=_date_formats(settings),
            )
            print(render_households(service.list_households(), as_of, session.labels))
            print()
            print(
                render_aggregates(
                    service.compute_aggregates(as_of),
                    as_of,
                    session.labels,
                    detail=getattr(args, "detail", False),
                )
            )
        return 0

    except HouseholdCensusError as e:
        print(f"Error: {e.message}")
        return 1


def _shell_add(session: CensusSession, tokens: list[str], as_of: date) -> None:
    """Handle `head` and `member` lines. Raises on invalid input."""
    labels = session.labels
    service = session.census_service
    command, rest = tokens[0], tokens[1:]

    household_id = None
    if command == "member":
        households = service.list_households()
        house_number = rest.pop(0) if rest else ""
        if not house_number.isdigit() or not 1 <= int(house_number) <= len(households):
            print(f"Error: {labels.household_not_found}: {house_number}")
            return
        household_id = households[int(house_number) - 1].id

    fields = dict(zip(["name", "gender", "date_of_birth"], rest, strict=False))
    form = validate_person(
        fields, as_of, labels, date_formats=_date_formats(session.settings)
    )

    if household_id is None:
        service.add_head(form.name, form.gender, form.date_of_birth)
        print(f"{labels.head_added} ({service.household_count()})")
    else:
        service.add_member(household_id, form.name, form.gender, form.date_of_birth)
        print(labels.member_added)


def cmd_shell(args: argparse.Namespace) -> int:
    """Interactive census session reading commands from standard input."""
    settings = _settings_from_args(args)
    try:
        as_of = _as_of(args, settings)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    with CensusSession(settings=settings) as session:
        print(SHELL_HELP)
        for line in sys.stdin:
            try:
                tokens = shlex.split(line)
            except ValueError as e:
                print(f"Error: {e}")
                continue
            if not tokens:
                continue

            command = tokens[0].lower()
            tokens[0] = command
            if command in ("quit", "exit"):
                break
            if command == "help":
                print(SHELL_HELP)
            elif command == "list":
                print(
                    render_households(
                        session.census_service.list_households(), as_of, session.labels
                    )
                )
            elif command == "stats":
                detail = len(tokens) > 1 and tokens[1].lower() == "detail"
                print(
                    render_aggregates(
                        session.census_service.compute_aggregates(as_of),
                        as_of,
                        session.labels,
                        detail=detail,
                    )
                )
            elif command in ("head", "member"):
                try:
                    _shell_add(session, tokens, as_of)
                except PersonFormError as e:
                    for error in e.errors:
                        print(f"Error: {error.message}")
                except HouseholdCensusError as e:
                    print(f"Error: {e.message}")
            else:
                print(f"Error: unknown command {command!r} (try 'help')")

    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="census",
        description="Household Census - heads of household, members and demographic counts",
    )
    parser.add_argument(
        "--locale",
        "-l",
        choices=[locale.value for locale in Locale],
        default=None,
        help="Language for ages, genders and headings (default: from settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value.lower() for level in LogLevel],
        default=None,
        help="Log level (default: from settings)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    # age command
    age_parser = subparsers.add_parser("age", help="Show the age for a date of birth")
    age_parser.add_argument("dob", help="Date of birth (YYYY-MM-DD)")
    age_parser.add_argument(
        "--as-of", default=None, help="Reference date (default: today)"
    )
    age_parser.set_defaults(func=cmd_age)

    # report command
    report_parser = subparsers.add_parser(
        "report", help="Load a roster CSV and show households and statistics"
    )
    report_parser.add_argument(
        "roster", help="CSV with household, role, name, gender and dob columns"
    )
    report_parser.add_argument(
        "--as-of", default=None, help="Reference date (default: today)"
    )
    report_parser.add_argument(
        "--detail",
        action="store_true",
        help="List the people in each statistic",
    )
    report_parser.set_defaults(func=cmd_report)

    # shell command
    shell_parser = subparsers.add_parser(
        "shell", help="Enter households interactively (nothing is saved)"
    )
    shell_parser.add_argument(
        "--as-of", default=None, help="Reference date (default: today)"
    )
    shell_parser.set_defaults(func=cmd_shell)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging(_settings_from_args(args))

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    sys.exit(main())
