"""Tests for structured logging in the census service.

Structlog can output to stdout directly or through Python's logging
depending on configuration, so both are checked.
"""

import logging
from datetime import date
from uuid import uuid4

import pytest

from household_census.domain.value_objects import Gender
from household_census.exceptions import HouseholdNotFoundError
from household_census.services.census import CensusServiceImpl


def _all_output(capsys, caplog) -> str:
    captured = capsys.readouterr()
    return captured.out + captured.err + caplog.text


class TestCensusServiceLogging:
    def test_head_added_is_logged(self, census_service: CensusServiceImpl, capsys, caplog):
        with caplog.at_level(logging.INFO, logger="household_census"):
            census_service.add_head("Anil", Gender.MALE, date(1990, 1, 1))

        assert "household_head_added" in _all_output(capsys, caplog)

    def test_missing_household_logs_warning(
        self, census_service: CensusServiceImpl, capsys, caplog
    ):
        with caplog.at_level(logging.WARNING, logger="household_census"):
            with pytest.raises(HouseholdNotFoundError):
                census_service.add_member(uuid4(), "X", Gender.MALE, date(2000, 1, 1))

        assert "household_not_found" in _all_output(capsys, caplog)


class TestLoggingConfiguration:
    def test_configure_logging_json(self, capsys, caplog):
        from household_census.config import LogLevel, Settings
        from household_census.logging_config import configure_logging, get_logger

        configure_logging(Settings(log_format="json", log_level=LogLevel.INFO))

        with caplog.at_level(logging.INFO, logger="household_census.test"):
            get_logger("household_census.test").info("census_event", households=2)

        output = _all_output(capsys, caplog)
        assert "census_event" in output
        assert '"households": 2' in output

    def test_json_events_carry_app_context(self, capsys, caplog):
        from household_census.config import Environment, LogLevel, Settings
        from household_census.logging_config import configure_logging, get_logger

        configure_logging(
            Settings(environment=Environment.PRODUCTION, log_level=LogLevel.INFO)
        )

        with caplog.at_level(logging.INFO, logger="household_census.test"):
            get_logger("household_census.test").info("census_event", name="अनिल")

        output = _all_output(capsys, caplog)
        assert '"environment": "production"' in output
        assert '"name": "अनिल"' in output

    def test_console_chain_ends_with_console_renderer(self):
        import structlog

        from household_census.config import Settings
        from household_census.logging_config import build_processors

        processors = build_processors(Settings(log_format="console"))

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
