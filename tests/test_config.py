from household_census.config import Environment, LogLevel, Settings, get_settings
from household_census.localization import Locale


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.app_name == "Household Census"
        assert settings.locale == Locale.MARATHI
        assert settings.date_format == "%Y-%m-%d"
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CENSUS_LOCALE", "en")
        monkeypatch.setenv("CENSUS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CENSUS_ENVIRONMENT", "testing")

        settings = Settings()

        assert settings.locale == Locale.ENGLISH
        assert settings.log_level == LogLevel.DEBUG
        assert settings.environment == Environment.TESTING

    def test_json_logs_by_default_in_production(self):
        assert Settings(environment=Environment.PRODUCTION).log_format == "json"
        assert Settings(environment=Environment.STAGING).log_format == "console"

    def test_production_environment_from_env(self, monkeypatch):
        monkeypatch.setenv("CENSUS_ENVIRONMENT", "production")

        assert Settings().log_format == "json"

    def test_explicit_log_format_wins(self):
        settings = Settings(environment=Environment.PRODUCTION, log_format="console")

        assert settings.log_format == "console"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
