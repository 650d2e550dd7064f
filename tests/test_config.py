import pytest
from slappd.config import Settings
from slappd.main import uvicorn_options


ENV_VARS = [
    "SLACK_TOKEN", "SLACK_SIGNING_SECRET", "UNTAPPD_BASE_URL", "UNTAPPD_CLIENT_ID",
    "UNTAPPD_CLIENT_SECRET", "MAX_RESULTS", "SHUTDOWN_GRACE_PERIOD", "HOST", "PORT",
    "DEBUG", "LOG_LEVEL",
]


class TestSettings:
    @pytest.fixture
    def clean_env(self, monkeypatch):
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        
        assert settings.max_results == 5
        assert settings.shutdown_grace_period == 10
        assert settings.port == 8080
        assert settings.slack_signing_secret is None
        assert settings.accepted_tokens == []

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv("SLACK_TOKEN", " tok-a, ,tok-b ")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("MAX_RESULTS", "3")
        
        settings = Settings(_env_file=None)
        
        assert settings.accepted_tokens == ["tok-a", "tok-b"]
        assert settings.port == 9000
        assert settings.max_results == 3


class TestUvicornOptions:
    def test_grace_period_reaches_uvicorn(self, settings):
        settings.shutdown_grace_period = 7
        settings.log_level = "DEBUG"
        
        options = uvicorn_options(settings)
        
        assert options["timeout_graceful_shutdown"] == 7
        assert options["log_level"] == "debug"
        assert options["port"] == settings.port
        assert options["host"] == settings.host
        assert options["reload"] is False
