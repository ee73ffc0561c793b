import logging

from exoanalysis.settings import Settings, configure_logging, get_settings, settings


def test_defaults():
    fresh = Settings(_env_file=None)
    assert fresh.search_limit == 10
    assert fresh.similarity_limit == 10
    assert fresh.log_level == "info"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EXOANALYSIS_SIMILARITY_LIMIT", "3")
    monkeypatch.setenv("EXOANALYSIS_LOG_LEVEL", "debug")
    fresh = Settings(_env_file=None)
    assert fresh.similarity_limit == 3
    assert fresh.logging_level == logging.DEBUG


def test_unknown_log_level_falls_back_to_info():
    assert Settings(_env_file=None, log_level="chatty").logging_level == logging.INFO


def test_get_settings_returns_global_instance():
    assert get_settings() is settings


def test_configure_logging_accepts_level_names():
    configure_logging("warning")
    configure_logging()


def test_only_engine_settings_are_declared():
    assert set(Settings.model_fields) == {"log_level", "search_limit", "similarity_limit"}
