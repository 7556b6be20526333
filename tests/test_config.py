"""Tests for environment-driven settings."""

from yamljson.config import Settings, get_settings


def test_defaults():
    s = Settings.from_env({})
    assert s == Settings(log_level="INFO", silent=False, strict=False)

def test_from_env_values():
    s = Settings.from_env(
        {"YAMLJSON_LOG_LEVEL": "3", "YAMLJSON_SILENT": "true", "YAMLJSON_STRICT": "1"}
    )
    assert s.log_level == "3"
    assert s.silent is True
    assert s.strict is True

def test_flags_are_case_insensitive():
    assert Settings.from_env({"YAMLJSON_SILENT": " YES "}).silent is True

def test_unrecognised_flag_is_false():
    assert Settings.from_env({"YAMLJSON_STRICT": "maybe"}).strict is False

def test_get_settings_reads_process_env(monkeypatch):
    monkeypatch.setenv("YAMLJSON_LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    assert get_settings().log_level == "DEBUG"

def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    first = get_settings()
    monkeypatch.setenv("YAMLJSON_STRICT", "1")
    assert get_settings() is first
