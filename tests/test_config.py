import logging

from newsverify.config import Settings


def test_debug_flag_sets_log_level():
    assert Settings(debug=False).get_log_level() == logging.INFO
    assert Settings(debug=True).get_log_level() == logging.DEBUG


def test_debug_flag_reads_environment(monkeypatch):
    monkeypatch.setenv("DEBUG", "true")
    assert Settings().get_log_level() == logging.DEBUG


def test_cors_origins_are_split_and_trimmed():
    settings = Settings(cors_origins="https://a.example, https://b.example ,")
    assert settings.get_cors_origins() == ["https://a.example", "https://b.example"]
