from pathlib import Path

from naega.config import get_settings


def test_defaults(monkeypatch):
    for name in ("NAEGA_DATA_FILE", "NAEGA_LOG_LEVEL", "NAEGA_LOG_DIR", "NAEGA_LOG_TO_FILE"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.data_file == Path("data/naega.txt")
    assert settings.log_level == "WARNING"
    assert settings.log_dir == Path(".local/naega")
    assert settings.log_to_file


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("NAEGA_DATA_FILE", str(tmp_path / "tasks.txt"))
    monkeypatch.setenv("NAEGA_LOG_LEVEL", "debug")
    monkeypatch.setenv("NAEGA_LOG_TO_FILE", "no")

    settings = get_settings()

    assert settings.data_file == tmp_path / "tasks.txt"
    assert settings.log_level == "DEBUG"
    assert not settings.log_to_file


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("NAEGA_LOG_LEVEL", "chatty")

    assert get_settings().log_level == "WARNING"
