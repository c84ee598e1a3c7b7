from pathlib import Path

import pytest

from mensura.config import Settings, get_settings, reset_settings

_ENV_VARS = (
    "MENSURA_CONFIG_FILE",
    "MENSURA_LOG_PATH",
    "MENSURA_LOG_LEVEL",
    "MENSURA_DESCRIPTION",
    "MENSURA_BEST",
)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    settings = get_settings()

    assert settings == Settings()
    assert settings.log_level_number == 20
    assert settings.as_dict() == {
        "log_path": None,
        "log_level": "INFO",
        "description_format": False,
        "best_measure": True,
    }


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MENSURA_LOG_LEVEL", "debug")
    monkeypatch.setenv("MENSURA_LOG_PATH", str(tmp_path / "events.jsonl"))
    monkeypatch.setenv("MENSURA_DESCRIPTION", "yes")
    monkeypatch.setenv("MENSURA_BEST", "0")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_path == (tmp_path / "events.jsonl").resolve()
    assert settings.description_format is True
    assert settings.best_measure is False


def test_settings_are_cached_until_refresh(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("MENSURA_BEST", "false")

    assert get_settings() is first
    assert get_settings(refresh=True).best_measure is False


def test_toml_config_file(tmp_path: Path) -> None:
    config = tmp_path / "mensura.toml"
    config.write_text(
        '[logging]\npath = "logs/run.jsonl"\nlevel = "warning"\n\n[display]\ndescription = true\nbest = false\n',
        encoding="utf-8",
    )

    settings = get_settings(config_file=config)

    assert settings.log_path == (tmp_path / "logs" / "run.jsonl").resolve()
    assert settings.log_level == "WARNING"
    assert settings.description_format is True
    assert settings.best_measure is False


def test_yaml_config_file_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    config = tmp_path / "mensura.yaml"
    config.write_text("display:\n  best: 'no'\n  description: true\n", encoding="utf-8")
    monkeypatch.setenv("MENSURA_CONFIG_FILE", str(config))
    monkeypatch.setenv("MENSURA_DESCRIPTION", "off")

    settings = get_settings()

    assert settings.best_measure is False
    assert settings.description_format is False
    assert settings.log_path is None


def test_invalid_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MENSURA_BEST", "maybe")
    with pytest.raises(ValueError, match="best"):
        get_settings(refresh=True)

    monkeypatch.delenv("MENSURA_BEST")
    monkeypatch.setenv("MENSURA_LOG_LEVEL", "loud")
    with pytest.raises(ValueError, match="log level"):
        get_settings(refresh=True)


def test_config_file_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        get_settings(config_file=tmp_path / "missing.toml")

    config = tmp_path / "mensura.ini"
    config.write_text("[display]\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported"):
        get_settings(config_file=config)
