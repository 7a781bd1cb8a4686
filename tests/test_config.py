import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.repositories import DEFAULT_REPOSITORY_URLS


def test_defaults(clean_env) -> None:
    settings = AppSettings(_env_file=None)

    assert settings.connect_timeout_seconds == 5
    assert settings.read_timeout_seconds == 5
    assert settings.repositories == list(DEFAULT_REPOSITORY_URLS)
    assert settings.descriptor_extension == "pom"
    assert settings.log_level == "WARNING"


def test_log_level_is_normalized(clean_env) -> None:
    assert AppSettings(_env_file=None, log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_rejected(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ARTIFACT_AGE_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError, match="Unknown log level"):
        AppSettings(_env_file=None)
