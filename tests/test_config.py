import pytest
from pydantic import ValidationError

from recaptcha_validator import Settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("RECAPTCHA_SECRET_KEY", raising=False)
    monkeypatch.delenv("RECAPTCHA_TIMEOUT_SECONDS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.RECAPTCHA_SECRET_KEY == ""
    assert settings.secret_key == ""
    assert settings.RECAPTCHA_TIMEOUT_SECONDS == 5.0


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("RECAPTCHA_SECRET_KEY", "env-secret")
    monkeypatch.setenv("RECAPTCHA_TIMEOUT_SECONDS", "1.5")

    settings = Settings(_env_file=None)

    assert settings.secret_key == "env-secret"
    assert settings.RECAPTCHA_TIMEOUT_SECONDS == 1.5


def test_reads_env_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("RECAPTCHA_SECRET_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("RECAPTCHA_SECRET_KEY=file-secret\nUNRELATED_SETTING=1\n")

    settings = Settings(_env_file=env_file)

    assert settings.secret_key == "file-secret"


@pytest.mark.parametrize("value", [0, -1])
def test_timeout_must_be_positive(value: float) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, RECAPTCHA_TIMEOUT_SECONDS=value)
