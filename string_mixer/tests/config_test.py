import logging

import pytest
from pydantic import ValidationError

from string_mixer.core.config import Settings
from string_mixer.core.logging_config import configure_logging
from string_mixer.services.mixer import StringMixer


def test_defaults_keep_legacy_key_layout():
    config = Settings()
    assert config.MIXER_KEY_WIDTH == 16
    assert config.MIXER_SALT_LENGTH == 10
    assert config.MIXER_STRICT is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MIXER_KEY_WIDTH", "0")
    monkeypatch.setenv("MIXER_SALT_LENGTH", "4")
    monkeypatch.setenv("MIXER_STRICT", "true")
    monkeypatch.setenv("APP_URL", "https://example.org")

    config = Settings()
    assert config.MIXER_KEY_WIDTH is None
    assert config.MIXER_SALT_LENGTH == 4
    assert config.MIXER_STRICT is True
    assert config.APP_URL == "https://example.org"


def test_invalid_key_width(monkeypatch):
    monkeypatch.setenv("MIXER_KEY_WIDTH", "1")
    with pytest.raises(ValidationError):
        Settings()


def test_invalid_salt_length():
    with pytest.raises(ValidationError):
        Settings(MIXER_SALT_LENGTH=-1)


def test_configure_logging_returns_package_logger():
    logger = configure_logging()
    assert logger.name == "string_mixer"


def test_strict_rejection_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="string_mixer"):
        with pytest.raises(ValueError):
            StringMixer(strict=True).encode("a" * 2000)
    assert "Strict encode rejected 1 values" in caplog.text


def test_plaintext_never_logged(caplog, sample_values):
    with caplog.at_level(logging.DEBUG, logger="string_mixer"):
        m = StringMixer()
        token = m.encode(*sample_values)
        m.decode(token.value, token.key)
    assert "Encoded 2 values" in caplog.text
    for value in sample_values:
        assert value not in caplog.text
