from __future__ import annotations

import dataclasses
import logging

import pytest

from safe_unpack import logging_config
from safe_unpack.config import ExtractionLimits, env_int
from safe_unpack.errors import ConfigValidationError


def test_limits_defaults():
    limits = ExtractionLimits()
    assert limits.max_entries == 10000
    assert limits.max_extracted_bytes == 1073741824
    assert limits.copy_chunk_bytes == 8192


def test_limits_from_env_defaults(monkeypatch):
    monkeypatch.delenv("SAFE_UNPACK_MAX_ENTRIES", raising=False)
    monkeypatch.delenv("SAFE_UNPACK_MAX_EXTRACTED_BYTES", raising=False)
    monkeypatch.delenv("SAFE_UNPACK_COPY_CHUNK_BYTES", raising=False)

    assert ExtractionLimits.from_env() == ExtractionLimits()


def test_limits_from_env_overrides():
    environ = {
        "SAFE_UNPACK_MAX_ENTRIES": "12",
        "SAFE_UNPACK_MAX_EXTRACTED_BYTES": "4096",
        "SAFE_UNPACK_COPY_CHUNK_BYTES": "512",
    }
    limits = ExtractionLimits.from_env(environ)
    assert limits == ExtractionLimits(max_entries=12, max_extracted_bytes=4096, copy_chunk_bytes=512)


def test_env_int_unset_or_empty_uses_default():
    assert env_int("X", 7, {"X": ""}) == 7
    assert env_int("X", 7, {"X": "  "}) == 7
    assert env_int("X", 7, {}) == 7
    assert env_int("X", 7, {"X": "12"}) == 12


@pytest.mark.parametrize("raw", ["abc", "1e3", "10.5"])
def test_limits_from_env_rejects_unparsable_values(raw):
    with pytest.raises(ConfigValidationError, match="SAFE_UNPACK_MAX_ENTRIES"):
        ExtractionLimits.from_env({"SAFE_UNPACK_MAX_ENTRIES": raw})


@pytest.mark.parametrize("field", ["max_entries", "max_extracted_bytes", "copy_chunk_bytes"])
def test_limits_reject_non_positive(field):
    with pytest.raises(ConfigValidationError, match=field):
        ExtractionLimits(**{field: 0})


def test_limits_are_immutable():
    limits = ExtractionLimits()
    with pytest.raises(dataclasses.FrozenInstanceError):
        limits.max_entries = 1  # type: ignore[misc]


def test_configure_logging_reads_env(monkeypatch):
    captured = {}
    monkeypatch.setenv("SAFE_UNPACK_LOG_LEVEL", "debug")
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    logging_config.configure_logging()

    assert captured["level"] == logging.DEBUG
    assert captured["force"] is False


def test_configure_logging_unknown_level_falls_back_to_info(monkeypatch):
    captured = {}
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    logging_config.configure_logging("chatty", force=True)

    assert captured["level"] == logging.INFO
    assert captured["force"] is True


@pytest.mark.parametrize("value", [True, False])
def test_limits_reject_booleans(value):
    with pytest.raises(ConfigValidationError, match="max_entries"):
        ExtractionLimits(max_entries=value)


def test_get_logger_leaves_root_logging_alone(monkeypatch):
    def fail(**_kwargs):
        raise AssertionError("library code must not configure root logging")

    monkeypatch.setattr(logging_config.logging, "basicConfig", fail)

    logger = logging_config.get_logger("safe_unpack.extractor")

    assert logger.name == "safe_unpack.extractor"
    assert logging_config.get_logger("cleanup").name == "safe_unpack.cleanup"


def test_package_logger_has_null_handler():
    package_logger = logging.getLogger("safe_unpack")
    assert any(isinstance(h, logging.NullHandler) for h in package_logger.handlers)


def test_configure_logging_warns_on_unknown_level(monkeypatch, caplog):
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: None)
    caplog.set_level(logging.WARNING, logger="safe_unpack")

    logging_config.configure_logging("chatty")

    assert "Invalid SAFE_UNPACK_LOG_LEVEL" in caplog.text
