"""Tests for codec logging."""

import logging

import pytest

from product_id_codec import ProductIdCodec
from product_id_codec.errors import InvalidConfigValueError, InvalidCustomIdError
from product_id_codec.logging import LogEvent, LogLevel, _log, get_logger, log_info


def test_logger_hierarchy() -> None:
    assert get_logger().name == "product_id_codec"
    assert get_logger("codec").name == "product_id_codec.codec"


def test_log_helpers_attach_event_data(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="product_id_codec"):
        log_info(LogEvent.CONFIG_LOAD, "Loaded", path="codec.yml")

    record = caplog.records[-1]
    assert record.getMessage() == "Loaded"
    assert record.event == "config_load"  # type: ignore[attr-defined]
    assert record.event_data == {"path": "codec.yml"}  # type: ignore[attr-defined]


def test_failing_callback_falls_back_to_logging(caplog: pytest.LogCaptureFixture) -> None:
    def _broken(level: int, event: str, data: dict) -> None:
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        _log(_broken, LogLevel.INFO, LogEvent.ID_PARSE, {"product_id": "x"})

    assert "Logging callback failed with error: boom" in caplog.text


def test_config_update_logged(caplog: pytest.LogCaptureFixture) -> None:
    codec = ProductIdCodec()
    with caplog.at_level(logging.INFO, logger="product_id_codec"):
        codec.update_config(length=10)

    records = [r for r in caplog.records if getattr(r, "event", None) == "config_update"]
    assert records
    assert records[-1].levelno == logging.INFO
    assert records[-1].event_data == {"fields": ["length"]}  # type: ignore[attr-defined]


def test_rejected_update_logged_as_warning(caplog: pytest.LogCaptureFixture) -> None:
    codec = ProductIdCodec()
    with caplog.at_level(logging.INFO, logger="product_id_codec"):
        with pytest.raises(InvalidConfigValueError):
            codec.update_config(length=0)

    assert any(r.levelno == logging.WARNING and "Rejected configuration update" in r.getMessage() for r in caplog.records)


def test_rejected_custom_id_logged(caplog: pytest.LogCaptureFixture) -> None:
    codec = ProductIdCodec()
    with caplog.at_level(logging.WARNING, logger="product_id_codec"):
        with pytest.raises(InvalidCustomIdError):
            codec.generate(custom_id="nope!")

    assert any(getattr(r, "event", None) == "id_generation" for r in caplog.records)


def test_debug_records_for_generation(caplog: pytest.LogCaptureFixture) -> None:
    codec = ProductIdCodec()
    with caplog.at_level(logging.DEBUG, logger="product_id_codec"):
        codec.generate(sequence=5)

    record = next(r for r in caplog.records if getattr(r, "event", None) == "id_generation")
    assert record.event_data["product_id"] == "00000005"  # type: ignore[attr-defined]


def test_codec_records_use_package_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Codec and config modules log through the package logger."""
    codec = ProductIdCodec()
    with caplog.at_level(logging.DEBUG, logger="product_id_codec"):
        codec.generate(sequence=1)
        codec.update_config(length=10)

    assert caplog.records
    assert {record.name for record in caplog.records} == {"product_id_codec"}
