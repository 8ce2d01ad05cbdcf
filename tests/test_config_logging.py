"""Tests for config and logging."""

import io
import json
import logging
import os
import sys
from decimal import Decimal
from unittest.mock import patch

import pytest

from atm_sim.config import ATMConfig
from atm_sim.exceptions import ConfigurationError
from atm_sim.logging import JsonFormatter, setup_logging


class TestATMConfig:
    """Tests for ATMConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = ATMConfig()

        assert config.reference_pin == "1234"
        assert config.max_pin_attempts == 3
        assert config.min_amount == Decimal("1.00")
        assert config.max_transaction_limit == Decimal("10000.00")
        assert config.initial_balance == Decimal("1000.00")
        assert config.decimal_places == 2
        assert config.currency_symbol == "$"
        assert config.record_initial_balance is True
        assert config.log_level == "WARNING"

    def test_money_fields_coerced_from_strings(self) -> None:
        config = ATMConfig(min_amount="5", max_transaction_limit="250.5", initial_balance=100)

        assert config.min_amount == Decimal("5.00")
        assert config.max_transaction_limit == Decimal("250.50")
        assert config.initial_balance == Decimal("100.00")
        assert str(config.initial_balance) == "100.00"

    def test_money_fields_rounded_half_up(self) -> None:
        config = ATMConfig(initial_balance=Decimal("10.005"))

        assert config.initial_balance == Decimal("10.01")

    def test_float_money_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            ATMConfig(initial_balance=10.5)

    def test_garbage_money_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="initial_balance"):
            ATMConfig(initial_balance="lots")

    def test_none_money_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="min_amount"):
            ATMConfig(min_amount=None)

    def test_frozen(self) -> None:
        config = ATMConfig()

        with pytest.raises(AttributeError):
            config.reference_pin = "0000"  # type: ignore[misc]

    def test_pin_hidden_from_repr(self) -> None:
        config = ATMConfig(reference_pin="9876")

        assert "9876" not in repr(config)

    def test_validate_returns_self(self) -> None:
        config = ATMConfig()

        assert config.validate() is config

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"reference_pin": "123"},
            {"reference_pin": "12a4"},
            {"reference_pin": "12345"},
            {"max_pin_attempts": 0},
            {"min_amount": "0"},
            {"min_amount": "-1"},
            {"min_amount": "100", "max_transaction_limit": "50"},
            {"initial_balance": "-0.01"},
        ],
    )
    def test_validate_rejects(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            ATMConfig(**kwargs).validate()

    def test_from_env_default(self) -> None:
        """Test creating config from environment with defaults."""
        env_vars = [
            "ATM_PIN",
            "ATM_MAX_PIN_ATTEMPTS",
            "ATM_MIN_AMOUNT",
            "ATM_MAX_AMOUNT",
            "ATM_INITIAL_BALANCE",
            "ATM_CURRENCY_SYMBOL",
            "ATM_RECORD_INITIAL",
            "LOG_LEVEL",
            "LOG_FORMAT",
        ]
        cleared = {k: v for k, v in os.environ.items() if k not in env_vars}

        with patch.dict(os.environ, cleared, clear=True):
            config = ATMConfig.from_env()

        assert config == ATMConfig()

    def test_from_env_custom(self) -> None:
        """Test creating config from custom environment variables."""
        env_vars = {
            "ATM_PIN": "4321",
            "ATM_MAX_PIN_ATTEMPTS": "5",
            "ATM_MIN_AMOUNT": "20",
            "ATM_MAX_AMOUNT": "500.00",
            "ATM_INITIAL_BALANCE": "250.25",
            "ATM_CURRENCY_SYMBOL": "€",
            "ATM_RECORD_INITIAL": "false",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }

        with patch.dict(os.environ, env_vars):
            config = ATMConfig.from_env()

        assert config.reference_pin == "4321"
        assert config.max_pin_attempts == 5
        assert config.min_amount == Decimal("20.00")
        assert config.max_transaction_limit == Decimal("500.00")
        assert config.initial_balance == Decimal("250.25")
        assert config.currency_symbol == "€"
        assert config.record_initial_balance is False
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_bad_attempts(self) -> None:
        with patch.dict(os.environ, {"ATM_MAX_PIN_ATTEMPTS": "three"}):
            with pytest.raises(ConfigurationError):
                ATMConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        logger = logging.getLogger("atm_sim")
        assert logger.level == logging.WARNING

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to WARNING."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.WARNING

    def test_default_stream_is_stderr(self) -> None:
        setup_logging()

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_custom_stream(self) -> None:
        stream = io.StringIO()
        setup_logging(level="INFO", stream=stream)

        logging.getLogger("atm_sim.test").info("hello")

        assert "hello" in stream.getvalue()
        assert "| INFO     | atm_sim.test |" in stream.getvalue()

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        record = self._record(level=logging.ERROR, msg="Error occurred", exc_info=exc_info)
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record()
        record.extra = {"transaction_type": "DEPOSIT", "amount": "50.00"}

        data = json.loads(JsonFormatter().format(record))

        assert data["transaction_type"] == "DEPOSIT"
        assert data["amount"] == "50.00"


class TestPackageInit:
    """Tests for atm_sim __init__.py."""

    def test_version_exported(self) -> None:
        from atm_sim import __version__

        assert isinstance(__version__, str)
