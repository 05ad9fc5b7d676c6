"""Smoke tests: package wiring, exception hierarchy, exit codes."""

from __future__ import annotations

import pytest

from slim_predict import __version__
from slim_predict.cli import exit_codes
from slim_predict.exceptions import (
    ConfigurationError,
    EnvironmentError,
    InputFileNotFoundError,
    InvalidFormatError,
    InvalidIntegerError,
    NegativeParameterError,
    SlimPredictError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidFormatError,
            InvalidIntegerError,
            NegativeParameterError,
            InputFileNotFoundError,
        ],
    )
    def test_validation_errors_are_configuration_errors(
        self, exc_class: type[SlimPredictError],
    ) -> None:
        assert issubclass(exc_class, ConfigurationError)
        assert issubclass(exc_class, SlimPredictError)

    def test_environment_error_inherits_from_base(self) -> None:
        assert issubclass(EnvironmentError, SlimPredictError)
        assert not issubclass(EnvironmentError, ConfigurationError)

    def test_hint_is_stored(self) -> None:
        err = SlimPredictError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert SlimPredictError("boom").hint is None

    def test_invalid_format_lists_choices(self) -> None:
        err = InvalidFormatError("xyz", choices=["csr", "ijv"])
        assert str(err) == "Invalid -ifmt of xyz."
        assert err.hint == "Valid formats are: csr, ijv."

    def test_invalid_integer_message(self) -> None:
        err = InvalidIntegerError("dbglvl", "lots")
        assert str(err) == "The -dbglvl parameter should be an integer, got 'lots'."


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130
