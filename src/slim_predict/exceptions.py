"""Custom exception hierarchy for slim-predict.

Every user-visible failure maps to a subclass of
:class:`SlimPredictError` so that the CLI error boundary can render a
clean message instead of a stack trace.

Hierarchy
---------
SlimPredictError
├── ConfigurationError
│   ├── InvalidFormatError
│   ├── InvalidIntegerError
│   ├── NegativeParameterError
│   └── InputFileNotFoundError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class SlimPredictError(Exception):
    """Base exception for all slim-predict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument resolution ---------------------------------------------------

class ConfigurationError(SlimPredictError):
    """Raised when the command line cannot be resolved into a configuration."""


class InvalidFormatError(ConfigurationError):
    """Raised when ``-ifmt`` names an unknown input format."""

    def __init__(self, value: str, *, choices: Iterable[str]) -> None:
        super().__init__(
            f"Invalid -ifmt of {value}.",
            hint=f"Valid formats are: {', '.join(choices)}.",
        )
        self.value: str = value


class InvalidIntegerError(ConfigurationError):
    """Raised when a numeric option value is not an integer."""

    def __init__(self, option: str, value: str) -> None:
        super().__init__(
            f"The -{option} parameter should be an integer, got {value!r}."
        )
        self.option: str = option
        self.value: str = value


class NegativeParameterError(ConfigurationError):
    """Raised when a numeric option that must be non-negative is negative."""

    def __init__(self, option: str) -> None:
        super().__init__(f"The -{option} parameter should be non-negative.")
        self.option: str = option


class InputFileNotFoundError(ConfigurationError):
    """Raised when a positional input file does not exist."""

    def __init__(self, role: str, path: str) -> None:
        super().__init__(f"Input {role} file {path} does not exist.")
        self.role: str = role
        self.path: str = path


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(SlimPredictError):
    """Raised when an optional runtime dependency is not available."""
