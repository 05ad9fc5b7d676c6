"""Domain models for slim-predict.

The resolved :class:`Configuration` and the :class:`UsageRequest`
short-circuit are **frozen** dataclasses: immutable value objects with
no I/O and no dependency on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Input formats
# ---------------------------------------------------------------------------

class InputFormat(Enum):
    """Encoding of the rating matrices, keyed by its command-line name."""

    CSR = "csr"
    CSR_NO_VALUES = "csrnv"
    CLUTO = "cluto"
    IJV = "ijv"

    @property
    def code(self) -> int:
        """Integer format code used by the sparse-matrix readers."""
        return _FORMAT_CODES[self]

    def normalize(self) -> tuple[InputFormat, bool]:
        """Return ``(stored_format, read_values)`` for this selection.

        ``CSR_NO_VALUES`` never survives resolution: it becomes plain CSR
        with rating values ignored.
        """
        if self is InputFormat.CSR_NO_VALUES:
            return InputFormat.CSR, False
        if self is InputFormat.CSR:
            return InputFormat.CSR, True
        if self is InputFormat.CLUTO:
            return InputFormat.CLUTO, True
        if self is InputFormat.IJV:
            return InputFormat.IJV, True
        raise AssertionError(f"unhandled input format: {self!r}")


_FORMAT_CODES: dict[InputFormat, int] = {
    InputFormat.CLUTO: 1,
    InputFormat.CSR: 2,
    InputFormat.CSR_NO_VALUES: 3,
    InputFormat.IJV: 6,
}


# ---------------------------------------------------------------------------
# Resolved configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Configuration:
    """Fully validated parameters for one prediction run."""

    model_file: str
    """Model produced by the SLIM learner."""

    training_file: str
    """Historical ("old") user-item interactions."""

    test_file: str | None = None
    """Hidden items per user, or ``None`` when not evaluating."""

    input_format: InputFormat = InputFormat.CSR
    read_values: bool = True
    binarize: bool = False

    output_file: str | None = None
    """Where predictions are written.  ``None`` means no output."""

    recommendation_count: int = 10
    debug_level: int = 0

    def __post_init__(self) -> None:
        if not self.model_file or not self.training_file:
            raise ValueError("model_file and training_file must be non-empty")
        if self.input_format is InputFormat.CSR_NO_VALUES:
            raise ValueError("CSR_NO_VALUES must be normalized to CSR")
        if self.recommendation_count < 0:
            raise ValueError("recommendation_count must be non-negative")
        if self.debug_level < 0:
            raise ValueError("debug_level must be non-negative")


# ---------------------------------------------------------------------------
# Usage short-circuit
# ---------------------------------------------------------------------------

class UsageKind(Enum):
    """Which usage text a :class:`UsageRequest` carries."""

    HELP = "help"
    """Full option reference (``-help`` or an unrecognized option)."""

    SHORT = "short"
    """One-line usage (wrong number of positional arguments)."""


@dataclass(frozen=True, slots=True)
class UsageRequest:
    """Resolution ended early: print *text* and exit successfully."""

    kind: UsageKind
    text: str
