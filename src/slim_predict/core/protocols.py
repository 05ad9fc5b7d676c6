"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts, never on concrete
implementations, so the resolver stays free of filesystem access and
the prediction step stays swappable.
"""

from __future__ import annotations

from typing import Protocol

from slim_predict.core.models import Configuration


class FileChecker(Protocol):
    """Contract for input-file existence probes."""

    def exists(self, path: str) -> bool:
        """Return ``True`` if *path* names an existing input file."""
        ...  # pragma: no cover


class Predictor(Protocol):
    """Contract for the downstream prediction step.

    Receives a fully resolved :class:`Configuration` whose input files
    are already known to exist, and returns a process exit code.
    """

    def predict(self, config: Configuration) -> int:
        ...  # pragma: no cover
