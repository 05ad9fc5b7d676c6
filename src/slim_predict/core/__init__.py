"""Core layer: argument resolution and domain models.

Rules
-----
* No ``print()`` calls.
* No filesystem access except through an injected ``FileChecker``.
* No imports from ``cli``; ``infra`` only supplies the default ``FileChecker``.
"""

from slim_predict.core.models import Configuration, InputFormat, UsageKind, UsageRequest
from slim_predict.core.protocols import FileChecker, Predictor
from slim_predict.core.resolver import ConfigurationResolver, resolve

__all__: list[str] = [
    "Configuration",
    "ConfigurationResolver",
    "FileChecker",
    "InputFormat",
    "Predictor",
    "UsageKind",
    "UsageRequest",
    "resolve",
]
