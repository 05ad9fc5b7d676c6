"""Infrastructure layer: operating-system integration.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from slim_predict.infra.filesystem import LocalFileChecker

__all__: list[str] = ["LocalFileChecker"]
