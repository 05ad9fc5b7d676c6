"""Infrastructure: input-file existence checks.

Rules
-----
* Only :meth:`pathlib.Path.is_file`, no file is opened.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

from pathlib import Path


class LocalFileChecker:
    """:class:`~slim_predict.core.protocols.FileChecker` for the local disk.

    A path counts as existing only when it is a regular file (symlinks
    are followed); directories and dangling links do not qualify.
    """

    def exists(self, path: str) -> bool:
        if not path:
            return False
        try:
            return Path(path).is_file()
        except OSError:
            return False
