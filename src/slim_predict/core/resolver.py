"""Core configuration resolver: argument vector to :class:`Configuration`.

The resolver is a single left-to-right pass:

1. **Tokenize** ``argv`` against
   :data:`~slim_predict.core.options.OPTION_TABLE`, the way
   ``getopt_long_only`` does: ``-name`` or ``--name``, unambiguous
   prefixes, and a value either after ``=`` or as the next token taken
   verbatim.  Options may be interleaved with positionals and ``--``
   ends option processing.  The first unrecognized or malformed option
   ends the scan.
2. **Apply** the recognized options in order through :mod:`argparse`.
   Each option's handler is an ``argparse.Action`` that validates its
   value on the spot, so diagnostics follow argument order.
3. **Short-circuit** to a :class:`UsageRequest` on ``-help``, on the
   option that ended the scan, or on a wrong positional count.
4. **Check** the positional input files in order, stopping at the
   first one that is missing.

Guarantees
----------
* Never prints and never exits the process.
* Failures are raised as
  :class:`~slim_predict.exceptions.ConfigurationError` subclasses.
* Filesystem access goes through the injected
  :class:`~slim_predict.core.protocols.FileChecker`.
"""

from __future__ import annotations

import argparse
import dataclasses
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from slim_predict.core.models import Configuration, UsageKind, UsageRequest
from slim_predict.core.options import (
    FORMAT_NAMES,
    HELP_TEXT,
    OPTION_TABLE,
    PROG,
    SHORT_USAGE_TEXT,
    OptionCode,
    OptionSpec,
    lookup_format,
)
from slim_predict.core.protocols import FileChecker
from slim_predict.exceptions import (
    InputFileNotFoundError,
    InvalidFormatError,
    InvalidIntegerError,
    NegativeParameterError,
)

MIN_POSITIONALS: int = 2
MAX_POSITIONALS: int = 3

POSITIONAL_ROLES: tuple[str, ...] = ("model", "old", "test")
"""Role names of the positional files, in argument order."""

_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*")


class _HelpRequested(Exception):
    """Internal signal raised by the ``-help`` action."""


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Tokens:
    """Result of splitting ``argv`` into options and positionals."""

    options: list[str] = field(default_factory=list)
    """Recognized options in canonical ``--name`` / ``--name=value`` form."""

    positionals: list[str] = field(default_factory=list)

    stopped: bool = False
    """An unrecognized or malformed option ended the scan."""


def match_option(name: str) -> OptionSpec | None:
    """Return the table entry for *name* or its unique prefix."""
    if not name:
        return None
    spec = OPTION_TABLE.get(name)
    if spec is not None:
        return spec
    candidates = [entry for key, entry in OPTION_TABLE.items() if key.startswith(name)]
    if len(candidates) == 1:
        return candidates[0]
    return None


def tokenize(argv: Sequence[str]) -> _Tokens:
    """Split *argv* into canonical options and positional arguments."""
    tokens = _Tokens()
    options_ended = False
    index = 0
    while index < len(argv):
        token = argv[index]
        index += 1

        if options_ended or token == "-" or not token.startswith("-"):
            tokens.positionals.append(token)
            continue
        if token == "--":
            options_ended = True
            continue

        body = token[2:] if token.startswith("--") else token[1:]
        name, sep, value = body.partition("=")
        spec = match_option(name)
        if spec is None:
            tokens.stopped = True
            return tokens

        if not spec.takes_value:
            if sep:
                tokens.stopped = True
                return tokens
            tokens.options.append(f"--{spec.name}")
            continue

        if not sep:
            if index >= len(argv):
                tokens.stopped = True
                return tokens
            value = argv[index]
            index += 1
        tokens.options.append(f"--{spec.name}={value}")
    return tokens


# ---------------------------------------------------------------------------
# Option handlers
# ---------------------------------------------------------------------------

class _FormatAction(argparse.Action):
    """``-ifmt``: map the name to an :class:`InputFormat`."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        selected = lookup_format(values)
        if selected is None:
            raise InvalidFormatError(values, choices=FORMAT_NAMES)
        input_format, read_values = selected.normalize()
        namespace.input_format = input_format
        # Once cleared, rating values stay ignored.
        if not read_values:
            namespace.read_values = False


class _StoreAction(argparse.Action):
    """``-outfile``: keep the value verbatim."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        setattr(namespace, self.dest, values)


class _FlagAction(argparse.Action):
    """``-binarize``: switch the flag on."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        setattr(namespace, self.dest, True)


class _NonNegativeIntAction(argparse.Action):
    """``-nrcmds`` / ``-dbglvl``: parse a non-negative decimal integer."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        *,
        option: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(option_strings, dest, **kwargs)
        self.option: str = option

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        # ASCII digits only; int() alone would also take "1_0" and "١٢".
        if not _INTEGER.fullmatch(values):
            raise InvalidIntegerError(self.option, values)
        number = int(values)
        if number < 0:
            raise NegativeParameterError(self.option)
        setattr(namespace, self.dest, number)


class _HelpAction(argparse.Action):
    """``-help``: abandon the scan and ask for the full help text."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        raise _HelpRequested


def _add_option(parser: argparse.ArgumentParser, spec: OptionSpec) -> None:
    """Register *spec* on *parser* under its canonical ``--name``."""
    kwargs: dict[str, Any] = {"default": argparse.SUPPRESS}
    if spec.takes_value:
        kwargs["metavar"] = spec.metavar
    else:
        kwargs["nargs"] = 0

    if spec.code is OptionCode.IFMT:
        kwargs.update(action=_FormatAction, dest="input_format")
    elif spec.code is OptionCode.BINARIZE:
        kwargs.update(action=_FlagAction, dest="binarize")
    elif spec.code is OptionCode.OUTFILE:
        kwargs.update(action=_StoreAction, dest="output_file")
    elif spec.code is OptionCode.NRCMDS:
        kwargs.update(action=_NonNegativeIntAction, option=spec.name, dest="recommendation_count")
    elif spec.code is OptionCode.DBGLVL:
        kwargs.update(action=_NonNegativeIntAction, option=spec.name, dest="debug_level")
    elif spec.code is OptionCode.HELP:
        kwargs.update(action=_HelpAction, dest="help")
    else:
        raise AssertionError(f"unhandled option: {spec.code!r}")

    parser.add_argument(f"--{spec.name}", **kwargs)


def build_parser() -> argparse.ArgumentParser:
    """Construct the option handler table from :data:`OPTION_TABLE`.

    It consumes the canonical tokens produced by :func:`tokenize`.
    Built-in help and error exits are disabled.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    for spec in OPTION_TABLE.values():
        _add_option(parser, spec)
    return parser


_POSITIONAL_FIELDS: frozenset[str] = frozenset({"model_file", "training_file", "test_file"})


def _draft() -> argparse.Namespace:
    """Namespace pre-filled with the option defaults of :class:`Configuration`."""
    defaults = {
        item.name: item.default
        for item in dataclasses.fields(Configuration)
        if item.name not in _POSITIONAL_FIELDS
    }
    return argparse.Namespace(**defaults)


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------

class ConfigurationResolver:
    """Resolve argument vectors into :class:`Configuration` values.

    Parameters
    ----------
    file_checker:
        Any object satisfying the :class:`FileChecker` protocol.
    """

    def __init__(self, file_checker: FileChecker) -> None:
        self._file_checker: FileChecker = file_checker
        self._parser: argparse.ArgumentParser = build_parser()

    def resolve(self, argv: Sequence[str]) -> Configuration | UsageRequest:
        """Resolve *argv* (without the program name).

        Returns
        -------
        Configuration
            When every option and input file is valid.
        UsageRequest
            When usage text should be shown instead (not an error).

        Raises
        ------
        InvalidFormatError
            If ``-ifmt`` names an unknown format.
        InvalidIntegerError
            If ``-nrcmds`` or ``-dbglvl`` is not an integer.
        NegativeParameterError
            If ``-nrcmds`` or ``-dbglvl`` is negative.
        InputFileNotFoundError
            If a positional input file does not exist.
        """
        tokens = tokenize(argv)
        try:
            namespace, _ = self._parser.parse_known_args(tokens.options, _draft())
        except _HelpRequested:
            return UsageRequest(UsageKind.HELP, HELP_TEXT)
        if tokens.stopped:
            return UsageRequest(UsageKind.HELP, HELP_TEXT)

        files = tokens.positionals
        if not MIN_POSITIONALS <= len(files) <= MAX_POSITIONALS:
            return UsageRequest(UsageKind.SHORT, SHORT_USAGE_TEXT)

        for role, path in zip(POSITIONAL_ROLES, files):
            if not self._file_checker.exists(path):
                raise InputFileNotFoundError(role, path)

        model_file, training_file, *rest = files
        return Configuration(
            model_file=model_file,
            training_file=training_file,
            test_file=rest[0] if rest else None,
            **vars(namespace),
        )


def resolve(
    argv: Sequence[str],
    file_checker: FileChecker | None = None,
) -> Configuration | UsageRequest:
    """Resolve *argv* using *file_checker* (the local disk by default)."""
    if file_checker is None:
        from slim_predict.infra.filesystem import LocalFileChecker

        file_checker = LocalFileChecker()
    return ConfigurationResolver(file_checker).resolve(argv)
