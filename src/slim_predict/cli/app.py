"""CLI application entry point for slim-predict.

This module is the **sole error boundary** for the application.  It
catches :class:`~slim_predict.exceptions.SlimPredictError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, renders a
user-friendly message, and returns a well-defined exit code.

Architecture notes
------------------
* Argument handling lives in :mod:`slim_predict.core.resolver`; this
  module only decides what to print and how the process ends.
* Usage and help text go to stdout; diagnostics go to stderr.
* This is the only place that translates between the domain world and
  the OS process exit code.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from slim_predict.cli import exit_codes
from slim_predict.cli.console import console, escape
from slim_predict.core.models import UsageRequest
from slim_predict.core.protocols import Predictor
from slim_predict.core.resolver import resolve
from slim_predict.exceptions import SlimPredictError


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    predictor: Predictor | None = None,
) -> int:
    """Run the slim-predict CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    predictor:
        Prediction step that receives the resolved configuration.  When
        ``None``, the configuration is only summarised.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SlimPredictError
        When the arguments fail validation; :func:`cli` renders it.
    """
    if argv is None:
        argv = sys.argv[1:]

    result = resolve(argv)

    if isinstance(result, UsageRequest):
        print(result.text, end="")
        return exit_codes.SUCCESS

    if predictor is not None:
        return predictor.predict(result)

    from slim_predict.cli.summary import render_configuration

    render_configuration(result)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except SlimPredictError as exc:
        console.print("[bold red]Error:[/bold red]", escape(str(exc)))
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]", escape(exc.hint))
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n ",
            f"{type(exc).__name__}:",
            escape(str(exc)),
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
