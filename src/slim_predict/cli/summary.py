"""Render a resolved :class:`Configuration` for the user.

Shown when no prediction step is attached to the CLI.  Uses a Rich
table when Rich is installed and a plain aligned listing otherwise.
"""

from __future__ import annotations

import sys

from slim_predict.cli.console import console, escape, rich_available
from slim_predict.core.models import Configuration


def _describe_format(config: Configuration) -> str:
    name = config.input_format.value
    if not config.read_values:
        return f"{name} (ratings ignored)"
    return name


def configuration_rows(config: Configuration) -> list[tuple[str, str]]:
    """Return ``(label, value)`` pairs in display order."""
    return [
        ("Model file", config.model_file),
        ("Old file", config.training_file),
        ("Test file", config.test_file or "-"),
        ("Input format", _describe_format(config)),
        ("Binarize", "yes" if config.binarize else "no"),
        ("Output file", config.output_file or "- (no output)"),
        ("Recommendations", str(config.recommendation_count)),
        ("Debug level", str(config.debug_level)),
    ]


def _print_plain(rows: list[tuple[str, str]]) -> None:
    print("\nslim-predict configuration", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    for label, value in rows:
        print(f"{label:<16} {value}", file=sys.stderr)
    print(file=sys.stderr)


def render_configuration(config: Configuration) -> None:
    """Print *config* as a two-column summary on stderr."""
    rows = configuration_rows(config)

    if not rich_available():
        _print_plain(rows)
        return

    from rich.table import Table

    table = Table(
        title="slim-predict configuration",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Parameter", style="bold", min_width=16)
    table.add_column("Value", min_width=20)
    for label, value in rows:
        table.add_row(label, escape(value))

    console.print()
    console.print(table)
    console.print()
