"""Static command-line tables: recognized options, format names, help texts.

Everything here is built once at import time and exposed through
read-only mappings.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from slim_predict.core.models import InputFormat

PROG: str = "slim-predict"


# ---------------------------------------------------------------------------
# Option table
# ---------------------------------------------------------------------------

class OptionCode(Enum):
    """Symbolic identity of each recognized long option."""

    IFMT = "ifmt"
    BINARIZE = "binarize"
    OUTFILE = "outfile"
    NRCMDS = "nrcmds"
    DBGLVL = "dbglvl"
    HELP = "help"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One row of the option table."""

    name: str
    code: OptionCode
    takes_value: bool
    metavar: str | None = None


def _build_option_table(*specs: OptionSpec) -> Mapping[str, OptionSpec]:
    return MappingProxyType({spec.name: spec for spec in specs})


OPTION_TABLE: Mapping[str, OptionSpec] = _build_option_table(
    OptionSpec("ifmt", OptionCode.IFMT, True, "string"),
    OptionSpec("binarize", OptionCode.BINARIZE, False),
    OptionSpec("outfile", OptionCode.OUTFILE, True, "string"),
    OptionSpec("nrcmds", OptionCode.NRCMDS, True, "int"),
    OptionSpec("dbglvl", OptionCode.DBGLVL, True, "int"),
    OptionSpec("help", OptionCode.HELP, False),
)


# ---------------------------------------------------------------------------
# -ifmt values
# ---------------------------------------------------------------------------

FORMAT_NAMES: Mapping[str, InputFormat] = MappingProxyType(
    {fmt.value: fmt for fmt in InputFormat}
)


def lookup_format(name: str) -> InputFormat | None:
    """Return the format called *name*, or ``None`` if there is none."""
    return FORMAT_NAMES.get(name)


# ---------------------------------------------------------------------------
# Help texts
# ---------------------------------------------------------------------------

HELP_TEXT: str = f"""\

 Usage:
   {PROG} [options] model-file old-file [test-file]

 Parameters:
   model-file
       The file that stores the model that was generated by the SLIM learner.

   old-file
       The file that stores the historical information for each user.

   test-file
       The file that stores the hidden items for each user.

 Options:
   -ifmt=string
      Specifies the format of the input files. Available options are:
        csr     -  CSR format [default].
        csrnv   -  CSR format without ratings.
        cluto   -  Format used by CLUTO.
        ijv     -  One (row#, col#, val) per line.

   -binarize
      Specifies that the ratings should be binarized.

   -outfile=string
      Specifies the output file that will store the predictions.
      If not specified, no output will be produced.

   -nrcmds=int
      Specifies the number of items to recommend for each user.
      The default value is 10.

   -dbglvl=int
      Specifies the debug level. The default value is 0.

   -help
      Prints this message.
"""

SHORT_USAGE_TEXT: str = f"""\

 Usage: {PROG} [options] model-file old-file [test-file]
   use '{PROG} -help' for a summary of the options.
"""
