"""Tests for the static option and format tables (core/options.py)."""

from __future__ import annotations

import pytest

from slim_predict.core.models import InputFormat
from slim_predict.core.options import (
    FORMAT_NAMES,
    HELP_TEXT,
    OPTION_TABLE,
    SHORT_USAGE_TEXT,
    OptionCode,
    lookup_format,
)


class TestOptionTable:
    def test_option_names(self) -> None:
        assert list(OPTION_TABLE) == ["ifmt", "binarize", "outfile", "nrcmds", "dbglvl", "help"]

    @pytest.mark.parametrize(
        ("name", "takes_value"),
        [
            ("ifmt", True),
            ("binarize", False),
            ("outfile", True),
            ("nrcmds", True),
            ("dbglvl", True),
            ("help", False),
        ],
    )
    def test_value_taking(self, name: str, takes_value: bool) -> None:
        assert OPTION_TABLE[name].takes_value is takes_value

    def test_codes_match_names(self) -> None:
        for name, spec in OPTION_TABLE.items():
            assert spec.name == name
            assert spec.code is OptionCode(name)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            OPTION_TABLE["extra"] = OPTION_TABLE["help"]  # type: ignore[index]


class TestFormatNames:
    def test_all_names_present(self) -> None:
        assert set(FORMAT_NAMES) == {"csr", "csrnv", "cluto", "ijv"}

    def test_lookup_hit(self) -> None:
        assert lookup_format("csrnv") is InputFormat.CSR_NO_VALUES

    @pytest.mark.parametrize("name", ["", "CSR", "bogus", " csr"])
    def test_lookup_miss(self, name: str) -> None:
        assert lookup_format(name) is None

    def test_map_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            FORMAT_NAMES["mtx"] = InputFormat.CSR  # type: ignore[index]


class TestHelpTexts:
    @pytest.mark.parametrize(
        "fragment",
        ["-ifmt=string", "-binarize", "-outfile=string", "-nrcmds=int", "-dbglvl=int", "-help"],
    )
    def test_help_documents_every_option(self, fragment: str) -> None:
        assert fragment in HELP_TEXT

    def test_help_lists_formats(self) -> None:
        for name in FORMAT_NAMES:
            assert f"  {name} " in HELP_TEXT

    def test_short_usage(self) -> None:
        assert "Usage: slim-predict [options] model-file old-file [test-file]" in SHORT_USAGE_TEXT
        assert "slim-predict -help" in SHORT_USAGE_TEXT
