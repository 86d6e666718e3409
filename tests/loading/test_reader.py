"""
Tests for input reading and section splitting.
"""

from pathlib import Path

import pytest

from crane_toolkit.core.errors import DiagramParseError, InputError
from crane_toolkit.loading.reader import read_lines, split_sections


class TestReadLines:
    """Tests for read_lines."""

    def test_keeps_trailing_spaces(self, write_input):
        """Trailing spaces are positional and must survive."""
        path = write_input("    [D]    \n 1   2   3 \n")
        assert read_lines(path) == ["    [D]    ", " 1   2   3 "]

    def test_strips_windows_line_endings(self, write_input):
        """CRLF files read the same as LF files."""
        path = write_input("[A]\r\n 1 \r\n")
        assert read_lines(path) == ["[A]", " 1 "]

    def test_missing_file_raises(self, tmp_path: Path):
        """A missing file is an InputError."""
        with pytest.raises(InputError, match="not found"):
            read_lines(tmp_path / "missing.txt")

    def test_invalid_utf8_raises(self, tmp_path: Path):
        """Undecodable bytes are an InputError, not a crash."""
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(InputError, match="Failed to read"):
            read_lines(path)


class TestSplitSections:
    """Tests for split_sections."""

    def test_splits_at_first_blank_line(self, sample_path):
        """The sample splits into 4 diagram lines and 4 instructions."""
        diagram, instructions = split_sections(read_lines(sample_path))
        assert len(diagram) == 4
        assert diagram[-1].split() == ["1", "2", "3"]
        assert instructions[0] == "move 1 from 2 to 1"
        assert len(instructions) == 4

    def test_whitespace_only_line_separates(self):
        """A separator line holding only spaces still counts as blank."""
        diagram, instructions = split_sections(["[A]", " 1 ", "   ", "move 1 from 1 to 2"])
        assert diagram == ["[A]", " 1 "]
        assert instructions == ["move 1 from 1 to 2"]

    def test_trailing_blank_lines_dropped(self):
        """Blank lines after the last instruction are ignored."""
        _, instructions = split_sections([" 1 ", "", "move 1 from 1 to 2", "", "  "])
        assert instructions == ["move 1 from 1 to 2"]

    def test_inner_blank_line_kept(self):
        """A blank line between instructions is left for the parser to reject."""
        _, instructions = split_sections(
            [" 1 ", "", "move 1 from 1 to 2", "", "move 1 from 2 to 1"]
        )
        assert instructions == ["move 1 from 1 to 2", "", "move 1 from 2 to 1"]

    def test_no_instructions_section(self):
        """A diagram followed by a blank line and nothing else is valid."""
        assert split_sections(["[A]", " 1 ", ""]) == (["[A]", " 1 "], [])

    def test_missing_separator_raises(self):
        """Without a blank line the sections cannot be told apart."""
        with pytest.raises(DiagramParseError, match="No blank line"):
            split_sections(["[A]", " 1 ", "move 1 from 1 to 2"])
