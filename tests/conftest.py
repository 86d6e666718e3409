import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import crane_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

FIXTURES = Path(__file__).resolve().parent / "fixtures"


# Common test fixtures
@pytest.fixture
def sample_path() -> Path:
    """Path to the three-stack sample input."""
    return FIXTURES / "sample_crates.txt"


@pytest.fixture
def sample_diagram() -> list[str]:
    """Diagram section of the sample input, header last."""
    return [
        "    [D]    ",
        "[N] [C]    ",
        "[Z] [M] [P]",
        " 1   2   3 ",
    ]


@pytest.fixture
def sample_instructions() -> list[str]:
    """Instruction section of the sample input."""
    return [
        "move 1 from 2 to 1",
        "move 3 from 1 to 3",
        "move 2 from 2 to 1",
        "move 1 from 1 to 2",
    ]


@pytest.fixture
def write_input(tmp_path: Path):
    """Write text to an input file and return its path."""
    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write
