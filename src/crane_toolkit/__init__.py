"""Top-level package for the crane toolkit.

Provides subpackages:
- crane_toolkit.core – warehouse/move models, errors, serialization, schemas
- crane_toolkit.parsing – diagram and instruction parsers
- crane_toolkit.crane – crane policies and the move executor
- crane_toolkit.loading – input file reading and section splitting
"""


def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("crane-toolkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
__copyright__ = "Copyright 2026 crane-toolkit authors. Licensed under the MIT License"
__all__: list[str] = ["__version__"]
