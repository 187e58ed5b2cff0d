"""Top-level package for the Photo Print Toolkit.

Provides subpackages:
- photoprint_toolkit.core – immutable photo and geometry models
- photoprint_toolkit.layout – print sizing and page packing engine
- photoprint_toolkit.intake – image discovery, zip extraction, dimension probing
- photoprint_toolkit.output – PDF, preview and manifest writers
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("photoprint_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
