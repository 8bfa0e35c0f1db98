"""Top-level package for scorepage.

Provides subpackages:
- scorepage.core – score, tuning and bounds models
- scorepage.layout – page view layout engine (line breaking, justification, header)
- scorepage.output – drawing surfaces and PNG/PDF renderers
- scorepage.controller – layout + render pipeline
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("scorepage")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0+unknown"

__all__: list[str] = ["__version__"]
