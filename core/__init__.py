"""Calculator evaluation engine.

This package also exposes the package version for runtime display."""

from core.version import __version__

__all__ = ["__version__"]
