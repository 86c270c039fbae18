"""
Core package for the MPGCalculator.net blog generator.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("mpgblog")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
