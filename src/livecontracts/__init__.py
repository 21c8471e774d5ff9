"""
livecontracts-process distribution import namespace.

This package re-exports the core `live_process` package for convenience.
"""

from importlib.metadata import PackageNotFoundError, version

# src/livecontracts/__init__.py
from live_process import *  # noqa: F401,F403

try:
    __version__ = version("livecontracts-process")
except PackageNotFoundError:  # pragma: no cover - fallback for local non-built environments
    __version__ = "0+unknown"

__all__ = ["__version__"]
