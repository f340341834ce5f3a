"""Coaster store service package.

Exposes the distribution version as `__version__`.
"""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("coaster-store")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
