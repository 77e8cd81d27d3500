"""Baseline compatibility checks for stylesheets."""

from ._version import __version__

__all__ = ["__version__"]
