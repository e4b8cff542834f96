"""Filtered project structure listing and content aggregation.

This package prints the directory tree of a project while honoring .gitignore-style
exclusion rules, and can collect the contents of the selected files into one file.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("projstruct")
except PackageNotFoundError:
    __version__ = "unknown"
