"""Query HTTP status codes from the terminal."""

from ._version import __version__

__all__ = ["__version__"]
