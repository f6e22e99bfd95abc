"""Domain layer: constants, errors and view schemas."""

from .errors import BrowserError, ErrorCodes, NotFoundError
from .schemas import DirectoryListing, DirectoryView, FileView, Link

__all__ = [
    "BrowserError",
    "ErrorCodes",
    "NotFoundError",
    "DirectoryListing",
    "DirectoryView",
    "FileView",
    "Link",
]
