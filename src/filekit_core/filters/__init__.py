"""
File filters for directory listing.

Every filter is a FileFilter and therefore also a plain
``Callable[[File], bool]``.
"""

from .extension import ExtensionFileFilter
from .type_filters import IsDirectoryFileFilter, IsFileFileFilter
from .image import ImageFileFilter, detect_image_type
from .regex import RegExFileFilter
from .combined import CombinedFileFilter

__all__ = [
    "ExtensionFileFilter",
    "IsDirectoryFileFilter",
    "IsFileFileFilter",
    "ImageFileFilter",
    "detect_image_type",
    "RegExFileFilter",
    "CombinedFileFilter",
]
