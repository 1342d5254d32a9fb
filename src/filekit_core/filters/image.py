"""
Image type filter.

Sniffs the image header with Pillow; the file extension is ignored.
"""

from typing import Iterable, Optional, Set

from PIL import Image

from ..adapters.local_file import File
from ..domain.enums import ImageType
from ..ports.filter_port import FileFilter


def detect_image_type(file: File) -> Optional[ImageType]:
    """Image type of the file, or None if it is not a readable image."""
    try:
        # Image.open only parses the header; pixel data is not loaded
        with Image.open(file.get_path()) as img:
            fmt = img.format
    except (OSError, ValueError, Image.DecompressionBombError):
        return None
    if not fmt:
        return None
    return ImageType.from_format(fmt)


class ImageFileFilter(FileFilter):
    """Selects images whose detected type is one of the allowed types."""

    def __init__(self, image_types: Iterable[ImageType]):
        self.image_types: Set[ImageType] = {ImageType(t) for t in image_types}

    def accept(self, file: File) -> bool:
        if not file.is_file():
            return False
        return detect_image_type(file) in self.image_types
