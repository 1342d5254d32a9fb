"""
Enumerations for filekit domain.
"""

import stat
from enum import Enum, IntFlag
from typing import Optional


class FileType(str, Enum):
    """Kind of a filesystem entry, as reported by lstat."""
    FILE = "file"
    DIR = "dir"
    LINK = "link"
    FIFO = "fifo"
    CHAR = "char"       # Character device
    BLOCK = "block"     # Block device
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Determine type from an st_mode value."""
        if stat.S_ISREG(mode):
            return cls.FILE
        if stat.S_ISDIR(mode):
            return cls.DIR
        if stat.S_ISLNK(mode):
            return cls.LINK
        if stat.S_ISFIFO(mode):
            return cls.FIFO
        if stat.S_ISCHR(mode):
            return cls.CHAR
        if stat.S_ISBLK(mode):
            return cls.BLOCK
        if stat.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


class WriteMode(str, Enum):
    """How a writer opens its file."""
    TRUNCATE = "wb"     # Start from an empty file
    APPEND = "ab"       # Keep content, write at the end


class ReadFlag(IntFlag):
    """Options for reading a file as a list of lines."""
    NONE = 0
    IGNORE_NEW_LINES = 1    # Strip line terminators
    SKIP_EMPTY_LINES = 2    # Drop lines that are empty


# Pillow formats that are variants of a recognised type
_FORMAT_ALIASES = {
    "MPO": "JPEG",      # JPEG with Multi-Picture Format data (phone cameras)
}


class ImageType(str, Enum):
    """Image formats recognised by header sniffing.

    Values are the format names reported by Pillow.
    """
    GIF = "GIF"
    JPEG = "JPEG"
    PNG = "PNG"
    BMP = "BMP"
    TIFF = "TIFF"
    WEBP = "WEBP"
    ICO = "ICO"
    PSD = "PSD"

    @classmethod
    def from_format(cls, fmt: str) -> Optional["ImageType"]:
        """Map a Pillow format name to an ImageType, if known."""
        try:
            fmt = fmt.upper()
            return cls(_FORMAT_ALIASES.get(fmt, fmt))
        except ValueError:
            return None
