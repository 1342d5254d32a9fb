"""
Services for filekit.

Higher-level helpers built on File: transfers and INI output.
"""

from .file_transfer import copy_file, move_file, output_file
from .ini_writer import IniFileWriter

__all__ = [
    "copy_file",
    "move_file",
    "output_file",
    "IniFileWriter",
]
