"""
Adapters for filekit.

The File entity and the stream operators over native OS handles.
"""

from .local_file import File
from .stream_operator import FileOperatorBase
from .file_reader import FileReader
from .file_writer import FileWriter

__all__ = ["File", "FileOperatorBase", "FileReader", "FileWriter"]
