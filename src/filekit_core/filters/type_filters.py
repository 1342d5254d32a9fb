"""
Filters selecting entries by kind.
"""

from ..adapters.local_file import File
from ..ports.filter_port import FileFilter


class IsDirectoryFileFilter(FileFilter):
    """Selects directories."""

    def accept(self, file: File) -> bool:
        return file.is_dir()


class IsFileFileFilter(FileFilter):
    """Selects regular files."""

    def accept(self, file: File) -> bool:
        return file.is_file()
