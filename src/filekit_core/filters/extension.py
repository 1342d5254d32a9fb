"""
Extension filter.
"""

from ..adapters.local_file import File
from ..ports.filter_port import FileFilter


class ExtensionFileFilter(FileFilter):
    """Selects regular files with the given extension (case-sensitive, no dot)."""

    def __init__(self, extension: str):
        self.extension = extension.lstrip(".")

    def accept(self, file: File) -> bool:
        return file.is_file() and file.get_extension() == self.extension

    def __repr__(self) -> str:
        return f"ExtensionFileFilter({self.extension!r})"
