"""
OR-combination of filters.
"""

from typing import Iterable

from ..adapters.local_file import File
from ..ports.filter_port import FileFilter, FilterLike, as_filter


class CombinedFileFilter(FileFilter):
    """Selects a file if any of the child filters selects it.

    Children are evaluated in order and evaluation stops at the first
    match. An empty combination selects nothing.
    """

    def __init__(self, filters: Iterable[FilterLike]):
        self.filters = [as_filter(f) for f in filters]

    def accept(self, file: File) -> bool:
        return any(f.accept(file) for f in self.filters)
