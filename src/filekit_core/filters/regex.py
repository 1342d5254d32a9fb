"""
Regular-expression filter over file names.
"""

import re
from typing import Optional, Pattern, Union

from ..adapters.local_file import File
from ..ports.filter_port import FileFilter


class RegExFileFilter(FileFilter):
    """
    Selects files whose base name matches a pattern.

    When an extension is given, the file must carry it and the
    ".<extension>" suffix is stripped before matching, so
    ``RegExFileFilter(r"^report_\\d+$", "csv")`` matches "report_7.csv".
    """

    def __init__(self, pattern: Union[str, Pattern[str]], extension: Optional[str] = None):
        """
        Args:
            pattern: Regular expression searched in the name
            extension: Extension (no dot) required and ignored in matching
        """
        self.pattern = re.compile(pattern)
        self.extension = extension.lstrip(".") if extension else None

    def accept(self, file: File) -> bool:
        if self.extension:
            if file.get_extension() != self.extension:
                return False
            name = file.get_name("." + self.extension)
        else:
            name = file.get_name()

        return self.pattern.search(name) is not None
