"""
Domain models for filekit.

Pure data classes with no filesystem dependencies.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FSConfig:
    """Host conventions used when deriving paths and writing files."""
    separator: str = os.sep          # Joins parent and child paths
    dir_mode: int = 0o777            # Mode for mkdir/mkfile (before umask)
    line_terminator: str = os.linesep  # Joins line lists on write
    encoding: str = "utf-8"          # Text encoding for get/put
    chunk_size: int = 65_536         # Read size when hashing

    def __post_init__(self):
        if not self.separator:
            raise ValueError("separator must not be empty")
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be greater than 0: {self.chunk_size}")


# Resolved once from the host at import time
DEFAULT_CONFIG = FSConfig()
