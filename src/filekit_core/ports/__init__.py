"""
Ports (interfaces) for filekit.

These define the contracts that filters implement.
"""

from .filter_port import FileFilter, FilterLike, as_filter

__all__ = ["FileFilter", "FilterLike", "as_filter"]
