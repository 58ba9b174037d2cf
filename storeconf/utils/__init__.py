"""Utilities Package"""

from storeconf.utils.sources import deep_merge, find_fragments, merge_sources, read_source

__all__ = [
    "deep_merge",
    "find_fragments",
    "merge_sources",
    "read_source"
]
