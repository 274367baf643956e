from .entry import Header, TableEntry
from .archive import BigArchive, decode, find_out_of_bounds, open_entry, read_entry, read_header

__all__ = [
    "Header",
    "TableEntry",
    "BigArchive",
    "decode",
    "find_out_of_bounds",
    "open_entry",
    "read_entry",
    "read_header",
]
