"""Decoder for EA BIG archives.

.. code-block:: python

    with open("example.big", "rb") as file_h:
        header, entries = eabig.decode(file_h)
        data = eabig.open_entry(file_h, entries[0]).read()
"""

from .errors import DecodeError, TruncatedError, InvalidEncodingError, InvalidSeekError
from .utils.file import EmbeddedFile
from .big import (
    Header,
    TableEntry,
    BigArchive,
    decode,
    find_out_of_bounds,
    open_entry,
    read_entry,
    read_header,
)
from .big.reader import BigReader

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "TruncatedError",
    "InvalidEncodingError",
    "InvalidSeekError",
    "EmbeddedFile",
    "Header",
    "TableEntry",
    "BigArchive",
    "decode",
    "find_out_of_bounds",
    "open_entry",
    "read_entry",
    "read_header",
    "BigReader",
]
