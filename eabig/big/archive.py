import os
import struct

from typing import BinaryIO, Iterator, Union

from .entry import Header, TableEntry
from ..errors import InvalidEncodingError, TruncatedError
from ..log import get_logger
from ..utils.file import EmbeddedFile


_logger = get_logger()

TAG_SIZE = 4
HEADER_SIZE = 16
ENTRY_PREFIX_SIZE = 8

# the declared archive size is the only little-endian field of the format
_size_struct = struct.Struct("<I")
_counts_struct = struct.Struct(">II")
_entry_struct = struct.Struct(">II")


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)

    if data is None or len(data) < size:
        raise TruncatedError(what, size, len(data or b""))

    return data


def read_cstring(stream: BinaryIO, what: str) -> bytes:
    """Read a NUL-terminated byte string, consuming the terminator."""
    out = bytearray()
    while True:
        b = stream.read(1)
        if not b:
            raise TruncatedError(what)
        if b == b"\x00":
            break
        out.extend(b)
    return bytes(out)


def read_header(stream: BinaryIO) -> Header:
    tag = read_exact(stream, TAG_SIZE, "archive tag")

    try:
        name = tag.decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidEncodingError(tag) from err

    raw = read_exact(stream, HEADER_SIZE - TAG_SIZE, "header")
    (size,) = _size_struct.unpack_from(raw, 0)
    files, indices = _counts_struct.unpack_from(raw, 4)

    return Header(name, size, files, indices)


def read_entry(stream: BinaryIO) -> TableEntry:
    pos, size = _entry_struct.unpack(read_exact(stream, ENTRY_PREFIX_SIZE, "table entry"))
    name = read_cstring(stream, "table entry name").decode("utf-8", errors="replace")

    return TableEntry(pos, size, name)


def decode(stream: BinaryIO) -> "tuple[Header, list[TableEntry]]":
    header = read_header(stream)
    _logger.debug(f"Decoded header {header}")

    entries = [read_entry(stream) for _ in range(header.files)]
    _logger.debug(f"Decoded {len(entries)} table entries")

    return header, entries


def open_entry(stream: BinaryIO, entry: TableEntry) -> EmbeddedFile:
    return EmbeddedFile(stream, entry.pos, entry.size)


def normalize_name(file_name: str) -> str:
    return file_name.replace("\\", "/")


def make_file_name_index(entries: "list[TableEntry]") -> "dict[str, TableEntry]":
    index: dict[str, TableEntry] = {}
    # first occurrence wins for duplicated names
    for entry in entries:
        index.setdefault(entry.name, entry)
        index.setdefault(normalize_name(entry.name), entry)
    return index


def lookup_entry(index: "dict[str, TableEntry]", file_name: str) -> "TableEntry | None":
    entry = index.get(file_name)

    if entry is None:
        entry = index.get(normalize_name(file_name))

    return entry


def find_out_of_bounds(entries: "list[TableEntry]", archive_size: int) -> "list[TableEntry]":
    return [entry for entry in entries if entry.end > archive_size]


class BigArchive:
    """A decoded archive over a caller-owned stream.

    The stream stays owned by the caller: it must remain open while entries
    are read and is never closed here.
    """

    def __init__(self, big_data: BinaryIO):
        self.data = big_data

        big_data.seek(0, os.SEEK_SET)
        self.header, self.entries = decode(big_data)

        self.file_name_index = make_file_name_index(self.entries)

    def list_files(self) -> "list[str]":
        return [entry.name for entry in self.entries]

    def find_entry(self, file_name: str) -> "TableEntry | None":
        return lookup_entry(self.file_name_index, file_name)

    def open(self, entry: Union[TableEntry, str]) -> EmbeddedFile:
        if isinstance(entry, str):
            found = self.find_entry(entry)
            if found is None:
                raise FileNotFoundError(entry)
            entry = found

        return open_entry(self.data, entry)

    def read_file(self, file_name: str) -> bytes:
        return self.open(file_name).read()

    def out_of_bounds(self) -> "list[TableEntry]":
        position = self.data.tell()
        try:
            size = self.data.seek(0, os.SEEK_END)
        finally:
            self.data.seek(position, os.SEEK_SET)
        return find_out_of_bounds(self.entries, size)

    def __len__(self):
        return len(self.entries)

    def __iter__(self) -> Iterator[TableEntry]:
        return iter(self.entries)

    def __getitem__(self, item: Union[int, str]) -> EmbeddedFile:
        if isinstance(item, int):
            return open_entry(self.data, self.entries[item])
        return self.open(item)

    def __repr__(self):
        return f"{self.__class__.__name__}[{self.header.name}, files={len(self)}]"
