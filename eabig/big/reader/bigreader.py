import os

from typing import BinaryIO, cast
from contextlib import contextmanager

from .adapter import FilesystemAdapter, ISOAdapter
from ..archive import decode, find_out_of_bounds, lookup_entry, make_file_name_index, open_entry
from ..entry import TableEntry
from ...log import get_logger


_logger = get_logger()


def is_iso_file(file_path):
    return os.path.isfile(file_path) and os.path.splitext(file_path)[1].upper() == ".ISO"


class BigReader:
    """Decodes a BIG archive found on disk or inside a disc image.

    ``load_path`` is either the archive itself, a folder holding it, or an ISO
    image holding it; for the last two ``archive_name`` names the archive
    relative to the container root.
    """

    def __init__(self, load_path, archive_name=None):
        self.load_path = load_path

        if is_iso_file(load_path):
            self.adapter = ISOAdapter(self.load_path)
        elif os.path.isdir(load_path):
            self.adapter = FilesystemAdapter(self.load_path)
        elif os.path.isfile(load_path) and archive_name is None:
            self.adapter = FilesystemAdapter(os.path.dirname(os.path.abspath(load_path)))
            archive_name = os.path.basename(load_path)
        else:
            raise ValueError("load_path must be a BIG archive, a folder or an iso")

        if archive_name is None:
            raise ValueError("archive_name is required when load_path is a folder or an iso")

        try:
            self.adapter.setup(archive_name)

            _logger.debug(f"Reading table of {self.adapter.archive_path} through {self.adapter.__class__.__name__}")

            with self.adapter.open(self.adapter.archive_path) as file_h:
                self.header, self.entries = decode(cast(BinaryIO, file_h))
        except BaseException:
            self.adapter.close()
            raise

        self.file_name_index = make_file_name_index(self.entries)

    def list_files(self) -> "list[str]":
        return [entry.name for entry in self.entries]

    def num_files(self):
        return len(self.entries)

    def file_exist(self, file_name):
        return self.find_entry(file_name) is not None

    def find_entry(self, file_name) -> "TableEntry | None":
        return lookup_entry(self.file_name_index, file_name)

    def archive_size(self) -> "int | None":
        return self.adapter.get_file_size(self.adapter.archive_path)

    def out_of_bounds(self) -> "list[TableEntry]":
        size = self.archive_size()
        if size is None:
            raise FileNotFoundError(self.adapter.archive_path)
        return find_out_of_bounds(self.entries, size)

    def read_file(self, file_name, size=-1, offset=0) -> bytes:
        with self.open(file_name) as embed:
            embed.seek(offset)
            return embed.read(size)

    @contextmanager
    def open(self, file_name):
        entry = file_name if isinstance(file_name, TableEntry) else self.find_entry(file_name)

        if entry is None:
            raise FileNotFoundError(file_name)

        with self.adapter.open(self.adapter.archive_path) as file_h:
            yield open_entry(cast(BinaryIO, file_h), entry)

    def close(self):
        self.adapter.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, exc_traceback):
        self.close()

    def __repr__(self):
        return (
            f"{self.__class__.__name__}[{self.adapter.__class__.__name__}="
            f"{os.path.basename(self.adapter.load_path)}]"
        )
