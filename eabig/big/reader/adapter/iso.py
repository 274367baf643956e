from typing import BinaryIO, cast
from contextlib import contextmanager
from pycdlib.pycdlibexception import PyCdlibInvalidISO

from ...dvd import DiscImage
from .abstract import AbstractAdapter


class ISOAdapter(AbstractAdapter):
    """Reads an archive stored inside a disc image without extracting it."""

    def __init__(self, load_path: str):
        super().__init__(load_path)

        try:
            self.image = DiscImage(load_path)
        except (IsADirectoryError, PermissionError, FileNotFoundError, PyCdlibInvalidISO):
            raise RuntimeError(f"cannot open iso {load_path}")  # pylint: disable=raise-missing-from

    def test_file(self, file_path: str) -> bool:
        return self.image.find_file(file_path) is not None

    def get_file_size(self, file_name: str) -> "int | None":
        return self.image.get_file_size(file_name)

    def find_file(self, file_name: str) -> "str | None":
        return self.image.find_file(file_name)

    @contextmanager
    def open(self, file_name: str) -> BinaryIO:  # pyright: ignore[reportGeneralTypeIssues]
        with self.image.open(file_name) as file_h:
            yield cast(BinaryIO, file_h)

    def close(self):
        self.image.close()
