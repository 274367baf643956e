from typing import BinaryIO
from abc import ABC, abstractmethod
from contextlib import contextmanager


class AbstractAdapter(ABC):
    """Locates and opens an archive inside some container (a folder, a disc image)."""

    @abstractmethod
    def test_file(self, file_path: str) -> bool:
        ...

    @abstractmethod
    def get_file_size(self, file_name: str) -> "int | None":
        ...

    @abstractmethod
    def find_file(self, file_name: str) -> "str | None":
        ...

    @contextmanager
    @abstractmethod
    def open(self, file_name: str) -> BinaryIO:
        ...

    def close(self):
        pass

    def __init__(self, load_path: str):
        self._init_called = True

        self.load_path = load_path

        self.archive_path = None

    def setup(self, archive_name: str):
        if not getattr(self, "_init_called", False):
            raise RuntimeError("must call __init__ of super class")

        self.archive_path = self.find_file(archive_name)

        if self.archive_path is None or not self.test_file(self.archive_path):
            raise FileNotFoundError(archive_name)
