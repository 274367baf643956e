import os

from typing import BinaryIO, cast
from contextlib import contextmanager

from .abstract import AbstractAdapter


class FilesystemAdapter(AbstractAdapter):
    def test_file(self, file_path: str) -> bool:
        return os.path.isfile(file_path) and os.access(file_path, os.R_OK)

    def get_file_size(self, file_name: str) -> "int | None":
        if not self.test_file(file_name):
            return None
        return os.stat(file_name).st_size

    def find_file(self, file_name: str) -> "str | None":
        file_name = file_name.replace("\\", "/")
        file_dir, base_name = os.path.split(file_name)
        search_path = os.path.join(self.load_path, file_dir)

        if not os.path.isdir(search_path):
            return None

        all_files = next(os.walk(search_path))[2]
        file_name_upper = base_name.upper()
        file_match_gen = (name for name in all_files if name.upper() == file_name_upper)
        file_name_match = next(file_match_gen, None)

        if file_name_match is not None:
            file_name_match = os.path.join(search_path, file_name_match)

        return file_name_match

    @contextmanager
    def open(self, file_name: str) -> BinaryIO:  # pyright: ignore[reportGeneralTypeIssues]
        with open(file_name, "rb") as file_h:
            yield cast(BinaryIO, file_h)
