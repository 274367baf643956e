from contextlib import contextmanager

import pycdlib


class DiscImage:
    """ISO 9660 image opened read-only through pycdlib.

    Lookups are case-insensitive, accept ``\\`` or ``/`` separators and may
    omit the ``;1`` version suffix.
    """

    def __init__(self, iso_path: str):
        self.iso = pycdlib.PyCdlib()
        self.iso.open(iso_path, mode="rb")
        self.iso9660_facade = self.iso.get_iso9660_facade()
        self.files = self.index_files()

    def index_files(self) -> "dict[str, str]":
        # DATA/AUDIO.BIG -> /DATA/AUDIO.BIG;1
        files = {}
        for dir_path, _, file_names in self.iso9660_facade.walk("/"):
            prefix = dir_path.rstrip("/")
            for file_name in file_names:
                iso_path = f"{prefix}/{file_name}"
                files[iso_path.lstrip("/").rsplit(";", 1)[0].upper()] = iso_path
        return files

    def find_file(self, file_name: str) -> "str | None":
        if file_name in self.files.values():
            return file_name

        return self.files.get(file_name.replace("\\", "/").strip("/").rsplit(";", 1)[0].upper())

    @contextmanager
    def open(self, file_name: str):
        iso_path = self.find_file(file_name)

        if iso_path is None:
            raise FileNotFoundError(file_name)

        with self.iso9660_facade.open_file_from_iso(iso_path) as file_h:
            yield file_h

    def get_file_size(self, file_name: str) -> "int | None":
        iso_path = self.find_file(file_name)

        if iso_path is None:
            return None

        return self.iso9660_facade.get_record(iso_path).get_data_length()

    def close(self):
        self.iso.close()
