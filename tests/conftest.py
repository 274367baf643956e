import io
import struct

import pytest


def build_big(files, tag=b"BIG4", declared_size=None, indices=None):
    """Lay out ``files`` (a list of ``(name, data)``) as a BIG archive, contents after the table."""
    table_size = sum(8 + len(name.encode("utf-8")) + 1 for name, _ in files)
    pos = 16 + table_size

    table = bytearray()
    contents = bytearray()
    for name, data in files:
        table += struct.pack(">II", pos + len(contents), len(data))
        table += name.encode("utf-8") + b"\x00"
        contents += data

    total = 16 + len(table) + len(contents)
    header = tag + struct.pack("<I", total if declared_size is None else declared_size)
    header += struct.pack(">II", len(files), table_size if indices is None else indices)

    return bytes(header + table + contents)


@pytest.fixture
def make_big():
    return build_big


@pytest.fixture
def sample_files():
    return [
        ("data\\config.ini", b"[main]\nvolume=7\n"),
        ("art\\logo.tga", bytes(range(256)) * 3),
        ("empty.txt", b""),
    ]


@pytest.fixture
def sample_stream(sample_files):
    return io.BytesIO(build_big(sample_files))
