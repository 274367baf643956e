import io
import struct

import pytest

from eabig import (
    BigArchive,
    Header,
    InvalidEncodingError,
    TableEntry,
    TruncatedError,
    decode,
    find_out_of_bounds,
    open_entry,
    read_entry,
    read_header,
)


def test_single_entry_archive():
    data = b"BIG4" + b"\x00\x00\x00\x00" + b"\x00\x00\x00\x01" + b"\x00\x00\x00\x00"
    data += struct.pack(">II", 30, 4) + b"a.txt\x00"
    data += b"DEAD"
    stream = io.BytesIO(data)

    header, entries = decode(stream)

    assert header == Header(name="BIG4", size=0, files=1, indices=0)
    assert entries == [TableEntry(pos=30, size=4, name="a.txt")]

    embed = open_entry(stream, entries[0])
    assert embed.read(4) == b"DEAD"
    assert embed.read(1) == b""


def test_header_size_is_little_endian():
    raw = b"BIGF" + b"\x10\x00\x00\x00" + b"\x00\x00\x00\x02" + b"\x00\x00\x01\x00"

    header = read_header(io.BytesIO(raw))

    assert header.size == 16
    assert header.files == 2
    assert header.indices == 256


def test_header_consumes_sixteen_bytes():
    stream = io.BytesIO(b"BIGF" + bytes(12) + b"rest")

    read_header(stream)

    assert stream.tell() == 16


def test_header_invalid_tag():
    raw = b"\xff\xff\xff\xff" + bytes(12)

    with pytest.raises(InvalidEncodingError) as exc_info:
        read_header(io.BytesIO(raw))

    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
    assert exc_info.value.raw == b"\xff\xff\xff\xff"


@pytest.mark.parametrize("length", [0, 3, 4, 10, 15])
def test_header_truncated(length):
    with pytest.raises(TruncatedError):
        read_header(io.BytesIO((b"BIGF" + bytes(12))[:length]))


def test_entry_leaves_stream_at_next_entry():
    raw = struct.pack(">II", 0x1234, 0x56) + b"dir\\file.dat\x00" + b"next"
    stream = io.BytesIO(raw)

    entry = read_entry(stream)

    assert entry == TableEntry(pos=0x1234, size=0x56, name="dir\\file.dat")
    assert entry.end == 0x1234 + 0x56
    assert stream.read() == b"next"


def test_entry_name_decoding_is_lossy():
    raw = struct.pack(">II", 0, 0) + b"caf\xe9.txt\x00"

    entry = read_entry(io.BytesIO(raw))

    assert entry.name == "caf\ufffd.txt"


def test_entry_empty_name():
    entry = read_entry(io.BytesIO(struct.pack(">II", 1, 2) + b"\x00"))

    assert entry.name == ""


def test_entry_truncated_prefix():
    with pytest.raises(TruncatedError):
        read_entry(io.BytesIO(b"\x00\x00\x00\x10\x00\x00"))


def test_entry_truncated_name():
    with pytest.raises(TruncatedError):
        read_entry(io.BytesIO(struct.pack(">II", 16, 4) + b"a.txt"))


def test_decode_preserves_table_order(make_big, sample_files):
    stream = io.BytesIO(make_big(sample_files))

    header, entries = decode(stream)

    assert header.name == "BIG4"
    assert header.files == len(sample_files)
    assert [entry.name for entry in entries] == [name for name, _ in sample_files]
    for entry, (_, data) in zip(entries, sample_files):
        assert entry.size == len(data)
        assert open_entry(stream, entry).read() == data


def test_decode_no_files(make_big):
    header, entries = decode(io.BytesIO(make_big([])))

    assert header.files == 0
    assert entries == []


def test_decode_ignores_declared_sizes(make_big):
    data = make_big([("a", b"abc")], declared_size=1, indices=9999)

    header, entries = decode(io.BytesIO(data))

    assert header.size == 1
    assert header.indices == 9999
    assert len(entries) == 1


def test_decode_missing_entry_fails(make_big):
    data = bytearray(make_big([("a", b"abc")]))
    data[8:12] = struct.pack(">I", 2)

    with pytest.raises(TruncatedError):
        decode(io.BytesIO(bytes(data[:16 + 8 + 2])))


def test_find_out_of_bounds():
    entries = [TableEntry(16, 4, "in"), TableEntry(18, 4, "edge"), TableEntry(30, 1, "out")]

    assert find_out_of_bounds(entries, 22) == [entries[2]]
    assert find_out_of_bounds(entries, 31) == []


def test_big_archive(sample_stream, sample_files):
    archive = BigArchive(sample_stream)

    assert len(archive) == 3
    assert archive.list_files() == [name for name, _ in sample_files]
    assert [entry.name for entry in archive] == archive.list_files()

    assert archive[1].read() == sample_files[1][1]
    assert archive["data\\config.ini"].read() == sample_files[0][1]
    assert archive.read_file("data/config.ini") == sample_files[0][1]
    assert archive.read_file("empty.txt") == b""
    assert archive.find_entry("art/logo.tga").size == len(sample_files[1][1])
    assert archive.find_entry("missing") is None
    assert archive.out_of_bounds() == []


def test_big_archive_missing_file(sample_stream):
    archive = BigArchive(sample_stream)

    with pytest.raises(FileNotFoundError):
        archive.open("nope.bin")


def test_big_archive_truncated_contents(make_big, sample_files):
    data = make_big(sample_files)[:-10]

    archive = BigArchive(io.BytesIO(data))

    assert [entry.name for entry in archive.out_of_bounds()] == ["art\\logo.tga", "empty.txt"]


def test_big_archive_bounds_keep_stream_position(sample_stream):
    archive = BigArchive(sample_stream)
    sample_stream.seek(5)

    archive.out_of_bounds()

    assert sample_stream.tell() == 5


class FailingStream(io.BytesIO):
    def read(self, size=-1):
        raise OSError(5, "Input/output error")


def test_decode_propagates_io_errors():
    stream = FailingStream(b"BIG4" + bytes(12))

    with pytest.raises(OSError) as exc_info:
        decode(stream)

    assert exc_info.value.errno == 5
    assert not isinstance(exc_info.value, TruncatedError)


def test_embedded_file_propagates_io_errors():
    embed = open_entry(FailingStream(bytes(32)), TableEntry(4, 8, "x"))

    with pytest.raises(OSError) as exc_info:
        embed.read(4)

    assert exc_info.value.errno == 5
    assert embed.tell() == 0
