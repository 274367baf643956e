import os
import io

from typing import BinaryIO

from ..errors import InvalidSeekError


class EmbeddedFile(io.BufferedIOBase, BinaryIO):  # pylint: disable=abstract-method
    """Read-only view over the bytes ``[offset, offset + size)`` of an archive stream.

    The view keeps its own position and re-seeks the underlying stream before
    every read, so the same handle can be used by other code (or other views)
    between calls. The underlying stream is never closed by the view.
    """

    def __init__(self, file_h: BinaryIO, offset: int, size: int):
        super().__init__()
        self.file_h: BinaryIO = file_h
        self.offset: int = offset
        self.size: int = size
        self.position: int = 0

    def readable(self):
        return True

    def seekable(self):
        return True

    def writable(self):
        return False

    def tell(self):
        return self.position

    def seek(self, position: int, whence=os.SEEK_SET):
        if whence == os.SEEK_SET:
            next_position = position
        elif whence == os.SEEK_CUR:
            next_position = self.position + position
        elif whence == os.SEEK_END:
            next_position = self.size + position
        else:
            raise ValueError(f"invalid whence ({whence}, should be 0, 1 or 2)")

        if next_position < 0:
            raise InvalidSeekError(next_position)

        self.position = next_position

        return self.position

    def available(self) -> int:
        return max(0, self.size - self.position)

    def read(self, size=-1):
        if size is None or (isinstance(size, int) and size < 0):
            size = self.available()
        elif isinstance(size, int):
            size = min(size, self.available())
        else:
            raise TypeError(f"argument should be integer or None, not '{type(size)}'")

        self.file_h.seek(self.offset + self.position)
        data = self.file_h.read(size) if size > 0 else b""
        self.position += len(data)

        return data

    def read1(self, size=-1):
        return self.read(size)

    def readinto(self, buffer):
        view = memoryview(buffer).cast("B")
        data = self.read(len(view))
        view[: len(data)] = data
        return len(data)

    def readinto1(self, buffer):
        return self.readinto(buffer)

    def __repr__(self):
        return f"{self.__class__.__name__}(offset={self.offset}, size={self.size}, position={self.position})"
