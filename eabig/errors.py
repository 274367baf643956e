from typing import Optional


class DecodeError(Exception):
    """Base class of every error raised while decoding a BIG archive."""


class TruncatedError(DecodeError):
    def __init__(self, what: str, expected: Optional[int] = None, received: Optional[int] = None):
        self.what = what
        self.expected = expected
        self.received = received

        if expected is None:
            super().__init__(f"unexpected end of stream while reading {what}")
        else:
            super().__init__(f"unexpected end of stream while reading {what}: expected {expected} bytes, got {received}")


class InvalidEncodingError(DecodeError):
    def __init__(self, raw: bytes):
        self.raw = raw
        super().__init__(f"archive tag {raw!r} is not valid text")


class InvalidSeekError(DecodeError):
    def __init__(self, position: int):
        self.position = position
        super().__init__(f"cannot seek before the start of the file (position {position})")
