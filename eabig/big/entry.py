from dataclasses import dataclass


@dataclass(frozen=True)
class Header:
    name: str
    size: int  # stored little-endian, unlike every other field
    files: int
    indices: int


@dataclass(frozen=True)
class TableEntry:
    pos: int
    size: int
    name: str

    @property
    def end(self) -> int:
        return self.pos + self.size
