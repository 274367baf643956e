import sys
from abc import ABC
from dataclasses import dataclass


@dataclass
class AbstractProgressError(ABC):
    """Message shown when a command line step fails; subclasses only set class attributes."""

    error_msg: str
    explanation: str
    suggestion: str

    def __post_init__(self):
        raise RuntimeError("Cannot instantiate ProgressError")

    @classmethod
    def print(cls, detail=None, file=None):
        file = file or sys.stdout
        lines = [
            cls.error_msg.replace("Error", "\x1b[1;31mError\x1b[0m"),
            f"\x1b[4m{cls.explanation}\x1b[0m",
            cls.suggestion,
        ]
        if detail:
            lines.insert(1, f"Cause: {detail}")

        file.flush()
        file.write("\n")
        for line in lines:
            file.write(f"  {line}.\n")
        file.write("\n")
        file.flush()
