import os

from typing import BinaryIO


BLOCK_SIZE = 2**20


def entry_output_path(output_dir: str, entry_name: str) -> str:
    """Map an entry name (usually with ``\\`` separators) to a path below ``output_dir``."""
    parts = [part for part in entry_name.replace("\\", "/").split("/") if part not in ("", ".")]

    if not parts or ".." in parts or ":" in parts[0]:
        raise ValueError(f"refusing to extract entry outside of the output folder: {entry_name!r}")

    return os.path.join(output_dir, *parts)


def copy_stream(src_fh: BinaryIO, dst, callback=None, block_size=BLOCK_SIZE) -> int:
    written = 0

    with open(dst, "wb") as dst_fh:
        while True:
            data = src_fh.read(block_size)

            if not data:
                break

            dst_fh.write(data)
            written += len(data)

            if callback:
                callback(advance=len(data))

    return written
