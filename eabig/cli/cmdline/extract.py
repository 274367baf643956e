import os
import sys
import argparse

from dataclasses import dataclass

from ..error import AbstractProgressError
from ..progress import Progress
from ..utils import copy_stream, entry_output_path
from ...big.reader import BigReader
from ...errors import DecodeError


@dataclass
class ProgressErrorOpenArchive(AbstractProgressError):
    error_msg = "Error while reading the archive table"
    explanation = "The file could not be opened or is not a valid BIG archive"
    suggestion = "Please check that the path points to a readable BIG archive"


@dataclass
class ProgressErrorBounds(AbstractProgressError):
    error_msg = "Error while checking entry bounds"
    explanation = "Some entries point past the end of the archive. This may be due to a truncated file"
    suggestion = "Please re-download or re-dump the archive and try again"


@dataclass
class ProgressErrorExtract(AbstractProgressError):
    error_msg = "Error while extracting files"
    explanation = "Disk may be full, an entry may be damaged or its name may be unsafe"
    suggestion = "Check disk space and destination folder and try again"


def print_table(reader: BigReader):
    header = reader.header

    print("  ======= Header =======")
    print(f"  name: {header.name}")
    print(f"  size: {header.size}")
    print(f"  files: {header.files}")
    print(f"  indices: {header.indices}")
    print("  ======= Entries ======")
    for entry in reader.entries:
        print(f"  name: {entry.name} | offset: {entry.pos} | size: {entry.size}")
    print()


def check_bounds(reader: BigReader, callback=None):
    if callback:
        callback(1)

    bad_entries = reader.out_of_bounds()

    if bad_entries:
        names = ", ".join(entry.name for entry in bad_entries)
        raise DecodeError(f"{len(bad_entries)} entries out of bounds: {names}")

    if callback:
        callback()


def extract_all(reader: BigReader, output_dir: str, callback=None):
    if callback:
        callback(total=sum(entry.size for entry in reader.entries))

    for entry in reader.entries:
        out_path = entry_output_path(output_dir, entry.name)
        os.makedirs(os.path.dirname(out_path), exist_ok=True)

        with reader.open(entry) as embed:
            written = copy_stream(embed, out_path, callback)

        if written != entry.size:
            raise DecodeError(f"{entry.name}: expected {entry.size} bytes, extracted {written}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="EA BIG archive extractor")

    parser.add_argument("archive", type=str, help="path to the BIG archive, or to a folder or iso containing it")
    parser.add_argument(
        "--inside",
        dest="archive_name",
        type=str,
        default=None,
        help="path of the archive inside the folder or iso given as first argument",
    )
    parser.add_argument(
        "-o", "--output", dest="output_dir", type=str, default=os.getcwd(), help="output folder (default: cwd)"
    )
    parser.add_argument("--list", dest="list_only", action="store_true", help="only print header and entries")
    parser.add_argument(
        "--check-bounds",
        dest="check_bounds",
        action="store_true",
        help="fail if any entry lies outside the archive",
    )

    args = parser.parse_args(argv)

    if not os.path.exists(args.archive):
        print()
        print(f"  {args.archive} does not exist.")
        print()
        sys.exit(1)

    with Progress("Reading table", ProgressErrorOpenArchive) as pbar:
        pbar(1)
        reader = BigReader(args.archive, args.archive_name)
        pbar()

    with reader:
        print()
        print_table(reader)

        if args.check_bounds:
            with Progress("Checking bounds", ProgressErrorBounds) as pbar:
                check_bounds(reader, callback=pbar)

        if args.list_only or not reader.entries:
            return

        with Progress("Extracting files", ProgressErrorExtract, unit="B") as pbar:
            extract_all(reader, os.path.abspath(args.output_dir), callback=pbar)

    print()
    print(f"  Extracted {reader.num_files()} files to {os.path.abspath(args.output_dir)}.")
    print()


if __name__ == "__main__":
    main()
