from .bigreader import BigReader, is_iso_file

__all__ = ["BigReader", "is_iso_file"]
