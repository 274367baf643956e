from .abstract import AbstractAdapter
from .filesystem import FilesystemAdapter
from .iso import ISOAdapter

__all__ = ["AbstractAdapter", "FilesystemAdapter", "ISOAdapter"]
