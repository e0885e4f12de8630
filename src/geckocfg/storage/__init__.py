"""Storage backends for code configuration sections."""

from .base import LineStore
from .ini_file import IniFile, IniFileError

__all__ = [
    "IniFile",
    "IniFileError",
    "LineStore",
]
