"""geckocfg: read, merge and write Gecko cheat code INI files."""

from .codes import (
    GeckoCode,
    GeckoCodeManager,
    Patch,
    bootstrap_local_config,
    fill_lines,
    mark_default_enabled,
    mark_enabled,
    merge_codes,
    parse_codes,
)
from .storage import IniFile, IniFileError, LineStore

__version__ = "0.1.0"

__all__ = [
    "GeckoCode",
    "GeckoCodeManager",
    "IniFile",
    "IniFileError",
    "LineStore",
    "Patch",
    "bootstrap_local_config",
    "fill_lines",
    "mark_default_enabled",
    "mark_enabled",
    "merge_codes",
    "parse_codes",
]
