"""Gecko code parsing, merging and serialization.

A game's codes live in two INI files: a global one shipped with the game
database, and a user one holding the user's own codes and which codes are
enabled. Both use the same two sections:

- ``[Gecko]``: the code entries
- ``[Gecko_Enabled]``: ``$Name`` markers for enabled codes
"""

from .activation import enabled_names, mark_default_enabled, mark_enabled
from .manager import GeckoCodeManager
from .merge import MergeResult, combine_codes, merge_codes, merge_sources
from .models import CODES_SECTION, ENABLED_SECTION, GeckoCode, Patch
from .parser import (
    LineKind,
    classify_line,
    parse_codes,
    parse_header,
    parse_patch,
    read_codes,
)
from .serializer import (
    bootstrap_lines,
    bootstrap_local_config,
    fill_lines,
    write_codes,
)

__all__ = [
    "CODES_SECTION",
    "ENABLED_SECTION",
    "GeckoCode",
    "GeckoCodeManager",
    "LineKind",
    "MergeResult",
    "Patch",
    "bootstrap_lines",
    "bootstrap_local_config",
    "classify_line",
    "combine_codes",
    "enabled_names",
    "fill_lines",
    "mark_default_enabled",
    "mark_enabled",
    "merge_codes",
    "merge_sources",
    "parse_codes",
    "parse_header",
    "parse_patch",
    "read_codes",
    "write_codes",
]
