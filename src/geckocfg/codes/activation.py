"""Apply ``$Name`` marker sections to a set of codes.

In the user INI the marker section lists the codes the user has enabled. In
the global INI the same section lists codes that are enabled by default and
are used to seed a user INI that has no marker section yet.
"""

from typing import Iterable

from ..storage import LineStore
from .models import ENABLED_SECTION, GeckoCode


def enabled_names(lines: Iterable[str]) -> list[str]:
    """Extract names from marker lines, ignoring anything not starting with ``$``."""
    return [line[1:] for line in lines if line.startswith("$")]


def mark_enabled(
    local_source: LineStore,
    codes: list[GeckoCode],
    section: str = ENABLED_SECTION,
) -> list[GeckoCode]:
    """Set ``active`` on every code named in the user INI's marker section.

    Matching is exact and case-sensitive. Returns ``codes`` for chaining.
    """
    names = set(enabled_names(local_source.get_lines(section)))
    for code in codes:
        if code.name in names:
            code.active = True
    return codes


def mark_default_enabled(
    global_source: LineStore,
    codes: list[GeckoCode],
    section: str = ENABLED_SECTION,
) -> list[GeckoCode]:
    """Set ``default_active`` on every code named in the global INI's marker section."""
    names = set(enabled_names(global_source.get_lines(section)))
    for code in codes:
        if code.name in names:
            code.default_active = True
    return codes
