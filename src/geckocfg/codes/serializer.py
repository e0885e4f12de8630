"""Convert codes back into INI section lines."""

from typing import Iterable

from ..storage import LineStore
from .models import CODES_SECTION, ENABLED_SECTION, GeckoCode


def _code_lines(code: GeckoCode) -> list[str]:
    header = "$" + code.name
    if code.creator:
        header += f" [{code.creator}]"

    lines = [header]
    lines.extend(patch.original_text for patch in code.codes)
    lines.extend("*" + note for note in code.notes)
    return lines


def fill_lines(codes: Iterable[GeckoCode]) -> tuple[list[str], list[str]]:
    """Render codes as (code section lines, marker section lines).

    Every active code gets a marker. Only user codes are written to the
    code section; global codes stay in the global INI.
    """
    code_lines: list[str] = []
    enabled_lines: list[str] = []

    for code in codes:
        if code.active:
            enabled_lines.append("$" + code.name)
        if not code.is_local:
            continue
        code_lines.extend(_code_lines(code))

    return code_lines, enabled_lines


def write_codes(
    store: LineStore,
    codes: Iterable[GeckoCode],
    codes_section: str = CODES_SECTION,
    enabled_section: str = ENABLED_SECTION,
) -> None:
    """Write the code and marker sections of a user INI."""
    code_lines, enabled_lines = fill_lines(codes)
    store.set_lines(codes_section, code_lines)
    store.set_lines(enabled_section, enabled_lines)


def bootstrap_lines(global_codes: Iterable[GeckoCode]) -> list[str]:
    """Marker lines for every code the global INI enables by default."""
    return ["$" + code.name for code in global_codes if code.default_active]


def bootstrap_local_config(
    local_store: LineStore,
    global_codes: Iterable[GeckoCode],
    section: str = ENABLED_SECTION,
) -> list[str]:
    """Seed the user INI's marker section from the default-enabled codes.

    Returns:
        The marker lines written.
    """
    lines = bootstrap_lines(global_codes)
    local_store.set_lines(section, lines)
    return lines
