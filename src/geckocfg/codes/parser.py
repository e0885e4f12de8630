"""Parser for the Gecko code section of an INI file.

The section is a flat list of lines. Each line is classified by its first
character:

    $Name [Creator]      starts a new entry
    *text                note for the current entry
    AAAAAAAA VVVVVVVV    patch line for the current entry

Parsing is permissive: a malformed patch line is kept with zeroed fields and
never stops the rest of the section from being read.
"""

import logging
import re
from enum import Enum
from typing import Iterable

from ..storage import LineStore
from .models import CODES_SECTION, GeckoCode, Patch

logger = logging.getLogger(__name__)

_HEX_TOKEN = re.compile(r"(?:0[xX])?[0-9A-Fa-f]+")


class LineKind(Enum):
    """Kind of a line in the code section."""

    BLANK = "blank"
    HEADER = "header"
    NOTE = "note"
    PATCH = "patch"


def classify_line(line: str) -> LineKind:
    """Classify a line by its first character."""
    if not line:
        return LineKind.BLANK
    if line[0] == "$":
        return LineKind.HEADER
    if line[0] == "*":
        return LineKind.NOTE
    return LineKind.PATCH


def parse_header(line: str) -> tuple[str, str]:
    """Split a ``$Name [Creator]`` line into (name, creator).

    The creator runs from the first ``[`` up to the next ``]``, or to the end
    of the line if the bracket is never closed.
    """
    name, bracket, rest = line[1:].partition("[")
    creator = rest.partition("]")[0] if bracket else ""
    return name.strip(), creator


def parse_patch(line: str) -> Patch:
    """Decode an ``ADDRESS VALUE`` line.

    Fields are read left to right; the first token that is missing or not
    hexadecimal leaves it and every later field at 0.
    """
    fields = [0, 0]
    tokens = line.split()
    for i in range(len(fields)):
        if i >= len(tokens) or not _HEX_TOKEN.fullmatch(tokens[i]):
            logger.debug("Malformed code line: %r", line)
            break
        fields[i] = int(tokens[i], 16)

    return Patch(address=fields[0], value=fields[1], original_text=line)


def parse_codes(lines: Iterable[str], is_local: bool = False) -> list[GeckoCode]:
    """Parse code section lines into entries.

    Args:
        lines: Raw lines of the code section.
        is_local: Whether the lines come from the user INI.

    Returns:
        Entries in file order. Duplicate names are kept; entries without a
        name (including patches that precede any header) are dropped.
    """
    codes: list[GeckoCode] = []
    current = GeckoCode(is_local=is_local)

    for line in lines:
        kind = classify_line(line)

        if kind is LineKind.BLANK:
            continue

        if kind is LineKind.HEADER:
            if current.name:
                codes.append(current)
            name, creator = parse_header(line)
            current = GeckoCode(name=name, creator=creator, is_local=is_local)
        elif kind is LineKind.NOTE:
            current.notes.append(line[1:])
        else:
            current.codes.append(parse_patch(line))

    # The last entry has no following header to close it
    if current.name:
        codes.append(current)

    return codes


def read_codes(
    store: LineStore,
    is_local: bool = False,
    section: str = CODES_SECTION,
) -> list[GeckoCode]:
    """Parse the code section of a store."""
    return parse_codes(store.get_lines(section), is_local=is_local)
