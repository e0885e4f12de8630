"""Section/line storage contract used by the code configuration core."""

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class LineStore(Protocol):
    """Anything that maps a section name to an ordered list of text lines.

    The core only reads and writes whole sections. A missing section reads
    as an empty list.
    """

    def get_lines(self, section: str) -> list[str]:
        """Return the lines of a section, or an empty list if it is missing."""
        ...

    def set_lines(self, section: str, lines: Sequence[str]) -> None:
        """Replace the lines of a section, creating it if needed."""
        ...
