"""Line-oriented INI file store.

Sections are kept as raw line lists rather than key/value pairs, so code
lines, notes and markers survive a load/save cycle untouched.
"""

import logging
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)

# Lines that appear before the first section header.
PREAMBLE = ""


class IniFileError(Exception):
    """Raised when an INI file cannot be read or written."""

    pass


def _section_name(line: str) -> str | None:
    """Return the section name if the line is a ``[header]``, else None."""
    stripped = line.strip()
    if not stripped.startswith("["):
        return None
    end = stripped.find("]")
    if end == -1:
        return None
    return stripped[1:end]


class IniFile:
    """An INI file held in memory as ordered sections of raw lines.

    Example:
        ini = IniFile.load(Path("GALE01.ini"))
        lines = ini.get_lines("Gecko")
        ini.set_lines("Gecko_Enabled", ["$Infinite Lives"])
        ini.save()
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path
        self._sections: dict[str, list[str]] = {}

    @classmethod
    def loads(cls, text: str, path: Path | None = None) -> "IniFile":
        """Build an IniFile from its text content."""
        ini = cls(path)
        current = PREAMBLE
        for raw in text.splitlines():
            name = _section_name(raw)
            if name is not None:
                current = name
                ini._sections.setdefault(current, [])
                continue
            if current == PREAMBLE and not raw.strip() and PREAMBLE not in ini._sections:
                continue
            ini._sections.setdefault(current, []).append(raw)

        for lines in ini._sections.values():
            while lines and not lines[-1].strip():
                lines.pop()

        return ini

    @classmethod
    def load(cls, path: Path) -> "IniFile":
        """Load an INI file from disk.

        A missing file yields an empty IniFile bound to ``path`` so that a
        later ``save()`` creates it.

        Raises:
            IniFileError: If the file exists but cannot be read.
        """
        if not path.exists():
            logger.debug("No INI file at %s, starting empty", path)
            return cls(path)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IniFileError(f"Cannot read INI file {path}: {e}") from e

        return cls.loads(text, path=path)

    def get_lines(self, section: str) -> list[str]:
        """Return a copy of the section's lines (empty if missing)."""
        return list(self._sections.get(section, []))

    def set_lines(self, section: str, lines: Sequence[str]) -> None:
        """Replace a section's lines, appending the section if new."""
        self._sections[section] = list(lines)

    def has_section(self, section: str) -> bool:
        """Check whether the section exists, even if it is empty."""
        return section in self._sections

    def remove_section(self, section: str) -> bool:
        """Remove a section. Returns True if it existed."""
        return self._sections.pop(section, None) is not None

    def sections(self) -> list[str]:
        """Names of all sections in file order, excluding the preamble."""
        return [name for name in self._sections if name != PREAMBLE]

    def dumps(self) -> str:
        """Render the file content."""
        blocks: list[str] = []
        for name, lines in self._sections.items():
            if name == PREAMBLE:
                if lines:
                    blocks.append("\n".join(lines))
                continue
            blocks.append("\n".join([f"[{name}]", *lines]))

        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def save(self, path: Path | None = None) -> None:
        """Write the file to ``path`` or to the path it was loaded from.

        Raises:
            IniFileError: If no path is known or the write fails.
        """
        target = path or self.path
        if target is None:
            raise IniFileError("No path to save INI file to")

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.dumps(), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save INI file to %s: %s", target, e)
            raise IniFileError(f"Cannot write INI file {target}: {e}") from e

        self.path = target
