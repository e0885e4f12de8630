"""Data models for Gecko code entries."""

from dataclasses import dataclass, field

# Default section names in a game INI file.
CODES_SECTION = "Gecko"
ENABLED_SECTION = "Gecko_Enabled"


@dataclass(frozen=True)
class Patch:
    """One address/value pair of a code.

    Attributes:
        address: Target address decoded from hex.
        value: Value decoded from hex.
        original_text: The source line, written back verbatim on save.
    """

    address: int = 0
    value: int = 0
    original_text: str = ""

    @classmethod
    def from_values(cls, address: int, value: int) -> "Patch":
        """Build a patch for a newly authored code line."""
        return cls(address=address, value=value, original_text=f"{address:08X} {value:08X}")

    def matches(self, address: int, value: int) -> bool:
        return self.address == address and self.value == value


@dataclass
class GeckoCode:
    """A named cheat code entry.

    Attributes:
        name: Entry name, the key used for merging and activation.
        creator: Optional attribution from the ``[Creator]`` part of the header.
        notes: Free-text note lines, in file order.
        codes: Patches, in the order they are applied.
        is_local: True if the entry came from the user INI.
        active: Whether the entry is enabled.
        default_active: Whether the global INI enables it by default.
    """

    name: str = ""
    creator: str = ""
    notes: list[str] = field(default_factory=list)
    codes: list[Patch] = field(default_factory=list)
    is_local: bool = False
    active: bool = False
    default_active: bool = False

    def has_patch(self, address: int, value: int) -> bool:
        """Check if any patch writes ``value`` to ``address``."""
        return any(patch.matches(address, value) for patch in self.codes)

    def same_codes(self, other: "GeckoCode") -> bool:
        """Compare decoded patches with another entry, ignoring their text."""
        if len(self.codes) != len(other.codes):
            return False
        return all(
            mine.matches(theirs.address, theirs.value)
            for mine, theirs in zip(self.codes, other.codes)
        )
