"""GeckoCodeManager: load, edit and save the codes of one game.

The manager ties the parser, merge, activation and serializer steps into
the cycle a frontend runs:

    manager = GeckoCodeManager(IniFile.load(global_path), IniFile.load(user_path))
    manager.load()
    manager.enable("Infinite Lives")
    manager.save()
"""

import logging

from ..storage import LineStore
from .activation import mark_default_enabled, mark_enabled
from .merge import merge_sources
from .models import CODES_SECTION, ENABLED_SECTION, GeckoCode
from .serializer import bootstrap_local_config, write_codes

logger = logging.getLogger(__name__)


class GeckoCodeManager:
    """Working set of codes merged from a global and a user store.

    Global codes are read-only: they can be enabled and disabled, but only
    user codes can be added or removed, and only the user store is written.
    """

    def __init__(
        self,
        global_store: LineStore,
        local_store: LineStore,
        *,
        codes_section: str = CODES_SECTION,
        enabled_section: str = ENABLED_SECTION,
        bootstrap: bool = True,
    ) -> None:
        """Initialize the manager.

        Args:
            global_store: Shared INI, never written.
            local_store: User INI, receives all edits on save().
            codes_section: Section holding code entries.
            enabled_section: Section holding activation markers.
            bootstrap: Seed missing user markers from global defaults in load().
        """
        self.global_store = global_store
        self.local_store = local_store
        self.codes_section = codes_section
        self.enabled_section = enabled_section
        self.auto_bootstrap = bootstrap
        self._codes: list[GeckoCode] = []
        self.last_discarded: list[GeckoCode] = []

    def _has_markers(self) -> bool:
        """Whether the user store already has a marker section."""
        has_section = getattr(self.local_store, "has_section", None)
        if has_section is not None:
            return bool(has_section(self.enabled_section))
        return bool(self.local_store.get_lines(self.enabled_section))

    def load(self) -> list[GeckoCode]:
        """Parse, merge and resolve activation for both stores.

        Replaces the current working set. If the user store has no marker
        section yet, it is seeded from the global defaults. Only global
        codes can be enabled by default; a global marker naming a user code
        is ignored.

        Returns:
            The new working set.
        """
        result = merge_sources(self.global_store, self.local_store, section=self.codes_section)
        self._codes = result.codes
        self.last_discarded = result.discarded

        global_codes = [code for code in self._codes if not code.is_local]
        mark_default_enabled(self.global_store, global_codes, section=self.enabled_section)

        if self.auto_bootstrap and not self._has_markers():
            logger.debug("Seeding %s from global defaults", self.enabled_section)
            bootstrap_local_config(self.local_store, self._codes, section=self.enabled_section)

        mark_enabled(self.local_store, self._codes, section=self.enabled_section)
        return self._codes

    def get(self, name: str) -> GeckoCode | None:
        """Get a code by name."""
        for code in self._codes:
            if code.name == name:
                return code
        return None

    def _require(self, name: str) -> GeckoCode:
        code = self.get(name)
        if code is None:
            raise KeyError(name)
        return code

    def list_codes(self, active_only: bool = False) -> list[GeckoCode]:
        """List codes in working-set order."""
        if active_only:
            return [code for code in self._codes if code.active]
        return list(self._codes)

    def enable(self, name: str) -> bool:
        """Enable a code.

        Returns:
            True if the code was disabled before.

        Raises:
            KeyError: If no code has this name.
        """
        code = self._require(name)
        if code.active:
            return False
        code.active = True
        return True

    def disable(self, name: str) -> bool:
        """Disable a code. Returns True if it was enabled before."""
        code = self._require(name)
        if not code.active:
            return False
        code.active = False
        return True

    def add_code(self, code: GeckoCode) -> None:
        """Add a user code to the working set.

        The name and creator must survive a save and reload unchanged, so
        text the header line cannot hold is rejected.

        Raises:
            ValueError: If the name is empty, already used, has surrounding
                whitespace or a ``[``, or the creator has a ``]``.
        """
        if not code.name:
            raise ValueError("Code name cannot be empty")
        if code.name != code.name.strip():
            raise ValueError("Code name cannot start or end with whitespace")
        if "[" in code.name:
            raise ValueError("Code name cannot contain '['")
        if "]" in code.creator:
            raise ValueError("Creator cannot contain ']'")
        if self.get(code.name) is not None:
            raise ValueError(f"Code '{code.name}' already exists")
        code.is_local = True
        self._codes.append(code)

    def remove_code(self, name: str) -> GeckoCode:
        """Remove a user code from the working set.

        Raises:
            KeyError: If no code has this name.
            ValueError: If the code comes from the global INI.
        """
        code = self._require(name)
        if not code.is_local:
            raise ValueError(f"Code '{name}' is defined in the global INI")
        self._codes.remove(code)
        return code

    def bootstrap(self, force: bool = False) -> list[str]:
        """Seed the user marker section from the global default-enabled codes.

        Args:
            force: Overwrite an existing marker section.

        Returns:
            The marker lines written, or an empty list if nothing was written.
        """
        if self._has_markers() and not force:
            logger.warning("%s already exists in the user INI, not bootstrapping", self.enabled_section)
            return []

        lines = bootstrap_local_config(self.local_store, self._codes, section=self.enabled_section)
        for code in self._codes:
            code.active = code.default_active
        return lines

    def save(self) -> None:
        """Write user codes and markers to the user store.

        If the store can persist itself (e.g. IniFile), it is saved too.
        """
        write_codes(
            self.local_store,
            self._codes,
            codes_section=self.codes_section,
            enabled_section=self.enabled_section,
        )
        save = getattr(self.local_store, "save", None)
        if callable(save):
            save()

    @property
    def code_count(self) -> int:
        """Return the number of codes in the working set."""
        return len(self._codes)
