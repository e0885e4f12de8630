"""Shared test fixtures."""

from pathlib import Path
from typing import Sequence

import pytest

FIXTURES_DIR = Path(__file__).parent / "codes" / "fixtures"


class FakeStore:
    """In-memory LineStore with no has_section/save support."""

    def __init__(self, sections: dict[str, list[str]] | None = None) -> None:
        self.sections = {name: list(lines) for name, lines in (sections or {}).items()}

    def get_lines(self, section: str) -> list[str]:
        return list(self.sections.get(section, []))

    def set_lines(self, section: str, lines: Sequence[str]) -> None:
        self.sections[section] = list(lines)


@pytest.fixture
def make_store():
    """Factory for in-memory stores: make_store(Gecko=[...], Gecko_Enabled=[...])."""

    def _make(**sections: list[str]) -> FakeStore:
        return FakeStore(sections)

    return _make


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
