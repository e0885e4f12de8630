"""Tests for applying activation marker sections."""

from geckocfg.codes import GeckoCode, enabled_names, mark_default_enabled, mark_enabled


def _codes(*names: str) -> list[GeckoCode]:
    return [GeckoCode(name=name) for name in names]


class TestEnabledNames:
    """Tests for enabled_names."""

    def test_only_dollar_lines(self):
        lines = ["$A", "", "B", "# comment", "$C"]
        assert enabled_names(lines) == ["A", "C"]

    def test_name_not_stripped(self):
        assert enabled_names(["$A "]) == ["A "]


class TestMarkEnabled:
    """Tests for mark_enabled."""

    def test_marks_matching_code(self, make_store):
        codes = _codes("X", "Y")
        mark_enabled(make_store(Gecko_Enabled=["$X"]), codes)

        assert codes[0].active is True
        assert codes[1].active is False
        assert all(c.default_active is False for c in codes)

    def test_exact_case_sensitive_match(self, make_store):
        codes = _codes("Moon Jump", "moon jump", "Moon")
        mark_enabled(make_store(Gecko_Enabled=["$Moon Jump"]), codes)

        assert [c.active for c in codes] == [True, False, False]

    def test_duplicates_all_marked(self, make_store):
        codes = _codes("Dup", "Dup")
        mark_enabled(make_store(Gecko_Enabled=["$Dup"]), codes)
        assert all(c.active for c in codes)

    def test_missing_section(self, make_store):
        codes = _codes("X")
        mark_enabled(make_store(), codes)
        assert codes[0].active is False

    def test_returns_same_list(self, make_store):
        codes = _codes("X")
        assert mark_enabled(make_store(), codes) is codes

    def test_never_clears_flags(self, make_store):
        codes = _codes("X")
        codes[0].active = True
        mark_enabled(make_store(Gecko_Enabled=[]), codes)
        assert codes[0].active is True

    def test_custom_section(self, make_store):
        codes = _codes("X")
        mark_enabled(make_store(AR_Enabled=["$X"]), codes, section="AR_Enabled")
        assert codes[0].active is True


class TestMarkDefaultEnabled:
    """Tests for mark_default_enabled."""

    def test_sets_default_flag_only(self, make_store):
        codes = _codes("X", "Y")
        mark_default_enabled(make_store(Gecko_Enabled=["$Y", "junk"]), codes)

        assert [c.default_active for c in codes] == [False, True]
        assert all(c.active is False for c in codes)

    def test_does_not_write_source(self, make_store):
        store = make_store(Gecko_Enabled=["$X"])
        mark_default_enabled(store, _codes("X"))
        assert store.sections == {"Gecko_Enabled": ["$X"]}
