"""Tests for writing codes back to INI sections."""

from geckocfg.codes import (
    GeckoCode,
    Patch,
    bootstrap_lines,
    bootstrap_local_config,
    fill_lines,
    parse_codes,
    write_codes,
)


def _local_code() -> GeckoCode:
    return GeckoCode(
        name="Speed Hack",
        creator="Me",
        notes=["Fast.", "*starred"],
        codes=[
            Patch(0x0412ABCD, 0xFFFF, "0412abcd 0000ffff"),
            Patch(0, 0, "garbage line"),
        ],
        is_local=True,
    )


class TestFillLines:
    """Tests for fill_lines."""

    def test_local_code_lines(self):
        code_lines, enabled_lines = fill_lines([_local_code()])

        assert code_lines == [
            "$Speed Hack [Me]",
            "0412abcd 0000ffff",
            "garbage line",
            "*Fast.",
            "**starred",
        ]
        assert enabled_lines == []

    def test_no_creator_no_brackets(self):
        code_lines, _ = fill_lines([GeckoCode(name="Plain", is_local=True)])
        assert code_lines == ["$Plain"]

    def test_global_codes_not_written(self):
        codes = [
            GeckoCode(name="G1", active=True),
            GeckoCode(name="G2"),
            GeckoCode(name="G3", active=True),
        ]
        code_lines, enabled_lines = fill_lines(codes)

        assert code_lines == []
        assert enabled_lines == ["$G1", "$G3"]

    def test_markers_for_local_and_global(self):
        codes = [GeckoCode(name="G", active=True), GeckoCode(name="L", is_local=True, active=True)]
        _, enabled_lines = fill_lines(codes)
        assert enabled_lines == ["$G", "$L"]

    def test_round_trip(self):
        original = _local_code()
        code_lines, _ = fill_lines([original])

        [parsed] = parse_codes(code_lines, is_local=True)

        assert parsed.name == original.name
        assert parsed.creator == original.creator
        assert [p.original_text for p in parsed.codes] == [
            p.original_text for p in original.codes
        ]
        assert parsed.notes == original.notes


class TestWriteCodes:
    """Tests for write_codes."""

    def test_sets_both_sections(self, make_store):
        store = make_store(Gecko=["$Old"], Gecko_Enabled=["$Old"], Other=["keep"])
        write_codes(store, [GeckoCode(name="New", is_local=True, active=True)])

        assert store.sections == {
            "Gecko": ["$New"],
            "Gecko_Enabled": ["$New"],
            "Other": ["keep"],
        }

    def test_custom_sections(self, make_store):
        store = make_store()
        write_codes(store, [], codes_section="AR", enabled_section="AR_Enabled")
        assert store.sections == {"AR": [], "AR_Enabled": []}


class TestBootstrap:
    """Tests for bootstrap_lines and bootstrap_local_config."""

    def test_bootstrap_lines(self):
        codes = [GeckoCode(name="X", default_active=True), GeckoCode(name="Y")]
        assert bootstrap_lines(codes) == ["$X"]

    def test_ignores_active_flag(self):
        codes = [GeckoCode(name="X", active=True)]
        assert bootstrap_lines(codes) == []

    def test_writes_only_marker_section(self, make_store):
        store = make_store(Gecko=["$Mine"])
        codes = [GeckoCode(name="X", default_active=True), GeckoCode(name="Y")]

        lines = bootstrap_local_config(store, codes)

        assert lines == ["$X"]
        assert store.sections == {"Gecko": ["$Mine"], "Gecko_Enabled": ["$X"]}
