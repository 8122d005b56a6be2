import pytest

from subverify.text import normalize


class TestNormalize:
    def test_collapses_whitespace_runs(self) -> None:
        assert normalize("foo \t\n  bar") == "FOO BAR"

    def test_trims_edges(self) -> None:
        assert normalize("  subscribed \n") == "SUBSCRIBED"

    def test_upper_cases(self) -> None:
        assert normalize("Foo Channel") == "FOO CHANNEL"

    @pytest.mark.parametrize("glyph", ["’", "‘", "`", "´", "ʼ", "'"])
    def test_unifies_quote_glyphs(self, glyph: str) -> None:
        assert normalize(f"it{glyph}s") == "IT'S"

    def test_upper_casing_cannot_leave_quote_glyphs(self) -> None:
        assert normalize("ŉ") == "'N"

    def test_quote_and_case_insensitive(self) -> None:
        assert normalize("It’s") == normalize("IT'S")

    def test_empty_and_none_yield_empty_string(self) -> None:
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize("   \n\t ") == ""


class TestNormalizeIdempotent:
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "I AM SUBSCRIBED TO FOO CHANNEL",
            "  mixed\tCase ’quotes’ `here`  ",
            "Straße\n\nline two",
            " non-breaking spaces ",
            "ŉ",
            "ŉ it’s",
        ],
    )
    def test_normalize_twice_equals_once(self, raw: str) -> None:
        once = normalize(raw)
        assert normalize(once) == once
