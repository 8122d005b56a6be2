from unittest.mock import MagicMock

import pytest

from subverify.rules.evaluator import RuleEvaluator
from subverify.rules.models import MatchMode


def _evaluator(mode: MatchMode, **kwargs: object) -> RuleEvaluator:
    params: dict[str, object] = {"channel_name": "Foo Channel", "keywords": "subscribed"}
    params.update(kwargs)
    return RuleEvaluator(mode=mode, **params)  # type: ignore[arg-type]


class TestExactMode:
    def test_channel_and_keyword_verifies(self) -> None:
        assert _evaluator(MatchMode.EXACT).evaluate("I AM SUBSCRIBED TO FOO CHANNEL")

    def test_keyword_alone_fails(self) -> None:
        assert not _evaluator(MatchMode.EXACT).evaluate("SUBSCRIBED")

    def test_channel_alone_fails(self) -> None:
        assert not _evaluator(MatchMode.EXACT).evaluate("FOO CHANNEL")


class TestLenientMode:
    def test_channel_alone_verifies(self) -> None:
        assert _evaluator(MatchMode.LENIENT).evaluate("FOO CHANNEL")

    def test_keyword_alone_verifies(self) -> None:
        assert _evaluator(MatchMode.LENIENT).evaluate("SUBSCRIBED")

    def test_neither_fails(self) -> None:
        assert not _evaluator(MatchMode.LENIENT).evaluate("BAR CHANNEL SUBSCRIBE")


class TestChannelTokens:
    def test_matches_channel_id(self) -> None:
        evaluator = _evaluator(MatchMode.LENIENT, channel_name="", channel_id="UCabc123")
        assert evaluator.is_own_channel("CHANNEL UCABC123 VIDEOS")

    def test_no_tokens_is_false(self) -> None:
        evaluator = _evaluator(MatchMode.LENIENT, channel_name="", channel_id="")
        assert not evaluator.is_own_channel("FOO CHANNEL")

    def test_accepts_raw_text(self) -> None:
        assert _evaluator(MatchMode.EXACT).evaluate("i am  subscribed to\nfoo channel")


class TestSubscribeWord:
    def test_any_keyword_matches(self) -> None:
        evaluator = _evaluator(MatchMode.LENIENT, channel_name="", keywords="joined, abonné")
        assert evaluator.has_subscribe_word("ABONNÉ")

    def test_blank_keyword_tokens_never_match(self) -> None:
        evaluator = _evaluator(MatchMode.LENIENT, channel_name="", keywords=" , ,")
        assert not evaluator.has_subscribe_word("ANYTHING AT ALL")

    def test_literal_mode_ignores_keywords(self) -> None:
        evaluator = _evaluator(
            MatchMode.LENIENT, keywords="joined", require_literal_subscribed=True
        )
        assert not evaluator.has_subscribe_word("JOINED")
        assert evaluator.has_subscribe_word("SUBSCRIBED")


class TestFromSettings:
    @pytest.mark.parametrize("mode", ["exact", "lenient"])
    def test_reads_mode(self, mode: str) -> None:
        settings = MagicMock(
            channel_name="Foo Channel",
            channel_id="",
            keywords="subscribed",
            verification_mode=mode,
            require_literal_subscribed=False,
        )
        evaluator = RuleEvaluator.from_settings(settings)
        assert evaluator.mode is MatchMode(mode)
