from subverify.config.settings import Settings
from subverify.rules.models import MatchMode
from subverify.text.normalizer import normalize

SUBSCRIBED_LITERAL = "SUBSCRIBED"


class RuleEvaluator:
    """Decides whether screenshot text proves a subscription.

    Matching is plain substring search over normalized text: the channel
    check looks for the channel name or id, the subscribe-word check looks
    for any configured keyword (or the literal SUBSCRIBED in strict mode).
    """

    def __init__(
        self,
        *,
        channel_name: str = "",
        channel_id: str = "",
        keywords: str = "",
        mode: MatchMode = MatchMode.LENIENT,
        require_literal_subscribed: bool = False,
    ) -> None:
        self._channel_tokens = [
            token for token in (normalize(channel_name), normalize(channel_id)) if token
        ]
        self._keywords = [
            token for token in (normalize(k) for k in keywords.split(",")) if token
        ]
        self._mode = mode
        self._require_literal = require_literal_subscribed

    @classmethod
    def from_settings(cls, settings: Settings) -> "RuleEvaluator":
        return cls(
            channel_name=settings.channel_name,
            channel_id=settings.channel_id,
            keywords=settings.keywords,
            mode=MatchMode(settings.verification_mode),
            require_literal_subscribed=settings.require_literal_subscribed,
        )

    @property
    def mode(self) -> MatchMode:
        return self._mode

    def is_own_channel(self, text: str) -> bool:
        norm_text = normalize(text)
        return any(token in norm_text for token in self._channel_tokens)

    def has_subscribe_word(self, text: str) -> bool:
        norm_text = normalize(text)
        if self._require_literal:
            return SUBSCRIBED_LITERAL in norm_text
        return any(keyword in norm_text for keyword in self._keywords)

    def evaluate(self, text: str) -> bool:
        """Return True when the text satisfies the configured mode."""
        if self._mode is MatchMode.EXACT:
            return self.is_own_channel(text) and self.has_subscribe_word(text)
        return self.is_own_channel(text) or self.has_subscribe_word(text)
