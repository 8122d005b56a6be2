from dataclasses import dataclass

from subverify.config.settings import Settings
from subverify.verification.models import OutcomeReason, VerificationOutcome

EXAMPLE_SCREENSHOT_URL = "https://i.ibb.co/mVVrXQqH/subscriber.png"
LINK_REQUEST_PHRASES = ("link", "yt link", "chanel link", "channel link")


@dataclass(frozen=True)
class OutcomeMessage:
    """Renderer-neutral content of a reply."""

    title: str
    description: str
    colour: str
    image_url: str | None = None


def _channel_ref(settings: Settings) -> str:
    name = settings.channel_name or settings.channel_id
    if settings.channel_link:
        return f"[{name}]({settings.channel_link})"
    return name


def render_outcome(outcome: VerificationOutcome, settings: Settings) -> OutcomeMessage:
    """Explain a verification outcome to the requester."""
    name = settings.channel_name or settings.channel_id
    reason = outcome.reason
    if reason is OutcomeReason.SUCCESS:
        return OutcomeMessage(
            title="Verification Successful!",
            description=(
                f"Thanks for subscribing to **{name}**.\n\n"
                "You have been given the SUBSCRIBER role. Enjoy your stay!"
            ),
            colour="green",
        )
    if reason is OutcomeReason.ALREADY_VERIFIED:
        return OutcomeMessage(
            title="Already Verified",
            description="You are already verified.",
            colour="green",
        )
    if reason is OutcomeReason.NO_IMAGE:
        return OutcomeMessage(
            title="No Image Provided",
            description="Please provide a valid image (JPG, PNG, WEBP, or GIF).",
            colour="red",
        )
    if reason is OutcomeReason.UNSUPPORTED_FORMAT:
        return OutcomeMessage(
            title="Unsupported File",
            description="Please upload a JPG, PNG, WEBP, or GIF image.",
            colour="red",
        )
    if reason is OutcomeReason.RULE_MISMATCH:
        return OutcomeMessage(
            title="Verification Failed",
            description=(
                f"You haven't subscribed to **{name}** or your screenshot is invalid.\n\n"
                f"Go and subscribe: **{_channel_ref(settings)}**\n\n"
                "Then send a screenshot like the one below."
            ),
            colour="red",
            image_url=EXAMPLE_SCREENSHOT_URL,
        )
    return OutcomeMessage(
        title="Processing Error",
        description="There was an error processing the image. Please try again.",
        colour="red",
    )


def is_link_request(content: str) -> bool:
    """True if a chat message asks for the channel link.

    Called by the platform adapter on every non-bot message and by the
    `link` CLI command.
    """
    lowered = content.lower()
    return any(phrase in lowered for phrase in LINK_REQUEST_PHRASES)


def render_channel_link(settings: Settings) -> OutcomeMessage:
    return OutcomeMessage(
        title="Official YouTube Channel",
        description=(
            f"Subscribe now: **{_channel_ref(settings)}**\n\n"
            "Don't forget to turn on notifications!"
        ),
        colour="blue",
        image_url=EXAMPLE_SCREENSHOT_URL,
    )
