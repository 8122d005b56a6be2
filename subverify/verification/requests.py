"""Builders that turn platform events into a VerificationRequest.

The chat-platform adapter calls `request_from_command` for /verify and
`request_from_message` for plain uploads; the CLI only uses the former.
"""

from subverify.imaging.preprocessor import ALLOWED_EXTENSIONS, resolve_extension
from subverify.verification.models import Attachment, Requester, VerificationRequest


def request_from_command(
    requester: Requester, attachment: Attachment | None
) -> VerificationRequest:
    """Request from a /verify command with an optional image option."""
    if attachment is None or not attachment.url:
        return VerificationRequest(requester=requester)
    return VerificationRequest(
        requester=requester,
        image_url=attachment.url,
        image_name=attachment.filename,
    )


def request_from_message(
    requester: Requester, attachments: list[Attachment]
) -> VerificationRequest:
    """Request from a plain message carrying uploaded files.

    Prefers the first attachment with an allowed image extension; falls back
    to the first attachment so the pipeline can report the bad format.
    """
    usable = [a for a in attachments if a.url]
    if not usable:
        return VerificationRequest(requester=requester)
    chosen = next(
        (a for a in usable if resolve_extension(a.url, a.filename) in ALLOWED_EXTENSIONS),
        usable[0],
    )
    return request_from_command(requester, chosen)
