from collections.abc import Callable
from datetime import datetime, timezone

from subverify.config.settings import Settings
from subverify.entitlement.base import BaseEntitlementGranter
from subverify.entitlement.factory import EntitlementGranterFactory
from subverify.imaging.exceptions import UnsupportedImageFormatError
from subverify.imaging.preprocessor import ImagePreprocessor
from subverify.ledger.base import BaseSubscriberLedger
from subverify.ledger.factory import LedgerFactory
from subverify.ledger.models import SubscriberRecord
from subverify.logging.logger import Log
from subverify.ocr.factory import OcrEngineFactory
from subverify.rules.evaluator import RuleEvaluator
from subverify.verification.models import (
    OutcomeReason,
    VerificationOutcome,
    VerificationRequest,
)
from subverify.verification.pipeline import PipelineContext, PipelineStep
from subverify.verification.steps import (
    EvaluateRulesStep,
    FetchImageStep,
    NormalizeTextStep,
    PreprocessImageStep,
    RecognizeTextStep,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Verifier:
    """Runs one verification request to exactly one outcome.

    Pipeline: ledger guard -> format check -> fetch -> resize -> OCR ->
    normalize -> evaluate -> grant -> append.
    """

    def __init__(
        self,
        *,
        ledger: BaseSubscriberLedger,
        preprocessor: ImagePreprocessor,
        steps: list[PipelineStep],
        granter: BaseEntitlementGranter,
        entitlement_ref: str = "",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ledger = ledger
        self._preprocessor = preprocessor
        self._steps = steps
        self._granter = granter
        self._entitlement_ref = entitlement_ref
        self._clock = clock

    def verify(self, request: VerificationRequest) -> VerificationOutcome:
        """Run the pipeline. Never raises; failures become outcomes."""
        requester_id = request.requester.id
        Log.info(f"Verification requested by {requester_id}")

        try:
            already_verified = self._ledger.exists(requester_id)
        except Exception as exc:
            Log.error(f"Ledger lookup failed for {requester_id}: {exc}")
            return VerificationOutcome(False, OutcomeReason.PROCESSING_ERROR)
        if already_verified:
            Log.info(f"{requester_id} is already verified")
            return VerificationOutcome(True, OutcomeReason.ALREADY_VERIFIED)

        if not request.image_url:
            return VerificationOutcome(False, OutcomeReason.NO_IMAGE)

        try:
            self._preprocessor.check_format(request.image_url, request.image_name)
        except UnsupportedImageFormatError as exc:
            Log.info(f"Rejected attachment from {requester_id}: {exc}")
            return VerificationOutcome(False, OutcomeReason.UNSUPPORTED_FORMAT)

        context = PipelineContext(request=request)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            Log.error(f"Error processing the image for {requester_id}: {exc}")
            return VerificationOutcome(False, OutcomeReason.PROCESSING_ERROR)

        if not context.verified:
            return VerificationOutcome(
                False, OutcomeReason.RULE_MISMATCH, context.normalized_text
            )

        return self._complete(request, context.normalized_text)

    def _complete(
        self, request: VerificationRequest, evidence_text: str
    ) -> VerificationOutcome:
        """Grant the entitlement, then record the subscriber."""
        requester = request.requester
        if self._entitlement_ref:
            if not self._granter.grant(requester.id, self._entitlement_ref):
                Log.warning(f"Continuing without role for {requester.id}")
        else:
            Log.debug("No entitlement configured, grant skipped")

        record = SubscriberRecord(
            id=requester.id,
            username=requester.username,
            verified_at=self._clock(),
            account_created_at=requester.account_created_at,
        )
        try:
            self._ledger.append(record)
        except Exception as exc:
            Log.error(f"Failed to record subscriber {requester.id}: {exc}")
            return VerificationOutcome(False, OutcomeReason.PROCESSING_ERROR, evidence_text)

        Log.info(f"{requester.id} verified successfully")
        return VerificationOutcome(True, OutcomeReason.SUCCESS, evidence_text)


def build_verifier(
    settings: Settings,
    ledger: BaseSubscriberLedger | None = None,
) -> Verifier:
    """Build a Verifier with all required adapters."""
    preprocessor = ImagePreprocessor(
        target_width=settings.image_target_width,
        timeout_seconds=settings.image_fetch_timeout_seconds,
    )
    steps: list[PipelineStep] = [
        FetchImageStep(preprocessor),
        PreprocessImageStep(preprocessor),
        RecognizeTextStep(OcrEngineFactory.create(settings)),
        NormalizeTextStep(),
        EvaluateRulesStep(RuleEvaluator.from_settings(settings)),
    ]
    return Verifier(
        ledger=ledger if ledger is not None else LedgerFactory.create(settings),
        preprocessor=preprocessor,
        steps=steps,
        granter=EntitlementGranterFactory.create(settings),
        entitlement_ref=settings.role_id,
    )
