from subverify.imaging.preprocessor import ImagePreprocessor
from subverify.logging.logger import Log
from subverify.ocr.base import BaseOcrEngine
from subverify.rules.evaluator import RuleEvaluator
from subverify.text.normalizer import normalize
from subverify.verification.pipeline import PipelineContext, PipelineStep


class FetchImageStep(PipelineStep):
    def __init__(self, preprocessor: ImagePreprocessor) -> None:
        self._preprocessor = preprocessor

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.request.image_url:
            raise ValueError("VerificationRequest.image_url must be set before fetching")
        context.raw_bytes = self._preprocessor.fetch(context.request.image_url)
        Log.info(
            f"Fetched {len(context.raw_bytes)} bytes for {context.request.requester.id}"
        )
        return context


class PreprocessImageStep(PipelineStep):
    def __init__(self, preprocessor: ImagePreprocessor) -> None:
        self._preprocessor = preprocessor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.prepared_bytes = self._preprocessor.resize(context.raw_bytes)
        return context


class RecognizeTextStep(PipelineStep):
    def __init__(self, ocr_engine: BaseOcrEngine) -> None:
        self._ocr_engine = ocr_engine

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._ocr_engine.extract_text(context.prepared_bytes)
        Log.debug(f"Extracted text: {context.extracted_text}")
        return context


class NormalizeTextStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.normalized_text = normalize(context.extracted_text)
        return context


class EvaluateRulesStep(PipelineStep):
    def __init__(self, evaluator: RuleEvaluator) -> None:
        self._evaluator = evaluator

    def run(self, context: PipelineContext) -> PipelineContext:
        context.verified = self._evaluator.evaluate(context.normalized_text)
        Log.info(
            f"Rules evaluated for {context.request.requester.id} "
            f"({self._evaluator.mode.value}): verified={context.verified}"
        )
        return context
