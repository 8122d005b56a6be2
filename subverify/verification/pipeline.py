from abc import ABC, abstractmethod
from dataclasses import dataclass

from subverify.verification.models import VerificationRequest


@dataclass(slots=True)
class PipelineContext:
    request: VerificationRequest
    raw_bytes: bytes = b""
    prepared_bytes: bytes = b""
    extracted_text: str = ""
    normalized_text: str = ""
    verified: bool = False


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
