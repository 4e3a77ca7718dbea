from __future__ import annotations

import logging

from ..domain.interfaces import Notifier, TextCorrectorLLM
from ..domain.models import CorrectionResult, DetectionThresholds
from ..pipeline.detection import classify_response

logger = logging.getLogger(__name__)

FAILURE_NOTICE = "Failed to process text. Please try again."


class TextCorrectionService:
    def __init__(self, llm: TextCorrectorLLM, *, thresholds: DetectionThresholds | None = None) -> None:
        self._llm = llm
        self._thresholds = thresholds or DetectionThresholds()

    async def process(self, text: str, *, notifier: Notifier | None = None) -> CorrectionResult:
        if not text.strip():
            return CorrectionResult.empty()

        try:
            raw = await self._llm.correct(text)
        except Exception:
            logger.exception("Text correction failed; falling back to the original text")
            await self._notify(notifier, FAILURE_NOTICE)
            return CorrectionResult.fallback(text)

        return classify_response(text, raw, self._thresholds)

    @staticmethod
    async def _notify(notifier: Notifier | None, message: str) -> None:
        if notifier is None:
            return
        try:
            await notifier.notify(message)
        except Exception:
            logger.exception("Failed to deliver failure notice")
