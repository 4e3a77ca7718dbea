from __future__ import annotations

from ..domain.models import CorrectionResult, DetectionThresholds
from .markers import extract_untranslatable


def non_latin_ratio(text: str) -> float:
    if not text:
        return 0.0
    outside = sum(1 for ch in text if ord(ch) > 0x7F)
    return outside / len(text)


def detect_translation(
    original: str,
    corrected: str,
    thresholds: DetectionThresholds | None = None,
) -> bool:
    """Best-effort guess whether the model translated rather than corrected."""
    limits = thresholds or DetectionThresholds()
    if not original:
        return False

    if (
        non_latin_ratio(original) > limits.source_non_latin_ratio
        and non_latin_ratio(corrected) < limits.target_non_latin_ratio
    ):
        return True

    length_delta = abs(len(original) - len(corrected)) / len(original)
    return length_delta > limits.length_delta_ratio


def classify_response(
    original: str,
    raw: str,
    thresholds: DetectionThresholds | None = None,
) -> CorrectionResult:
    display, terms = extract_untranslatable(raw)
    return CorrectionResult(
        corrected_text=display,
        is_translated=detect_translation(original, display, thresholds),
        untranslatable_words=terms,
    )
