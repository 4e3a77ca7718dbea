from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CorrectionResult:
    corrected_text: str
    is_translated: bool = False
    untranslatable_words: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "CorrectionResult":
        return cls(corrected_text="")

    @classmethod
    def fallback(cls, original: str) -> "CorrectionResult":
        """Result shown when the model could not be reached: the input as typed."""
        return cls(corrected_text=original)


@dataclass(frozen=True)
class Fragment:
    text: str
    flagged: bool = False


@dataclass(frozen=True)
class DetectionThresholds:
    source_non_latin_ratio: float = 0.3
    target_non_latin_ratio: float = 0.1
    length_delta_ratio: float = 0.4


@dataclass(frozen=True)
class GenerationConfig:
    temperature: float = 0.3
    top_p: float = 0.95
    top_k: int = 64

    def to_payload(self) -> dict[str, float | int]:
        return {"temperature": self.temperature, "topP": self.top_p, "topK": self.top_k}
