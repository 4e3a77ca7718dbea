from __future__ import annotations

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..modules.text.domain.models import DetectionThresholds
from ..modules.text.infrastructure.llm_gemini import DEFAULT_API_URL


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    telegram_bot_token: str = Field(..., alias="TELEGRAM_BOT_TOKEN")

    gemini_api_key: SecretStr = Field(..., alias="GEMINI_API_KEY")
    gemini_api_url: str = Field(DEFAULT_API_URL, alias="GEMINI_API_URL")
    gemini_timeout_seconds: float = Field(30.0, gt=0, alias="GEMINI_TIMEOUT_SECONDS")

    debounce_seconds: float = Field(0.5, ge=0, alias="DEBOUNCE_SECONDS")

    translation_source_ratio: float = Field(0.3, ge=0, le=1, alias="TRANSLATION_SOURCE_NON_LATIN_RATIO")
    translation_target_ratio: float = Field(0.1, ge=0, le=1, alias="TRANSLATION_TARGET_NON_LATIN_RATIO")
    translation_length_ratio: float = Field(0.4, ge=0, alias="TRANSLATION_LENGTH_DELTA_RATIO")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", alias="LOG_LEVEL")

    @property
    def detection_thresholds(self) -> DetectionThresholds:
        return DetectionThresholds(
            source_non_latin_ratio=self.translation_source_ratio,
            target_non_latin_ratio=self.translation_target_ratio,
            length_delta_ratio=self.translation_length_ratio,
        )
