from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx
from aiogram import Bot, Dispatcher

from .config import AppConfig
from .handlers.commands import create_commands_router
from .handlers.copy import create_copy_router
from .handlers.text import create_text_router
from .handlers.unsupported import create_unsupported_router
from ..modules.text.infrastructure.llm_gemini import GeminiTextCorrector
from ..modules.text.infrastructure.telegram import ChatNotifier
from ..modules.text.services.correction import TextCorrectionService
from ..modules.text.services.sessions import SessionRegistry

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    config: AppConfig
    http_client: httpx.AsyncClient
    text_service: TextCorrectionService
    sessions: SessionRegistry | None = None

    @classmethod
    def build(cls, config: AppConfig) -> "AppContainer":
        http_client = httpx.AsyncClient(timeout=config.gemini_timeout_seconds)
        llm = GeminiTextCorrector(
            http_client,
            api_key=config.gemini_api_key.get_secret_value(),
            api_url=config.gemini_api_url,
        )
        text_service = TextCorrectionService(llm, thresholds=config.detection_thresholds)
        return cls(config=config, http_client=http_client, text_service=text_service)

    def create_dispatcher(self, bot: Bot) -> Dispatcher:
        self.sessions = SessionRegistry(
            self.text_service,
            delay=self.config.debounce_seconds,
            notifier_factory=lambda chat_id: ChatNotifier(bot, chat_id),
        )
        dispatcher = Dispatcher()
        dispatcher.include_router(create_commands_router())
        dispatcher.include_router(create_copy_router(self.sessions))
        dispatcher.include_router(create_text_router(self.sessions))
        dispatcher.include_router(create_unsupported_router())
        dispatcher.shutdown.register(self.on_shutdown)
        return dispatcher

    async def on_shutdown(self, bot: Bot) -> None:
        if self.sessions:
            logger.info("Closing %s chat session(s)", len(self.sessions))
            await self.sessions.close()
        await self.http_client.aclose()
