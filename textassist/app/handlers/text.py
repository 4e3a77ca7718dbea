from __future__ import annotations

import logging

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup, Message
from aiogram.utils.chat_action import ChatActionSender
from aiogram.utils.formatting import Text

from ...modules.text.domain.models import CorrectionResult, Fragment
from ...modules.text.pipeline.rendering import as_telegram_text, render_fragments
from ...modules.text.services.correction import FAILURE_NOTICE
from ...modules.text.services.sessions import ChatSession, SessionRegistry

logger = logging.getLogger(__name__)

COPY_CALLBACK = "copy"
EMPTY_REPLY = "Nothing came back for this text."


def copy_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[InlineKeyboardButton(text="📋 Copy", callback_data=COPY_CALLBACK)]]
    )


def build_reply(result: CorrectionResult) -> tuple[Text, list[Fragment]]:
    fragments = render_fragments(result.corrected_text, result.untranslatable_words)
    return as_telegram_text(result, fragments), fragments


async def send_correction(message: Message, session: ChatSession, result: CorrectionResult) -> None:
    if not result.corrected_text:
        if message.text and message.text.strip():
            await message.reply(EMPTY_REPLY)
        return

    reply_text, fragments = build_reply(result)
    try:
        reply = await message.reply(**reply_text.as_kwargs(), reply_markup=copy_keyboard())
    except TelegramBadRequest:
        logger.exception("Failed to send corrected text")
        await message.reply(FAILURE_NOTICE)
        return
    session.remember(reply.message_id, fragments)


def create_text_router(sessions: SessionRegistry) -> Router:
    router = Router(name="text_handler")

    async def handle_change(message: Message, bot: Bot) -> None:
        assert message.text is not None
        session = sessions.get(message.chat.id)
        async with ChatActionSender.typing(bot=bot, chat_id=message.chat.id):
            result = await session.corrector.schedule(message.text)

        # superseded by a newer edit or message
        if result is None:
            return
        await send_correction(message, session, result)

    router.message(F.text & ~F.via_bot & ~F.text.startswith("/"))(handle_change)
    router.edited_message(F.text & ~F.via_bot & ~F.text.startswith("/"))(handle_change)
    return router
