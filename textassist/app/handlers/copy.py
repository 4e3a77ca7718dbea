from __future__ import annotations

from aiogram import Bot, F, Router
from aiogram.types import CallbackQuery

from ...modules.text.infrastructure.telegram import ChatClipboard
from ...modules.text.services.clipboard import copy_plain_text
from ...modules.text.services.sessions import SessionRegistry
from .text import COPY_CALLBACK


def create_copy_router(sessions: SessionRegistry) -> Router:
    router = Router(name="copy_handler")

    @router.callback_query(F.data == COPY_CALLBACK)
    async def copy_output(callback: CallbackQuery, bot: Bot) -> None:
        message = callback.message
        if message is None:
            await callback.answer("Nothing to copy")
            return

        session = sessions.peek(message.chat.id)
        fragments = session.recall(message.message_id) if session else None
        if not fragments:
            await callback.answer("Nothing to copy")
            return

        copied = await copy_plain_text(fragments, ChatClipboard(bot, message.chat.id))
        await callback.answer("Copied" if copied else "Copy failed")

    return router
