from __future__ import annotations

from aiogram import F, Router
from aiogram.types import Message

UNSUPPORTED_TEXT = "I can only work with text for now :("


def create_unsupported_router() -> Router:
    router = Router(name="unsupported")

    @router.message(~F.via_bot)
    async def handle_unknown(message: Message) -> None:
        if message.text:
            return
        await message.answer(UNSUPPORTED_TEXT)

    return router
