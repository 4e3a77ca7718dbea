from __future__ import annotations

from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

START_TEXT = (
    "✍️ Smart Text Assistant\n\n"
    "Type in any language. Text will be corrected and translated to English in real-time.\n\n"
    "Edit your message and I'll follow along: I wait until you stop typing for a moment, "
    "then answer with the latest version only.\n\n"
    "Underlined words are names or terms I couldn't translate confidently. "
    "Tap 📋 Copy to get the clean text."
)

HELP_TEXT = START_TEXT


def create_commands_router() -> Router:
    router = Router(name="commands")

    @router.message(CommandStart())
    async def start(message: Message) -> None:
        await message.answer(START_TEXT)

    @router.message(Command("help"))
    async def help_cmd(message: Message) -> None:
        await message.answer(HELP_TEXT)

    @router.message(F.text.startswith("/"))
    async def unknown_command(message: Message) -> None:
        await message.answer("Unknown command. Send /help to see what I can do.")

    return router
