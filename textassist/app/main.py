from __future__ import annotations

import asyncio
import logging

from aiogram import Bot

from .config import AppConfig
from .di import AppContainer


async def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # request URLs carry the API key as a query parameter
    logging.getLogger("httpx").setLevel(logging.WARNING)

    bot = Bot(token=config.telegram_bot_token)
    container = AppContainer.build(config)
    dispatcher = container.create_dispatcher(bot)
    try:
        # Drop pending updates to avoid correcting stale messages after a restart
        await dispatcher.start_polling(
            bot,
            allowed_updates=["message", "edited_message", "callback_query"],
            drop_pending_updates=True,
        )
    finally:
        await bot.session.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
