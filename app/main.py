# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/7 05:40
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
import json
from urllib.parse import urlparse

from loguru import logger
from telegram import Update, BotCommand
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from dictionary.crud import ChatConfigStore, TranslationCache
from dictionary.database import create_db_engine, create_session_factory, init_database
from dictionary.node import DictionaryService
from mybot.common import DICTIONARY_SERVICE_KEY
from mybot.handlers import (
    start_command,
    help_command,
    flip_command,
    direction_command,
    handle_message,
)
from mybot.task_manager import wait_for_all_tasks
from settings import settings, LOG_DIR
from utils import init_log
from wordreference import WordReferenceClient

init_log(LOG_DIR)


def build_dictionary_service() -> DictionaryService:
    engine = create_db_engine(settings.DATABASE_URL)
    init_database(engine)

    session_factory = create_session_factory(engine)
    return DictionaryService(
        cache=TranslationCache(session_factory),
        chat_configs=ChatConfigStore(session_factory),
        fetcher=WordReferenceClient(),
        default_direction=settings.DEFAULT_TRANSLATION_DIRECTION,
        no_translation_text=settings.NO_TRANSLATION_TEXT,
    )


async def setup_bot_commands(application: Application):
    """设置机器人的命令菜单"""
    commands = [
        BotCommand("flip", "Swap the translation direction"),
        BotCommand("direction", "Show the translation direction"),
        BotCommand("help", "Usage"),
    ]

    try:
        await application.bot.set_my_commands(commands)
        logger.success(f"已设置机器人命令菜单: {[f'/{cmd.command}' for cmd in commands]}")
    except Exception as e:
        logger.error(f"设置机器人命令菜单失败: {e}")


async def shutdown_dictionary_service(application: Application):
    await wait_for_all_tasks()

    service: DictionaryService = application.bot_data.get(DICTIONARY_SERVICE_KEY)
    if service and isinstance(service.fetcher, WordReferenceClient):
        await service.fetcher.aclose()


def main() -> None:
    """Start the bot."""
    sp = settings.model_dump(mode='json')

    s = json.dumps(sp, indent=2, ensure_ascii=False)
    logger.success(f"Loading settings: {s}")

    # Create the Application and pass it your bot's token.
    application = settings.get_default_application()
    application.bot_data[DICTIONARY_SERVICE_KEY] = build_dictionary_service()

    application.post_init = setup_bot_commands
    application.post_shutdown = shutdown_dictionary_service

    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    application.add_handler(CommandHandler("flip", flip_command))
    application.add_handler(CommandHandler("direction", direction_command))

    # on non command i.e message - look up the word
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    if settings.WEBHOOK_ADDRESS:
        logger.info(f"Running with webhook: {settings.WEBHOOK_ADDRESS}")
        application.run_webhook(
            listen=settings.WEBHOOK_LISTEN,
            port=settings.WEBHOOK_PORT,
            url_path=urlparse(settings.WEBHOOK_ADDRESS).path.lstrip("/"),
            webhook_url=settings.WEBHOOK_ADDRESS,
            allowed_updates=Update.ALL_TYPES,
        )
    else:
        # Run the bot until the user presses Ctrl-C
        application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
