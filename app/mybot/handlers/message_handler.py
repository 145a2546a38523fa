# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/12 10:00
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : The main message handler: look up the word and reply.
"""
from loguru import logger
from telegram import Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes

from mybot.common import extract_word, get_chat_identity, get_dictionary_service
from mybot.task_manager import non_blocking_handler


async def reply_translation(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.effective_message
    if not message or not message.text:
        return

    word = extract_word(message, context.bot.username)
    if not word:
        return

    chat_id, _, _ = get_chat_identity(update)
    logger.debug(f"Lookup request: word={word!r} chat={chat_id}")

    service = get_dictionary_service(context)
    answer_text = await service.handle_word(word, chat_id)

    await message.reply_text(answer_text, parse_mode=ParseMode.HTML)


@non_blocking_handler("handle_message")
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Orchestrates the bot's response to a new message.
    """
    await reply_translation(update, context)
