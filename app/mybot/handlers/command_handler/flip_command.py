# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/12 01:26
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : /flip 命令：反转聊天的翻译方向
"""
from loguru import logger
from telegram import Update
from telegram.ext import ContextTypes

from mybot.common import get_chat_identity, get_dictionary_service, should_ignore_command_in_group


async def flip_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Swap source and target language of the chat, e.g. pten -> enpt"""
    if should_ignore_command_in_group(update, context):
        return

    chat_id, user_id, username = get_chat_identity(update)
    service = get_dictionary_service(context)

    result = service.toggle_direction(chat_id, user_id=user_id, username=username)
    logger.debug(f"{result=}")

    await update.message.reply_html(
        f"Translation direction: <b>{result.previous}</b> ➜ <b>{result.current}</b>"
    )


async def direction_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show the current translation direction of the chat"""
    if should_ignore_command_in_group(update, context):
        return

    chat_id, _, _ = get_chat_identity(update)
    direction = get_dictionary_service(context).resolve_direction(chat_id)

    await update.message.reply_html(
        f"Translation direction: <b>{direction}</b> "
        f"({direction.source} ➜ {direction.target})\nUse /flip to swap it."
    )
