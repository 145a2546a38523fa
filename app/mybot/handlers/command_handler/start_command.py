# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/12 01:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from telegram import Update
from telegram.ext import ContextTypes

from mybot.common import get_chat_identity, get_dictionary_service, should_ignore_command_in_group

START_TPL = """
Hi, I am @{username}, a WordReference dictionary bot.

Send me a word and I will reply with its main translations.
In groups, mention me together with the word, e.g. <code>@{username} casa</code>.

Current direction: <b>{direction}</b>
Use /flip to swap the source and target language.
"""

HELP_TPL = """
<b>Commands</b>
/flip - swap the translation direction of this chat (e.g. pten ⇄ enpt)
/direction - show the translation direction of this chat
/help - show this message

Supported directions: <code>pten</code>, <code>enpt</code>, <code>iten</code>, <code>enit</code>
Current direction: <b>{direction}</b>
"""


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /start is issued."""
    if should_ignore_command_in_group(update, context):
        return

    chat_id, _, _ = get_chat_identity(update)
    direction = get_dictionary_service(context).resolve_direction(chat_id)

    answer_text = START_TPL.format(username=context.bot.username, direction=direction).strip()
    await update.message.reply_html(answer_text)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /help is issued."""
    if should_ignore_command_in_group(update, context):
        return

    chat_id, _, _ = get_chat_identity(update)
    direction = get_dictionary_service(context).resolve_direction(chat_id)

    await update.message.reply_html(HELP_TPL.format(direction=direction).strip())
