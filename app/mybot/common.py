# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/9 00:44
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""
from typing import Optional, Tuple

from telegram import Message, Update
from telegram.constants import ChatType
from telegram.ext import ContextTypes

from dictionary.node import DictionaryService

DICTIONARY_SERVICE_KEY = "dictionary_service"


def should_ignore_command_in_group(update, context) -> bool:
    """
    Check if a command should be ignored in group chats.
    Returns True if the command should be ignored (not processed).

    In groups, only respond to commands with bot mention (/command@botname).
    In private chats, respond to all commands.
    """
    # Only check for group chats
    if not update.message or update.message.chat.type == ChatType.PRIVATE:
        return False

    # In groups, check if command contains bot mention
    bot_username = context.bot.username
    if bot_username and update.message.text:
        # If command doesn't contain @botname, ignore it
        command_part = update.message.text.split()[0] if update.message.text else ""
        if command_part.startswith("/") and f"@{bot_username}" not in command_part:
            return True

    return False


def get_dictionary_service(context: ContextTypes.DEFAULT_TYPE) -> DictionaryService:
    """The service is created once at startup and shared through bot_data"""
    return context.bot_data[DICTIONARY_SERVICE_KEY]


def get_chat_identity(update: Update) -> Tuple[str, Optional[int], Optional[str]]:
    """
    Returns: (chat_id, user_id, username)

    Groups share one configuration for all members, so user_id and username
    are only filled for private chats.
    """
    chat = update.effective_chat
    chat_id = str(chat.id)

    if chat.type != ChatType.PRIVATE or not update.effective_user:
        return chat_id, None, None

    user = update.effective_user
    return chat_id, user.id, user.username


def extract_word(message: Message, bot_username: str | None) -> str:
    """
    Word to look up in a text message

    Private chats: the whole text. Groups: only messages mentioning the bot,
    with the mention removed. Empty string means the message is not for us.
    """
    text = (message.text or "").strip()
    if not text:
        return ""

    if message.chat.type == ChatType.PRIVATE:
        return text

    mention = f"@{bot_username}" if bot_username else ""
    if not mention or mention not in text:
        return ""

    return text.replace(mention, "").strip()
