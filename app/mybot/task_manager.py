# -*- coding: utf-8 -*-
"""
Background execution of bot handlers

Every lookup runs as its own asyncio task so a slow WordReference request
never holds up other chats. Tasks are tracked until they finish, which lets
shutdown wait for in-flight replies.
"""
import asyncio
import functools
from contextlib import suppress
from typing import Callable, Set

from loguru import logger
from telegram import Update

_active_tasks: Set[asyncio.Task] = set()

ERROR_REPLY_TEXT = "❌ Something went wrong while handling your request, please try again later."


def get_active_tasks_count() -> int:
    return len(_active_tasks)


def _forget_task(task: asyncio.Task) -> None:
    _active_tasks.discard(task)


def _chat_label(update: Update | None) -> str:
    if update and update.effective_chat:
        return str(update.effective_chat.id)
    return "-"


def non_blocking_handler(handler_name: str = "unknown"):
    """
    Run the decorated handler as a background task and return the task

    Usage:
        @non_blocking_handler("handle_message")
        async def handle_message(update, context):
            ...
    """

    def decorator(handler_func: Callable):
        @functools.wraps(handler_func)
        async def wrapper(update, context):
            chat_label = _chat_label(update)
            task = asyncio.create_task(
                _execute_handler_task(handler_func, update, context, handler_name),
                name=f"{handler_name}:{chat_label}",
            )
            # Strong reference until done, the loop only keeps weak ones
            _active_tasks.add(task)
            task.add_done_callback(_forget_task)

            logger.debug(f"Started {task.get_name()} (Active tasks: {len(_active_tasks)})")
            return task

        return wrapper

    return decorator


async def _execute_handler_task(handler_func: Callable, update, context, handler_name: str):
    with logger.contextualize(chat_id=_chat_label(update)):
        try:
            await handler_func(update, context)
            logger.debug(f"Completed {handler_name} task")
        except Exception as e:
            logger.exception(f"Error in {handler_name} handler: {e}")
            await _reply_error(update, context)


async def _reply_error(update, context) -> None:
    # The failure is already logged, a failed notification is not worth another traceback
    with suppress(Exception):
        if update and update.effective_chat:
            message = update.effective_message
            await context.bot.send_message(
                chat_id=update.effective_chat.id,
                text=ERROR_REPLY_TEXT,
                reply_to_message_id=message.message_id if message else None,
            )


async def wait_for_all_tasks(timeout: float = 30.0) -> bool:
    """
    Wait for in-flight handlers, used on shutdown

    Returns:
        True if all tasks completed, False if timeout occurred
    """
    if not _active_tasks:
        return True

    pending = list(_active_tasks)
    logger.info(f"Waiting for {len(pending)} active tasks to complete...")

    done, still_running = await asyncio.wait(pending, timeout=timeout)
    if still_running:
        logger.warning(
            f"Timeout waiting for tasks to complete, {len(still_running)} tasks still running"
        )
        return False

    logger.info(f"All {len(done)} tasks completed")
    return True
