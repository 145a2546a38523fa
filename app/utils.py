# -*- coding: utf-8 -*-
# Time       : 2023/8/19 17:19
# Author     : QIN2DIM
# GitHub     : https://github.com/QIN2DIM
# Description:
from __future__ import annotations

import os
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

from loguru import logger

STDOUT_FORMAT = (
    "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
    "<lvl>{level:<8}</lvl>    | "
    "<c>{name}</c>:<c>{function}</c>:<c>{line}</c> | "
    "<y>{extra[chat_id]}</y> | "
    "<n>{message}</n>"
)

PERSISTENT_FORMAT = (
    "<g>{time:YYYY-MM-DD HH:mm:ss}</g> | "
    "<lvl>{level}</lvl>    | "
    "<c><u>{name}</u></c>:{function}:{line} | "
    "{message} - "
    "{extra}"
)


def _timezone_filter(tz: ZoneInfo):
    def _filter(record):
        record["time"] = record["time"].astimezone(tz)
        return record

    return _filter


def init_log(log_dir: Path | None = None, *, level: str | None = None, serialize: bool = True):
    """
    Configure loguru sinks

    stdout at LOG_LEVEL (default DEBUG); with ``log_dir``: error.log, runtime.log
    and, unless disabled, serialize.log as JSON lines. Timestamps use LOG_TIMEZONE.
    Records carry the ``chat_id`` bound by the message handlers, "-" otherwise.
    """
    log_level = (level or os.getenv("LOG_LEVEL", "DEBUG")).upper()
    tz_filter = _timezone_filter(ZoneInfo(os.getenv("LOG_TIMEZONE", "UTC")))

    logger.remove()
    logger.configure(extra={"chat_id": "-"})
    logger.add(
        sink=sys.stdout,
        colorize=True,
        level=log_level,
        format=STDOUT_FORMAT,
        diagnose=False,
        filter=tz_filter,
    )

    if log_dir is None:
        return logger

    rotating = {"rotation": "5 MB", "retention": "7 days", "encoding": "utf8", "diagnose": False}
    logger.add(sink=log_dir.joinpath("error.log"), level="ERROR", filter=tz_filter, **rotating)
    logger.add(sink=log_dir.joinpath("runtime.log"), level="TRACE", filter=tz_filter, **rotating)

    if serialize:
        logger.add(
            sink=log_dir.joinpath("serialize.log"),
            level="DEBUG",
            format=PERSISTENT_FORMAT,
            encoding="utf8",
            diagnose=False,
            serialize=True,
            filter=tz_filter,
        )
    return logger
