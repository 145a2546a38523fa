# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 21:00
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : WordReference 词典查询：翻译方向、词条缓存与聊天配置
"""
from .directions import Direction, DEFAULT_DIRECTION, is_valid_direction, reverse, header_label
from .errors import (
    DictionaryError,
    InvalidDirection,
    FetchFailure,
    CacheError,
    ChatConfigError,
    NotFound,
    DuplicateKey,
)

__all__ = [
    "Direction",
    "DEFAULT_DIRECTION",
    "is_valid_direction",
    "reverse",
    "header_label",
    "DictionaryError",
    "InvalidDirection",
    "FetchFailure",
    "CacheError",
    "ChatConfigError",
    "NotFound",
    "DuplicateKey",
]
