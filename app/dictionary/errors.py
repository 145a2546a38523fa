# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 21:05
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Exceptions raised by the dictionary pipeline
"""


class DictionaryError(Exception):
    """Base class for every error raised by the dictionary pipeline"""


class InvalidDirection(DictionaryError, ValueError):
    """Direction code outside of the supported set"""

    def __init__(self, code: str):
        super().__init__(f"Unsupported translation direction: {code!r}")
        self.code = code


class FetchFailure(DictionaryError):
    """The dictionary page could not be downloaded"""

    def __init__(self, word: str, direction: str, detail: str):
        super().__init__(f"Failed to fetch {word!r} ({direction}): {detail}")
        self.word = word
        self.direction = direction
        self.detail = detail


class CacheError(DictionaryError):
    """Persistence failure inside the translation cache"""


class ChatConfigError(DictionaryError):
    """Persistence failure inside the chat configuration store"""


class NotFound(ChatConfigError):
    """No configuration stored for the chat"""

    def __init__(self, chat_id: str):
        super().__init__(f"No configuration stored for chat {chat_id}")
        self.chat_id = chat_id


class DuplicateKey(ChatConfigError):
    """A configuration already exists for the chat"""

    def __init__(self, chat_id: str):
        super().__init__(f"Configuration for chat {chat_id} already exists")
        self.chat_id = chat_id
