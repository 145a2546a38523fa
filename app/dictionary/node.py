# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/12 00:21
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 词条查询与翻译方向切换的核心业务逻辑
"""
from typing import Optional, Protocol

from loguru import logger

from dictionary.crud import ChatConfigStore, TranslationCache, normalize_word
from dictionary.directions import DEFAULT_DIRECTION, Direction, resolve_direction, reverse
from dictionary.errors import (
    CacheError,
    ChatConfigError,
    DuplicateKey,
    FetchFailure,
    InvalidDirection,
    NotFound,
)
from models import LookupResult, LookupSource, ToggleResult
from wordreference.extractor import extract_entries, extract_raw_table


class PageFetcher(Protocol):
    async def fetch(self, word: str, direction: str) -> str: ...


class DictionaryService:
    """
    Glue between the chat configuration, the translation cache and WordReference

    Every dependency is injected, the service itself holds no mutable state and
    may serve any number of concurrent requests.
    """

    def __init__(
        self,
        cache: TranslationCache,
        chat_configs: ChatConfigStore,
        fetcher: PageFetcher,
        default_direction: Direction | str = DEFAULT_DIRECTION,
        no_translation_text: str = "No translations found.",
    ):
        self.cache = cache
        self.chat_configs = chat_configs
        self.fetcher = fetcher
        self.default_direction = resolve_direction(default_direction)
        self.no_translation_text = no_translation_text

    def resolve_direction(self, chat_id: str) -> Direction:
        """Stored direction of the chat, or the default one"""
        try:
            config = self.chat_configs.get(chat_id)
        except ChatConfigError as e:
            logger.error(f"Failed to load config of chat {chat_id}, using default: {e}")
            return self.default_direction

        if config is None:
            return self.default_direction

        direction = resolve_direction(config.translation_direction, self.default_direction)
        if direction.value != config.translation_direction:
            logger.warning(
                f"Chat {chat_id} stores invalid direction "
                f"{config.translation_direction!r}, using {direction}"
            )
        return direction

    def _cache_formatted(self, word: str, direction: Direction, text: str) -> None:
        try:
            self.cache.put_formatted(word, direction, text)
        except CacheError as e:
            logger.error(f"Failed to cache formatted text of {word!r}: {e}")

    async def lookup(self, word: str, direction: Direction) -> LookupResult:
        word = normalize_word(word)
        result = LookupResult(word=word, direction=direction)

        try:
            if formatted := self.cache.get_formatted(word, direction):
                logger.debug(f"Formatted cache hit: {word!r} ({direction})")
                result.text, result.source = formatted, LookupSource.FORMATTED_CACHE
                return result

            if raw := self.cache.get_raw(word, direction):
                # Formatted text was dropped, e.g. the output format changed
                logger.debug(f"Raw cache hit: {word!r} ({direction})")
                result.source = LookupSource.RAW_CACHE
                if text := extract_entries(raw):
                    self._cache_formatted(word, direction, text)
                    result.text = text
                return result
        except CacheError as e:
            logger.error(f"Translation cache unavailable, fetching {word!r} directly: {e}")

        logger.debug(f"Cache miss: {word!r} ({direction})")
        result.source = LookupSource.REMOTE

        try:
            page = await self.fetcher.fetch(word, direction)
        except FetchFailure as e:
            logger.error(e)
            return result

        table = extract_raw_table(page, direction)
        if not table:
            logger.info(f"No translation table for {word!r} ({direction})")
            return result

        text = extract_entries(table)
        if not text:
            logger.info(f"Translation table of {word!r} ({direction}) has no entries")
            return result

        try:
            self.cache.put_raw(word, direction, table)
        except CacheError as e:
            logger.error(f"Failed to cache raw markup of {word!r}: {e}")
        else:
            self._cache_formatted(word, direction, text)

        result.text = text
        return result

    async def handle_word(self, word: str, chat_id: str) -> str:
        """Reply text for a word sent in a chat"""
        direction = self.resolve_direction(chat_id)
        result = await self.lookup(word, direction)
        return result.text or self.no_translation_text

    def toggle_direction(
        self, chat_id: str, user_id: Optional[int] = None, username: Optional[str] = None
    ) -> ToggleResult:
        """
        Reverse the translation direction of a chat, e.g. pten -> enpt

        Chats without a configuration start from the default direction and get
        a record created. A corrupted stored direction is replaced by the
        reverse of the default one.
        """
        chat_id = str(chat_id)

        try:
            config = self.chat_configs.get(chat_id)
        except ChatConfigError as e:
            logger.error(f"Failed to load config of chat {chat_id}: {e}")
            config = None

        current = config.translation_direction if config else self.default_direction.value

        try:
            new_direction = reverse(current)
        except InvalidDirection as e:
            logger.warning(f"{e}, chat {chat_id} falls back to the default direction")
            current = self.default_direction.value
            new_direction = reverse(current)

        is_new = config is None
        if is_new:
            try:
                self.chat_configs.create_or_update(chat_id, new_direction, user_id, username)
            except DuplicateKey:
                self.chat_configs.update_direction(chat_id, new_direction)
                is_new = False
        else:
            try:
                self.chat_configs.update_direction(chat_id, new_direction)
            except NotFound:
                self.chat_configs.create_or_update(chat_id, new_direction, user_id, username)
                is_new = True

        logger.info(f"Chat {chat_id} flipped direction: {current} -> {new_direction}")
        return ToggleResult(
            chat_id=chat_id, previous=Direction(current), current=new_direction, is_new=is_new
        )
