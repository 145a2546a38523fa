# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 22:02
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : WordReference page fetcher
"""
from urllib.parse import quote

import httpx
from httpx import AsyncClient
from loguru import logger

from dictionary.directions import is_valid_direction
from dictionary.errors import FetchFailure, InvalidDirection
from settings import settings


class WordReferenceClient:
    def __init__(
        self,
        base_url: str = settings.WORDREFERENCE_BASE_URL,
        user_agent: str = settings.WORDREFERENCE_USER_AGENT,
        timeout: float = settings.FETCH_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        headers = {"User-Agent": user_agent}
        self._client = AsyncClient(
            base_url=base_url, headers=headers, timeout=timeout, transport=transport
        )

    @staticmethod
    def build_path(word: str, direction: str) -> str:
        return f"/{direction}/{quote(word, safe='')}"

    async def fetch(self, word: str, direction: str) -> str:
        """
        Download the dictionary page of a word

        No retry is made, a single failed request is reported to the caller.

        Args:
            word: the looked-up word
            direction: translation direction code, e.g. ``pten``

        Returns:
            Page HTML

        Raises:
            InvalidDirection: unsupported direction
            FetchFailure: transport error, timeout or non-2xx response
        """
        if not is_valid_direction(direction):
            raise InvalidDirection(direction)

        path = self.build_path(word, str(direction))
        logger.info(f"Fetching WordReference page: {path}")

        try:
            response = await self._client.get(path)
            response.raise_for_status()
        except httpx.HTTPError as err:
            raise FetchFailure(word, str(direction), repr(err)) from err

        return response.text

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
