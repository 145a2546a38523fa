# -*- coding: utf-8 -*-
"""
Shared fixtures: in-memory database, stores and a canned WordReference page
"""
from typing import List, Tuple

import pytest

from dictionary.crud import ChatConfigStore, TranslationCache
from dictionary.database import create_db_engine, create_session_factory, init_database
from dictionary.errors import FetchFailure
from dictionary.node import DictionaryService

CASA_PAGE = """
<html>
  <body>
    <table class="WRD">
      <tr class="wrtopsection"><td colspan="3"><span class="ph">Additional Translations</span></td></tr>
      <tr class="even"><td><strong>lar</strong></td><td>nm</td><td>home</td></tr>
    </table>
    <table class="WRD">
      <tr class="wrtopsection"><td colspan="3"><span class="ph">Traduções principais</span></td></tr>
      <tr class="even">
        <td class="FrWrd"><strong>casa</strong></td>
        <td>nf</td>
        <td class="ToWrd">house <em class="POS2">n</em></td>
      </tr>
    </table>
  </body>
</html>
"""

CASA_TABLE = """
<table class="WRD">
  <tr class="wrtopsection"><td colspan="3">Traduções principais</td></tr>
  <tr class="even"><td><strong>casa</strong></td><td>nf</td><td>house</td></tr>
</table>
"""


class FakeFetcher:
    """Records every request and replies with a canned page"""

    def __init__(self, page: str = CASA_PAGE, error: Exception | None = None):
        self.page = page
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def fetch(self, word: str, direction: str) -> str:
        self.calls.append((word, str(direction)))
        if self.error:
            raise self.error
        return self.page


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://")
    init_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def cache(session_factory):
    return TranslationCache(session_factory)


@pytest.fixture
def chat_configs(session_factory):
    return ChatConfigStore(session_factory)


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def failing_fetcher():
    return FakeFetcher(error=FetchFailure("casa", "pten", "ConnectError('boom')"))


@pytest.fixture
def service(cache, chat_configs, fetcher):
    return DictionaryService(cache=cache, chat_configs=chat_configs, fetcher=fetcher)


@pytest.fixture
def casa_page():
    return CASA_PAGE


@pytest.fixture
def casa_table():
    return CASA_TABLE


@pytest.fixture
def make_fetcher():
    return FakeFetcher
