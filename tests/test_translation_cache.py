# -*- coding: utf-8 -*-
"""
Tests for the two-tier translation cache
"""
import pytest

from dictionary.crud import TranslationCache
from dictionary.database import create_db_engine, create_session_factory
from dictionary.errors import CacheError
from dictionary.models import CachedArticle


def load_record(session_factory, word, direction) -> CachedArticle:
    with session_factory() as db:
        return (
            db.query(CachedArticle)
            .filter(CachedArticle.word == word, CachedArticle.lang_direction == direction)
            .one()
        )


class TestTranslationCache:
    def test_miss_on_both_tiers(self, cache):
        assert cache.get_raw("casa", "pten") is None
        assert cache.get_formatted("casa", "pten") is None

    def test_put_raw_creates_unformatted_record(self, cache):
        cache.put_raw("casa", "pten", "<table>casa</table>")

        assert cache.get_raw("casa", "pten") == "<table>casa</table>"
        assert cache.get_formatted("casa", "pten") is None

    def test_put_formatted_keeps_raw_markup(self, cache):
        cache.put_raw("casa", "pten", "<table>casa</table>")
        cache.put_formatted("casa", "pten", "<b>casa</b> nf ⮕ house\n")

        assert cache.get_formatted("casa", "pten") == "<b>casa</b> nf ⮕ house\n"
        assert cache.get_raw("casa", "pten") == "<table>casa</table>"

    def test_replacing_raw_markup_resets_formatted_text(self, cache, session_factory):
        cache.put_raw("casa", "pten", "<table>v1</table>")
        cache.put_formatted("casa", "pten", "formatted v1")
        before = load_record(session_factory, "casa", "pten")

        cache.put_raw("casa", "pten", "<table>v2</table>")
        after = load_record(session_factory, "casa", "pten")

        assert cache.get_raw("casa", "pten") == "<table>v2</table>"
        assert cache.get_formatted("casa", "pten") is None
        assert after.id == before.id
        assert after.created_at == before.created_at
        assert after.updated_at >= before.updated_at

    def test_concurrent_insert_is_overwritten(self, cache, session_factory, monkeypatch):
        find = TranslationCache._find
        raced = []

        def racing_find(db, word, direction):
            if not raced:
                raced.append(word)
                with session_factory() as other:
                    other.add(
                        CachedArticle(
                            word=word, lang_direction=direction, html="theirs", formatted="f"
                        )
                    )
                    other.commit()
                return None
            return find(db, word, direction)

        monkeypatch.setattr(TranslationCache, "_find", staticmethod(racing_find))

        cache.put_raw("casa", "pten", "mine")

        assert raced == ["casa"]
        assert cache.get_raw("casa", "pten") == "mine"
        assert cache.get_formatted("casa", "pten") is None
        with session_factory() as db:
            assert db.query(CachedArticle).count() == 1

    def test_put_formatted_without_raw_creates_placeholder(self, cache):
        cache.put_formatted("casa", "pten", "formatted")

        assert cache.get_formatted("casa", "pten") == "formatted"
        assert cache.get_raw("casa", "pten") == ""

    def test_key_is_the_lowercased_word(self, cache):
        cache.put_raw(" Casa ", "pten", "<table>casa</table>")

        assert cache.get_raw("casa", "pten") == "<table>casa</table>"
        assert cache.get_raw("CASA", "pten") == "<table>casa</table>"

    def test_directions_are_cached_separately(self, cache):
        cache.put_raw("casa", "pten", "<table>pt</table>")
        cache.put_raw("casa", "iten", "<table>it</table>")
        cache.put_formatted("casa", "iten", "it")

        assert cache.get_raw("casa", "pten") == "<table>pt</table>"
        assert cache.get_formatted("casa", "pten") is None
        assert cache.get_formatted("casa", "iten") == "it"

    def test_single_record_per_key(self, cache, session_factory):
        cache.put_raw("casa", "pten", "a")
        cache.put_formatted("casa", "pten", "b")
        cache.put_raw("casa", "pten", "c")

        with session_factory() as db:
            assert db.query(CachedArticle).count() == 1

    def test_persistence_failure_raises_cache_error(self):
        # Tables are never created on this engine
        engine = create_db_engine("sqlite://")
        broken = TranslationCache(create_session_factory(engine))

        with pytest.raises(CacheError):
            broken.get_raw("casa", "pten")
        with pytest.raises(CacheError):
            broken.get_formatted("casa", "pten")
        with pytest.raises(CacheError):
            broken.put_raw("casa", "pten", "<table/>")
        with pytest.raises(CacheError):
            broken.put_formatted("casa", "pten", "text")

        engine.dispose()
