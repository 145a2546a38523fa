# -*- coding: utf-8 -*-
"""
CRUD operations for the translation cache and the chat configuration store
"""
from typing import Optional

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from dictionary.directions import is_valid_direction
from dictionary.errors import CacheError, ChatConfigError, DuplicateKey, InvalidDirection, NotFound
from dictionary.models import CachedArticle, ChatConfig, utcnow


def normalize_word(word: str) -> str:
    return (word or "").strip().lower()


class TranslationCache:
    """
    Two-tier cache keyed by (word, direction)

    ``html`` keeps the extracted translation table, ``formatted`` the text
    derived from it. Replacing the html always discards the formatted text.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_db(self) -> Session:
        return self._session_factory()

    @staticmethod
    def _find(db: Session, word: str, direction: str) -> Optional[CachedArticle]:
        return (
            db.query(CachedArticle)
            .filter(CachedArticle.word == word, CachedArticle.lang_direction == direction)
            .first()
        )

    def _get(self, word: str, direction: str) -> Optional[CachedArticle]:
        db = self.get_db()
        try:
            return self._find(db, normalize_word(word), str(direction))
        except SQLAlchemyError as e:
            raise CacheError(f"Failed to read cached article {word!r} ({direction}): {e}") from e
        finally:
            db.close()

    def get_formatted(self, word: str, direction: str) -> Optional[str]:
        """Formatted text, or None when there is no record or it was never formatted"""
        record = self._get(word, direction)
        return record.formatted if record else None

    def get_raw(self, word: str, direction: str) -> Optional[str]:
        """Raw table markup regardless of the formatted tier"""
        record = self._get(word, direction)
        return record.html if record else None

    def _write(self, word: str, direction: str, apply_existing, build_new) -> None:
        word, direction = normalize_word(word), str(direction)

        for attempt in range(2):
            db = self.get_db()
            try:
                if record := self._find(db, word, direction):
                    apply_existing(record)
                    record.updated_at = utcnow()
                else:
                    db.add(build_new(word, direction))
                db.commit()
                return
            except IntegrityError as e:
                db.rollback()
                # Lost an insert race against a concurrent request, retry as an update
                if attempt == 0:
                    logger.debug(f"Concurrent insert for {word!r} ({direction}), retrying")
                    continue
                raise CacheError(f"Failed to write cached article {word!r} ({direction}): {e}") from e
            except SQLAlchemyError as e:
                db.rollback()
                raise CacheError(f"Failed to write cached article {word!r} ({direction}): {e}") from e
            finally:
                db.close()

    def put_raw(self, word: str, direction: str, html: str) -> None:
        """Insert or replace the raw markup; the formatted text is reset to NULL"""

        def apply_existing(record: CachedArticle):
            record.html = html
            record.formatted = None

        def build_new(w: str, d: str) -> CachedArticle:
            return CachedArticle(word=w, lang_direction=d, html=html, formatted=None)

        self._write(word, direction, apply_existing, build_new)
        logger.debug(f"Cached raw markup: {word!r} ({direction})")

    def put_formatted(self, word: str, direction: str, text: str) -> None:
        """Insert or replace the formatted text, leaving the raw markup untouched"""

        def apply_existing(record: CachedArticle):
            record.formatted = text

        def build_new(w: str, d: str) -> CachedArticle:
            logger.warning(f"Formatted text cached before raw markup: {w!r} ({d})")
            return CachedArticle(word=w, lang_direction=d, html="", formatted=text)

        self._write(word, direction, apply_existing, build_new)
        logger.debug(f"Cached formatted text: {word!r} ({direction})")


class ChatConfigStore:
    """CRUD operations for the per-chat translation direction"""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def get_db(self) -> Session:
        return self._session_factory()

    def get(self, chat_id: str) -> Optional[ChatConfig]:
        db = self.get_db()
        try:
            return db.get(ChatConfig, str(chat_id))
        except SQLAlchemyError as e:
            raise ChatConfigError(f"Failed to read config of chat {chat_id}: {e}") from e
        finally:
            db.close()

    def create_or_update(
        self,
        chat_id: str,
        direction: str,
        user_id: Optional[int] = None,
        username: Optional[str] = None,
    ) -> ChatConfig:
        """
        Insert the configuration of a chat, existing records are left untouched

        Raises:
            InvalidDirection: unsupported direction
            DuplicateKey: the chat already has a configuration
        """
        if not is_valid_direction(direction):
            raise InvalidDirection(direction)

        chat_id = str(chat_id)
        now = utcnow()
        db = self.get_db()
        try:
            record = ChatConfig(
                chat_id=chat_id,
                translation_direction=str(direction),
                user_id=user_id,
                username=username,
                created_at=now,
                updated_at=now,
            )
            db.add(record)
            db.commit()
            db.refresh(record)
            logger.info(f"Created config of chat {chat_id}: direction={direction}")
            return record
        except IntegrityError as e:
            db.rollback()
            raise DuplicateKey(chat_id) from e
        except SQLAlchemyError as e:
            db.rollback()
            raise ChatConfigError(f"Failed to create config of chat {chat_id}: {e}") from e
        finally:
            db.close()

    def update_direction(self, chat_id: str, direction: str) -> ChatConfig:
        """
        Change the direction of an existing chat, all other fields are kept

        Raises:
            InvalidDirection: unsupported direction
            NotFound: the chat has no configuration yet
        """
        if not is_valid_direction(direction):
            raise InvalidDirection(direction)

        chat_id = str(chat_id)
        db = self.get_db()
        try:
            record = db.get(ChatConfig, chat_id)
            if record is None:
                raise NotFound(chat_id)

            record.translation_direction = str(direction)
            record.updated_at = utcnow()
            db.commit()
            db.refresh(record)
            logger.info(f"Updated config of chat {chat_id}: direction={direction}")
            return record
        except SQLAlchemyError as e:
            db.rollback()
            raise ChatConfigError(f"Failed to update config of chat {chat_id}: {e}") from e
        finally:
            db.close()
