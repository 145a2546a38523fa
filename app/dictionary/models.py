# -*- coding: utf-8 -*-
"""
SQLAlchemy database models
"""
from datetime import datetime, UTC

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base

from dictionary.directions import DEFAULT_DIRECTION

# Base class for models
Base = declarative_base()


def utcnow() -> datetime:
    # Stored naive, always UTC
    return datetime.now(UTC).replace(tzinfo=None)


class CachedArticle(Base):
    """
    Two-tier cache of dictionary lookups
    Raw table markup plus the formatted text derived from it
    """

    __tablename__ = "cached_articles"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Lowercased word and direction code form the cache key
    word = Column(String, nullable=False)
    lang_direction = Column(String(4), nullable=False)

    html = Column(Text, nullable=False)

    # NULL until derived from html, reset whenever html is replaced
    formatted = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("word", "lang_direction", name="uq_word_direction"),)

    def __repr__(self):
        return (
            f"<CachedArticle(word='{self.word}', lang_direction='{self.lang_direction}', "
            f"formatted={self.formatted is not None})>"
        )


class ChatConfig(Base):
    """
    Per-chat translation settings
    chat_id is the group id for group chats and the user id for private chats
    """

    __tablename__ = "users"

    chat_id = Column(String, primary_key=True)

    translation_direction = Column(
        String(4),
        default=DEFAULT_DIRECTION.value,
        server_default=DEFAULT_DIRECTION.value,
        nullable=False,
    )

    # Only filled for private chats
    user_id = Column(BigInteger, nullable=True)
    username = Column(String, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return (
            f"<ChatConfig(chat_id='{self.chat_id}', "
            f"translation_direction='{self.translation_direction}')>"
        )
