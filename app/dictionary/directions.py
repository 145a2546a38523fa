# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 21:10
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : Supported translation directions
"""
from enum import Enum

from dictionary.errors import InvalidDirection


class Direction(str, Enum):
    PT_EN = "pten"
    """
    Portuguese -> English
    """

    EN_PT = "enpt"
    """
    English -> Portuguese
    """

    IT_EN = "iten"
    """
    Italian -> English
    """

    EN_IT = "enit"
    """
    English -> Italian
    """

    def __str__(self) -> str:
        return self.value

    @property
    def source(self) -> str:
        return self.value[:2]

    @property
    def target(self) -> str:
        return self.value[2:]


DEFAULT_DIRECTION = Direction.PT_EN

_SUPPORTED = {d.value for d in Direction}

# Header text of the WordReference table holding the main translations
_HEADER_LABELS = {
    Direction.PT_EN: "Traduções principais",
    Direction.IT_EN: "Principal Translations/Traduzioni principali",
}
_FALLBACK_HEADER_LABEL = "Traduções principais"


def is_valid_direction(code: str) -> bool:
    """True only for one of the four supported 4-letter codes"""
    if isinstance(code, Direction):
        return True
    if not isinstance(code, str) or len(code) != 4:
        return False
    return code in _SUPPORTED


def reverse(code: str) -> Direction:
    """
    Swap source and target language of a direction, e.g. ``pten`` -> ``enpt``

    Raises:
        InvalidDirection: ``code`` is not a supported direction
    """
    if not is_valid_direction(code):
        raise InvalidDirection(code)

    value = Direction(code).value
    return Direction(f"{value[2:]}{value[:2]}")


def header_label(direction: str) -> str:
    """Label identifying the main translation table for the direction"""
    if is_valid_direction(direction):
        return _HEADER_LABELS.get(Direction(direction), _FALLBACK_HEADER_LABEL)
    return _FALLBACK_HEADER_LABEL


def resolve_direction(code: str | None, default: Direction = DEFAULT_DIRECTION) -> Direction:
    """Coerce a stored code into a Direction, falling back to ``default``"""
    if code and is_valid_direction(code):
        return Direction(code)
    return default
