# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/11 20:34
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    :
"""

from enum import Enum

from pydantic import BaseModel, Field

from dictionary.directions import Direction


class TranslationEntry(BaseModel):
    headword: str = Field(default="", description="源语言词条，仅取 <strong> 中的文本")
    part_of_speech: str = Field(default="", description="词性或语法注释", examples=["nf"])
    translation: str = Field(default="", description="目标语言译文")

    def to_html(self) -> str:
        return f"<b>{self.headword}</b> {self.part_of_speech} ⮕ {self.translation}\n"


class LookupSource(str, Enum):
    FORMATTED_CACHE = "formatted_cache"
    """
    命中已格式化的缓存
    """

    RAW_CACHE = "raw_cache"
    """
    命中原始 HTML 缓存，重新解析
    """

    REMOTE = "remote"
    """
    缓存未命中，从 WordReference 抓取
    """


class LookupResult(BaseModel):
    word: str
    direction: Direction
    text: str = Field(default="", description="格式化后的译文，空字符串表示没有找到译文")
    source: LookupSource | None = Field(default=None)

    @property
    def found(self) -> bool:
        return bool(self.text)


class ToggleResult(BaseModel):
    chat_id: str
    previous: Direction
    current: Direction
    is_new: bool = Field(default=False, description="是否为该聊天新建了配置")
