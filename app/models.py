# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 00:30
@Desc    : 内容单元与判定结果
"""
from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, Field, model_validator

# 翻译失败时返回的占位文本，调用方只能通过字符串比较识别
TRANSLATION_FAILED = "Error translating text."

# 模型未按结构化格式返回、且明确表示图片中没有文字时使用的标记
NO_TEXT_FOUND = "NO_TEXT_FOUND"


@dataclass(frozen=True)
class PlainText:
    text: str


@dataclass(frozen=True)
class ImageRef:
    """An image the model service can fetch by itself"""

    url: str


ContentUnit = Union[PlainText, ImageRef]


class ClassificationResult(BaseModel):
    is_target_language: bool = True


class ExtractionResult(BaseModel):
    extracted_text: str = Field(default="", description="内容中的文字，未识别到文字时为空字符串")
    is_target_language: bool = Field(default=True, description="文字是否为目标语言")

    @model_validator(mode="after")
    def _nothing_to_flag_without_text(self):
        if not self.extracted_text:
            self.is_target_language = True
        return self

    @classmethod
    def nothing(cls) -> "ExtractionResult":
        return cls(extracted_text="", is_target_language=True)

    @property
    def should_translate(self) -> bool:
        return bool(self.extracted_text) and not self.is_target_language
