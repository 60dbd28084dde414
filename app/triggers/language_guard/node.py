# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 01:45
@Desc    : 语言守卫的核心业务逻辑：判定是否需要翻译并生成提醒回复
"""

from loguru import logger
from openai import AsyncOpenAI

from models import ContentUnit, ImageRef, PlainText
from prompts import MODERATION_REPLY_TEMPLATE
from settings import Settings, settings
from triggers.language_guard.extractor import ContentExtractor
from triggers.language_guard.language_detector import LanguageClassifier
from triggers.language_guard.translator import Translator


def is_empty_unit(unit: ContentUnit | None) -> bool:
    if unit is None:
        return True
    if isinstance(unit, PlainText):
        return not unit.text
    if isinstance(unit, ImageRef):
        return not unit.url
    return False


class LanguageGuard:
    """Runs one content unit through extraction and, when needed, translation."""

    def __init__(
        self, extractor: ContentExtractor, translator: Translator, *, config: Settings = settings
    ):
        self._extractor = extractor
        self._translator = translator
        self._config = config

    @classmethod
    def from_client(cls, client: AsyncOpenAI, *, config: Settings = settings) -> "LanguageGuard":
        """Wires every stage to the same shared model client"""
        classifier = LanguageClassifier(client, config=config)
        extractor = ContentExtractor(client, classifier, config=config)
        translator = Translator(client, config=config)
        return cls(extractor, translator, config=config)

    def format_reply(self, translation: str) -> str:
        return MODERATION_REPLY_TEMPLATE.format(
            translation=translation, language=self._config.TARGET_LANGUAGE_NAME
        )

    async def moderate(self, unit: ContentUnit | None) -> str | None:
        """
        Returns:
            str | None: 需要发送的提醒回复；内容为目标语言或没有文字时返回 None
        """
        if is_empty_unit(unit):
            logger.debug("[语言守卫] 跳过：内容为空")
            return None

        result = await self._extractor.extract(unit)
        if not result.should_translate:
            logger.debug(f"[语言守卫] 无需翻译: {type(unit).__name__}")
            return None

        logger.info(f"[语言守卫] 检测到非目标语言内容: {result.extracted_text[:50]}...")
        translation = await self._translator.translate(result.extracted_text)

        return self.format_reply(translation)
