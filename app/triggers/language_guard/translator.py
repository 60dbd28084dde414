# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 01:30
@Desc    : 翻译为目标语言，失败时返回占位文本而不是抛出异常
"""
from loguru import logger
from openai import AsyncOpenAI

from models import TRANSLATION_FAILED
from prompts import TRANSLATION_SYSTEM_PROMPT, TRANSLATION_USER_PROMPT
from settings import Settings, settings
from triggers.language_guard.fallback import fail_safe


class Translator:
    def __init__(self, client: AsyncOpenAI, *, config: Settings = settings):
        self._client = client
        self._config = config

    @fail_safe("translate", lambda: TRANSLATION_FAILED)
    async def translate(self, text: str) -> str:
        language = self._config.TARGET_LANGUAGE_NAME

        response = await self._client.chat.completions.create(
            model=self._config.TRANSLATION_MODEL,
            messages=[
                {"role": "system", "content": TRANSLATION_SYSTEM_PROMPT.format(language=language)},
                {
                    "role": "user",
                    "content": TRANSLATION_USER_PROMPT.format(language=language, text=text),
                },
            ],
            max_tokens=self._config.TRANSLATION_MAX_TOKENS,
        )

        if translation := (response.choices[0].message.content or "").strip():
            return translation

        logger.warning(f"翻译结果为空 (原文: {text[:30]}...)")
        return TRANSLATION_FAILED
