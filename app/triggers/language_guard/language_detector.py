# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 00:15
@Desc    : 语言检测模块：本地 langdetect 快速判定，不确定时交给模型确认
"""

import re

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException
from loguru import logger
from openai import AsyncOpenAI

from models import ClassificationResult
from prompts import CLASSIFICATION_SYSTEM_PROMPT, CLASSIFICATION_USER_PROMPT
from settings import Settings, settings
from triggers.language_guard.fallback import fail_safe

# 设置随机种子以确保检测结果的一致性
DetectorFactory.seed = 0


def clean_text_for_detection(text: str) -> str:
    """清理文本以便进行语言检测"""
    if not text:
        return ""

    # 移除 URL
    text = re.sub(r'https?://[^\s]+', '', text)

    # 移除邮箱地址
    text = re.sub(r'\S+@\S+', '', text)

    # 移除用户名提及（@username）与 hashtag
    text = re.sub(r'[@#]\w+', '', text)

    # 移除多余的空格
    text = re.sub(r'\s+', ' ', text).strip()

    return text


def detect_top_language(text: str) -> str | None:
    """Return the code of langdetect's top guess, or None when it has no usable answer"""
    cleaned_text = clean_text_for_detection(text) or text

    try:
        lang_probs = detect_langs(cleaned_text)
    except LangDetectException as e:
        logger.debug(f"语言检测失败: {e}")
        return None
    except Exception as e:
        logger.warning(f"语言检测异常: {e}")
        return None

    if not lang_probs:
        logger.debug("语言检测未返回结果")
        return None

    top = lang_probs[0]
    logger.debug(f"检测到语言: {top.lang} (置信度: {top.prob:.3f}) (原文: {text[:30]}...)")
    return top.lang


def base_language(lang_code: str) -> str:
    """标准化语言代码，去掉地区后缀（zh-cn、zh-tw -> zh）"""
    return lang_code.strip().lower().split("-")[0]


class LanguageClassifier:
    """Decides whether a piece of text is written in the target language."""

    def __init__(self, client: AsyncOpenAI, *, config: Settings = settings):
        self._client = client
        self._config = config

    async def classify(self, text: str) -> bool:
        if not text or not text.strip():
            return True

        # 只看排名第一的候选语言，不参考置信度
        top_lang = detect_top_language(text)
        if top_lang and base_language(top_lang) == base_language(self._config.TARGET_LANGUAGE_CODE):
            return True

        return await self._confirm_with_model(text)

    async def verdict(self, text: str) -> ClassificationResult:
        return ClassificationResult(is_target_language=await self.classify(text))

    @fail_safe("classify", lambda: True)
    async def _confirm_with_model(self, text: str) -> bool:
        language = self._config.TARGET_LANGUAGE_NAME
        token = self._config.target_language_token

        response = await self._client.chat.completions.create(
            model=self._config.CLASSIFICATION_MODEL,
            messages=[
                {"role": "system", "content": CLASSIFICATION_SYSTEM_PROMPT.format(token=token)},
                {
                    "role": "user",
                    "content": CLASSIFICATION_USER_PROMPT.format(
                        language=language, token=token, text=text
                    ),
                },
            ],
            max_tokens=self._config.CLASSIFICATION_MAX_TOKENS,
        )

        answer = (response.choices[0].message.content or "").strip().lower()
        logger.debug(f"模型语言判定: {answer!r} (原文: {text[:30]}...)")

        # 子串匹配：'non-english' 同样包含 'english'，也会判定为目标语言
        return token in answer
