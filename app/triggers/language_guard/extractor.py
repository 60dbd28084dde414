# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 01:10
@Desc    : 将文本与图片统一归一化为 (文字, 是否目标语言)
"""
import json

from loguru import logger
from openai import AsyncOpenAI

from models import ContentUnit, ExtractionResult, ImageRef, NO_TEXT_FOUND, PlainText
from prompts import IMAGE_TRANSCRIPTION_PROMPT
from settings import Settings, settings
from triggers.language_guard.fallback import fail_safe
from triggers.language_guard.language_detector import LanguageClassifier


class ContentExtractor:
    """
    Normalizes a content unit into an ExtractionResult.

    Plain text goes straight to the classifier. Images take a single vision request that
    transcribes and judges the text at once; when the model ignores the requested JSON shape
    its raw answer is treated as the transcription and classified locally.
    """

    def __init__(
        self, client: AsyncOpenAI, classifier: LanguageClassifier, *, config: Settings = settings
    ):
        self._client = client
        self._classifier = classifier
        self._config = config

    async def extract(self, unit: ContentUnit) -> ExtractionResult:
        if isinstance(unit, PlainText):
            return ExtractionResult(
                extracted_text=unit.text,
                is_target_language=await self._classifier.classify(unit.text),
            )
        if isinstance(unit, ImageRef):
            return await self._extract_from_image(unit)
        raise TypeError(f"Unsupported content unit: {type(unit).__name__}")

    @fail_safe("extract_image", ExtractionResult.nothing)
    async def _extract_from_image(self, image: ImageRef) -> ExtractionResult:
        verdict_key = self._config.structured_verdict_key
        prompt = IMAGE_TRANSCRIPTION_PROMPT.format(
            language=self._config.TARGET_LANGUAGE_NAME, verdict_key=verdict_key
        )

        response = await self._client.chat.completions.create(
            model=self._config.VISION_MODEL,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {"type": "image_url", "image_url": {"url": image.url}},
                    ],
                }
            ],
            max_tokens=self._config.VISION_MAX_TOKENS,
            response_format={"type": "json_object"},
        )

        content = (response.choices[0].message.content or "").strip()
        if not content:
            content = json.dumps({"text": "", verdict_key: True})

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as err:
            logger.error(f"图片识别结果不是合法的 JSON: {err}")
            payload = None

        if isinstance(payload, dict):
            return self._parse_structured(payload, verdict_key)

        # 合法 JSON 但不是对象（列表、字符串、数字）同样按原文重新判定，
        # 不会当作“无文字”直接放行；JSON 字符串连同引号一起作为文字
        return await self._parse_raw(content)

    @staticmethod
    def _parse_structured(payload: dict, verdict_key: str) -> ExtractionResult:
        text = payload.get("text") or ""
        if not isinstance(text, str):
            text = str(text)

        # 仅当字段显式为 false 时才视为非目标语言
        return ExtractionResult(
            extracted_text=text, is_target_language=payload.get(verdict_key) is not False
        )

    async def _parse_raw(self, content: str) -> ExtractionResult:
        if not content or NO_TEXT_FOUND in content:
            return ExtractionResult.nothing()

        logger.warning(f"模型未按结构化格式返回，按原文重新判定语言: {content[:50]}...")
        return ExtractionResult(
            extracted_text=content, is_target_language=await self._classifier.classify(content)
        )
