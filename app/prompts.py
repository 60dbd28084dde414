# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 00:20
@Desc    : 提示词模板
"""

# 语言二次确认，回答被约束为两个词之一
CLASSIFICATION_SYSTEM_PROMPT = (
    "You are a language detection assistant. "
    "Respond with only '{token}' or 'non-{token}'."
)

CLASSIFICATION_USER_PROMPT = (
    "Is this text in {language}? Answer with only '{token}' or 'non-{token}': {text}"
)

# 图片文字识别 + 语言判定，回答被约束为两个字段的 JSON 对象
IMAGE_TRANSCRIPTION_PROMPT = (
    "Extract any text in this image and determine if it's in {language}. "
    "Respond in JSON format with the following structure: "
    '{{"text": "extracted text", "{verdict_key}": true/false}}. '
    "If there is no text, set text to empty string and {verdict_key} to true."
)

TRANSLATION_SYSTEM_PROMPT = "You are a translation assistant. Translate the text to {language}."

TRANSLATION_USER_PROMPT = "Translate this text to {language}: {text}"

# 回复模板属于对外约定，格式不可改动
MODERATION_REPLY_TEMPLATE = (
    "Translation: {translation}\n\nPlease, refrain from usage of any language except {language}"
)

START_TEXT = "Hi! I'll monitor messages and provide translations for non-{language} content."

HELP_TEXT = "I automatically detect non-{language} messages and translate them to {language}."
