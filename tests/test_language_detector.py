# -*- coding: utf-8 -*-
"""
@Desc    : Tests for the two-stage language classifier
"""
from unittest.mock import patch

import pytest
from langdetect.lang_detect_exception import ErrorCode, LangDetectException
from langdetect.language import Language

from models import ClassificationResult
from settings import Settings
from triggers.language_guard.language_detector import (
    LanguageClassifier,
    base_language,
    clean_text_for_detection,
    detect_top_language,
)

DETECT_LANGS = "triggers.language_guard.language_detector.detect_langs"


class TestCleanTextForDetection:
    def test_strips_links_mentions_and_hashtags(self):
        text = "Bonjour @alice https://example.com/x #news mail me at bob@example.com"
        assert clean_text_for_detection(text) == "Bonjour mail me at"

    def test_empty_input(self):
        assert clean_text_for_detection("") == ""

    def test_falls_back_to_raw_text_when_cleaning_empties_it(self):
        with patch(DETECT_LANGS, return_value=[Language("en", 0.9)]) as mock_detect:
            detect_top_language("https://example.com")

        mock_detect.assert_called_once_with("https://example.com")


class TestLocalFastPath:
    @pytest.mark.asyncio
    async def test_empty_text_is_target_language(self, llm_client, config):
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS) as mock_detect:
            assert await classifier.classify("") is True
            assert await classifier.classify("   ") is True

        mock_detect.assert_not_called()
        llm_client.chat.completions.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_confident_target_language_skips_remote_check(self, llm_client, config):
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("en", 0.99)]):
            assert await classifier.classify("Good morning everyone") is True

        assert llm_client.chat.completions.create.await_count == 0

    @pytest.mark.asyncio
    async def test_low_probability_top_guess_still_short_circuits(self, llm_client, config):
        """Only the top candidate's code is consulted; its probability is ignored."""
        classifier = LanguageClassifier(llm_client, config=config)
        guesses = [Language("en", 0.34), Language("fr", 0.33), Language("it", 0.33)]

        with patch(DETECT_LANGS, return_value=guesses):
            assert await classifier.classify("ok ciao merci") is True

        assert llm_client.chat.completions.create.await_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("detected", ["zh-cn", "zh-tw"])
    async def test_regional_variant_matches_base_language(self, llm_client, detected):
        config = Settings(TARGET_LANGUAGE_CODE="zh", TARGET_LANGUAGE_NAME="Chinese")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language(detected, 0.99)]):
            assert await classifier.classify("你好，今天天气很好") is True

        assert llm_client.chat.completions.create.await_count == 0

    def test_base_language(self):
        assert base_language("zh-CN") == "zh"
        assert base_language(" en ") == "en"

    @pytest.mark.asyncio
    async def test_real_detector_recognises_plain_english(self, llm_client, config):
        classifier = LanguageClassifier(llm_client, config=config)

        text = "The weather is lovely today and we are going for a long walk in the park."
        assert await classifier.classify(text) is True
        assert llm_client.chat.completions.create.await_count == 0


class TestRemoteFallback:
    @pytest.mark.asyncio
    async def test_other_language_asks_the_model(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion("French")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("fr", 0.99)]):
            assert await classifier.classify("Bonjour le monde") is False

        llm_client.chat.completions.create.assert_awaited_once()
        kwargs = llm_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == config.CLASSIFICATION_MODEL
        assert kwargs["max_tokens"] == config.CLASSIFICATION_MAX_TOKENS
        assert "'english' or 'non-english'" in kwargs["messages"][0]["content"]
        assert kwargs["messages"][1]["content"].endswith("Bonjour le monde")

    @pytest.mark.asyncio
    async def test_reply_is_trimmed_and_lower_cased(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion("  ENGLISH \n")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("nl", 0.6)]):
            assert await classifier.classify("Hello there mate") is True

    @pytest.mark.asyncio
    async def test_non_english_reply_matches_by_substring(
        self, llm_client, config, make_completion
    ):
        """Known weak point: 'non-english' contains 'english', so it reads as target language."""
        llm_client.chat.completions.create.return_value = make_completion("non-english")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("ru", 0.99)]):
            assert await classifier.classify("Привет, как дела?") is True

    @pytest.mark.asyncio
    async def test_empty_reply_is_not_target_language(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion(None)
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("de", 0.99)]):
            assert await classifier.classify("Guten Tag") is False

    @pytest.mark.asyncio
    async def test_detector_exception_falls_through(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion("spanish")
        classifier = LanguageClassifier(llm_client, config=config)
        error = LangDetectException(ErrorCode.CantDetectError, "No features in text.")

        with patch(DETECT_LANGS, side_effect=error):
            assert await classifier.classify("¿Qué tal?") is False

        llm_client.chat.completions.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_detector_error_falls_through(
        self, llm_client, config, make_completion
    ):
        llm_client.chat.completions.create.return_value = make_completion("english")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, side_effect=RuntimeError("boom")):
            assert await classifier.classify("hello") is True

        llm_client.chat.completions.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_empty_detector_result_falls_through(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion("non")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[]):
            assert await classifier.classify("xyz") is False

        llm_client.chat.completions.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_remote_failure_defaults_to_target_language(self, llm_client, config):
        llm_client.chat.completions.create.side_effect = ConnectionError("service unavailable")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("ja", 0.99)]):
            assert await classifier.classify("こんにちは") is True

    @pytest.mark.asyncio
    async def test_verdict_wraps_classification(self, llm_client, config, make_completion):
        llm_client.chat.completions.create.return_value = make_completion("non")
        classifier = LanguageClassifier(llm_client, config=config)

        with patch(DETECT_LANGS, return_value=[Language("fr", 0.99)]):
            verdict = await classifier.verdict("Salut")

        assert verdict == ClassificationResult(is_target_language=False)
