# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 00:45
@Desc    : 频道语言守卫：检测非目标语言的文字与图片并给出翻译
"""

from .extractor import ContentExtractor
from .language_detector import LanguageClassifier
from .node import LanguageGuard
from .translator import Translator

__all__ = ["ContentExtractor", "LanguageClassifier", "LanguageGuard", "Translator"]
