# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 00:35
@Desc    : 统一的兜底策略：任何环节失败都退回到“不打扰”的结果
"""
import functools
from typing import Awaitable, Callable, TypeVar

from loguru import logger

T = TypeVar("T")


def fail_safe(stage: str, default_factory: Callable[[], T]):
    """
    Decorator that turns any exception raised by an async stage into its safe default.

    Args:
        stage: Name of the stage for logging purposes
        default_factory: Builds the value that suppresses moderation for this stage

    Usage:
        @fail_safe("translate", lambda: TRANSLATION_FAILED)
        async def translate(self, text): ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as err:
                default = default_factory()
                logger.error(f"[{stage}] 调用失败，使用兜底结果 {default!r}: {err}")
                return default

        return wrapper

    return decorator
