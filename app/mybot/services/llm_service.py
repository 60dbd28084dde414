# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 02:00
@Desc    : Builds the shared model client used by every language guard stage.
"""
from urllib.request import getproxies

import httpx
from loguru import logger
from openai import AsyncOpenAI

from settings import Settings, settings


def create_llm_client(config: Settings = settings) -> AsyncOpenAI:
    """
    Create the process-wide client. It is built once at startup and never mutated afterwards,
    so concurrent handlers share it without locking.

    Retries are disabled: every stage resolves a failure to its safe default immediately.
    """
    http_client = None
    if proxy_url := getproxies().get("https") or getproxies().get("http"):
        logger.success(f"模型服务使用代理: {proxy_url}")
        http_client = httpx.AsyncClient(proxy=proxy_url, timeout=config.HTTP_REQUEST_TIMEOUT)

    return AsyncOpenAI(
        api_key=config.OPENAI_API_KEY.get_secret_value(),
        base_url=config.OPENAI_BASE_URL,
        timeout=config.HTTP_REQUEST_TIMEOUT,
        max_retries=0,
        http_client=http_client,
    )
