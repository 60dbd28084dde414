# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/14 02:10
@Desc    : 频道消息处理：把频道消息拆成内容单元交给语言守卫，并回复翻译提醒
"""
from typing import AsyncIterator

from loguru import logger
from telegram import Bot, Message, Update
from telegram.ext import ContextTypes

from models import ContentUnit, ImageRef, PlainText
from mybot.services import response_service
from mybot.task_manager import non_blocking_handler
from triggers.language_guard import LanguageGuard

# 语言守卫实例在启动时注入 application.bot_data
LANGUAGE_GUARD_KEY = "language_guard"


async def _resolve_photo(message: Message, bot: Bot) -> ImageRef | None:
    # 选择最高质量版本（列表最后一个）
    photo = message.photo[-1]

    try:
        file = await bot.get_file(photo.file_id)
    except Exception as err:
        logger.error(f"Failed to resolve photo {photo.file_id}: {err}")
        return None

    if not file.file_path:
        logger.error("No file path found for image")
        return None

    # python-telegram-bot 已将 file_path 补全为可下载的完整 URL
    return ImageRef(url=file.file_path)


async def iter_content_units(message: Message, bot: Bot) -> AsyncIterator[ContentUnit]:
    """Yields the text first, then the caption, then the largest photo of a post"""
    if message.text:
        yield PlainText(message.text)

    if message.caption:
        yield PlainText(message.caption)

    if message.photo:
        if image := await _resolve_photo(message, bot):
            yield image


async def process_channel_post(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.channel_post
    if not message:
        logger.debug("Received empty channel post")
        return

    guard: LanguageGuard = context.bot_data[LANGUAGE_GUARD_KEY]

    async for unit in iter_content_units(message, context.bot):
        if reply := await guard.moderate(unit):
            await response_service.send_moderation_reply(context, message, reply)


@non_blocking_handler("handle_channel_post")
async def handle_channel_post(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await process_channel_post(update, context)
