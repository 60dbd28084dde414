# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/12 10:00
@Desc    : Service for sending responses to Telegram.
"""
from loguru import logger
from telegram import Message
from telegram.ext import ContextTypes


async def send_moderation_reply(
    context: ContextTypes.DEFAULT_TYPE, trigger_message: Message, text: str
) -> bool:
    """以回复原消息的方式发送翻译提醒，发送失败只记录日志"""
    try:
        await context.bot.send_message(
            chat_id=trigger_message.chat.id,
            text=text,
            reply_to_message_id=trigger_message.message_id,
        )
        return True
    except Exception as err:
        logger.error(f"Failed to send moderation reply: {err}")
        return False
