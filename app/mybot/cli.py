# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/9 00:44
@Desc    :
"""
from telegram import Update
from telegram.ext import ContextTypes

from prompts import START_TEXT, HELP_TEXT
from settings import settings


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /start is issued."""
    await update.effective_message.reply_text(
        START_TEXT.format(language=settings.TARGET_LANGUAGE_NAME)
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Send a message when the command /help is issued."""
    await update.effective_message.reply_text(
        HELP_TEXT.format(language=settings.TARGET_LANGUAGE_NAME)
    )
