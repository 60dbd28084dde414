# -*- coding: utf-8 -*-
"""
@Time    : 2025/7/7 05:40
@Desc    : Bootstrap of the channel language guard bot
"""
import json

from loguru import logger
from telegram import Update, BotCommand
from telegram.ext import CommandHandler, MessageHandler, filters

from mybot.cli import start, help_command
from mybot.handlers import handle_channel_post, LANGUAGE_GUARD_KEY
from mybot.services.llm_service import create_llm_client
from mybot.task_manager import wait_for_all_tasks
from settings import settings, LOG_DIR
from triggers.language_guard import LanguageGuard
from utils import init_log

init_log(
    runtime=LOG_DIR.joinpath("runtime.log"),
    error=LOG_DIR.joinpath("error.log"),
    serialize=LOG_DIR.joinpath("serialize.log"),
)


async def setup_bot_commands(application):
    """设置机器人的命令菜单"""
    commands = [
        BotCommand("start", "Start the bot"),
        BotCommand("help", "What this bot does"),
    ]

    try:
        await application.bot.set_my_commands(commands)
        logger.success(f"已设置机器人命令菜单: {[f'/{cmd.command}' for cmd in commands]}")
    except Exception as e:
        logger.error(f"设置机器人命令菜单失败: {e}")


async def drain_pending_tasks(application):
    """Give in-flight channel posts a chance to finish before the process exits"""
    await wait_for_all_tasks(timeout=30.0)


def main() -> None:
    """Start the bot."""
    sp = settings.model_dump(mode='json')

    s = json.dumps(sp, indent=2, ensure_ascii=False)
    logger.success(f"Loading settings: {s}")

    settings.check_credentials()

    # Create the Application and pass it your bot's token.
    application = settings.get_default_application()

    # 模型客户端只在启动时创建一次，之后只读共享
    application.bot_data[LANGUAGE_GUARD_KEY] = LanguageGuard.from_client(create_llm_client())

    application.post_init = setup_bot_commands
    application.post_shutdown = drain_pending_tasks

    application.add_handler(CommandHandler("start", start))
    application.add_handler(CommandHandler("help", help_command))

    application.add_handler(
        MessageHandler(filters.UpdateType.CHANNEL_POST & ~filters.COMMAND, handle_channel_post)
    )

    logger.info("Bot initializing...")

    # Run the bot until the user presses Ctrl-C
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
