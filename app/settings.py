from pathlib import Path
from typing import Any
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    TELEGRAM_BOT_API_TOKEN: SecretStr = Field(
        default="", description="通过 https://t.me/BotFather 获取机器人的 API_TOKEN"
    )

    OPENAI_API_KEY: SecretStr = Field(
        default="", description="用于语言判定、图片文字识别与翻译的模型服务 API_KEY"
    )

    OPENAI_BASE_URL: str | None = Field(
        default=None, description="兼容 OpenAI 协议的模型服务地址，留空则使用官方地址"
    )

    TARGET_LANGUAGE_CODE: str = Field(
        default="en", description="频道允许使用的语言，ISO 639-1 编码，与 langdetect 的输出对齐"
    )

    TARGET_LANGUAGE_NAME: str = Field(
        default="English",
        description="目标语言的英文名称，用于提示词、判定关键字以及回复模板",
    )

    CLASSIFICATION_MODEL: str = Field(
        default="gpt-4o-mini", description="本地检测不确定时用于二次确认语言的模型"
    )

    VISION_MODEL: str = Field(
        default="gpt-4o-mini", description="用于识别图片中文字并判断语言的多模态模型"
    )

    TRANSLATION_MODEL: str = Field(default="gpt-4o-mini", description="用于翻译的模型")

    CLASSIFICATION_MAX_TOKENS: int = Field(
        default=10, description="语言二次确认只需要回答一个词，限制输出长度"
    )

    VISION_MAX_TOKENS: int = Field(default=1000)

    TRANSLATION_MAX_TOKENS: int = Field(default=1000)

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=75.0, description="HTTP 请求超时时间（秒），同时作用于 Telegram API 与模型服务。"
    )

    def model_post_init(self, context: Any, /) -> None:
        self.TARGET_LANGUAGE_CODE = self.TARGET_LANGUAGE_CODE.strip().lower()
        self.TARGET_LANGUAGE_NAME = self.TARGET_LANGUAGE_NAME.strip()

    @property
    def target_language_token(self) -> str:
        """The single word the classification prompt asks the model to answer with"""
        return self.TARGET_LANGUAGE_NAME.lower()

    @property
    def structured_verdict_key(self) -> str:
        """Boolean field name of the image transcription response, e.g. `isEnglish`"""
        return f"is{self.TARGET_LANGUAGE_NAME.replace(' ', '')}"

    def check_credentials(self) -> None:
        if not self.TELEGRAM_BOT_API_TOKEN.get_secret_value():
            raise ValueError("TELEGRAM_BOT_API_TOKEN is not defined in .env file")
        if not self.OPENAI_API_KEY.get_secret_value():
            raise ValueError("OPENAI_API_KEY is not defined in .env file")

    def get_default_application(self) -> Application:
        _base_builder = (
            Application.builder()
            .token(self.TELEGRAM_BOT_API_TOKEN.get_secret_value())
            .connect_timeout(self.HTTP_REQUEST_TIMEOUT)
            .write_timeout(self.HTTP_REQUEST_TIMEOUT)
            .read_timeout(self.HTTP_REQUEST_TIMEOUT)
        )
        if proxy_url := getproxies().get("http"):
            logger.success(f"使用代理: {proxy_url}")
            application = _base_builder.proxy(proxy_url).get_updates_proxy(proxy_url).build()
        else:
            application = _base_builder.build()

        return application


settings = Settings()  # type: ignore
