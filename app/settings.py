from pathlib import Path
from typing import Any
from urllib.request import getproxies

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from telegram.ext import Application

from dictionary.directions import DEFAULT_DIRECTION, is_valid_direction

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")
DATA_DIR = PROJECT_DIR.joinpath("data")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    TELEGRAM_BOT_API_TOKEN: SecretStr = Field(
        default="", description="通过 https://t.me/BotFather 获取机器人的 API_TOKEN"
    )

    DATABASE_URL: str = Field(
        default=f"sqlite:///{DATA_DIR.joinpath('translations.db')}",
        description="SQLAlchemy 数据库连接 URL，保存词条缓存和聊天配置",
    )

    DEFAULT_TRANSLATION_DIRECTION: str = Field(
        default=DEFAULT_DIRECTION.value,
        description="聊天没有配置翻译方向时使用的默认方向，可选 pten / enpt / iten / enit",
    )

    WORDREFERENCE_BASE_URL: str = Field(default="https://www.wordreference.com")

    WORDREFERENCE_USER_AGENT: str = Field(
        default="Mozilla/5.0 (X11; Linux x86_64; rv:141.0) Gecko/20100101 Firefox/141.0",
        description="抓取词典页面时使用的浏览器 User-Agent",
    )

    FETCH_TIMEOUT: float = Field(
        default=15.0, description="抓取词典页面的超时时间（秒），超时视为抓取失败，不做重试"
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=75.0, description="HTTP 请求超时时间（秒），用于 Telegram API 调用。"
    )

    WEBHOOK_ADDRESS: str | None = Field(
        default=None,
        description="Webhook 的公网地址。为空时使用 long polling 运行机器人。",
    )

    WEBHOOK_LISTEN: str = Field(default="127.0.0.1", description="Webhook 本地监听地址")

    WEBHOOK_PORT: int = Field(default=3030, description="Webhook 本地监听端口")

    NO_TRANSLATION_TEXT: str = Field(
        default="No translations found.", description="没有找到译文时的回复"
    )

    def model_post_init(self, context: Any, /) -> None:
        if not is_valid_direction(self.DEFAULT_TRANSLATION_DIRECTION):
            logger.warning(
                f"DEFAULT_TRANSLATION_DIRECTION={self.DEFAULT_TRANSLATION_DIRECTION!r} 无效，"
                f"回退到 {DEFAULT_DIRECTION.value}"
            )
            self.DEFAULT_TRANSLATION_DIRECTION = DEFAULT_DIRECTION.value

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
