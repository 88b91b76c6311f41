"""이 파일은 .py 알림 플러그인 모듈로 빌드 결과를 텔레그램으로 전송합니다."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, field_validator

from buildrunner.adapters.telegram import TelegramClient
from buildrunner.core.config import TELEGRAM_API_URL
from buildrunner.core.errors import PluginConfigError
from buildrunner.core.options import PluginOptions
from buildrunner.core.plugin_base import LOG_SUMMARY_SKIP, BasePlugin
from buildrunner.core.types import BuildContext
from buildrunner.services.notification import (
    DEFAULT_LOG_HEADER_ONLY,
    DEFAULT_LOG_SKIP,
    ErrorPolicy,
    NotificationDispatcher,
    build_log_summary,
    parse_recipient,
    render_message,
)

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = (
    "[%ICON_BUILD%] [%PROJECT_TITLE%](%PROJECT_LINK%)"
    " - [Build #%BUILD_ID%](%BUILD_LINK%) has finished "
    "for commit [%SHORT_COMMIT_ID% (%COMMITTER_EMAIL%)](%COMMIT_LINK%) "
    "on branch [%BRANCH%](%BRANCH_LINK%)"
)


class TelegramNotifyOptions(PluginOptions):
    auth_token: str = Field(min_length=1)
    recipients: List[str]
    message: str = DEFAULT_MESSAGE
    send_log: bool = False
    api_url: str = TELEGRAM_API_URL
    timeout: int = Field(default=10, ge=1)
    on_send_error: ErrorPolicy = ErrorPolicy.CONTINUE
    log_skip: List[str] = Field(default_factory=lambda: list(DEFAULT_LOG_SKIP))
    log_header_only: List[str] = Field(default_factory=lambda: list(DEFAULT_LOG_HEADER_ONLY))

    @field_validator("auth_token", mode="before")
    @classmethod
    def _strip_auth_token(cls, value: Any):
        # 공백뿐인 토큰은 빈 값으로 취급한다.
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("recipients", mode="before")
    @classmethod
    def _normalize_recipients(cls, value: Union[str, int, list, None]):
        # 단일 문자열/숫자 수신자도 목록으로 받는다.
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            value = [value]
        if isinstance(value, list):
            return [str(item) for item in value if str(item).strip()]
        return value

    @field_validator("recipients")
    @classmethod
    def _require_recipients(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("Not setting recipients")
        return value


class TelegramNotify(BasePlugin):
    plugin_name = "telegram_notify"
    options_model = TelegramNotifyOptions
    log_summary = LOG_SUMMARY_SKIP

    def __init__(self, context: BuildContext, options: Optional[Dict[str, Any]] = None):
        super().__init__(context, options)
        # 토큰은 %ENV:NAME% 형식으로 환경 변수에서 받을 수 있다.
        self.auth_token = self.context.interpolate(self.options.auth_token, with_env=True).strip()
        if not self.auth_token:
            raise PluginConfigError("telegram_notify: auth_token is empty after interpolation")

    def execute(self) -> bool:
        message = render_message(self.options.message, self.context)
        log_excerpt = None
        if self.options.send_log:
            log_excerpt = build_log_summary(
                self.context,
                skip=self.options.log_skip,
                header_only=self.options.log_header_only,
            )

        recipients = [
            parse_recipient(self.context.interpolate(value, with_env=True))
            for value in self.options.recipients
        ]
        client = TelegramClient(
            auth_token=self.auth_token,
            api_url=self.options.api_url,
            timeout=self.options.timeout,
        )
        dispatcher = NotificationDispatcher(client, policy=self.options.on_send_error)
        failed = dispatcher.dispatch(message, recipients, log_excerpt)
        if failed:
            logger.warning("%d of %d recipients were not notified", len(failed), len(recipients))
        return True
