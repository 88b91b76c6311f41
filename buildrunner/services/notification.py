"""이 파일은 .py 알림 서비스 모듈로 빌드 로그 요약과 수신자별 메시지 전송을 담당합니다."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Set

from buildrunner.adapters.base import MessageSender
from buildrunner.core.config import PLUGIN_SECTION_MARKER
from buildrunner.core.errors import NotificationError, TransportError
from buildrunner.core.plugin_base import LOG_SUMMARY_HEADER, LOG_SUMMARY_SKIP
from buildrunner.core.types import BuildContext

logger = logging.getLogger(__name__)

# ESC 바이트가 빠지거나 "/"로 바뀐 채 로그에 남은 색상 코드도 함께 제거한다.
ANSI_COLOR_PATTERN = re.compile(r"/?\x1b?\[(?:\d{1,3};)*\d{1,3}m")
ICON_PLACEHOLDER = "%ICON_BUILD%"
ICON_SUCCESS = "✅"
ICON_FAILURE = "❌"

# 출력이 긴 플러그인은 로그 요약에서 제외한다.
DEFAULT_LOG_SKIP = ("slack_notify", "php_loc", "telegram_notify")
# 의존성 설치 단계는 제목만 남긴다.
DEFAULT_LOG_HEADER_ONLY = ("composer",)


class ErrorPolicy(str, Enum):
    CONTINUE = "continue"
    FAIL = "fail"


@dataclass(frozen=True)
class Recipient:
    chat_id: str
    topic_id: Optional[str] = None


def parse_recipient(value: str) -> Recipient:
    # "chat/topic" 형식에서 토픽이 비어 있으면 None으로 둔다.
    parts = (str(value).strip() + "/").split("/")
    return Recipient(chat_id=parts[0], topic_id=parts[1] or None)


def strip_ansi(text: str) -> str:
    return ANSI_COLOR_PATTERN.sub("", text)


def summarize_log(log: str, skip: Iterable[str], header_only: Iterable[str]) -> str:
    skip_set: Set[str] = set(skip)
    header_set: Set[str] = set(header_only)
    sections = strip_ansi(log).split(PLUGIN_SECTION_MARKER)

    summary: List[str] = []
    # 첫 표식 이전의 텍스트는 어느 플러그인에도 속하지 않는다.
    for section in sections[1:]:
        name, newline, body = section.partition("\n")
        name = name.strip()
        if name in skip_set:
            continue
        summary.append(f"*{PLUGIN_SECTION_MARKER}{name}*\n")
        if name not in header_set:
            summary.append(f"```{newline}{body}```")
    return "".join(summary)


def section_names(context: BuildContext, policy: str) -> Set[str]:
    return {name for name, value in context.section_policies.items() if value == policy}


def build_log_summary(
    context: BuildContext,
    skip: Iterable[str] = DEFAULT_LOG_SKIP,
    header_only: Iterable[str] = DEFAULT_LOG_HEADER_ONLY,
) -> str:
    # 설정 목록과 플러그인별 요약 방식을 합쳐서 적용한다.
    skip_set = set(skip) | section_names(context, LOG_SUMMARY_SKIP)
    header_set = set(header_only) | section_names(context, LOG_SUMMARY_HEADER)
    return summarize_log(context.log_text, skip_set, header_set)


def render_message(template: str, context: BuildContext) -> str:
    icon = ICON_SUCCESS if context.success else ICON_FAILURE
    return context.interpolate(template.replace(ICON_PLACEHOLDER, icon))


class NotificationDispatcher:
    def __init__(self, sender: MessageSender, policy: ErrorPolicy = ErrorPolicy.CONTINUE) -> None:
        self.sender = sender
        self.policy = ErrorPolicy(policy)

    def dispatch(
        self,
        message: str,
        recipients: Iterable[Recipient],
        log_excerpt: Optional[str] = None,
    ) -> List[Recipient]:
        """수신자별로 메시지를 순차 전송하고 실패한 수신자 목록을 반환합니다.

        CONTINUE 정책에서는 한 수신자의 실패가 나머지 전송을 막지 않으며,
        FAIL 정책에서는 첫 실패에서 NotificationError를 발생시킵니다.
        """
        failed: List[Recipient] = []
        for recipient in recipients:
            try:
                self._send(recipient, message)
                if log_excerpt is not None:
                    self._send(recipient, log_excerpt)
            except TransportError as exc:
                if self.policy is ErrorPolicy.FAIL:
                    raise NotificationError(f"Failed to notify {recipient.chat_id}: {exc}") from exc
                logger.warning("Notification to %s failed: %s", recipient.chat_id, exc)
                failed.append(recipient)
        return failed

    def _send(self, recipient: Recipient, text: str) -> None:
        self.sender.send_message(recipient.chat_id, text, recipient.topic_id)
