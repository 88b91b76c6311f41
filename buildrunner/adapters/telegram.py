"""이 파일은 .py 텔레그램 어댑터로 Bot API 메시지 전송을 래핑합니다."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from buildrunner.core.config import TELEGRAM_API_URL
from buildrunner.core.errors import TransportError

from .base import MessageSender

PARSE_MODE = "Markdown"


@dataclass
class TelegramClient(MessageSender):
    auth_token: str
    api_url: str = TELEGRAM_API_URL
    timeout: int = 10

    def _url(self) -> str:
        # https://<host>/bot<token>/sendMessage 형식으로 만든다.
        return f"{self.api_url.rstrip('/')}/bot{self.auth_token}/sendMessage"

    def send_message(self, chat_id: str, text: str, topic_id: Optional[str] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": PARSE_MODE,
        }
        # 토픽 ID가 있을 때만 message_thread_id를 보낸다.
        if topic_id is not None:
            payload["message_thread_id"] = topic_id

        try:
            response = requests.post(
                self._url(),
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            # 예외 메시지에 토큰이 포함된 URL이 노출되지 않도록 유형만 남긴다.
            raise TransportError(f"Telegram request failed: {type(exc).__name__}") from exc

        if response.status_code >= 400:
            raise TransportError(f"Telegram error {response.status_code}: {response.text[:200]}")

        if not response.text:
            return {}
        try:
            return response.json()
        except ValueError:
            return {}
