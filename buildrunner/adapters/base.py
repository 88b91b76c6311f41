"""이 파일은 .py 외부 전송 어댑터 베이스 모듈로 메시지 전송 인터페이스를 제공합니다."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class MessageSender(ABC):
    @abstractmethod
    def send_message(self, chat_id: str, text: str, topic_id: Optional[str] = None) -> Dict[str, Any]:
        raise NotImplementedError
