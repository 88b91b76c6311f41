"""이 파일은 .py 서비스 패키지 초기화 모듈로 알림/리포팅 서비스를 노출합니다."""

from .notification import NotificationDispatcher, Recipient, parse_recipient
from .reporting import summarize_violations, write_report

__all__ = [
    "NotificationDispatcher",
    "Recipient",
    "parse_recipient",
    "summarize_violations",
    "write_report",
]
