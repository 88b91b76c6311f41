"""이 파일은 .py 어댑터 패키지 초기화 모듈로 공통 어댑터를 노출합니다."""

from .base import MessageSender
from .command import CommandResult, CommandRunner, find_binary
from .telegram import TelegramClient

__all__ = [
    "CommandResult",
    "CommandRunner",
    "MessageSender",
    "TelegramClient",
    "find_binary",
]
