"""이 파일은 .py 플러그인 패키지 초기화 모듈로 내장 플러그인을 노출합니다."""

from .php_cs_fixer import PhpCsFixer
from .telegram_notify import TelegramNotify

__all__ = ["PhpCsFixer", "TelegramNotify"]
