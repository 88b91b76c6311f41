"""이 파일은 .py 코어 패키지 초기화 모듈로 주요 심볼을 재노출합니다."""

from .errors import PluginConfigError, PluginError
from .logging import setup_logging
from .plugin_base import BasePlugin
from .types import BuildContext, Severity, Violation
from .verdict import UNLIMITED, apply_verdict, passes

__all__ = [
    "BasePlugin",
    "BuildContext",
    "PluginConfigError",
    "PluginError",
    "Severity",
    "UNLIMITED",
    "Violation",
    "apply_verdict",
    "passes",
    "setup_logging",
]
