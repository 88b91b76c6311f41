"""이 파일은 .py 플러그인 베이스 모듈로 빌드 대상 실행 계약을 제공합니다."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Optional, Type

from .options import PluginOptions, validate_options
from .types import BuildContext, Violation

# 알림 메시지의 로그 요약에서 플러그인 구간을 다루는 방식이다.
LOG_SUMMARY_FULL = "full"
LOG_SUMMARY_HEADER = "header"
LOG_SUMMARY_SKIP = "skip"


class BasePlugin(ABC):
    plugin_name: ClassVar[str] = ""
    options_model: ClassVar[Type[PluginOptions]] = PluginOptions
    log_summary: ClassVar[str] = LOG_SUMMARY_FULL

    def __init__(self, context: BuildContext, options: Optional[Dict[str, Any]] = None):
        self.context = context
        # 잘못된 설정은 실행 전 생성 시점에 PluginConfigError로 실패한다.
        self.options = validate_options(self.options_model, options)

    @abstractmethod
    def execute(self) -> bool:
        raise NotImplementedError

    def add_violation(self, violation: Violation) -> Violation:
        self.context.violations.append(violation)
        return violation
