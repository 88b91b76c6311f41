"""이 파일은 .py 공통 예외 모듈로 오류 유형을 표준화합니다."""


class PluginConfigError(ValueError):
    """플러그인 설정 검증 실패 시 사용합니다."""


class PluginError(RuntimeError):
    """플러그인 실행을 중단시키는 치명적 오류의 기반 예외입니다."""


class ToolNotFoundError(PluginError):
    """실행 파일을 찾지 못했을 때 사용합니다."""


class CommandError(PluginError):
    """외부 프로세스를 기동하지 못했을 때 사용합니다."""


class VersionProbeError(PluginError):
    """도구 버전 문자열을 해석하지 못했을 때 사용합니다."""


class ReportParseError(PluginError):
    """도구가 만든 보고서를 해석하지 못했을 때 사용합니다."""


class DiffParseError(ReportParseError):
    """diff 텍스트 형식이 잘못되었을 때 사용합니다."""


class NotificationError(PluginError):
    """fail 정책에서 알림 전송이 실패했을 때 사용합니다."""


class TransportError(RuntimeError):
    """단일 알림 전송 요청 실패에 사용합니다."""
