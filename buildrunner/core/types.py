"""이 파일은 .py 타입 정의 모듈로 빌드 컨텍스트와 위반 결과 모델을 제공합니다."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

ENV_PLACEHOLDER = re.compile(r"%ENV:([A-Za-z_][A-Za-z0-9_]*)%")


class Severity(str, Enum):
    # 위반 심각도 등급으로 숫자가 낮을수록 심각하다.
    CRITICAL = "Critical"
    HIGH = "High"
    NORMAL = "Normal"
    LOW = "Low"


@dataclass(frozen=True)
class Violation:
    # 플러그인이 보고한 단일 위반 항목으로 생성 후 변경하지 않는다.
    plugin: str
    message: str
    severity: Severity
    file: Optional[str] = None
    # 파일 시작부터 변경된 청크는 라인 번호를 알 수 없어 None이다.
    line: Optional[int] = None


@dataclass
class BuildContext:
    # 하나의 빌드 동안 플러그인들이 순차적으로 갱신하는 공용 상태이다.
    build_id: int
    build_path: str = "."
    commit_id: str = ""
    committer_email: str = ""
    commit_message: str = ""
    branch: str = ""
    project_id: Optional[int] = None
    project_title: str = ""
    project_link: str = ""
    build_link: str = ""
    commit_link: str = ""
    branch_link: str = ""
    debug: bool = False
    success: bool = True
    # False면 외부 명령 출력은 빌드 로그에 남기지 않는다.
    log_exec_output: bool = True
    log_lines: List[str] = field(default_factory=list)
    violations: List[Violation] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)
    # 플러그인 이름 → 알림 로그 요약 방식(full/header/skip), 파이프라인이 채운다.
    section_policies: Dict[str, str] = field(default_factory=dict)

    @property
    def short_commit_id(self) -> str:
        return self.commit_id[:7]

    @property
    def log_text(self) -> str:
        return "\n".join(self.log_lines)

    def log(self, message: str) -> None:
        # 빌드 로그는 사용자에게 그대로 노출되는 텍스트이다.
        self.log_lines.append(message)

    def report_error(
        self,
        plugin: str,
        message: str,
        severity: Severity,
        file: Optional[str] = None,
        line: Optional[int] = None,
    ) -> Violation:
        violation = Violation(
            plugin=plugin,
            message=message,
            severity=severity,
            file=file,
            line=line,
        )
        self.violations.append(violation)
        return violation

    def store_meta(self, key: str, value: Any) -> None:
        self.meta[key] = value

    def variables(self) -> Dict[str, str]:
        # 메시지/인자 템플릿에서 치환할 빌드 변수 목록이다.
        return {
            "%BUILD_ID%": str(self.build_id),
            "%BUILD_PATH%": self.build_path,
            "%BUILD_LINK%": self.build_link,
            "%COMMIT_ID%": self.commit_id,
            "%SHORT_COMMIT_ID%": self.short_commit_id,
            "%COMMITTER_EMAIL%": self.committer_email,
            "%COMMIT_MESSAGE%": self.commit_message,
            "%COMMIT_LINK%": self.commit_link,
            "%BRANCH%": self.branch,
            "%BRANCH_LINK%": self.branch_link,
            "%PROJECT_ID%": "" if self.project_id is None else str(self.project_id),
            "%PROJECT_TITLE%": self.project_title,
            "%PROJECT_LINK%": self.project_link,
        }

    def interpolate(self, template: str, with_env: bool = False) -> str:
        result = str(template)
        for placeholder, value in self.variables().items():
            result = result.replace(placeholder, value)
        if with_env:
            # %ENV:NAME% 형식은 환경 변수 값으로 바꾸고, 없으면 그대로 둔다.
            result = ENV_PLACEHOLDER.sub(
                lambda match: os.environ.get(match.group(1), match.group(0)),
                result,
            )
        return result
