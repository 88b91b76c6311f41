"""이 파일은 .py 명령 실행 어댑터로 외부 도구 실행과 실행 파일 탐색을 래핑합니다."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from buildrunner.core.errors import CommandError, ToolNotFoundError
from buildrunner.core.types import BuildContext

logger = logging.getLogger(__name__)

ARGS_PLACEHOLDER = "%s"


@dataclass
class CommandResult:
    success: bool
    exit_code: int
    stdout: str
    stderr: str

    @property
    def output(self) -> str:
        # 버전 출력처럼 stdout/stderr 어느 쪽에 올지 모르는 경우에 사용한다.
        return "\n".join(part for part in (self.stdout, self.stderr) if part)


class CommandRunner:
    def __init__(
        self,
        context: BuildContext,
        timeout: Optional[int] = None,
        cwd: Optional[str] = None,
    ) -> None:
        self.context = context
        # 기본값 None은 타임아웃 없이 종료까지 기다린다.
        self.timeout = timeout
        self.cwd = cwd or context.build_path

    def run(self, template: str, args: str = "") -> CommandResult:
        # 템플릿의 첫 %s 자리에 이미 이스케이프된 인자 문자열을 넣는다.
        command_line = template.replace(ARGS_PLACEHOLDER, args, 1)
        try:
            command = shlex.split(command_line)
        except ValueError as exc:
            raise CommandError(f"Invalid command line: {command_line}") from exc

        logger.debug("Executing: %s", command_line)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False,
                cwd=self.cwd,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandError(f"Command timeout: {command_line}") from exc
        except OSError as exc:
            raise CommandError(f"Command execution failed: {exc}") from exc

        result = CommandResult(
            success=completed.returncode == 0,
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        if self.context.log_exec_output:
            for stream in (result.stdout, result.stderr):
                if stream.strip():
                    self.context.log(stream.rstrip("\n"))
        return result

    def run_version(self, probe: str) -> str:
        # 버전 확인 명령의 종료 코드는 판단에 쓰지 않는다.
        return self.run(probe).output


def find_binary(
    names: Sequence[str],
    build_path: str = ".",
    extra_path: Optional[str] = None,
) -> str:
    # 탐색 순서: 설정 경로 → 빌드의 vendor/bin → PATH
    search_dirs: List[Path] = []
    if extra_path:
        search_dirs.append(Path(extra_path))
    search_dirs.append(Path(build_path) / "vendor" / "bin")

    for directory in search_dirs:
        for name in names:
            candidate = directory / name
            if candidate.is_file() and os.access(candidate, os.X_OK):
                return str(candidate.resolve())

    for name in names:
        found = shutil.which(name)
        if found:
            return found

    raise ToolNotFoundError(f"Could not find {' / '.join(names)}")
