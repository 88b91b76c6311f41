"""이 파일은 .py 정적 분석 플러그인 모듈로 PHP CS Fixer 실행과 위반 보고를 담당합니다."""

from __future__ import annotations

import logging
import shlex
from typing import Any, Dict, Optional

from pydantic import Field

from buildrunner.adapters.command import CommandRunner, find_binary
from buildrunner.analysis.violations import extract_violations, parse_report
from buildrunner.core.errors import ReportParseError
from buildrunner.core.options import PluginOptions
from buildrunner.core.plugin_base import BasePlugin
from buildrunner.core.types import BuildContext
from buildrunner.core.verdict import UNLIMITED, apply_verdict
from buildrunner.core.versioning import format_version, parse_version, version_in_range

logger = logging.getLogger(__name__)

BINARY_NAMES = ("php-cs-fixer", "php-cs-fixer.phar")
# udiff 형식은 2.8.0에서 추가되었고 3.0.0부터 기본값이다.
UDIFF_MIN_VERSION = (2, 8, 0)
UDIFF_MAX_VERSION = (3, 0, 0)
# --dry-run에서 수정할 파일이 있으면 종료 코드에 8 비트가 켜진다.
EXIT_FILES_NEED_FIXING = 8


class PhpCsFixerOptions(PluginOptions):
    args: str = ""
    directory: Optional[str] = None
    # 실행 파일을 먼저 찾아볼 디렉터리이다.
    binary_path: Optional[str] = None
    verbose: bool = False
    diff: bool = False
    rules: Optional[str] = None
    config: Optional[str] = None
    errors: bool = False
    report_errors: bool = False
    allowed_warnings: int = Field(default=0, ge=UNLIMITED)


class PhpCsFixer(BasePlugin):
    plugin_name = "php_cs_fixer"
    options_model = PhpCsFixerOptions

    def __init__(self, context: BuildContext, options: Optional[Dict[str, Any]] = None):
        super().__init__(context, options)
        self.args = self._build_args()

    def _build_args(self) -> str:
        # 설정값을 PHP CS Fixer 플래그 문자열로 조립한다.
        options = self.options
        args = options.args
        if options.verbose:
            args += " --verbose"
        if options.diff:
            args += " --diff"
        if options.rules:
            args += " --rules=" + shlex.quote(options.rules)
        if options.config:
            args += " --config=" + shlex.quote(self.context.interpolate(options.config))
        if options.errors:
            args += " --dry-run"
        return args

    def execute(self) -> bool:
        executable = shlex.quote(
            find_binary(BINARY_NAMES, self.context.build_path, self.options.binary_path)
        )
        runner = CommandRunner(self.context)

        # 버전은 실행할 때마다 다시 확인한다.
        version_output = runner.run_version(f"{executable} --version")
        version = parse_version(version_output, "the PHP Coding Standards Fixer")
        supports_udiff = version_in_range(version, UDIFF_MIN_VERSION, UDIFF_MAX_VERSION)
        logger.debug("PHP CS Fixer %s (udiff: %s)", format_version(version), supports_udiff)

        directory = self.options.directory or ""
        if not self.options.config and not directory:
            directory = "."

        args = self.args
        previous_log_exec_output = self.context.log_exec_output
        if self.options.errors:
            args += " --verbose --format json --diff"
            if supports_udiff:
                args += " --diff-format udiff"
            # JSON 보고서는 디버그 빌드에서만 로그에 남긴다.
            if not self.context.debug:
                self.context.log_exec_output = False

        target = f" {shlex.quote(directory)}" if directory else ""
        try:
            result = runner.run(f"{executable} fix{target} %s", args)
        finally:
            self.context.log_exec_output = previous_log_exec_output

        if not self.options.errors:
            return result.success

        success = (result.exit_code & ~EXIT_FILES_NEED_FIXING) == 0
        warning_count = self._process_report(result.stdout)
        if not apply_verdict(
            self.context,
            self.plugin_name,
            warning_count,
            self.options.allowed_warnings,
        ):
            success = False
        return success

    def _process_report(self, output: str) -> int:
        try:
            report = parse_report(output)
            extraction = extract_violations(report, self.plugin_name)
        except ReportParseError:
            # 진단을 위해 원본 출력을 빌드 로그에 남긴 뒤 실패시킨다.
            self.context.log(output)
            raise

        # report_errors가 꺼져 있어도 개수는 판정에 사용한다.
        if self.options.report_errors:
            for violation in extraction.violations:
                self.add_violation(violation)
        return extraction.warning_count
