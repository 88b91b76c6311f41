"""이 파일은 .py 위반 추출 모듈로 diff 청크에서 라인 단위 위반을 생성합니다."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from buildrunner.core.errors import ReportParseError
from buildrunner.core.types import Severity, Violation

from .diff_parser import Chunk, LineType, parse_diff

LINE_SYMBOLS = {
    LineType.ADDED: "+",
    LineType.REMOVED: "-",
    LineType.UNCHANGED: " ",
}
SUGGESTION_TEMPLATE = "PHP CS Fixer suggestion:\r\n```diff\r\n{diff}\r\n```"
FAILED_FIXERS_TEMPLATE = "PHP CS Fixer failed fixers: {fixers}"


class CursorState(str, Enum):
    COUNTING = "counting"
    FROZEN = "frozen"


class FirstLineCursor:
    """청크의 첫 변경 라인 번호를 계산하는 2상태 커서.

    COUNTING 상태에서는 변경 없는 라인마다 번호를 올리고, 처음 추가/삭제
    라인을 만나면 FROZEN으로 바뀌어 이후 라인은 번호에 영향을 주지 않는다.
    시작 번호가 0인 청크는 처음부터 FROZEN이며 라인 번호는 None이다.
    """

    def __init__(self, start: int) -> None:
        self.line: Optional[int]
        if start == 0:
            self.line = None
            self.state = CursorState.FROZEN
        else:
            self.line = start
            self.state = CursorState.COUNTING

    def feed(self, line_type: LineType) -> None:
        if self.state is CursorState.FROZEN:
            return
        if line_type is LineType.UNCHANGED:
            self.line = (self.line or 0) + 1
            return
        self.state = CursorState.FROZEN


@dataclass
class ExtractionResult:
    violations: List[Violation] = field(default_factory=list)
    # 판정에 쓰는 경고 수로 청크 개수만 센다.
    warning_count: int = 0


def render_chunk(chunk: Chunk) -> List[str]:
    return [LINE_SYMBOLS[line.type] + line.content for line in chunk.lines]


def first_modified_line(chunk: Chunk) -> Optional[int]:
    cursor = FirstLineCursor(chunk.start)
    for line in chunk.lines:
        cursor.feed(line.type)
    return cursor.line


def parse_report(output: str) -> Dict[str, Any]:
    try:
        data = json.loads((output or "").strip())
    except ValueError as exc:
        raise ReportParseError("Could not process the report generated by PHP CS Fixer.") from exc
    if not isinstance(data, dict):
        raise ReportParseError("Could not process the report generated by PHP CS Fixer.")
    return data


def extract_violations(report: Dict[str, Any], plugin_name: str) -> ExtractionResult:
    result = ExtractionResult()
    files = report.get("files") or []
    if not isinstance(files, list):
        raise ReportParseError("Report field 'files' must be a list")

    for entry in files:
        if not isinstance(entry, dict) or not isinstance(entry.get("diff"), str):
            raise ReportParseError(f"Report entry without diff: {entry!r}")
        filename = entry.get("name")
        if not isinstance(filename, str) or not filename:
            raise ReportParseError(f"Report entry without file name: {entry!r}")
        applied_fixers = entry.get("appliedFixers") or []
        # 수정기 목록은 문자열 배열이어야 한다.
        if not isinstance(applied_fixers, list) or not all(isinstance(item, str) for item in applied_fixers):
            raise ReportParseError(f"Invalid appliedFixers for {filename}: {applied_fixers!r}")
        diffs = parse_diff(entry["diff"])
        if not diffs:
            raise ReportParseError(f"Could not parse diff for {filename}")

        # 보고서의 diff는 파일 하나에 대한 것이므로 첫 Diff만 사용한다.
        for chunk in diffs[0].chunks:
            message = SUGGESTION_TEMPLATE.format(diff="\r\n".join(render_chunk(chunk)))
            result.violations.append(
                Violation(
                    plugin=plugin_name,
                    message=message,
                    severity=Severity.LOW,
                    file=filename,
                    line=first_modified_line(chunk),
                )
            )
            result.warning_count += 1

        if applied_fixers:
            result.violations.append(
                Violation(
                    plugin=plugin_name,
                    message=FAILED_FIXERS_TEMPLATE.format(fixers=", ".join(applied_fixers)),
                    severity=Severity.LOW,
                    file=filename,
                )
            )

    return result
