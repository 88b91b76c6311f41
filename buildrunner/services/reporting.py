"""이 파일은 .py 리포팅 모듈로 위반 요약과 보고서 파일 생성을 제공합니다."""

from __future__ import annotations

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from buildrunner.core.config import REPORTS_DIR
from buildrunner.core.types import BuildContext, Violation

SUPPORTED_FORMATS = {"json", "csv"}
CSV_FIELDS = ["plugin", "severity", "file", "line", "message"]


def summarize_violations(violations: List[Violation]) -> Dict[str, int]:
    # 심각도별로 카운트를 집계해 요약 정보를 만든다.
    summary: Dict[str, int] = {}
    for violation in violations:
        key = violation.severity.value
        summary[key] = summary.get(key, 0) + 1
    return summary


def default_report_path(build_id: int, report_format: str = "json", base_dir: Optional[Path] = None) -> Path:
    # 빌드별 디렉터리에 형식 확장자로 저장한다.
    root = Path(base_dir) if base_dir is not None else REPORTS_DIR
    return root / f"build-{build_id}" / f"report.{report_format.strip().lower()}"


def write_report(context: BuildContext, file_path: Path, report_format: str = "json") -> Path:
    # 지원 여부를 확인하고 형식을 정규화한다.
    normalized = report_format.strip().lower()
    if normalized not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format: {report_format}")

    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    if normalized == "json":
        _write_json(file_path, _build_json_payload(context))
    else:
        _write_csv(file_path, context.violations)
    return file_path


def _build_json_payload(context: BuildContext) -> Dict[str, Any]:
    # 빌드 정보/메타데이터/위반 목록을 하나의 JSON 페이로드로 구성한다.
    return {
        "build": {
            "id": context.build_id,
            "branch": context.branch,
            "commit_id": context.commit_id,
            "success": context.success,
        },
        "meta": context.meta,
        "summary": summarize_violations(context.violations),
        "violations": [_violation_to_dict(item) for item in context.violations],
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }


def _write_json(file_path: Path, payload: Dict[str, Any]) -> None:
    file_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _write_csv(file_path: Path, violations: List[Violation]) -> None:
    with file_path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for violation in violations:
            writer.writerow(_violation_to_dict(violation))


def _violation_to_dict(item: Violation) -> Dict[str, Any]:
    return {
        "plugin": item.plugin,
        "severity": item.severity.value,
        "file": item.file,
        "line": item.line,
        "message": item.message,
    }
