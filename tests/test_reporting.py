"""이 파일은 .py 테스트 모듈로 위반 요약과 보고서 파일 생성을 검증합니다."""

import csv
import json

from buildrunner.core.types import BuildContext, Severity
from buildrunner.services import reporting
from buildrunner.services.reporting import default_report_path, summarize_violations, write_report


def _context():
    context = BuildContext(build_id=9, branch="main")
    context.report_error("php_cs_fixer", "suggestion", Severity.LOW, "a.php", 4)
    context.report_error("php_cs_fixer", "failed fixers", Severity.LOW, "a.php")
    context.report_error("phpstan", "bad call", Severity.HIGH, "b.php", 10)
    context.store_meta("php_cs_fixer-warnings", 1)
    return context


def test_summarize_violations() -> None:
    assert summarize_violations(_context().violations) == {"Low": 2, "High": 1}


def test_write_json_report(tmp_path) -> None:
    path = write_report(_context(), tmp_path / "out" / "report.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["build"]["id"] == 9
    assert payload["meta"] == {"php_cs_fixer-warnings": 1}
    assert payload["violations"][0]["line"] == 4
    assert payload["violations"][1]["line"] is None


def test_write_csv_report(tmp_path) -> None:
    path = write_report(_context(), tmp_path / "report.csv", "CSV")
    with path.open(encoding="utf-8") as handle:
        rows = list(csv.DictReader(handle))
    assert [row["severity"] for row in rows] == ["Low", "Low", "High"]


def test_unsupported_format(tmp_path) -> None:
    try:
        write_report(_context(), tmp_path / "report.xml", "xml")
    except ValueError as exc:
        assert "xml" in str(exc)
    else:
        raise AssertionError("ValueError not raised")


def test_default_report_path_under_reports_dir(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(reporting, "REPORTS_DIR", tmp_path)
    assert default_report_path(9, "CSV") == tmp_path / "build-9" / "report.csv"
    assert default_report_path(9, base_dir=tmp_path / "other") == tmp_path / "other" / "build-9" / "report.json"
