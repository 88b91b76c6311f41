"""이 파일은 .py 테스트 모듈로 unified diff 파싱을 검증합니다."""

from buildrunner.analysis.diff_parser import LineType, parse_diff
from buildrunner.core.errors import DiffParseError

FIXER_DIFF = (
    "--- Original\n"
    "+++ New\n"
    "@@ -1,4 +1,4 @@\n"
    " <?php\n"
    "-$a = array();\n"
    "+$a = [];\n"
    " \n"
    "@@ -10 +10,2 @@\n"
    "-echo 1;\n"
    "+echo 1;\n"
    "+\n"
    "\\ No newline at end of file\n"
)


def test_parse_diff_with_file_headers() -> None:
    diffs = parse_diff(FIXER_DIFF)
    assert len(diffs) == 1
    diff = diffs[0]
    assert diff.from_file == "Original"
    assert diff.to_file == "New"
    assert [chunk.start for chunk in diff.chunks] == [1, 10]
    assert diff.chunks[0].start_range == 4
    # 범위가 생략된 헤더는 1로 본다.
    assert diff.chunks[1].start_range == 1
    assert diff.chunks[1].end_range == 2


def test_parse_diff_line_types() -> None:
    chunk = parse_diff(FIXER_DIFF)[0].chunks[0]
    assert [line.type for line in chunk.lines] == [
        LineType.UNCHANGED,
        LineType.REMOVED,
        LineType.ADDED,
        LineType.UNCHANGED,
    ]
    assert chunk.lines[1].content == "$a = array();"
    assert chunk.lines[3].content == ""


def test_parse_diff_skips_no_newline_marker() -> None:
    chunk = parse_diff(FIXER_DIFF)[0].chunks[1]
    assert len(chunk.lines) == 3


def test_parse_diff_without_header_is_anonymous() -> None:
    diffs = parse_diff("@@ -3,2 +3,3 @@\n unchanged\n-old\n+new\n")
    assert len(diffs) == 1
    assert diffs[0].from_file is None
    assert len(diffs[0].chunks) == 1
    assert len(diffs[0].chunks[0].lines) == 3


def test_parse_diff_multiple_files_and_git_noise() -> None:
    text = (
        "diff --git a/a.php b/a.php\n"
        "index 1234abc..5678def 100644\n"
        "--- a/a.php\n"
        "+++ b/a.php\n"
        "@@ -1 +1 @@\n"
        "-x\n"
        "+y\n"
        "--- a/b.php\n"
        "+++ b/b.php\n"
        "@@ -0,0 +1 @@\n"
        "+<?php\n"
    )
    diffs = parse_diff(text)
    assert [diff.to_file for diff in diffs] == ["b/a.php", "b/b.php"]
    assert diffs[1].chunks[0].start == 0


def test_parse_diff_empty_text() -> None:
    assert parse_diff("") == []


def test_parse_diff_invalid_chunk_header() -> None:
    try:
        parse_diff("--- a\n+++ b\n@@ broken @@\n")
    except DiffParseError as exc:
        assert "broken" in str(exc)
    else:
        raise AssertionError("DiffParseError not raised")


def test_parse_diff_bare_chunk_header_starts_at_zero() -> None:
    # 2.8.0 이전 PHP CS Fixer는 라인 번호 없는 "@@ @@" 헤더를 출력한다.
    diffs = parse_diff("--- Original\n+++ New\n@@ @@\n-$a = array();\n+$a = [];\n")
    chunk = diffs[0].chunks[0]
    assert (chunk.start, chunk.start_range, chunk.end, chunk.end_range) == (0, 1, 0, 1)
    assert [line.type for line in chunk.lines] == [LineType.REMOVED, LineType.ADDED]
