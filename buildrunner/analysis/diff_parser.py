"""이 파일은 .py diff 파서 모듈로 unified diff 텍스트를 청크/라인 단위로 구조화합니다."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from buildrunner.core.errors import DiffParseError

FROM_FILE_PATTERN = re.compile(r'^---\s+"?(?P<file>[^\t"]+)')
TO_FILE_PATTERN = re.compile(r'^\+\+\+\s+"?(?P<file>[^\t"]+)')
CHUNK_HEADER_PATTERN = re.compile(
    r"^@@\s+-(?P<start>\d+)(?:,\s*(?P<start_range>\d+))?"
    r"\s+\+(?P<end>\d+)(?:,\s*(?P<end_range>\d+))?\s+@@"
)
# 2.8.0 이전 PHP CS Fixer의 기본 diff는 청크 헤더에 라인 번호가 없다.
BARE_CHUNK_HEADER_PATTERN = re.compile(r"^@@\s*@@")
# git diff가 붙이는 부가 헤더는 내용과 무관하므로 건너뛴다.
NOISE_PATTERN = re.compile(r"^(?:diff --git |index [\da-f.]+|[+-]{3} [ab]/)")
NO_NEWLINE_MARKER = "\\"


class LineType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Line:
    type: LineType
    content: str


@dataclass
class Chunk:
    # start가 0이면 파일 시작부터 바뀐 청크이다.
    start: int
    start_range: int
    end: int
    end_range: int
    lines: List[Line] = field(default_factory=list)


@dataclass
class Diff:
    # 파일 헤더 없이 청크만 있는 diff는 파일명이 None이다.
    from_file: Optional[str]
    to_file: Optional[str]
    chunks: List[Chunk] = field(default_factory=list)


def parse_diff(text: str) -> List[Diff]:
    lines = re.split(r"\r\n|\r|\n", text or "")
    if lines and lines[-1] == "":
        lines.pop()

    diffs: List[Diff] = []
    current: Optional[Diff] = None
    collected: List[str] = []
    index = 0
    while index < len(lines):
        line = lines[index]
        next_line = lines[index + 1] if index + 1 < len(lines) else ""
        from_match = FROM_FILE_PATTERN.match(line)
        to_match = TO_FILE_PATTERN.match(next_line)
        if from_match and to_match:
            # 새 파일 헤더가 나오면 이전 파일의 청크를 마무리한다.
            _flush(diffs, current, collected)
            current = Diff(from_match.group("file").strip(), to_match.group("file").strip())
            collected = []
            index += 2
            continue
        if not NOISE_PATTERN.match(line):
            collected.append(line)
        index += 1

    _flush(diffs, current, collected)
    return diffs


def _flush(diffs: List[Diff], current: Optional[Diff], collected: List[str]) -> None:
    if current is None:
        # 헤더 없이 청크만 있는 입력은 이름 없는 Diff 하나로 본다.
        if not any(item.startswith("@@") for item in collected):
            return
        current = Diff(None, None)
    current.chunks = _parse_chunks(collected)
    diffs.append(current)


def _parse_chunks(lines: List[str]) -> List[Chunk]:
    chunks: List[Chunk] = []
    chunk: Optional[Chunk] = None
    for line in lines:
        if line.startswith("@@"):
            chunk = _parse_chunk_header(line)
            chunks.append(chunk)
            continue
        # 첫 청크 헤더 이전의 줄은 청크에 속하지 않는다.
        if chunk is None or line.startswith(NO_NEWLINE_MARKER):
            continue
        chunk.lines.append(_parse_line(line))
    return chunks


def _parse_chunk_header(line: str) -> Chunk:
    if BARE_CHUNK_HEADER_PATTERN.match(line):
        # 위치를 알 수 없으므로 파일 시작(0)으로 본다.
        return Chunk(start=0, start_range=1, end=0, end_range=1)
    match = CHUNK_HEADER_PATTERN.match(line)
    if not match:
        raise DiffParseError(f"Invalid chunk header: {line}")
    start_range = match.group("start_range")
    end_range = match.group("end_range")
    return Chunk(
        start=int(match.group("start")),
        start_range=max(1, int(start_range)) if start_range is not None else 1,
        end=int(match.group("end")),
        end_range=max(1, int(end_range)) if end_range is not None else 1,
    )


def _parse_line(line: str) -> Line:
    if line.startswith("+"):
        return Line(LineType.ADDED, line[1:])
    if line.startswith("-"):
        return Line(LineType.REMOVED, line[1:])
    if line.startswith(" "):
        return Line(LineType.UNCHANGED, line[1:])
    return Line(LineType.UNCHANGED, line)
