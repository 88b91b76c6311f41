"""이 파일은 .py 분석 패키지 초기화 모듈로 diff 파서와 위반 추출기를 노출합니다."""

from .diff_parser import Chunk, Diff, Line, LineType, parse_diff
from .violations import ExtractionResult, FirstLineCursor, extract_violations, parse_report

__all__ = [
    "Chunk",
    "Diff",
    "ExtractionResult",
    "FirstLineCursor",
    "Line",
    "LineType",
    "extract_violations",
    "parse_diff",
    "parse_report",
]
