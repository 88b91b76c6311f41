"""이 파일은 .py 버전 협상 모듈로 도구 버전 해석과 범위 비교를 제공합니다."""

import re
from typing import Tuple

from .errors import VersionProbeError

VERSION_PATTERN = re.compile(r"(\d+\.\d+\.\d+)")

Version = Tuple[int, int, int]


def parse_version(output: str, tool_name: str = "the tool") -> Version:
    # 자유 형식 출력에서 처음 나오는 x.y.z 문자열만 사용한다.
    match = VERSION_PATTERN.search(output or "")
    if not match:
        raise VersionProbeError(f"Unable to determine the version of {tool_name}.")
    major, minor, patch = (int(part) for part in match.group(1).split("."))
    return major, minor, patch


def version_in_range(version: Version, minimum: Version, maximum_exclusive: Version) -> bool:
    # [minimum, maximum_exclusive) 반개구간 비교이다.
    return minimum <= version < maximum_exclusive


def format_version(version: Version) -> str:
    return ".".join(str(part) for part in version)
