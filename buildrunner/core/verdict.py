"""이 파일은 .py 판정 모듈로 허용 경고 수 기반 성공/실패를 결정합니다."""

import logging

from .types import BuildContext

logger = logging.getLogger(__name__)

# 허용치가 이 값이면 경고 수와 무관하게 통과한다.
UNLIMITED = -1


def passes(count: int, allowed: int) -> bool:
    if allowed == UNLIMITED:
        return True
    return count <= allowed


def warnings_meta_key(plugin_name: str) -> str:
    return f"{plugin_name}-warnings"


def apply_verdict(context: BuildContext, plugin_name: str, count: int, allowed: int) -> bool:
    # 통과 여부와 관계없이 경고 수는 추세 확인용으로 항상 저장한다.
    context.store_meta(warnings_meta_key(plugin_name), count)
    result = passes(count, allowed)
    if not result:
        logger.info("%s: %d warnings exceed allowance %d", plugin_name, count, allowed)
    return result
