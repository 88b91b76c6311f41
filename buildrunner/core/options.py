"""이 파일은 .py 플러그인 옵션 검증 모듈로 pydantic 모델 기반 설정 검증을 제공합니다."""

from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import PluginConfigError


class PluginOptions(BaseModel):
    # 알 수 없는 키는 오타로 보고 거부하며, 생성 후에는 변경할 수 없다.
    model_config = ConfigDict(extra="forbid", frozen=True)


OptionsT = TypeVar("OptionsT", bound=PluginOptions)


def validate_options(model: Type[OptionsT], options: Optional[Dict[str, Any]]) -> OptionsT:
    # 설정이 없으면 빈 딕셔너리로 시작한다.
    if options is None:
        options = {}
    if not isinstance(options, dict):
        raise PluginConfigError("Plugin options must be an object")

    try:
        return model.model_validate(options)
    except ValidationError as exc:
        # 누적된 오류를 하나의 예외로 전달한다.
        errors = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"]) or "options"
            errors.append(f"{location}: {error['msg']}")
        raise PluginConfigError("; ".join(errors)) from exc
