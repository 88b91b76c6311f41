"""이 파일은 .py 플러그인 레지스트리 모듈로 알려진 플러그인 종류와 빌드 설정 로딩을 담당합니다."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Type

import yaml

from buildrunner.plugins import PhpCsFixer, TelegramNotify

from .errors import PluginConfigError
from .plugin_base import BasePlugin
from .types import BuildContext

# 파이프라인이 실행할 수 있는 플러그인 종류는 여기에 나열된 것뿐이다.
PLUGIN_KINDS: Dict[str, Type[BasePlugin]] = {
    PhpCsFixer.plugin_name: PhpCsFixer,
    TelegramNotify.plugin_name: TelegramNotify,
}
STAGES = ("setup", "test", "success", "failure", "complete")

BuildConfig = Dict[str, Dict[str, Dict[str, Any]]]


def create_plugin(name: str, context: BuildContext, options: Optional[Dict[str, Any]] = None) -> BasePlugin:
    plugin_class = PLUGIN_KINDS.get(name)
    if plugin_class is None:
        raise PluginConfigError(f"Unknown plugin: {name}")
    return plugin_class(context, options)


def section_policies() -> Dict[str, str]:
    # 알림 로그 요약에서 플러그인별 구간 처리 방식을 알려준다.
    return {name: plugin_class.log_summary for name, plugin_class in PLUGIN_KINDS.items()}


def parse_build_config(data: Any) -> BuildConfig:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PluginConfigError("Build config must be a mapping of stages")

    config: BuildConfig = {}
    for stage, plugins in data.items():
        if stage not in STAGES:
            raise PluginConfigError(f"Unknown stage: {stage}")
        plugins = plugins or {}
        if not isinstance(plugins, dict):
            raise PluginConfigError(f"Stage '{stage}' must map plugin names to options")
        stage_config: Dict[str, Dict[str, Any]] = {}
        for name, options in plugins.items():
            if name not in PLUGIN_KINDS:
                raise PluginConfigError(f"Unknown plugin: {name}")
            # 옵션 없이 이름만 적은 플러그인은 기본 설정으로 실행한다.
            options = options or {}
            if not isinstance(options, dict):
                raise PluginConfigError(f"Options of '{name}' must be a mapping")
            stage_config[str(name)] = options
        config[str(stage)] = stage_config
    return config


def load_build_config(path: Path) -> BuildConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Build config not found: {path}")
    return parse_build_config(yaml.safe_load(path.read_text(encoding="utf-8")))
