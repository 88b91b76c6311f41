"""이 파일은 .py 빌드 파이프라인 모듈로 단계별 플러그인 순차 실행과 결과 판정을 담당합니다."""

from __future__ import annotations

import logging
from typing import List, Tuple

from buildrunner.core.config import PLUGIN_SECTION_MARKER
from buildrunner.core.errors import PluginError
from buildrunner.core.plugin_base import BasePlugin
from buildrunner.core.plugin_registry import BuildConfig, create_plugin, section_policies
from buildrunner.core.types import BuildContext

logger = logging.getLogger(__name__)

PLUGIN_SUCCESS = "PLUGIN: SUCCESS"
PLUGIN_FAILED = "PLUGIN: FAILED"


class BuildPipeline:
    def __init__(self, context: BuildContext, build_config: BuildConfig) -> None:
        self.context = context
        self.build_config = build_config
        # 알림 플러그인이 로그 요약 시 참고할 구간 처리 방식을 채운다.
        self.context.section_policies = section_policies()
        # 모든 플러그인 설정을 실행 전에 검증해 잘못된 설정이면 즉시 실패한다.
        self.stages = {
            stage: [(name, create_plugin(name, context, options)) for name, options in plugins.items()]
            for stage, plugins in build_config.items()
        }

    def run(self) -> bool:
        # setup이 실패하면 test는 건너뛴다.
        if not self._run_stage("setup") or not self._run_stage("test"):
            self.context.success = False

        # 결과 단계의 알림/후처리는 빌드 성공 여부를 바꾸지 않는다.
        self._run_stage("success" if self.context.success else "failure")
        self._run_stage("complete")
        logger.info("Build %s finished: success=%s", self.context.build_id, self.context.success)
        return self.context.success

    def _run_stage(self, stage: str) -> bool:
        plugins: List[Tuple[str, BasePlugin]] = self.stages.get(stage, [])
        succeeded = True
        for name, plugin in plugins:
            if not self._run_plugin(name, plugin):
                succeeded = False
        return succeeded

    def _run_plugin(self, name: str, plugin: BasePlugin) -> bool:
        self.context.log(f"{PLUGIN_SECTION_MARKER}{name}")
        try:
            result = plugin.execute()
        except PluginError as exc:
            # 치명적 오류는 원문 그대로 빌드 로그에 남기고 실패로 처리한다.
            self.context.log(str(exc))
            logger.error("Plugin %s failed: %s", name, exc)
            result = False

        self.context.log(PLUGIN_SUCCESS if result else PLUGIN_FAILED)
        return result
