"""이 파일은 .py 설정 모듈로 경로와 기본값을 정의합니다."""

import os
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_BUILD_CONFIG = os.getenv("CI_RUNNER_CONFIG", ".ci-runner.yml")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
TELEGRAM_API_URL = os.getenv("TELEGRAM_API_URL", "https://api.telegram.org")
REPORTS_DIR = Path(os.getenv("REPORTS_DIR", str(REPO_ROOT / "storage" / "reports")))
# 빌드 로그에서 플러그인 구간을 나누는 표식이다.
PLUGIN_SECTION_MARKER = "RUNNING PLUGIN: "
