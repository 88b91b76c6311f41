"""이 파일은 .py 정적 분석 데모 실행 스크립트로 PHP CS Fixer 보고 모드를 검증합니다."""

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

from buildrunner.core.logging import setup_logging
from buildrunner.core.plugin_registry import create_plugin
from buildrunner.core.types import BuildContext

PLUGIN_NAME = "php_cs_fixer"


def main() -> None:
    setup_logging()
    build_path = sys.argv[1] if len(sys.argv) > 1 else "."
    context = BuildContext(build_id=0, build_path=str(Path(build_path).resolve()), debug=True)
    plugin = create_plugin(
        PLUGIN_NAME,
        context,
        {"errors": True, "report_errors": True, "allowed_warnings": -1},
    )
    success = plugin.execute()

    print(f"Success: {success}")
    print(f"Warnings: {context.meta.get(PLUGIN_NAME + '-warnings')}")
    for violation in context.violations:
        print(f"- {violation.file}:{violation.line} | {violation.severity.value}")


if __name__ == "__main__":
    main()
