"""이 파일은 .py 엔트리포인트로 빌드 설정 파일 기준 파이프라인 실행을 제공합니다."""

import argparse
import sys
from pathlib import Path
from typing import Optional

from buildrunner.core.config import DEFAULT_BUILD_CONFIG
from buildrunner.core.errors import PluginConfigError
from buildrunner.core.logging import setup_logging
from buildrunner.core.plugin_registry import load_build_config
from buildrunner.core.types import BuildContext
from buildrunner.services.pipeline import BuildPipeline
from buildrunner.services.reporting import default_report_path, summarize_violations, write_report


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run build plugins against a working copy.")
    parser.add_argument("--config", default=DEFAULT_BUILD_CONFIG, help="YAML build config")
    parser.add_argument("--build-path", default=".", help="working copy to build")
    parser.add_argument("--build-id", type=int, default=0)
    parser.add_argument("--branch", default="")
    parser.add_argument("--commit", default="")
    parser.add_argument("--committer-email", default="")
    parser.add_argument("--project-title", default="")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--report", help="write violations report to this path")
    parser.add_argument("--save-report", action="store_true", help="write violations report under REPORTS_DIR")
    parser.add_argument("--report-format", default="json", choices=["json", "csv"])
    return parser.parse_args(argv)


def _report_path(args: argparse.Namespace) -> Optional[Path]:
    if args.report:
        return Path(args.report)
    if args.save_report:
        return default_report_path(args.build_id, args.report_format)
    return None


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging("DEBUG" if args.debug else "INFO")

    build_path = Path(args.build_path)
    config_path = Path(args.config)
    if not config_path.is_absolute():
        config_path = build_path / config_path

    context = BuildContext(
        build_id=args.build_id,
        build_path=str(build_path.resolve()),
        commit_id=args.commit,
        committer_email=args.committer_email,
        branch=args.branch,
        project_title=args.project_title,
        debug=args.debug,
    )
    try:
        pipeline = BuildPipeline(context, load_build_config(config_path))
    except (PluginConfigError, FileNotFoundError) as exc:
        print(f"Invalid build config: {exc}", file=sys.stderr)
        return 2

    success = pipeline.run()
    print(context.log_text)
    print(f"Violations: {summarize_violations(context.violations)}")
    report_path = _report_path(args)
    if report_path is not None:
        write_report(context, report_path, args.report_format)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
