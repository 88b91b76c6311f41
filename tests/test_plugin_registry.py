"""이 파일은 .py 테스트 모듈로 플러그인 종류 등록과 빌드 설정 로딩을 검증합니다."""

from buildrunner.core.errors import PluginConfigError
from buildrunner.core.plugin_registry import (
    PLUGIN_KINDS,
    create_plugin,
    load_build_config,
    parse_build_config,
    section_policies,
)
from buildrunner.core.types import BuildContext
from buildrunner.plugins import PhpCsFixer

BUILD_CONFIG = """
test:
  php_cs_fixer:
    errors: true
    report_errors: true
    allowed_warnings: 2
complete:
  telegram_notify:
    auth_token: "%ENV:TG_TOKEN%"
    recipients:
      - -100123/4
"""


def test_known_plugin_kinds() -> None:
    assert set(PLUGIN_KINDS) == {"php_cs_fixer", "telegram_notify"}


def test_load_build_config(tmp_path) -> None:
    path = tmp_path / ".ci-runner.yml"
    path.write_text(BUILD_CONFIG)

    config = load_build_config(path)

    assert list(config) == ["test", "complete"]
    assert config["test"]["php_cs_fixer"]["allowed_warnings"] == 2
    assert config["complete"]["telegram_notify"]["recipients"] == ["-100123/4"]


def test_plugin_without_options() -> None:
    config = parse_build_config({"test": {"php_cs_fixer": None}})
    assert config == {"test": {"php_cs_fixer": {}}}


def test_unknown_stage_and_plugin() -> None:
    for data in ({"deploy": {}}, {"test": {"phpunit": {}}}, ["test"]):
        try:
            parse_build_config(data)
        except PluginConfigError:
            continue
        raise AssertionError(f"PluginConfigError not raised for {data!r}")


def test_create_plugin() -> None:
    plugin = create_plugin("php_cs_fixer", BuildContext(build_id=1), {"errors": True})
    assert isinstance(plugin, PhpCsFixer)
    try:
        create_plugin("phpunit", BuildContext(build_id=1))
    except PluginConfigError as exc:
        assert "phpunit" in str(exc)
    else:
        raise AssertionError("PluginConfigError not raised")


def test_section_policies() -> None:
    policies = section_policies()
    assert policies["telegram_notify"] == "skip"
    assert policies["php_cs_fixer"] == "full"
