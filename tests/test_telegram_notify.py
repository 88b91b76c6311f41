"""이 파일은 .py 테스트 모듈로 텔레그램 알림 플러그인을 검증합니다."""

import requests

from buildrunner.core.errors import NotificationError, PluginConfigError
from buildrunner.core.types import BuildContext
from buildrunner.plugins.telegram_notify import TelegramNotify


class FakeResponse:
    def __init__(self, status_code=200, text='{"ok": true}'):
        self.status_code = status_code
        self.text = text

    def json(self):
        return {"ok": self.status_code < 400}


def _capture_posts(monkeypatch, status_for=None):
    posts = []
    status_for = status_for or {}

    def fake_post(url, json=None, headers=None, timeout=None):
        posts.append({"url": url, "json": json, "timeout": timeout})
        return FakeResponse(status_code=status_for.get(json["chat_id"], 200))

    monkeypatch.setattr(requests, "post", fake_post)
    return posts


def test_missing_auth_token_fails_construction() -> None:
    try:
        TelegramNotify(BuildContext(build_id=1), {"recipients": ["1"]})
    except PluginConfigError as exc:
        assert "auth_token" in str(exc)
    else:
        raise AssertionError("PluginConfigError not raised")


def test_blank_auth_token_fails_construction() -> None:
    try:
        TelegramNotify(BuildContext(build_id=1), {"auth_token": "   ", "recipients": ["1"]})
    except PluginConfigError as exc:
        assert "auth_token" in str(exc)
    else:
        raise AssertionError("PluginConfigError not raised")


def test_auth_token_empty_after_env_interpolation_fails(monkeypatch) -> None:
    monkeypatch.setenv("TELEGRAM_TOKEN", " ")
    try:
        TelegramNotify(BuildContext(build_id=1), {"auth_token": "%ENV:TELEGRAM_TOKEN%", "recipients": ["1"]})
    except PluginConfigError as exc:
        assert "auth_token" in str(exc)
    else:
        raise AssertionError("PluginConfigError not raised")


def test_missing_recipients_fails_construction() -> None:
    for options in ({"auth_token": "t"}, {"auth_token": "t", "recipients": []}):
        try:
            TelegramNotify(BuildContext(build_id=1), options)
        except PluginConfigError as exc:
            assert "recipients" in str(exc)
        else:
            raise AssertionError("PluginConfigError not raised")


def test_single_recipient_is_normalized() -> None:
    plugin = TelegramNotify(BuildContext(build_id=1), {"auth_token": "t", "recipients": -100123})
    assert plugin.options.recipients == ["-100123"]


def test_auth_token_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("TG_TOKEN", "secret-token")
    plugin = TelegramNotify(
        BuildContext(build_id=1),
        {"auth_token": "%ENV:TG_TOKEN%", "recipients": "1"},
    )
    assert plugin.auth_token == "secret-token"


def test_execute_posts_message_and_log(monkeypatch) -> None:
    posts = _capture_posts(monkeypatch)
    context = BuildContext(build_id=7, branch="main", success=True)
    context.log("RUNNING PLUGIN: php_cs_fixer")
    context.log("PLUGIN: SUCCESS")
    plugin = TelegramNotify(
        context,
        {
            "auth_token": "abc",
            "recipients": ["100/5", "200"],
            "message": "%ICON_BUILD% build %BUILD_ID%",
            "send_log": True,
        },
    )

    assert plugin.execute() is True
    assert len(posts) == 4
    assert posts[0]["url"] == "https://api.telegram.org/botabc/sendMessage"
    assert posts[0]["json"] == {
        "chat_id": "100",
        "text": "✅ build 7",
        "parse_mode": "Markdown",
        "message_thread_id": "5",
    }
    assert posts[1]["json"]["text"].startswith("*RUNNING PLUGIN: php_cs_fixer*")
    assert "message_thread_id" not in posts[2]["json"]


def test_execute_is_best_effort_by_default(monkeypatch) -> None:
    posts = _capture_posts(monkeypatch, status_for={"100": 403})
    plugin = TelegramNotify(
        BuildContext(build_id=1),
        {"auth_token": "abc", "recipients": ["100", "200"]},
    )

    assert plugin.execute() is True
    assert [post["json"]["chat_id"] for post in posts] == ["100", "200"]


def test_execute_fail_policy(monkeypatch) -> None:
    _capture_posts(monkeypatch, status_for={"100": 500})
    plugin = TelegramNotify(
        BuildContext(build_id=1),
        {"auth_token": "abc", "recipients": ["100", "200"], "on_send_error": "fail"},
    )
    try:
        plugin.execute()
    except NotificationError as exc:
        assert "100" in str(exc)
    else:
        raise AssertionError("NotificationError not raised")
