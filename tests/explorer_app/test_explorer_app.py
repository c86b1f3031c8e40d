"""Unit tests for explorer_app module (env helpers, option picking)."""

from __future__ import annotations

import os

import pytest

pytestmark = pytest.mark.requires_nicegui

app = pytest.importorskip("monsterstats.explorer_app.app")


def test_env_bool_unset_returns_default():
    key = "_TEST_MONSTERSTATS_APP_UNSET_XYZ"
    assert key not in os.environ
    assert app._env_bool(key, True) is True
    assert app._env_bool(key, False) is False


@pytest.mark.parametrize("val, expected", [
    ("1", True), ("true", True), ("Yes", True), ("on", True),
    ("0", False), ("false", False), ("No", False), ("off", False),
])
def test_env_bool_values(monkeypatch, val, expected):
    monkeypatch.setenv("_TEST_MONSTERSTATS_APP_BOOL", val)
    assert app._env_bool("_TEST_MONSTERSTATS_APP_BOOL", not expected) is expected


def test_env_bool_invalid_returns_default(monkeypatch):
    monkeypatch.setenv("_TEST_MONSTERSTATS_APP_BOOL", "maybe")
    assert app._env_bool("_TEST_MONSTERSTATS_APP_BOOL", True) is True
    assert app._env_bool("_TEST_MONSTERSTATS_APP_BOOL", False) is False


def test_env_int(monkeypatch):
    key = "_TEST_MONSTERSTATS_APP_INT"
    assert app._env_int(key, 8080) == 8080
    monkeypatch.setenv(key, "9000")
    assert app._env_int(key, 8080) == 9000
    monkeypatch.setenv(key, "not-a-port")
    assert app._env_int(key, 8080) == 8080


def test_pick_prefers_named_option():
    assert app._pick(["name", "size"], "size") == "size"
    assert app._pick(["name", "monster_type"], "size") == "name"
    assert app._pick([], "size") is None
