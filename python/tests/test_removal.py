"""Tests for forget, forget_using_history and forget_all."""

import pytest

import remember
from remember import File, UsageError
from remember.config import DEFAULT_CACHE_NAME
from remember.registry import CacheRegistry


def _run(stage, records):
    return list(stage.process(records))


def _warnings(caplog):
    return [r for r in caplog.records if r.name == "remember.diagnostics"]


def test_forgets_a_file_it_used_to_know():
    registry = CacheRegistry()
    _run(remember.remember("forget", registry=registry),
         [File("./fixture/one"), File("./fixture/two")])
    assert remember.forget("forget", "./fixture/one", registry=registry) is True
    out = _run(remember.remember("forget", registry=registry), [])
    assert [f.path for f in out] == ["./fixture/two"]


def test_forget_also_drops_history_entries():
    registry = CacheRegistry()
    _run(remember.remember("hist", registry=registry), [File("new", None, ["old", "new"])])
    remember.forget("hist", "new", registry=registry)
    assert dict(registry.history_for("hist")) == {}


def test_forget_missing_cache_warns_without_raising(caplog):
    registry = CacheRegistry()
    assert remember.forget("nonexistent-cache", "some/path", registry=registry) is False
    warnings = _warnings(caplog)
    assert warnings
    assert warnings[0].args[0] == "remember"
    assert "nonexistent-cache" in warnings[0].args[1]
    assert warnings[0].event == "forget.cache_missing"
    assert len(registry) == 0


def test_forget_missing_path_warns_without_raising(caplog):
    registry = CacheRegistry()
    remember.remember("cacheThatExists", registry=registry)
    assert remember.forget("cacheThatExists", "missing/path", registry=registry) is False
    warnings = _warnings(caplog)
    assert warnings[0].args[0] == "remember"
    assert "missing/path" in warnings[0].args[1]
    assert "cacheThatExists" in warnings[0].args[1]
    assert warnings[0].path == "missing/path"


def test_forget_single_argument_uses_default_cache():
    registry = CacheRegistry()
    _run(remember.remember(registry=registry), [File("solo"), File("kept")])
    assert remember.forget("solo", registry=registry) is True
    assert list(registry.files_for(DEFAULT_CACHE_NAME)) == ["kept"]


def test_forget_rejects_bad_cache_name():
    with pytest.raises(UsageError):
        remember.forget(["bad"], "path", registry=CacheRegistry())


def test_forget_does_not_resolve_history():
    registry = CacheRegistry()
    _run(remember.remember("strict", registry=registry), [File("new", None, ["old", "new"])])
    assert remember.forget("strict", "old", registry=registry) is False
    assert list(registry.files_for("strict")) == ["new"]


def test_forget_using_history_resolves_old_path():
    registry = CacheRegistry()
    _run(remember.remember("renamed", registry=registry),
         [File("new/name", b"x", ["old/name", "new/name"])])
    assert remember.forget_using_history("renamed", "old/name", registry=registry) is True
    out = _run(remember.remember("renamed", registry=registry), [])
    assert out == []
    assert dict(registry.history_for("renamed")) == {}


def test_forget_using_history_prefers_current_path():
    registry = CacheRegistry()
    _run(remember.remember("prefer", registry=registry),
         [File("b", None, ["a", "b"]), File("a")])
    assert remember.forget_using_history("prefer", "a", registry=registry) is True
    assert list(registry.files_for("prefer")) == ["b"]


def test_forget_using_history_after_rename():
    registry = CacheRegistry()
    f = File("src/app.ts", b"code")
    f.rename("dist/app.js")
    _run(remember.remember("pipeline", registry=registry), [f, File("dist/lib.js")])
    remember.forget_using_history("pipeline", "src/app.ts", registry=registry)
    assert list(registry.files_for("pipeline")) == ["dist/lib.js"]


def test_forget_using_history_unknown_path_warns(caplog):
    registry = CacheRegistry()
    remember.remember("known", registry=registry)
    assert remember.forget_using_history("known", "never/seen", registry=registry) is False
    warnings = _warnings(caplog)
    assert "never/seen" in warnings[0].args[1]
    assert warnings[0].event == "forget.file_missing"


def test_forget_using_history_unknown_cache_warns(caplog):
    registry = CacheRegistry()
    assert remember.forget_using_history("ghost-cache", "x", registry=registry) is False
    assert "ghost-cache" in _warnings(caplog)[0].args[1]


def test_forget_using_history_single_argument():
    registry = CacheRegistry()
    _run(remember.remember(registry=registry), [File("b", None, ["a", "b"])])
    assert remember.forget_using_history("a", registry=registry) is True
    assert dict(registry.files_for()) == {}


def test_forget_all_clears_cache():
    registry = CacheRegistry()
    stage = remember.remember("all", registry=registry)
    _run(stage, [File("a", None, ["z", "a"]), File("b")])
    assert remember.forget_all("all", registry=registry) is True
    assert dict(registry.files_for("all")) == {}
    assert dict(registry.history_for("all")) == {}
    assert registry.get("all") is stage.cache


def test_forget_all_missing_cache_warns(caplog):
    registry = CacheRegistry()
    assert remember.forget_all("absent", registry=registry) is False
    assert "absent" in _warnings(caplog)[0].args[1]


def test_forget_all_defaults_to_default_cache():
    registry = CacheRegistry()
    _run(remember.remember(registry=registry), [File("d")])
    assert remember.forget_all(registry=registry) is True
    assert len(registry.get_or_create()) == 0
