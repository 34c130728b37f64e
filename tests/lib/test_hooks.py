import logging

import pytest

from gridfilter.lib.hooks import LocalHooks


def test_run_calls_callbacks_in_registration_order():
    hooks = LocalHooks()
    calls = []
    hooks.add("evt", lambda x: calls.append(("a", x)))
    hooks.add("evt", lambda x: calls.append(("b", x)))
    hooks.run("evt", 1)
    assert calls == [("a", 1), ("b", 1)]
    assert hooks.count("evt") == 2


def test_run_without_listeners_is_noop():
    LocalHooks().run("nothing")


def test_restricted_events_reject_unknown_names():
    hooks = LocalHooks(["beforeAdd"])
    with pytest.raises(ValueError):
        hooks.add("afterAdd", lambda: None)


def test_add_rejects_non_callable():
    with pytest.raises(TypeError):
        LocalHooks().add("evt", "nope")  # type: ignore[arg-type]


def test_remove_missing_hook_logs_warning(caplog):
    hooks = LocalHooks()
    with caplog.at_level(logging.WARNING, logger="gridfilter.lib.hooks"):
        hooks.remove("evt", print)
    assert "não registrado" in caplog.text


def test_callback_may_remove_itself_while_running():
    hooks = LocalHooks()
    calls = []

    def once():
        calls.append(1)
        hooks.remove("evt", once)

    hooks.add("evt", once)
    hooks.run("evt")
    hooks.run("evt")
    assert calls == [1]


def test_clear_drops_all_callbacks():
    hooks = LocalHooks()
    hooks.add("a", print)
    hooks.add("b", print)
    hooks.clear()
    assert hooks.count() == 0
