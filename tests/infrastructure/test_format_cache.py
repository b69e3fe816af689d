"""Tests for the single-entry FormatCache."""

from statusclock.infrastructure.cache import FormatCache


def test_get_returns_value_for_last_key():
    cache = FormatCache[str, int]()
    cache.set("h:mm a", 1)
    assert cache.get("h:mm a") == 1
    assert cache.last_key == "h:mm a"


def test_new_key_evicts_previous_entry():
    cache = FormatCache[str, int]()
    cache.set("h:mm a", 1)
    cache.set("HH:mm", 2)
    assert cache.get("h:mm a") is None
    assert cache.get("HH:mm") == 2
    assert cache.last_key == "HH:mm"


def test_clear():
    cache = FormatCache[str, int]()
    cache.set("h:mm a", 1)
    cache.clear()
    assert cache.get("h:mm a") is None
    assert cache.last_key is None
