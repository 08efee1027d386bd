"""Tests for the dark-mode preference store."""

import json

import pytest

from my_location_base.errors import StorageWriteError
from my_location_base.services.preferences import (
    DARK_MODE_KEY,
    PreferenceStore,
    get_item,
    load_preferences,
    set_item,
)


async def test_default_is_false(tmp_path) -> None:
    store = PreferenceStore(tmp_path / "preferences.json")
    assert await store.get_dark_mode() is False


async def test_round_trip_across_restart(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    await PreferenceStore(path).set_dark_mode(True)
    assert await PreferenceStore(path).get_dark_mode() is True
    await PreferenceStore(path).set_dark_mode(False)
    assert await PreferenceStore(path).get_dark_mode() is False


async def test_stored_as_json_encoded_string(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    await PreferenceStore(path).set_dark_mode(True)
    with open(path, encoding="utf-8") as f:
        assert json.load(f) == {DARK_MODE_KEY: "true"}


async def test_corrupt_file_reads_as_false(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("{not json", encoding="utf-8")
    assert await PreferenceStore(path).get_dark_mode() is False


async def test_invalid_value_reads_as_false(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({DARK_MODE_KEY: "yes please"}), encoding="utf-8")
    assert await PreferenceStore(path).get_dark_mode() is False


async def test_write_failure_raises_storage_write_error(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    path.mkdir()
    with pytest.raises(StorageWriteError):
        await PreferenceStore(path).set_dark_mode(True)


def test_set_item_keeps_other_keys(tmp_path) -> None:
    path = tmp_path / "nested" / "preferences.json"
    set_item(path, "other", "1")
    set_item(path, DARK_MODE_KEY, "true")
    assert load_preferences(path) == {"other": "1", DARK_MODE_KEY: "true"}
    assert get_item(path, "missing") is None


def test_load_preferences_ignores_non_object(tmp_path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_preferences(path) == {}
