"""
Shared fixtures cho test suite.

Settings file luon tro vao tmp_path: test khong bao gio doc/ghi
~/.spellscan/settings.json that.
"""

import pytest

from core.dictionary import Dictionary


@pytest.fixture(autouse=True)
def isolated_settings_file(tmp_path, monkeypatch):
    """Redirect SETTINGS_FILE vao thu muc tam cua moi test."""
    settings_file = tmp_path / "settings" / "settings.json"
    monkeypatch.setattr("config.paths.SETTINGS_FILE", settings_file)
    return settings_file


@pytest.fixture
def small_dictionary():
    """Dictionary nho du cho cac scenario co ban."""
    return Dictionary(
        [
            "hello",
            "world",
            "this",
            "is",
            "a",
            "test",
            "error",
            "errors",
            "another",
            "typo",
            "file",
            "with",
            "no",
            "they're",
            "state-of-the-art",
        ]
    )
