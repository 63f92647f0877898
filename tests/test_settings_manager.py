"""
Tests cho settings_manager: load JSON, file hong, value sai type.
"""

import json

from config.app_settings import AppSettings
from services.settings_manager import load_app_settings


def _write_settings(settings_file, content: str) -> None:
    settings_file.parent.mkdir(parents=True, exist_ok=True)
    settings_file.write_text(content, encoding="utf-8")


class TestLoadAppSettings:
    def test_missing_file_gives_defaults(self, isolated_settings_file):
        """Chua co settings file -> defaults."""
        assert not isolated_settings_file.exists()
        assert load_app_settings() == AppSettings()

    def test_corrupt_file_gives_defaults(self, isolated_settings_file):
        """JSON hong -> defaults, khong raise."""
        _write_settings(isolated_settings_file, "{not json")
        assert load_app_settings() == AppSettings()

    def test_non_object_gives_defaults(self, isolated_settings_file):
        """JSON khong phai object -> defaults."""
        _write_settings(isolated_settings_file, "[1, 2]")
        assert load_app_settings() == AppSettings()

    def test_reads_saved_values(self, isolated_settings_file):
        """Values trong file duoc dua vao AppSettings."""
        _write_settings(
            isolated_settings_file,
            json.dumps(
                {
                    "excluded_patterns": "*.log",
                    "max_workers": 3,
                    "use_system_word_list": True,
                }
            ),
        )
        settings = load_app_settings()
        assert settings.get_excluded_patterns_list() == ["*.log"]
        assert settings.max_workers == 3
        assert settings.use_system_word_list is True

    def test_extra_keys_and_wrong_types_tolerated(self, isolated_settings_file):
        """Key la bi bo qua, value sai type dung default."""
        _write_settings(
            isolated_settings_file,
            json.dumps({"custom": "keep", "queue_size": "big", "verbose": True}),
        )
        settings = load_app_settings()
        assert settings.queue_size == AppSettings().queue_size
        assert settings.verbose is True
