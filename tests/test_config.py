"""
Tests for settings sources: defaults, YAML preferences and environment variables.
"""

from pathlib import Path

import pytest
import yaml

from app.infra.config import Settings


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run in an empty directory so no stray config/.env is picked up"""
    monkeypatch.chdir(tmp_path)
    for name in ("TODOAPP_DATA_FILE", "TODOAPP_LOG_LEVEL", "TODOAPP_CONFIG_DIR"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


class TestSettings:

    def test_defaults(self, workdir):
        settings = Settings(config_dir=workdir / "cfg")
        assert settings.data_file == Path("todos.json")
        assert settings.preferences.timer_presets == [15, 30, 60]
        assert settings.preferences.theme == "auto"
        assert settings.preferences.holiday_country == "JP"

    def test_env_overrides_data_file(self, workdir, monkeypatch):
        monkeypatch.setenv("TODOAPP_DATA_FILE", "elsewhere.json")
        settings = Settings(config_dir=workdir / "cfg")
        assert settings.data_file == Path("elsewhere.json")

    def test_workspace_yaml_preferences(self, workdir):
        (workdir / "config").mkdir()
        (workdir / "config" / "settings.yaml").write_text(
            yaml.dump({"theme": "dark", "timer_presets": [5, 25]}), encoding="utf-8"
        )
        settings = Settings(config_dir=workdir / "cfg")
        assert settings.preferences.theme == "dark"
        assert settings.preferences.timer_presets == [5, 25]

    def test_user_config_dir_yaml(self, workdir):
        config_dir = workdir / "cfg"
        config_dir.mkdir()
        (config_dir / "settings.yaml").write_text("language: ja\n", encoding="utf-8")
        settings = Settings(config_dir=config_dir)
        assert settings.preferences.language == "ja"

    def test_broken_yaml_keeps_defaults(self, workdir):
        config_dir = workdir / "cfg"
        config_dir.mkdir()
        (config_dir / "settings.yaml").write_text("theme: [unclosed\n", encoding="utf-8")
        settings = Settings(config_dir=config_dir)
        assert settings.preferences.theme == "auto"

    @pytest.mark.parametrize("content", [
        "frame_interval_ms: 5\n",
        "timer_presets: [15, 0]\n",
        "- theme\n- dark\n",
    ])
    def test_invalid_preferences_keep_defaults(self, workdir, content):
        """Out-of-range values or a non-mapping document fall back to defaults."""
        config_dir = workdir / "cfg"
        config_dir.mkdir()
        (config_dir / "settings.yaml").write_text(content, encoding="utf-8")
        settings = Settings(config_dir=config_dir)
        assert settings.preferences.frame_interval_ms == 200
        assert settings.preferences.timer_presets == [15, 30, 60]
        assert settings.preferences.theme == "auto"
