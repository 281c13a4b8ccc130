"""
Tests for Settings
==================
Tests for the YAML settings loader in bigramkit/settings.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bigramkit import settings
from bigramkit.settings import (
    CONFIG_ENV_VAR,
    ModelSettings,
    PACKAGE_ROOT,
    get_setting,
    load_app_config,
    resolve_path,
)


@pytest.fixture
def custom_config(tmp_path, monkeypatch):
    path = tmp_path / "app.yaml"
    path.write_text(
        "model:\n"
        "  smoothing: 0.25\n"
        "corpus:\n"
        f"  path: {tmp_path / 'corpus.txt'}\n"
        "report:\n"
        "  show: 2\n"
        "sampling:\n"
        "  seed: 99\n"
    )
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    return path


class TestBundledConfig:
    """Tests against the shipped app.yaml."""

    def test_loads(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        data = load_app_config()
        assert data["model"]["smoothing"] == 1.0

    def test_get_setting_dotted(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert get_setting("report.samples") == 5
        assert get_setting("report.missing", "fallback") == "fallback"
        assert get_setting("model.smoothing.deeper", 3) == 3

    def test_default_model_settings(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        s = ModelSettings()
        assert s.smoothing == 1.0
        assert s.corpus_path == PACKAGE_ROOT / "data" / "names.txt"
        assert s.seed is None
        assert s.show == 5


class TestOverrides:
    """Tests for config overrides."""

    def test_env_var_config(self, custom_config, tmp_path):
        s = ModelSettings()
        assert s.smoothing == 0.25
        assert s.corpus_path == tmp_path / "corpus.txt"
        assert s.show == 2
        assert s.seed == 99
        # keys absent from the custom file fall back to defaults
        assert s.samples == 5

    def test_explicit_values_win(self, custom_config):
        s = ModelSettings(smoothing=2.0, seed=1, corpus_path="other.txt")
        assert s.smoothing == 2.0
        assert s.seed == 1
        assert s.corpus_path == Path("other.txt")

    def test_negative_smoothing(self, custom_config):
        with pytest.raises(ValueError):
            ModelSettings(smoothing=-0.5)

    def test_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        with pytest.raises(FileNotFoundError):
            load_app_config()

    def test_empty_config(self, tmp_path, monkeypatch):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
        assert load_app_config() == {}
        assert ModelSettings().smoothing == 1.0

    def test_switching_config_file(self, tmp_path, monkeypatch):
        """Changing BIGRAMKIT_CONFIG between calls picks up the new file."""
        first = tmp_path / "first.yaml"
        first.write_text("model:\n  smoothing: 0.5\n")
        second = tmp_path / "second.yaml"
        second.write_text("model:\n  smoothing: 3.0\n")

        monkeypatch.setenv(CONFIG_ENV_VAR, str(first))
        assert get_setting("model.smoothing") == 0.5
        monkeypatch.setenv(CONFIG_ENV_VAR, str(second))
        assert get_setting("model.smoothing") == 3.0
        monkeypatch.delenv(CONFIG_ENV_VAR)
        assert get_setting("model.smoothing") == 1.0

    def test_explicit_path(self, tmp_path, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        path = tmp_path / "explicit.yaml"
        path.write_text("report:\n  show: 9\n")
        assert load_app_config(path)["report"]["show"] == 9
        assert load_app_config(str(path)) == load_app_config(path)


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_relative(self):
        assert resolve_path("data/names.txt") == (PACKAGE_ROOT / "data" / "names.txt").resolve()

    def test_absolute(self, tmp_path):
        assert resolve_path(str(tmp_path)) == tmp_path

    def test_none(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    def test_config_path_default(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert settings.config_path() == settings.APP_CONFIG_PATH
