"""
Unit Tests for Configuration

Tests for:
    - Defaults and validation
    - TOML loading
    - Environment overrides
"""

import pytest

from amazons_engine.config import EngineConfig, SearchConfig
from amazons_engine.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("AMAZONS_CONFIG_TOML", raising=False)
    monkeypatch.delenv("AMAZONS_SEARCH_DEPTH", raising=False)


class TestSearchConfig:
    def test_defaults(self):
        config = SearchConfig()
        assert config.depth_thresholds == (20, 30, 40, 50)
        assert config.fixed_depth is None
        assert config.time_limit_ms is None

    def test_thresholds_become_tuple(self):
        assert SearchConfig(depth_thresholds=[5, 10]).depth_thresholds == (5, 10)

    @pytest.mark.parametrize("kwargs", [
        {"depth_thresholds": (20, 20)},
        {"depth_thresholds": (30, 20)},
        {"fixed_depth": 0},
        {"time_limit_ms": 0},
        {"time_limit_ms": -5},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigError):
            SearchConfig(**kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            SearchConfig(fixed_depth=-1)


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.search == SearchConfig()

    def test_level_normalised(self):
        assert EngineConfig(log_level="debug").log_level == "DEBUG"

    def test_bad_level(self):
        with pytest.raises(ConfigError):
            EngineConfig(log_level="LOUD")


class TestLoadFromToml:
    def test_missing_file(self, tmp_path):
        config = EngineConfig.load_from_toml(str(tmp_path / "nope.toml"))
        assert config == EngineConfig()

    def test_default_path(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "amazons.toml").write_text('log_level = "WARNING"\n')
        assert EngineConfig.load_from_toml().log_level == "WARNING"

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "engine.toml"
        path.write_text("[search]\nfixed_depth = 2\n")
        monkeypatch.setenv("AMAZONS_CONFIG_TOML", str(path))
        assert EngineConfig.load_from_toml().search.fixed_depth == 2

    def test_full_file(self, tmp_path):
        path = tmp_path / "engine.toml"
        path.write_text(
            'log_level = "DEBUG"\n'
            'log_file = "logs/engine.log"\n'
            "unknown = 1\n"
            "[search]\n"
            "depth_thresholds = [10, 20]\n"
            "time_limit_ms = 500\n"
            "extra = true\n"
        )
        config = EngineConfig.load_from_toml(str(path))
        assert config.log_level == "DEBUG"
        assert str(config.log_file) == "logs/engine.log"
        assert config.search.depth_thresholds == (10, 20)
        assert config.search.time_limit_ms == 500
        assert config.search.fixed_depth is None

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "engine.toml"
        path.write_text("[search]\nfixed_depth = 0\n")
        with pytest.raises(ConfigError):
            EngineConfig.load_from_toml(str(path))

    def test_depth_override(self, tmp_path, monkeypatch):
        path = tmp_path / "engine.toml"
        path.write_text("[search]\nfixed_depth = 2\n")
        monkeypatch.setenv("AMAZONS_SEARCH_DEPTH", "4")
        assert EngineConfig.load_from_toml(str(path)).search.fixed_depth == 4

    def test_bad_depth_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AMAZONS_SEARCH_DEPTH", "deep")
        with pytest.raises(ConfigError):
            EngineConfig.load_from_toml(str(tmp_path / "nope.toml"))
