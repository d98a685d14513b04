"""Tests for tether.config and tether.config_loader."""

from pathlib import Path

import pytest

from tether._errors import ConfigError
from tether.config import TetherConfig
from tether.config_loader import load_config


class TestTetherConfig:
    """TetherConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = TetherConfig()
        assert config.base_url == ""
        assert config.timeout == 5.0
        assert config.headers == {}
        assert config.follow_redirects is False
        assert config.max_events == 1_000
        assert config.verbose is False

    def test_frozen(self) -> None:
        config = TetherConfig()
        with pytest.raises(AttributeError):
            config.timeout = 1.0  # type: ignore[misc]

    def test_header_values_normalized_to_str(self) -> None:
        config = TetherConfig(headers={"X-Version": 2})  # type: ignore[dict-item]
        assert config.headers == {"X-Version": "2"}

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ConfigError, match="timeout"):
            TetherConfig(timeout=0)

    def test_non_numeric_timeout_rejected(self) -> None:
        with pytest.raises(ConfigError, match="timeout"):
            TetherConfig(timeout="5")  # type: ignore[arg-type]

    def test_bool_timeout_rejected(self) -> None:
        with pytest.raises(ConfigError, match="timeout"):
            TetherConfig(timeout=True)

    def test_max_events_must_be_positive_int(self) -> None:
        with pytest.raises(ConfigError, match="max_events"):
            TetherConfig(max_events=0)
        with pytest.raises(ConfigError, match="max_events"):
            TetherConfig(max_events=1.5)  # type: ignore[arg-type]

    def test_headers_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError, match="headers"):
            TetherConfig(headers=["X-A"])  # type: ignore[arg-type]


class TestLoadConfig:
    """load_config — file config merged with keyword overrides."""

    def test_no_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_config(tmp_path) == TetherConfig()

    def test_yaml_top_level_keys(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text(
            "base_url: https://api.example.com\ntimeout: 3\nheaders:\n  X-App: demo\n"
        )
        config = load_config(tmp_path)
        assert config.base_url == "https://api.example.com"
        assert config.timeout == 3
        assert config.headers == {"X-App": "demo"}

    def test_yml_extension(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yml").write_text("verbose: true\n")
        assert load_config(tmp_path).verbose is True

    def test_yaml_tether_section(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("tether:\n  max_events: 50\n")
        assert load_config(tmp_path).max_events == 50

    def test_toml_section(self, tmp_path: Path) -> None:
        (tmp_path / "tether.toml").write_text(
            '[tether]\nbase_url = "https://t.test"\nfollow_redirects = true\n\n'
            '[tether.headers]\nX-App = "demo"\n'
        )
        config = load_config(tmp_path)
        assert config.base_url == "https://t.test"
        assert config.follow_redirects is True
        assert config.headers == {"X-App": "demo"}

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("timeout: 1\n")
        (tmp_path / "tether.toml").write_text("timeout = 2\n")
        assert load_config(tmp_path).timeout == 1

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("timeout: 1\nverbose: false\n")
        config = load_config(tmp_path, verbose=True)
        assert config.timeout == 1
        assert config.verbose is True

    def test_empty_yaml_is_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("")
        assert load_config(tmp_path) == TetherConfig()

    def test_unknown_key_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("port: 3000\n")
        with pytest.raises(ConfigError, match="port"):
            load_config(tmp_path)

    def test_unknown_override_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="retries"):
            load_config(tmp_path, retries=3)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("base_url: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tether.toml").write_text("base_url = \n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(tmp_path)

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_non_mapping_section(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("tether: 3\n")
        with pytest.raises(ConfigError, match="section"):
            load_config(tmp_path)

    def test_invalid_value_from_file(self, tmp_path: Path) -> None:
        (tmp_path / "tether.yaml").write_text("timeout: -1\n")
        with pytest.raises(ConfigError, match="positive"):
            load_config(tmp_path)
