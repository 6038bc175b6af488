"""Tests for configuration loading."""

import pytest

from prtitles import config
from prtitles.config import get_config, load_config, reset_config
from prtitles.errors import ConfigError, ErrorKind


def test_defaults():
    """Test default values without file or environment."""
    cfg = load_config()
    assert cfg.extraction.project_root == "PremiereData"
    assert cfg.extraction.title_marker == "CompressedTitle"
    assert cfg.extraction.header_size == 32
    assert cfg.extraction.encoding == "base64"
    assert cfg.output.output_dir is None


def test_yaml_file(tmp_path, monkeypatch):
    """Test values are read from the first config file found."""
    path = tmp_path / "config.yaml"
    path.write_text("extraction:\n  header_size: 64\noutput:\n  output_dir: /tmp/titles\n")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [tmp_path / "missing.yaml", path])

    cfg = load_config()
    assert cfg.extraction.header_size == 64
    assert cfg.extraction.title_marker == "CompressedTitle"
    assert cfg.output.output_dir == "/tmp/titles"


def test_env_overrides_file(tmp_path, monkeypatch):
    """Test PRTITLES_* variables win over the config file."""
    path = tmp_path / "config.yaml"
    path.write_text("extraction:\n  header_size: 64\n")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])
    monkeypatch.setenv("PRTITLES_HEADER_SIZE", "48")
    monkeypatch.setenv("PRTITLES_OUTPUT_DIR", "/out")

    cfg = load_config()
    assert cfg.extraction.header_size == 48
    assert cfg.output.output_dir == "/out"


def test_invalid_yaml_warns(tmp_path, monkeypatch):
    """Test a broken config file is ignored with a warning."""
    path = tmp_path / "config.yaml"
    path.write_text("extraction: [unclosed\n")
    monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])

    with pytest.warns(UserWarning, match="Ignoring config file"):
        cfg = load_config()
    assert cfg.extraction.header_size == 32


def test_get_config_cached():
    """Test the global config is loaded once until reset."""
    first = get_config()
    assert get_config() is first
    reset_config()
    assert get_config() is not first


class TestInvalidConfig:
    """Test malformed config values are reported as ConfigError."""

    def test_non_numeric_header_size(self, monkeypatch):
        """Test a non-numeric PRTITLES_HEADER_SIZE is rejected."""
        monkeypatch.setenv("PRTITLES_HEADER_SIZE", "thirty-two")

        with pytest.raises(ConfigError) as excinfo:
            load_config()

        assert excinfo.value.kind == ErrorKind.BAD_CONFIG
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_null_header_size(self, tmp_path, monkeypatch):
        """Test an empty header_size in the file is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("extraction:\n  header_size: null\n")
        monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])

        with pytest.raises(ConfigError) as excinfo:
            load_config()
        assert isinstance(excinfo.value.__cause__, TypeError)

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_header_size_must_be_positive(self, monkeypatch, value):
        """Test zero or negative header sizes are rejected."""
        monkeypatch.setenv("PRTITLES_HEADER_SIZE", value)
        with pytest.raises(ConfigError, match="positive"):
            load_config()

    @pytest.mark.parametrize("section", ["extraction", "output"])
    def test_section_must_be_mapping(self, tmp_path, monkeypatch, section):
        """Test a list where a section mapping is expected is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text(f"{section}: [a, b]\n")
        monkeypatch.setattr(config, "CONFIG_LOCATIONS", [path])

        with pytest.raises(ConfigError, match=f"'{section}' must be a mapping"):
            load_config()
