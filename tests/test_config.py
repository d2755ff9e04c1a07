"""Unit tests for varresolver/config.py."""

from pathlib import Path

import pytest

from varresolver.config import (
    ResolverConfig,
    build_registry,
    find_config_file,
    load_config,
    validate_config_file,
)
from varresolver.errors import ConfigError
from varresolver.interpolation import DEFAULT_MAX_PASSES


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a config file inside a temp directory."""
    return tmp_path / ".varresolver.yml"


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_when_no_file(self, tmp_path: Path) -> None:
        config = load_config(directory=tmp_path)
        assert config == ResolverConfig()
        assert config.max_passes == DEFAULT_MAX_PASSES
        assert config.schemes is None
        assert config.strict is True

    def test_full_config(self, config_file: Path) -> None:
        config_file.write_text("max_passes: 3\nschemes: [env, 'yaml:']\nstrict: false\n")
        config = load_config(config_file)
        assert config == ResolverConfig(max_passes=3, schemes=["env:", "yaml:"], strict=False)

    def test_discovers_default_file(self, tmp_path: Path) -> None:
        (tmp_path / ".varresolver.yaml").write_text("max_passes: 4\n")
        assert load_config(directory=tmp_path).max_passes == 4

    def test_single_scheme_string(self, config_file: Path) -> None:
        config_file.write_text("schemes: env\n")
        assert load_config(config_file).schemes == ["env:"]

    def test_empty_file_gives_defaults(self, config_file: Path) -> None:
        config_file.write_text("")
        assert load_config(config_file) == ResolverConfig()

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yml")

    @pytest.mark.parametrize(
        "content, message",
        [
            ("max_passes: 0\n", "max_passes"),
            ("max_passes: many\n", "max_passes"),
            ("max_passes: true\n", "max_passes"),
            ("schemes: {env: 1}\n", "schemes"),
            ("schemes: [ftp]\n", "Unknown scheme"),
            ("strict: maybe\n", "strict"),
            ("- just\n- a list\n", "dictionary"),
            ("key: [unclosed\n", "Invalid YAML"),
        ],
    )
    def test_invalid_config(self, config_file: Path, content: str, message: str) -> None:
        config_file.write_text(content)
        with pytest.raises(ConfigError, match=message):
            load_config(config_file)

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


class TestFindConfigFile:
    def test_prefers_yml(self, tmp_path: Path) -> None:
        (tmp_path / ".varresolver.yml").write_text("")
        (tmp_path / ".varresolver.yaml").write_text("")
        assert find_config_file(tmp_path) == tmp_path / ".varresolver.yml"

    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_config_file(tmp_path) is None


class TestValidateConfigFile:
    """Tests for validate_config_file()."""

    def test_valid(self, config_file: Path) -> None:
        config_file.write_text("max_passes: 2\n")
        assert validate_config_file(config_file) == (True, None)

    def test_missing(self, tmp_path: Path) -> None:
        ok, message = validate_config_file(tmp_path / "nope.yml")
        assert not ok
        assert "File not found" in message

    def test_directory(self, tmp_path: Path) -> None:
        ok, message = validate_config_file(tmp_path)
        assert not ok
        assert "Not a file" in message

    def test_invalid(self, config_file: Path) -> None:
        config_file.write_text("strict: 3\n")
        ok, message = validate_config_file(config_file)
        assert not ok
        assert "strict" in message


class TestBuildRegistry:
    """Tests for build_registry()."""

    def test_all_builtins_by_default(self) -> None:
        registry = build_registry(ResolverConfig())
        assert registry.schemes() == ["env:", "json:", "yaml:", "toml:", "ini:", "file:"]
        assert registry.max_passes == DEFAULT_MAX_PASSES

    def test_enabled_subset_keeps_builtin_order(self) -> None:
        registry = build_registry(ResolverConfig(max_passes=2, schemes=["yaml:", "env:"]))
        assert registry.schemes() == ["env:", "yaml:"]
        assert registry.max_passes == 2

    def test_disabled_scheme_passes_through(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HELLO", "world")
        registry = build_registry(ResolverConfig(schemes=["json:"]))
        assert registry.resolve_variable("env:HELLO") == "env:HELLO"
