"""Unit tests for agentdoc.config — LoaderConfig."""
from __future__ import annotations

from pathlib import Path

import pytest

from agentdoc.config import LoaderConfig
from agentdoc.core.errors import ConfigError


class TestLoaderConfigDefaults:
    def test_defaults(self) -> None:
        config = LoaderConfig()
        assert config.root == "."
        assert config.default_extension == ".md"
        assert config.extensions == (".md",)
        assert config.delimiter == "---"
        assert config.encoding == "utf-8"
        assert config.store == "filesystem"
        assert config.store_options == {}

    def test_frozen(self) -> None:
        with pytest.raises((AttributeError, TypeError)):
            LoaderConfig().root = "/x"  # type: ignore[misc]

    def test_extension_dot_added(self) -> None:
        config = LoaderConfig(default_extension="txt", extensions=("txt", "md"))
        assert config.default_extension == ".txt"
        assert config.extensions == (".txt", ".md")

    def test_default_extension_always_recognized(self) -> None:
        assert LoaderConfig(default_extension=".prompt").extensions == (".prompt", ".md")

    def test_path_root_accepted(self, tmp_path: Path) -> None:
        assert LoaderConfig(root=tmp_path).root == str(tmp_path)  # type: ignore[arg-type]

    def test_blank_extension_rejected(self) -> None:
        with pytest.raises(ConfigError):
            LoaderConfig(extensions=(" ",))

    def test_blank_delimiter_rejected(self) -> None:
        with pytest.raises(ConfigError):
            LoaderConfig(delimiter="  ")


class TestFromMapping:
    def test_known_keys(self) -> None:
        config = LoaderConfig.from_mapping(
            {"root": "/r", "extensions": [".md", ".markdown"], "store": "memory"}
        )
        assert config.root == "/r"
        assert config.extensions == (".md", ".markdown")
        assert config.store == "memory"

    def test_single_extension_string(self) -> None:
        assert LoaderConfig.from_mapping({"extensions": ".txt"}).extensions == (".md", ".txt")

    def test_unknown_key(self) -> None:
        with pytest.raises(ConfigError, match="rooot"):
            LoaderConfig.from_mapping({"rooot": "/r"})

    def test_bad_extensions_shape(self) -> None:
        with pytest.raises(ConfigError, match="extensions"):
            LoaderConfig.from_mapping({"extensions": 3})

    def test_bad_store_options(self) -> None:
        with pytest.raises(ConfigError, match="store_options"):
            LoaderConfig.from_mapping({"store_options": ["x"]})

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            LoaderConfig.from_mapping({"nope": 1})


class TestFromYaml:
    def test_relative_root_resolved_against_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agentdoc.yaml"
        config_file.write_text("root: prompts\ndelimiter: '+++'\n", encoding="utf-8")
        config = LoaderConfig.from_yaml(config_file)
        assert config.root == str(tmp_path / "prompts")
        assert config.delimiter == "+++"

    def test_absolute_root_kept(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agentdoc.yaml"
        config_file.write_text("root: /srv/prompts\n", encoding="utf-8")
        assert LoaderConfig.from_yaml(config_file).root == "/srv/prompts"

    def test_empty_file_gives_defaults_relative_to_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agentdoc.yaml"
        config_file.write_text("", encoding="utf-8")
        config = LoaderConfig.from_yaml(config_file)
        assert config.root == str(tmp_path / ".")
        assert config.extensions == (".md",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            LoaderConfig.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agentdoc.yaml"
        config_file.write_text("root: [oops\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            LoaderConfig.from_yaml(config_file)

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "agentdoc.yaml"
        config_file.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            LoaderConfig.from_yaml(config_file)
