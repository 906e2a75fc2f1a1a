"""Unit tests for compiler configuration loading."""

import pytest

from eml_compiler import CompilerConfig, ConfigError, EMLCompiler, load_config


class TestCompilerConfig:

    def test_defaults(self):
        config = CompilerConfig()
        assert config.valid_tags == frozenset({"view"})
        assert config.passthrough_attributes == frozenset({"style", "class"})
        assert config.trace_file is None

    def test_from_dict(self):
        config = CompilerConfig.from_dict({"valid_tags": ["card", "view"]})
        assert config.valid_tags == frozenset({"card", "view"})

    def test_from_dict_rejects_string_tags(self):
        with pytest.raises(ConfigError):
            CompilerConfig.from_dict({"valid_tags": "view"})

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigError, match="unknown config keys"):
            CompilerConfig.from_dict({"tags": ["view"]})

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(ConfigError):
            CompilerConfig.from_dict(["view"])


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "eml.yaml"
        path.write_text("valid_tags:\n  - card\n")
        config = load_config(path)
        assert config.valid_tags == frozenset({"card"})
        tree = EMLCompiler(config).compile('<card grow="1">x</card>')
        assert tree.children[0].style == {"flex-grow": "1"}

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == CompilerConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("valid_tags: [view\n")
        with pytest.raises(ConfigError, match="malformed config"):
            load_config(path)
