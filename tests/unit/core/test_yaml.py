"""Unit tests for core.yaml module."""

from pathlib import Path

import pytest
import yaml

from relayinfo.core.yaml import load_yaml


class TestLoadYaml:
    def test_mapping(self, tmp_path: Path):
        path = tmp_path / "relay.yaml"
        path.write_text("info:\n  name: Relay\n", encoding="utf-8")
        assert load_yaml(path) == {"info": {"name": "Relay"}}

    def test_accepts_str(self, tmp_path: Path):
        path = tmp_path / "relay.yaml"
        path.write_text("grpc: {}\n", encoding="utf-8")
        assert load_yaml(str(path)) == {"grpc": {}}

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml(path) == {}

    def test_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_yaml(tmp_path / "missing.yaml")

    def test_invalid_syntax(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("info: [unclosed\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)

    def test_non_mapping(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(TypeError, match="must contain a mapping"):
            load_yaml(path)

    def test_no_python_tags(self, tmp_path: Path):
        path = tmp_path / "evil.yaml"
        path.write_text("x: !!python/object/apply:os.system ['true']\n", encoding="utf-8")
        with pytest.raises(yaml.YAMLError):
            load_yaml(path)
