"""Unit tests for avarpc.config module."""

import json

import pytest
from pydantic import ValidationError

from avarpc.config import loader
from avarpc.config.load_utils import load_json_file, load_json_file_optional
from avarpc.config.loader import load_config
from avarpc.config.schema import Config, LoggingConfig, NodeConfig
from avarpc.core.errors import ConfigError, LoadError


class TestNodeConfig:
    """Tests for NodeConfig schema."""

    def test_defaults(self):
        node = NodeConfig()
        assert node.host == "127.0.0.1"
        assert node.port == 9650
        assert node.protocol == "http"
        assert node.timeout == 30.0
        assert node.api_key_env == "AVARPC_API_KEY"

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_range(self, port):
        with pytest.raises(ValidationError):
            NodeConfig(port=port)

    def test_protocol_choices(self):
        with pytest.raises(ValidationError):
            NodeConfig(protocol="ws")

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            NodeConfig(timeout=0)

    @pytest.mark.parametrize("host", ["", "   ", "http://node", "node/ext"])
    def test_host_must_be_bare(self, host):
        with pytest.raises(ValidationError):
            NodeConfig(host=host)

    def test_host_is_stripped(self):
        assert NodeConfig(host=" node.local ").host == "node.local"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            NodeConfig(hostname="x")


class TestConfig:
    """Tests for root Config."""

    def test_defaults(self):
        config = Config()
        assert config.node == NodeConfig()
        assert config.logging == LoggingConfig()
        assert config.logging.level == "WARNING"

    def test_nested_validation(self):
        config = Config.model_validate({"node": {"port": 9652}, "logging": {"level": "DEBUG"}})
        assert config.node.port == 9652
        assert config.logging.level == "DEBUG"

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            Config.model_validate({"logging": {"level": "TRACE"}})


class TestLoadUtils:
    """Tests for JSON file helpers."""

    def test_load_json_file(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text('{"node": {"port": 1}}')
        assert load_json_file(path) == {"node": {"port": 1}}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("  \n")
        assert load_json_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError, match="File not found"):
            load_json_file(tmp_path / "missing.json", error_context="config")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("{not json")
        with pytest.raises(LoadError, match="Invalid JSON"):
            load_json_file(path)

    def test_non_object(self, tmp_path):
        path = tmp_path / "c.json"
        path.write_text("[1]")
        with pytest.raises(LoadError, match="Expected object"):
            load_json_file(path)

    def test_optional_missing_returns_none(self, tmp_path):
        assert load_json_file_optional(tmp_path / "missing.json") is None


@pytest.fixture
def layered(tmp_path, monkeypatch):
    """Point the global config layer at tmp_path/home and return (home_cfg, project_dir)."""
    home_cfg = tmp_path / "home" / ".avarpc" / "config.json"
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setattr(loader, "get_default_config_path", lambda: home_cfg)
    return home_cfg, project


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_files_gives_defaults(self, layered):
        _, project = layered
        assert load_config(cwd=project) == Config()

    def test_global_only(self, layered):
        home_cfg, project = layered
        _write(home_cfg, {"node": {"host": "node.global"}})

        assert load_config(cwd=project).node.host == "node.global"

    def test_local_overrides_global(self, layered):
        home_cfg, project = layered
        _write(home_cfg, {"node": {"host": "node.global", "port": 9660}})
        _write(project / ".avarpc" / "config.json", {"node": {"port": 9670}})

        config = load_config(cwd=project)

        assert config.node.host == "node.global"
        assert config.node.port == 9670

    def test_invalid_layer(self, layered):
        home_cfg, project = layered
        _write(home_cfg, {"node": {"port": "not-a-port"}})

        with pytest.raises(ConfigError, match="validation failed"):
            load_config(cwd=project)

    def test_broken_json_layer(self, layered):
        _, project = layered
        local = project / ".avarpc" / "config.json"
        local.parent.mkdir()
        local.write_text("{")

        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(cwd=project)

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "explicit.json"
        _write(path, {"node": {"protocol": "https", "port": 443}})

        config = load_config(path)

        assert config.node.protocol == "https"
        assert config.node.port == 443

    def test_explicit_path_missing(self, tmp_path):
        with pytest.raises(ConfigError, match="File not found"):
            load_config(tmp_path / "nope.json")

    def test_explicit_path_invalid(self, tmp_path):
        path = tmp_path / "explicit.json"
        _write(path, {"unknown": True})

        with pytest.raises(ConfigError, match="validation failed"):
            load_config(path)
