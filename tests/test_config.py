import json

import pytest

from particlrpc import ConfigParseError, ConfigReadError, CredentialReadError, HttpSettings, RpcConfig


class TestDefaults:
    def test_fresh_config(self):
        cfg = RpcConfig()
        assert cfg.data_dir == "."
        assert cfg.host == "localhost"
        assert cfg.port == 51735
        assert cfg.auth_token == ""

    @pytest.mark.parametrize("port", [0, -1, -51735])
    def test_non_positive_port_resets_to_default(self, port):
        cfg = RpcConfig(port=1234)
        cfg.set_port(port)
        assert cfg.port == 51735

    @pytest.mark.parametrize("port", [1, 8332, 51735, 65535])
    def test_positive_port_stored(self, port):
        cfg = RpcConfig()
        cfg.set_port(port)
        assert cfg.port == port

    def test_host_stored_verbatim_and_reset(self):
        cfg = RpcConfig()
        cfg.set_host("node.example.org")
        assert cfg.host == "node.example.org"
        cfg.set_host("")
        assert cfg.host == "localhost"

    def test_data_directory_stored_verbatim_and_reset(self, tmp_path):
        cfg = RpcConfig()
        cfg.set_data_directory("/var/lib/particl")
        assert cfg.data_dir == "/var/lib/particl"
        cfg.set_data_directory(tmp_path)
        assert cfg.data_dir == str(tmp_path)
        cfg.set_data_directory("")
        assert cfg.data_dir == "."

    def test_assignment_applies_same_rules(self):
        cfg = RpcConfig()
        cfg.port = -3
        cfg.host = ""
        assert cfg.port == 51735
        assert cfg.host == "localhost"


class TestConfigFile:
    def _write(self, tmp_path, payload):
        path = tmp_path / "particlrpc.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_only_port_changes(self, tmp_path):
        cfg = RpcConfig()
        cfg.set_host("10.0.0.5")
        cfg.set_data_directory("/data")

        cfg.load_config_file(self._write(tmp_path, {"rpc_port": 9999}))

        assert cfg.port == 9999
        assert cfg.host == "10.0.0.5"
        assert cfg.data_dir == "/data"

    def test_all_fields(self, tmp_path):
        cfg = RpcConfig()
        cfg.load_config_file(
            self._write(tmp_path, {"data_dir": "/d", "rpc_host": "h", "rpc_port": 1, "other": True})
        )
        assert (cfg.data_dir, cfg.host, cfg.port) == ("/d", "h", 1)

    def test_empty_and_non_positive_fields_are_ignored(self, tmp_path):
        cfg = RpcConfig(data_dir="/keep", host="keep", port=4242)
        cfg.load_config_file(self._write(tmp_path, {"data_dir": "", "rpc_host": "", "rpc_port": -1}))
        assert (cfg.data_dir, cfg.host, cfg.port) == ("/keep", "keep", 4242)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigReadError):
            RpcConfig().load_config_file(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{rpc_port: 1", encoding="utf-8")
        with pytest.raises(ConfigParseError) as info:
            RpcConfig().load_config_file(path)
        assert str(path) in str(info.value)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"rpc_host": "\xff\xfe"}')
        with pytest.raises(ConfigParseError):
            RpcConfig().load_config_file(path)

    def test_null_fields_are_ignored(self, tmp_path):
        cfg = RpcConfig(data_dir="/keep", host="keep")
        cfg.load_config_file(self._write(tmp_path, {"data_dir": None, "rpc_host": None, "rpc_port": 9999}))
        assert (cfg.data_dir, cfg.host, cfg.port) == ("/keep", "keep", 9999)

        cfg.load_config_file(self._write(tmp_path, {"rpc_port": None}))
        assert cfg.port == 9999

    def test_wrong_field_type(self, tmp_path):
        with pytest.raises(ConfigParseError):
            RpcConfig().load_config_file(self._write(tmp_path, {"rpc_port": "not-a-port"}))


class TestCredential:
    def test_token_empty_until_loaded(self, tmp_path):
        (tmp_path / ".cookie").write_text("__cookie__:abc123\n", encoding="utf-8")
        cfg = RpcConfig(data_dir=str(tmp_path))
        assert cfg.auth_token == ""

        cfg.load_credential()

        assert cfg.auth_token == "__cookie__:abc123"
        assert cfg.credentials() == ("__cookie__", "abc123")

    def test_missing_cookie(self, tmp_path):
        cfg = RpcConfig(data_dir=str(tmp_path))
        with pytest.raises(CredentialReadError) as info:
            cfg.load_credential()
        assert ".cookie" in str(info.value)

    def test_explicit_token(self):
        cfg = RpcConfig()
        cfg.set_auth_token("  user:pass:word ")
        assert cfg.credentials() == ("user", "pass:word")

    def test_no_credentials_without_token(self):
        assert RpcConfig().credentials() is None


class TestUrls:
    def test_base_url(self):
        cfg = RpcConfig(host="127.0.0.1", port=51935)
        assert cfg.base_url() == "http://127.0.0.1:51935"
        assert cfg.base_url("w1") == "http://127.0.0.1:51935/wallet/w1"

    def test_wallet_name_is_quoted(self):
        assert RpcConfig().base_url("my wallet/2").endswith("/wallet/my%20wallet%2F2")


def test_http_settings_from_env(monkeypatch):
    monkeypatch.setenv("PARTICLRPC_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("PARTICLRPC_USER_AGENT", "tests/1.0")
    settings = HttpSettings()
    assert settings.http_timeout_seconds == 5.0
    assert settings.user_agent == "tests/1.0"
