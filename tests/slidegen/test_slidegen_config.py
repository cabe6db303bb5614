"""Tests for slidegen.config"""

import pytest
import yaml

from slidegen.config import (
    DEFAULT_GENERATION_URL,
    ConfigStatus,
    SlideGenConfig,
)
from slidegen.errors import ConfigurationError


class TestSlideGenConfig:
    def test_defaults(self):
        config = SlideGenConfig()
        assert config.generation_url == DEFAULT_GENERATION_URL
        assert config.service_timeout == 30.0
        assert config.generation_timeout == 60.0
        assert config.default_template == "bullet-point1"
        assert config.allowed_plans == ["essential", "paid", "premium"]
        assert config.account_id is None

    def test_load_without_file(self):
        config = SlideGenConfig.load_from_yaml("/nonexistent/config.yaml")
        assert config == SlideGenConfig()

    def test_load_from_yaml(self, tmp_path):
        cfg = {
            "slidegen": {
                "generation_url": "https://gen.example/create",
                "account_id": "acct-yaml",
                "allowed_plans": ["Paid", "team"],
                "service_timeout": 10,
            }
        }
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(yaml.dump(cfg))

        config = SlideGenConfig.load_from_yaml(str(cfg_path))
        assert config.generation_url == "https://gen.example/create"
        assert config.account_id == "acct-yaml"
        assert config.allowed_plans == ["paid", "team"]
        assert config.service_timeout == 10.0

    def test_default_path_in_working_directory(self, tmp_path):
        (tmp_path / ".slidedeck").mkdir()
        (tmp_path / ".slidedeck" / "config.yaml").write_text(
            yaml.dump({"slidegen": {"default_template": "custom-design"}})
        )

        assert SlideGenConfig.load_from_yaml().default_template == "custom-design"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(yaml.dump({"slidegen": {"account_id": "acct-yaml"}}))

        monkeypatch.setenv("SLIDEGEN_ACCOUNT_ID", "acct-env")
        monkeypatch.setenv("SLIDEGEN_ALLOWED_PLANS", "premium, enterprise")
        monkeypatch.setenv("SLIDEGEN_GENERATION_TIMEOUT", "90")

        config = SlideGenConfig.load_from_yaml(str(cfg_path))
        assert config.account_id == "acct-env"
        assert config.allowed_plans == ["premium", "enterprise"]
        assert config.generation_timeout == 90.0

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        cfg_path = tmp_path / "other.yaml"
        cfg_path.write_text(yaml.dump({"slidegen": {"pricing_url": "https://p.example"}}))
        monkeypatch.setenv("SLIDEGEN_CONFIG", str(cfg_path))

        assert SlideGenConfig.load_from_yaml().pricing_url == "https://p.example"

    def test_empty_env_value_ignored(self, monkeypatch):
        monkeypatch.setenv("SLIDEGEN_ACCOUNT_ID", "")
        assert SlideGenConfig.load_from_dict({"account_id": "acct-yaml"}).account_id == "acct-yaml"

    def test_non_numeric_timeout(self, monkeypatch):
        monkeypatch.setenv("SLIDEGEN_SERVICE_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="SLIDEGEN_SERVICE_TIMEOUT"):
            SlideGenConfig.load_from_dict({})

    @pytest.mark.parametrize("content", ["- a\n- b\n", "slidegen: [1, 2]\n", "slidegen: {generation_url: [\n"])
    def test_malformed_file(self, tmp_path, content):
        cfg_path = tmp_path / "config.yaml"
        cfg_path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            SlideGenConfig.load_from_yaml(str(cfg_path))


class TestValidate:
    def test_default_config_is_ok_with_warning(self):
        status = SlideGenConfig().validate()
        assert isinstance(status, ConfigStatus)
        assert status.ok
        assert any("SLIDEGEN_ACCOUNT_ID" in w for w in status.warnings)

    def test_account_id_silences_warning(self):
        status = SlideGenConfig(account_id="acct-1").validate()
        assert status.ok
        assert status.warnings == []

    @pytest.mark.parametrize("overrides,fragment", [
        ({"generation_url": ""}, "generation_url is not configured"),
        ({"inference_url": "localhost:9000"}, "inference_url must be an http(s) URL"),
        ({"allowed_plans": []}, "allowed_plans is empty"),
        ({"service_timeout": 0}, "timeouts must be positive"),
    ])
    def test_errors(self, overrides, fragment):
        status = SlideGenConfig(**overrides).validate()
        assert not status.ok
        assert any(fragment in e for e in status.errors)


class TestResolveAccountId:
    def test_caller_value_wins(self):
        assert SlideGenConfig(account_id="env").resolve_account_id(" caller ") == "caller"

    def test_fallback(self):
        assert SlideGenConfig(account_id="env").resolve_account_id("") == "env"
        assert SlideGenConfig().resolve_account_id(None) is None
