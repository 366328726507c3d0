"""Unit tests for configuration defaults and loading."""

import pytest
from pydantic import ValidationError

from llm_capabilities.config import (
    DEFAULT_CACHE_PATH,
    DEFAULT_INDEX_PATH,
    CapabilitiesConfig,
)
from llm_capabilities.models.capabilities import Capability


class TestDefaults:
    """Test default values."""

    def test_paths(self):
        config = CapabilitiesConfig()
        assert config.cache_path == DEFAULT_CACHE_PATH == ".llm_capabilities_cache.json"
        assert config.index_path == DEFAULT_INDEX_PATH == ".llm_capabilities_index.json"

    def test_intervals(self):
        config = CapabilitiesConfig()
        assert config.index_ttl == 86_400
        assert config.max_age == 2_592_000

    def test_provider_table(self):
        table = CapabilitiesConfig().provider_capabilities
        assert set(table) == {
            Capability.STRUCTURED_OUTPUT,
            Capability.FUNCTION_CALLING,
            Capability.VISION,
            Capability.STREAMING,
        }
        assert table[Capability.STRUCTURED_OUTPUT] == {"openai", "google", "anthropic", "deepseek"}
        assert table[Capability.VISION] == {"openai", "google", "anthropic"}

    def test_instances_do_not_share_table(self):
        first = CapabilitiesConfig()
        second = CapabilitiesConfig()
        first.provider_capabilities[Capability.VISION].add("qwen")

        assert "qwen" not in second.provider_capabilities[Capability.VISION]
        assert "qwen" not in CapabilitiesConfig().provider_capabilities[Capability.VISION]


class TestSettings:
    """Test explicit settings and validation."""

    def test_nullable_max_age(self):
        assert CapabilitiesConfig(max_age=None).max_age is None

    def test_table_accepts_names_and_copies(self):
        source = {"structured_output": ["openai"]}
        config = CapabilitiesConfig(provider_capabilities=source)
        source["structured_output"].append("qwen")

        assert config.provider_capabilities == {Capability.STRUCTURED_OUTPUT: {"openai"}}

    def test_unknown_capability_in_table_rejected(self):
        with pytest.raises(ValidationError):
            CapabilitiesConfig(provider_capabilities={"telepathy": ["openai"]})

    @pytest.mark.parametrize("field,value", [("index_ttl", -1), ("max_age", -5), ("request_timeout", 0)])
    def test_rejects_invalid_numbers(self, field, value):
        with pytest.raises(ValidationError):
            CapabilitiesConfig(**{field: value})

    def test_copy_with(self):
        base = CapabilitiesConfig()
        changed = base.copy_with(cache_path="/tmp/other.json")
        assert changed.cache_path == "/tmp/other.json"
        assert base.cache_path == DEFAULT_CACHE_PATH
        assert changed.provider_capabilities is not base.provider_capabilities


class TestFromEnv:
    """Test environment loading."""

    def test_empty_environment_gives_defaults(self):
        assert CapabilitiesConfig.from_env({}) == CapabilitiesConfig()

    def test_reads_variables(self):
        config = CapabilitiesConfig.from_env({
            "LLM_CAPABILITIES_CACHE_PATH": "/data/cache.json",
            "LLM_CAPABILITIES_INDEX_PATH": "/data/index.json",
            "LLM_CAPABILITIES_INDEX_TTL": "60",
            "LLM_CAPABILITIES_MAX_AGE": "120",
            "LLM_CAPABILITIES_INDEX_URL": "https://mirror.test/models",
            "LLM_CAPABILITIES_REQUEST_TIMEOUT": "2.5",
            "LLM_CAPABILITIES_REGISTRY_ENABLED": "false",
        })
        assert config.cache_path == "/data/cache.json"
        assert config.index_path == "/data/index.json"
        assert config.index_ttl == 60
        assert config.max_age == 120
        assert config.index_url == "https://mirror.test/models"
        assert config.request_timeout == 2.5
        assert config.registry_enabled is False

    def test_none_disables_max_age(self):
        assert CapabilitiesConfig.from_env({"LLM_CAPABILITIES_MAX_AGE": "none"}).max_age is None

    def test_invalid_number(self):
        with pytest.raises(ValidationError):
            CapabilitiesConfig.from_env({"LLM_CAPABILITIES_INDEX_TTL": "daily"})

    def test_reads_os_environ(self, clean_env, monkeypatch):
        monkeypatch.setenv("LLM_CAPABILITIES_CACHE_PATH", "/env/cache.json")
        assert CapabilitiesConfig.from_env().cache_path == "/env/cache.json"
