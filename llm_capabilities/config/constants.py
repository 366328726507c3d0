"""
Capability Resolution Defaults

Central location for default paths, intervals and environment variable names.
"""

DEFAULT_CACHE_PATH = ".llm_capabilities_cache.json"
DEFAULT_INDEX_PATH = ".llm_capabilities_index.json"
DEFAULT_INDEX_TTL = 86_400  # 24 hours in seconds
DEFAULT_MAX_AGE = 2_592_000  # 30 days in seconds

# OpenRouter publishes supported parameters and modalities per model
OPENROUTER_MODELS_URL = "https://openrouter.ai/api/v1/models"
DEFAULT_REQUEST_TIMEOUT = 10.0

DEFAULT_PROVIDER_CAPABILITIES = {
    "structured_output": ("openai", "google", "anthropic", "deepseek"),
    "function_calling": ("openai", "google", "anthropic", "deepseek"),
    "vision": ("openai", "google", "anthropic"),
    "streaming": ("openai", "google", "anthropic", "deepseek"),
}

# Environment variables read by CapabilitiesConfig.from_env
CACHE_PATH_ENV_VAR = "LLM_CAPABILITIES_CACHE_PATH"
INDEX_PATH_ENV_VAR = "LLM_CAPABILITIES_INDEX_PATH"
INDEX_TTL_ENV_VAR = "LLM_CAPABILITIES_INDEX_TTL"
MAX_AGE_ENV_VAR = "LLM_CAPABILITIES_MAX_AGE"
INDEX_URL_ENV_VAR = "LLM_CAPABILITIES_INDEX_URL"
REQUEST_TIMEOUT_ENV_VAR = "LLM_CAPABILITIES_REQUEST_TIMEOUT"
REGISTRY_ENABLED_ENV_VAR = "LLM_CAPABILITIES_REGISTRY_ENABLED"
