"""
SaaSistent Configuration.

Pydantic schema plus YAML/environment loading.
"""

from saasistent.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    clear_config_cache,
    get_config,
    load_config,
    load_yaml_file,
    save_yaml_file,
)
from saasistent.config.merger import deep_merge, set_nested_value
from saasistent.config.schema import (
    Config,
    GenerationConfig,
    LoggingConfig,
    OutputConfig,
    ProviderConfig,
    TokenBudgets,
)

__all__ = [
    "Config",
    "ConfigurationError",
    "GenerationConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProviderConfig",
    "TokenBudgets",
    "apply_env_overrides",
    "clear_config_cache",
    "deep_merge",
    "get_config",
    "load_config",
    "load_yaml_file",
    "save_yaml_file",
    "set_nested_value",
]
