"""Application configuration helpers."""

from __future__ import annotations

from .contract import (
    DEFAULT_NODE_CREATE_SELECTOR,
    get_method_selectors,
    get_node_create_selector,
)
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .explorer import ExplorerConfig, get_explorer_config
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config

__all__ = [
    "DEFAULT_NODE_CREATE_SELECTOR",
    "CacheConfig",
    "ConfigurationError",
    "ExplorerConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "configure_logging",
    "get_explorer_config",
    "get_method_selectors",
    "get_node_create_selector",
    "get_storage_config",
    "optional_env_var",
    "require_env_vars",
]
