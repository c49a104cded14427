"""Chain explorer configuration values."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, ShouldCacheHook

EXPLORER_BASE_URL = "https://api.polygonscan.com/api"
EXPLORER_TIMEOUT_SECONDS = 20.0
EXPLORER_CACHE_TTL_SECONDS = 600.0

_ADDRESS_PATTERN = re.compile(r"\A0x[0-9a-fA-F]{40}\Z")


@dataclass(frozen=True)
class ExplorerConfig:
    """Holds explorer API configuration values."""

    api_key: str
    contract_address: str
    resilience: ResilienceConfig


def normalize_address(value: str) -> str:
    candidate = value.strip()
    if not _ADDRESS_PATTERN.match(candidate):
        raise ConfigurationError(f"Invalid contract address: {value!r}")
    return candidate.lower()


def get_explorer_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> ExplorerConfig:
    values = require_env_vars(("EXPLORER_API_KEY", "NODE_CONTRACT_ADDRESS"))
    return ExplorerConfig(
        api_key=values["EXPLORER_API_KEY"],
        contract_address=normalize_address(values["NODE_CONTRACT_ADDRESS"]),
        resilience=resilience
        or ResilienceConfig(
            name="explorer",
            base_url=optional_env_var("EXPLORER_BASE_URL", EXPLORER_BASE_URL),
            timeout_seconds=EXPLORER_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
            cache=CacheConfig(
                backend="sqlite",
                default_ttl_seconds=EXPLORER_CACHE_TTL_SECONDS,
                refresh_ttl_on_access=False,
                should_cache=cache_predicate,
            ),
        ),
    )
