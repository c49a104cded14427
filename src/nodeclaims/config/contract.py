"""Node contract ABI knowledge: the selectors of the methods we reconcile."""

from __future__ import annotations

from nodeclaims.domain.reconciliation import MethodSelectors
from nodeclaims.domain.reconciliation.classify import normalize_selector

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError

DEFAULT_NODE_CREATE_SELECTOR = "0x8f0ba4ca"


def get_node_create_selector() -> str:
    value = optional_env_var("NODE_CREATE_SELECTOR", DEFAULT_NODE_CREATE_SELECTOR)
    try:
        return normalize_selector(value)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


def get_method_selectors() -> MethodSelectors:
    node_create = get_node_create_selector()
    values = require_env_vars(("CLAIM_SINGLE_SELECTOR", "CLAIM_ALL_SELECTOR"))
    try:
        return MethodSelectors(
            node_create=node_create,
            claim_single=values["CLAIM_SINGLE_SELECTOR"],
            claim_all=values["CLAIM_ALL_SELECTOR"],
        )
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc
