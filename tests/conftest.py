from __future__ import annotations

import pytest

from nodeclaims.domain.reconciliation import MethodSelectors
from tests.helpers.transactions import CLAIM_ALL, CLAIM_SINGLE, NODE_CREATE, make_selectors


@pytest.fixture
def selectors() -> MethodSelectors:
    return make_selectors()


@pytest.fixture
def selector_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_CREATE_SELECTOR", NODE_CREATE)
    monkeypatch.setenv("CLAIM_SINGLE_SELECTOR", CLAIM_SINGLE)
    monkeypatch.setenv("CLAIM_ALL_SELECTOR", CLAIM_ALL)


@pytest.fixture
def explorer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPLORER_API_KEY", "test-key")
    monkeypatch.setenv("NODE_CONTRACT_ADDRESS", "0x8258fDDF7E0477B8DfF86970813Ce5D333C88B57")
    monkeypatch.delenv("EXPLORER_BASE_URL", raising=False)
