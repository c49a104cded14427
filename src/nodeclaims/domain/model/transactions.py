"""Transactions as observed on the node contract (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TxStatus(StrEnum):
    SUCCESS = "success"
    FAILED = "failed"


class MethodKind(StrEnum):
    """Contract call a transaction has been classified as."""

    NODE_CREATE = "node_create"
    CLAIM_SINGLE = "claim_single"
    CLAIM_ALL = "claim_all"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True, kw_only=True)
class Transaction:
    """One externally sourced transaction sent to the node contract."""

    sender: str
    input: str
    timestamp: int
    status: TxStatus
    tx_hash: str | None = None
    block_number: int | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is TxStatus.SUCCESS
