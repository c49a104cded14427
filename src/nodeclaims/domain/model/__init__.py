"""Domain model for node reward reconciliation."""

from __future__ import annotations

from .nodes import ClaimAllEvent, ClaimSingleEvent, NodeRecord
from .transactions import MethodKind, Transaction, TxStatus

__all__ = [
    "ClaimAllEvent",
    "ClaimSingleEvent",
    "MethodKind",
    "NodeRecord",
    "Transaction",
    "TxStatus",
]
