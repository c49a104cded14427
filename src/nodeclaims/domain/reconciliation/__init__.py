"""Reconciliation core turning contract transactions into per-node claim state.

Layered flow:
1) classify transactions by method selector
2) decode node names and claim targets from call data
3) build the node registry and the claim indexes
4) resolve each node's effective last claim
"""

from __future__ import annotations

from .claims import ClaimIndexes, ClaimIndexResult, build_claim_indexes
from .classify import (
    MethodSelectors,
    classify_node_creations,
    classify_transaction,
    classify_transactions,
)
from .contracts import ClassifiedTransaction, DecodeFailure, DecodeFailureReason
from .decode import DecodeError, decode_claim_target, decode_node_name
from .engine import EmptyTransactionSourceError, ReconciliationEngine, ReconciliationReport
from .registry import RegistryResult, build_node_registry
from .resolve import reconcile_node, reconcile_nodes

__all__ = [
    "ClaimIndexResult",
    "ClaimIndexes",
    "ClassifiedTransaction",
    "DecodeError",
    "DecodeFailure",
    "DecodeFailureReason",
    "EmptyTransactionSourceError",
    "MethodSelectors",
    "ReconciliationEngine",
    "ReconciliationReport",
    "RegistryResult",
    "build_claim_indexes",
    "build_node_registry",
    "classify_node_creations",
    "classify_transaction",
    "classify_transactions",
    "decode_claim_target",
    "decode_node_name",
    "reconcile_node",
    "reconcile_nodes",
]
