"""Orchestrator for the reconciliation subsystem.

The engine runs the stages in order and owns the barrier between them: the
claim indexes are fully built before any node is reconciled, and are only read
afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from nodeclaims.domain.model import MethodKind

from .claims import build_claim_indexes
from .classify import classify_transactions
from .registry import build_node_registry
from .resolve import reconcile_nodes

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nodeclaims.domain.model import NodeRecord, Transaction

    from .classify import MethodSelectors
    from .contracts import DecodeFailure

log = getLogger(__name__)


class EmptyTransactionSourceError(ValueError):
    """Raised when the engine is handed no transactions at all."""


@dataclass(frozen=True, slots=True, kw_only=True)
class ReconciliationReport:
    """Reconciled nodes plus run counters and per-transaction decode failures."""

    nodes: tuple[NodeRecord, ...]
    decode_failures: tuple[DecodeFailure, ...]
    transactions_seen: int
    ignored: int
    single_claims_seen: int
    claim_all_seen: int

    @property
    def nodes_created(self) -> int:
        return len(self.nodes)

    @property
    def nodes_with_claim(self) -> int:
        return sum(1 for node in self.nodes if node.had_claim)

    @property
    def decode_failure_count(self) -> int:
        return len(self.decode_failures)


@dataclass(slots=True)
class ReconciliationEngine:
    """Run classification, registry/index construction and reconciliation."""

    selectors: MethodSelectors

    def run(self, transactions: Sequence[Transaction] | None) -> ReconciliationReport:
        if not transactions:
            raise EmptyTransactionSourceError("No transactions supplied for reconciliation")

        classified = classify_transactions(transactions, self.selectors)
        registry = build_node_registry(classified)
        claim_result = build_claim_indexes(classified)
        nodes = reconcile_nodes(registry.nodes, claim_result.indexes)

        failures = (*registry.failures, *claim_result.failures)
        for failure in failures:
            log.warning(
                "Dropped %s transaction %s: %s (%s)",
                failure.kind,
                failure.transaction.tx_hash or "<unknown>",
                failure.message,
                failure.reason,
            )

        report = ReconciliationReport(
            nodes=tuple(nodes),
            decode_failures=failures,
            transactions_seen=len(transactions),
            ignored=sum(1 for item in classified if item.kind is MethodKind.IGNORED),
            single_claims_seen=claim_result.indexes.single_claims_seen,
            claim_all_seen=claim_result.indexes.claim_all_seen,
        )
        log.info(
            "Reconciled %s nodes from %s transactions: with_claim=%s, single_claims=%s, "
            "claim_all=%s, ignored=%s, decode_failures=%s",
            report.nodes_created,
            report.transactions_seen,
            report.nodes_with_claim,
            report.single_claims_seen,
            report.claim_all_seen,
            report.ignored,
            report.decode_failure_count,
        )
        return report
