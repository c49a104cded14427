"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from nodeclaims.adapters.explorer import ExplorerFetcher
from nodeclaims.adapters.explorer.client import DEFAULT_PAGE_SIZE
from nodeclaims.config import get_method_selectors, get_node_create_selector
from nodeclaims.domain.reconciliation import (
    ReconciliationEngine,
    build_node_registry,
    classify_node_creations,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nodeclaims.domain.model import Transaction
    from nodeclaims.domain.ports.fetching import TransactionFetcher
    from nodeclaims.domain.reconciliation import (
        MethodSelectors,
        ReconciliationReport,
        RegistryResult,
    )


log = getLogger(__name__)


def _fetch_transactions(
    source: TransactionFetcher | None,
    *,
    start_block: int,
    end_block: int | None,
    page_size: int,
    max_pages: int | None,
) -> Sequence[Transaction]:
    effective_source = source or ExplorerFetcher()
    log.info(
        "Fetching contract transactions: start_block=%s, end_block=%s, page_size=%s, "
        "max_pages=%s",
        start_block,
        end_block,
        page_size,
        max_pages,
    )

    result = effective_source(
        start_block=start_block,
        end_block=end_block,
        page_size=page_size,
        max_pages=max_pages,
    )
    log.info(f"Fetched {len(result.transactions)} transactions in {result.pages} pages")
    return result.transactions


def reconcile_node_rewards(
    *,
    source: TransactionFetcher | None = None,
    selectors: MethodSelectors | None = None,
    start_block: int = 0,
    end_block: int | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int | None = None,
) -> ReconciliationReport:
    """Fetch the contract's transactions and reconcile every node's last claim."""

    effective_selectors = selectors or get_method_selectors()
    transactions = _fetch_transactions(
        source,
        start_block=start_block,
        end_block=end_block,
        page_size=page_size,
        max_pages=max_pages,
    )
    return ReconciliationEngine(selectors=effective_selectors).run(transactions)


def list_created_nodes(
    *,
    source: TransactionFetcher | None = None,
    node_create_selector: str | None = None,
    start_block: int = 0,
    end_block: int | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    max_pages: int | None = None,
) -> RegistryResult:
    """Fetch the contract's transactions and list the nodes they created.

    Only the node-creation selector is needed; claims are not looked at.
    """

    selector = node_create_selector or get_node_create_selector()
    transactions = _fetch_transactions(
        source,
        start_block=start_block,
        end_block=end_block,
        page_size=page_size,
        max_pages=max_pages,
    )
    registry = build_node_registry(classify_node_creations(transactions, selector))
    for failure in registry.failures:
        log.warning(
            "Dropped node_create transaction %s: %s (%s)",
            failure.transaction.tx_hash or "<unknown>",
            failure.message,
            failure.reason,
        )
    log.info(f"Listed {len(registry.nodes)} nodes, {len(registry.failures)} undecodable")
    return registry
