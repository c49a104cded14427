"""Resolve the effective last claim of each node against the claim indexes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nodeclaims.domain.model import NodeRecord

    from .claims import ClaimIndexes

NO_CLAIM: Final[int] = 0


def reconcile_node(node: NodeRecord, indexes: ClaimIndexes) -> NodeRecord:
    """Return ``node`` with ``last_claim``/``had_claim`` set from the latest applicable claim.

    The more recent of the node's single claim and the owner's claim-all wins.
    A winning claim-all only counts when it happened after the node was
    created; a single claim needs no such check since it names the node.
    """

    single = indexes.single_claim_for(node.owner, node.created_at)
    claim_all = indexes.claim_all_for(node.owner)
    single_time = single.claimed_at if single is not None else NO_CLAIM
    all_time = claim_all.claimed_at if claim_all is not None else NO_CLAIM

    if all_time > single_time:
        if claim_all is not None and node.created_at < claim_all.claimed_at:
            return node.claimed(all_time)
        return node
    if single is not None:
        return node.claimed(single_time)
    return node


def reconcile_nodes(nodes: Iterable[NodeRecord], indexes: ClaimIndexes) -> list[NodeRecord]:
    return [reconcile_node(node, indexes) for node in nodes]
