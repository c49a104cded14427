"""Index claim transactions by the node or owner whose reward clock they reset."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from nodeclaims.domain.model import ClaimAllEvent, ClaimSingleEvent, MethodKind

from .contracts import DecodeFailure
from .decode import DecodeError, decode_claim_target

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nodeclaims.domain.model.nodes import NodeKey

    from .contracts import ClassifiedTransaction


@dataclass(frozen=True, slots=True, kw_only=True)
class ClaimIndexes:
    """Latest claim-single per node key and latest claim-all per owner (read-only)."""

    single: Mapping[NodeKey, ClaimSingleEvent] = field(
        default_factory=lambda: MappingProxyType({})
    )
    claim_all: Mapping[str, ClaimAllEvent] = field(default_factory=lambda: MappingProxyType({}))
    single_claims_seen: int = 0
    claim_all_seen: int = 0

    def single_claim_for(self, owner: str, created_at: int) -> ClaimSingleEvent | None:
        return self.single.get((owner, created_at))

    def claim_all_for(self, owner: str) -> ClaimAllEvent | None:
        return self.claim_all.get(owner)


@dataclass(frozen=True, slots=True)
class ClaimIndexResult:
    indexes: ClaimIndexes
    failures: tuple[DecodeFailure, ...] = ()


def _chronological(classified: Iterable[ClassifiedTransaction]) -> list[ClassifiedTransaction]:
    return sorted(classified, key=lambda item: item.transaction.timestamp)


def build_claim_indexes(classified: Iterable[ClassifiedTransaction]) -> ClaimIndexResult:
    """Build both claim indexes, keeping the latest claim for every key.

    Input is sorted by timestamp first (stable, so same-second claims keep
    source order), which makes the result independent of source ordering.
    """

    single: dict[NodeKey, ClaimSingleEvent] = {}
    claim_all: dict[str, ClaimAllEvent] = {}
    failures: list[DecodeFailure] = []
    single_seen = 0
    claim_all_seen = 0

    for item in _chronological(classified):
        tx = item.transaction
        if item.kind is MethodKind.CLAIM_SINGLE:
            single_seen += 1
            try:
                target = decode_claim_target(tx)
            except DecodeError as exc:
                failures.append(
                    DecodeFailure(
                        transaction=tx,
                        kind=item.kind,
                        reason=exc.reason,
                        message=str(exc),
                    )
                )
                continue
            event = ClaimSingleEvent(
                owner=tx.sender,
                target_created_at=target,
                claimed_at=tx.timestamp,
            )
            existing = single.get(event.key)
            if existing is None or event.claimed_at >= existing.claimed_at:
                single[event.key] = event
        elif item.kind is MethodKind.CLAIM_ALL:
            claim_all_seen += 1
            existing_all = claim_all.get(tx.sender)
            if existing_all is None or tx.timestamp >= existing_all.claimed_at:
                claim_all[tx.sender] = ClaimAllEvent(owner=tx.sender, claimed_at=tx.timestamp)

    indexes = ClaimIndexes(
        single=MappingProxyType(single),
        claim_all=MappingProxyType(claim_all),
        single_claims_seen=single_seen,
        claim_all_seen=claim_all_seen,
    )
    return ClaimIndexResult(indexes=indexes, failures=tuple(failures))
