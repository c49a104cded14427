"""Build node records from node-creation transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nodeclaims.domain.model import MethodKind, NodeRecord

from .contracts import DecodeFailure
from .decode import DecodeError, decode_node_name

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .contracts import ClassifiedTransaction


@dataclass(slots=True)
class RegistryResult:
    """Node records in input order, plus the creations that failed to decode."""

    nodes: list[NodeRecord] = field(default_factory=list[NodeRecord])
    failures: list[DecodeFailure] = field(default_factory=list[DecodeFailure])


def build_node_registry(classified: Iterable[ClassifiedTransaction]) -> RegistryResult:
    """Create one node record per decodable node-creation transaction.

    Records are not deduplicated: two creations by one owner in the same second
    yield two records sharing the same ``(owner, created_at)`` key.
    """

    result = RegistryResult()
    for item in classified:
        if item.kind is not MethodKind.NODE_CREATE:
            continue
        tx = item.transaction
        try:
            name = decode_node_name(tx)
        except DecodeError as exc:
            result.failures.append(
                DecodeFailure(transaction=tx, kind=item.kind, reason=exc.reason, message=str(exc))
            )
            continue
        result.nodes.append(NodeRecord.created(owner=tx.sender, name=name, created_at=tx.timestamp))
    return result
