from __future__ import annotations

from types import MappingProxyType

from nodeclaims.domain.model import ClaimAllEvent, ClaimSingleEvent, NodeRecord
from nodeclaims.domain.reconciliation import ClaimIndexes, reconcile_node, reconcile_nodes
from tests.helpers.transactions import OTHER_OWNER, OWNER


def _node(created_at: int = 100, *, owner: str = OWNER) -> NodeRecord:
    return NodeRecord.created(owner=owner, name="Alpha", created_at=created_at)


def _indexes(
    *,
    single: list[ClaimSingleEvent] | None = None,
    claim_all: list[ClaimAllEvent] | None = None,
) -> ClaimIndexes:
    return ClaimIndexes(
        single=MappingProxyType({event.key: event for event in single or []}),
        claim_all=MappingProxyType({event.owner: event for event in claim_all or []}),
    )


def _single(claimed_at: int, *, target: int = 100) -> ClaimSingleEvent:
    return ClaimSingleEvent(owner=OWNER, target_created_at=target, claimed_at=claimed_at)


def _all(claimed_at: int, *, owner: str = OWNER) -> ClaimAllEvent:
    return ClaimAllEvent(owner=owner, claimed_at=claimed_at)


def test_node_without_claims_is_unchanged() -> None:
    node = _node()

    result = reconcile_node(node, _indexes())

    assert result == node
    assert result.last_claim == 100
    assert result.had_claim is False


def test_single_claim_alone_sets_last_claim() -> None:
    result = reconcile_node(_node(), _indexes(single=[_single(150)]))

    assert result.last_claim == 150
    assert result.had_claim is True


def test_claim_all_after_creation_applies() -> None:
    result = reconcile_node(_node(), _indexes(claim_all=[_all(200)]))

    assert result.last_claim == 200
    assert result.had_claim is True


def test_claim_all_before_creation_is_irrelevant() -> None:
    result = reconcile_node(_node(), _indexes(claim_all=[_all(50)]))

    assert result.last_claim == 100
    assert result.had_claim is False


def test_claim_all_in_creation_second_does_not_apply() -> None:
    result = reconcile_node(_node(), _indexes(claim_all=[_all(100)]))

    assert result.last_claim == 100
    assert result.had_claim is False


def test_later_single_claim_beats_earlier_claim_all() -> None:
    result = reconcile_node(_node(), _indexes(single=[_single(150)], claim_all=[_all(120)]))

    assert result.last_claim == 150
    assert result.had_claim is True


def test_later_claim_all_beats_earlier_single_claim() -> None:
    result = reconcile_node(_node(), _indexes(single=[_single(150)], claim_all=[_all(300)]))

    assert result.last_claim == 300
    assert result.had_claim is True


def test_single_claim_wins_a_tie_with_claim_all() -> None:
    result = reconcile_node(_node(), _indexes(single=[_single(200)], claim_all=[_all(200)]))

    assert result.last_claim == 200
    assert result.had_claim is True


def test_stale_claim_all_newer_than_single_claim_keeps_creation_time() -> None:
    result = reconcile_node(
        _node(created_at=500),
        _indexes(single=[_single(80, target=500)], claim_all=[_all(90)]),
    )

    assert result.last_claim == 500
    assert result.had_claim is False


def test_claims_of_other_nodes_and_owners_do_not_apply() -> None:
    indexes = _indexes(single=[_single(150, target=999)], claim_all=[_all(300, owner=OTHER_OWNER)])

    result = reconcile_node(_node(), indexes)

    assert result.last_claim == 100
    assert result.had_claim is False


def test_only_claim_fields_change() -> None:
    node = _node()

    result = reconcile_node(node, _indexes(claim_all=[_all(200)]))

    assert (result.owner, result.name, result.created_at) == (node.owner, node.name, node.created_at)


def test_reconcile_nodes_preserves_order() -> None:
    nodes = [_node(100), _node(300), _node(150, owner=OTHER_OWNER)]

    result = reconcile_nodes(nodes, _indexes(claim_all=[_all(200)]))

    assert [(node.created_at, node.had_claim) for node in result] == [
        (100, True),
        (300, False),
        (150, False),
    ]
