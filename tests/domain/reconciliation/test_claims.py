from __future__ import annotations

import pytest

from nodeclaims.domain.model import ClaimAllEvent, ClaimSingleEvent, TxStatus
from nodeclaims.domain.reconciliation import (
    DecodeFailureReason,
    MethodSelectors,
    build_claim_indexes,
    classify_transactions,
)
from tests.helpers.transactions import (
    CLAIM_SINGLE,
    OTHER_OWNER,
    OWNER,
    claim_all_tx,
    claim_single_tx,
    make_transaction,
    node_create_tx,
)


def test_latest_single_claim_wins_per_node_key(selectors: MethodSelectors) -> None:
    classified = classify_transactions(
        [
            claim_single_tx(100, timestamp=150),
            claim_single_tx(100, timestamp=300),
            claim_single_tx(120, timestamp=200),
        ],
        selectors,
    )

    indexes = build_claim_indexes(classified).indexes

    assert indexes.single_claim_for(OWNER, 100) == ClaimSingleEvent(
        owner=OWNER, target_created_at=100, claimed_at=300
    )
    assert indexes.single_claim_for(OWNER, 120) == ClaimSingleEvent(
        owner=OWNER, target_created_at=120, claimed_at=200
    )
    assert indexes.single_claims_seen == 3


def test_latest_claim_all_wins_per_owner(selectors: MethodSelectors) -> None:
    classified = classify_transactions(
        [
            claim_all_tx(timestamp=200),
            claim_all_tx(timestamp=400),
            claim_all_tx(sender=OTHER_OWNER, timestamp=250),
        ],
        selectors,
    )

    indexes = build_claim_indexes(classified).indexes

    assert indexes.claim_all_for(OWNER) == ClaimAllEvent(owner=OWNER, claimed_at=400)
    assert indexes.claim_all_for(OTHER_OWNER) == ClaimAllEvent(owner=OTHER_OWNER, claimed_at=250)
    assert indexes.claim_all_seen == 3


def test_descending_input_is_sorted_before_indexing(selectors: MethodSelectors) -> None:
    classified = classify_transactions(
        [
            claim_all_tx(timestamp=400),
            claim_all_tx(timestamp=200),
            claim_single_tx(100, timestamp=300),
            claim_single_tx(100, timestamp=150),
        ],
        selectors,
    )

    indexes = build_claim_indexes(classified).indexes

    claim_all = indexes.claim_all_for(OWNER)
    single = indexes.single_claim_for(OWNER, 100)
    assert claim_all is not None
    assert claim_all.claimed_at == 400
    assert single is not None
    assert single.claimed_at == 300


def test_missing_entries_are_none(selectors: MethodSelectors) -> None:
    indexes = build_claim_indexes(classify_transactions([node_create_tx()], selectors)).indexes

    assert indexes.single_claim_for(OWNER, 100) is None
    assert indexes.claim_all_for(OWNER) is None
    assert indexes.single_claims_seen == 0


def test_failed_claims_are_not_indexed(selectors: MethodSelectors) -> None:
    classified = classify_transactions(
        [
            claim_single_tx(100, timestamp=500, status=TxStatus.FAILED),
            claim_all_tx(timestamp=600, status=TxStatus.FAILED),
        ],
        selectors,
    )

    indexes = build_claim_indexes(classified).indexes

    assert indexes.single == {}
    assert indexes.claim_all == {}
    assert indexes.single_claims_seen == 0


def test_undecodable_single_claim_is_recorded(selectors: MethodSelectors) -> None:
    bad = make_transaction(CLAIM_SINGLE + "xyz", timestamp=170)
    classified = classify_transactions([bad, claim_single_tx(100, timestamp=180)], selectors)

    result = build_claim_indexes(classified)

    assert list(result.indexes.single) == [(OWNER, 100)]
    assert result.indexes.single_claims_seen == 2
    assert [failure.reason for failure in result.failures] == [DecodeFailureReason.MALFORMED_HEX]


def test_indexes_are_read_only(selectors: MethodSelectors) -> None:
    indexes = build_claim_indexes(classify_transactions([claim_all_tx()], selectors)).indexes

    with pytest.raises(TypeError):
        indexes.claim_all[OTHER_OWNER] = ClaimAllEvent(owner=OTHER_OWNER, claimed_at=1)  # type: ignore[index]
