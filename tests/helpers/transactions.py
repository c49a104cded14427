"""Builders for contract transactions used across reconciliation tests."""

from __future__ import annotations

from nodeclaims.domain.model import Transaction, TxStatus
from nodeclaims.domain.reconciliation import MethodSelectors

NODE_CREATE = "0x8f0ba4ca"
CLAIM_SINGLE = "0x379607f5"
CLAIM_ALL = "0x4e71d92d"

OWNER = "0x1111111111111111111111111111111111111111"
OTHER_OWNER = "0x2222222222222222222222222222222222222222"


def make_selectors() -> MethodSelectors:
    return MethodSelectors(node_create=NODE_CREATE, claim_single=CLAIM_SINGLE, claim_all=CLAIM_ALL)


def encode_string_argument(text: str) -> str:
    """ABI-encode ``text`` as the single dynamic ``string`` argument of a call."""

    raw = text.encode("utf-8")
    padded = raw + b"\x00" * (-len(raw) % 32)
    return (32).to_bytes(32, "big").hex() + len(raw).to_bytes(32, "big").hex() + padded.hex()


def make_transaction(
    call_data: str,
    *,
    sender: str = OWNER,
    timestamp: int = 100,
    status: TxStatus = TxStatus.SUCCESS,
    tx_hash: str | None = None,
) -> Transaction:
    return Transaction(
        sender=sender,
        input=call_data,
        timestamp=timestamp,
        status=status,
        tx_hash=tx_hash or f"0x{timestamp:064x}",
    )


def node_create_tx(
    name: str = "Alpha Node",
    *,
    sender: str = OWNER,
    timestamp: int = 100,
    status: TxStatus = TxStatus.SUCCESS,
) -> Transaction:
    return make_transaction(
        NODE_CREATE + encode_string_argument(name),
        sender=sender,
        timestamp=timestamp,
        status=status,
    )


def claim_single_tx(
    target_created_at: int,
    *,
    sender: str = OWNER,
    timestamp: int = 150,
    status: TxStatus = TxStatus.SUCCESS,
) -> Transaction:
    return make_transaction(
        CLAIM_SINGLE + target_created_at.to_bytes(32, "big").hex(),
        sender=sender,
        timestamp=timestamp,
        status=status,
    )


def claim_all_tx(
    *,
    sender: str = OWNER,
    timestamp: int = 200,
    status: TxStatus = TxStatus.SUCCESS,
) -> Transaction:
    return make_transaction(CLAIM_ALL, sender=sender, timestamp=timestamp, status=status)
