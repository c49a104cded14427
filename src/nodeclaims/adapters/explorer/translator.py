"""Translate explorer payloads into domain transactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nodeclaims.domain.model import Transaction, TxStatus

from .schema import TransactionPayload

if TYPE_CHECKING:
    from .schema import TransactionPayloadInput


def parse_transaction(payload: TransactionPayloadInput) -> Transaction:
    model = (
        payload
        if isinstance(payload, TransactionPayload)
        else TransactionPayload.model_validate(payload)
    )
    return parse_transaction_model(model)


def parse_transaction_model(model: TransactionPayload) -> Transaction:
    return Transaction(
        sender=model.from_address.lower(),
        input=model.input,
        timestamp=model.time_stamp,
        status=TxStatus.SUCCESS if model.succeeded else TxStatus.FAILED,
        tx_hash=model.hash,
        block_number=model.block_number,
    )
