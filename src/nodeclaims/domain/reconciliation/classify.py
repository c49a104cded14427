"""Classify transactions by the contract method they invoke."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from nodeclaims.domain.model import MethodKind

from .contracts import ClassifiedTransaction

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nodeclaims.domain.model import Transaction

SELECTOR_HEX_LENGTH = 8
_SELECTOR_PATTERN = re.compile(r"\A(?:0x)?([0-9a-f]{8})\Z")


def normalize_selector(value: str) -> str:
    """Return ``value`` as a lower-case ``0x``-prefixed 4-byte selector."""

    match = _SELECTOR_PATTERN.match(value.strip().lower())
    if match is None:
        raise ValueError(f"Invalid method selector: {value!r}")
    return f"0x{match.group(1)}"


def method_selector(call_data: str) -> str | None:
    """Extract the selector from hex call data, or ``None`` when it is too short."""

    hex_data = call_data.lower().removeprefix("0x")
    head = hex_data[:SELECTOR_HEX_LENGTH]
    if len(head) < SELECTOR_HEX_LENGTH:
        return None
    return f"0x{head}"


@dataclass(frozen=True, slots=True, kw_only=True)
class MethodSelectors:
    """Selectors of the three node-contract methods, taken from the deployed ABI."""

    node_create: str
    claim_single: str
    claim_all: str

    def __post_init__(self) -> None:
        normalized = {
            "node_create": normalize_selector(self.node_create),
            "claim_single": normalize_selector(self.claim_single),
            "claim_all": normalize_selector(self.claim_all),
        }
        if len(set(normalized.values())) != len(normalized):
            raise ValueError("Method selectors must be distinct")
        for name, value in normalized.items():
            object.__setattr__(self, name, value)

    def kind_for(self, selector: str | None) -> MethodKind:
        if selector == self.node_create:
            return MethodKind.NODE_CREATE
        if selector == self.claim_single:
            return MethodKind.CLAIM_SINGLE
        if selector == self.claim_all:
            return MethodKind.CLAIM_ALL
        return MethodKind.IGNORED


def classify_transaction(transaction: Transaction, selectors: MethodSelectors) -> MethodKind:
    """Tag ``transaction`` with the method it invoked; failed transactions are ignored."""

    if not transaction.succeeded:
        return MethodKind.IGNORED
    return selectors.kind_for(method_selector(transaction.input))


def classify_transactions(
    transactions: Iterable[Transaction],
    selectors: MethodSelectors,
) -> list[ClassifiedTransaction]:
    return [
        ClassifiedTransaction(transaction=tx, kind=classify_transaction(tx, selectors))
        for tx in transactions
    ]


def classify_node_creations(
    transactions: Iterable[Transaction],
    node_create_selector: str,
) -> list[ClassifiedTransaction]:
    """Classify against the node-creation selector alone; every other call is ignored."""

    selector = normalize_selector(node_create_selector)
    return [
        ClassifiedTransaction(
            transaction=tx,
            kind=(
                MethodKind.NODE_CREATE
                if tx.succeeded and method_selector(tx.input) == selector
                else MethodKind.IGNORED
            ),
        )
        for tx in transactions
    ]
