"""Public interface for the chain explorer adapter."""

from __future__ import annotations

from .client import ExplorerAPIError, ExplorerFetcher
from .schema import TransactionPayload, TransactionPayloadInput, TxListResponse
from .translator import parse_transaction

__all__ = [
    "ExplorerAPIError",
    "ExplorerFetcher",
    "TransactionPayload",
    "TransactionPayloadInput",
    "TxListResponse",
    "parse_transaction",
]
