"""Ports for fetching external domain data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nodeclaims.domain.model import Transaction


class ExternalSourceError(RuntimeError):
    """Raised by fetchers when the external data source fails or misbehaves."""


@dataclass(slots=True)
class TransactionFetchResult:
    """Transactions sent to the node contract, in ascending time order."""

    transactions: Sequence[Transaction]
    pages: int = 0


@runtime_checkable
class TransactionFetcher(Protocol):
    """Callable port for retrieving contract transactions from a chain explorer."""

    def __call__(
        self,
        *,
        start_block: int = 0,
        end_block: int | None = None,
        page_size: int = 1000,
        max_pages: int | None = None,
    ) -> TransactionFetchResult:
        ...


__all__ = ["ExternalSourceError", "TransactionFetchResult", "TransactionFetcher"]
