"""Ports the domain relies on for external data."""

from __future__ import annotations

from .fetching import ExternalSourceError, TransactionFetcher, TransactionFetchResult

__all__ = ["ExternalSourceError", "TransactionFetchResult", "TransactionFetcher"]
