"""HTTP client for the chain explorer account API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from nodeclaims.adapters.http_resilience import ResilientClient
from nodeclaims.config.explorer import EXPLORER_BASE_URL, ExplorerConfig, get_explorer_config
from nodeclaims.domain.ports.fetching import (
    ExternalSourceError,
    TransactionFetcher,
    TransactionFetchResult,
)

from .schema import TransactionPayload, TxListResponse
from .translator import parse_transaction_model

if TYPE_CHECKING:
    from collections.abc import Callable

    from nodeclaims.config.http_resilience import ResilienceConfig
    from nodeclaims.domain.model import Transaction

log = getLogger(__name__)

DEFAULT_PAGE_SIZE = 1000
LATEST_BLOCK = 99999999


def _should_cache_payload(payload: object) -> bool:
    try:
        response = TxListResponse.model_validate(payload)
    except ValidationError:
        return False
    return response.is_ok or response.is_empty


def _default_config() -> ExplorerConfig:
    return get_explorer_config(cache_predicate=_should_cache_payload)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _next_window_start(payloads: list[TransactionPayload], window_start: int) -> int:
    """Restart a full page at its last block; hashes already seen are skipped."""

    last_block = payloads[-1].block_number
    if last_block > window_start:
        return last_block
    log.warning(
        "Block %s holds more transactions than one page; later ones in it may be missing",
        window_start,
    )
    return window_start + 1


class ExplorerAPIError(ExternalSourceError):
    """Raised when the explorer API returns an application-level error."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail


@dataclass(slots=True)
class ExplorerFetcher:
    config: ExplorerConfig = field(default_factory=_default_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(
        self,
        *,
        start_block: int = 0,
        end_block: int | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int | None = None,
    ) -> TransactionFetchResult:
        if page_size <= 0:
            raise ValueError("Page size must be positive")
        return asyncio.run(
            self._fetch_transactions_async(
                start_block=start_block,
                end_block=LATEST_BLOCK if end_block is None else end_block,
                page_size=page_size,
                max_pages=max_pages,
            )
        )

    async def _fetch_transactions_async(
        self,
        *,
        start_block: int,
        end_block: int,
        page_size: int,
        max_pages: int | None,
    ) -> TransactionFetchResult:
        transactions: list[Transaction] = []
        seen_hashes: set[str] = set()
        window_start = start_block
        fetched_pages = 0

        async with self.client_factory(self.config.resilience) as client:
            while window_start <= end_block and (max_pages is None or fetched_pages < max_pages):
                payloads = await self._request_transaction_page(
                    client=client,
                    page_size=page_size,
                    start_block=window_start,
                    end_block=end_block,
                )
                fetched_pages += 1
                log.debug(
                    "Fetched %s transactions from block %s onwards", len(payloads), window_start
                )
                for payload in payloads:
                    if payload.hash in seen_hashes:
                        continue
                    seen_hashes.add(payload.hash)
                    transactions.append(parse_transaction_model(payload))
                if len(payloads) < page_size:
                    break
                window_start = _next_window_start(payloads, window_start)

        return TransactionFetchResult(transactions=transactions, pages=fetched_pages)

    async def _request_transaction_page(
        self,
        *,
        client: ResilientClient,
        page_size: int,
        start_block: int,
        end_block: int,
    ) -> list[TransactionPayload]:
        params: dict[str, str | int] = {
            "module": "account",
            "action": "txlist",
            "address": self.config.contract_address,
            "startblock": start_block,
            "endblock": end_block,
            "page": 1,
            "offset": page_size,
            "sort": "asc",
            "apikey": self.config.api_key,
        }
        response_json = await self._perform_request(
            client=client, params=httpx.QueryParams(params)
        )
        if response_json.is_empty:
            return []
        if isinstance(response_json.result, str):
            raise ExplorerAPIError("Unexpected explorer result payload", detail=response_json.result)
        return response_json.result

    async def _perform_request(
        self,
        *,
        client: ResilientClient,
        params: httpx.QueryParams,
    ) -> TxListResponse:
        base_url = self.config.resilience.base_url or EXPLORER_BASE_URL
        response = await client.get(base_url, params=params)
        response.raise_for_status()

        try:
            payload = TxListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ExplorerAPIError("Unexpected explorer response payload") from exc

        if not payload.is_ok and not payload.is_empty:
            detail = payload.result if isinstance(payload.result, str) else None
            log.error(f"Explorer API error {payload.message}: {detail}")
            raise ExplorerAPIError(payload.message, detail=detail)

        return payload


if TYPE_CHECKING:
    _fetcher_check: TransactionFetcher = ExplorerFetcher()
