"""Shared reconciliation contract components.

This module intentionally holds only:
- the classified-transaction envelope passed between stages
- the decode failure record collected by the builders
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nodeclaims.domain.model import MethodKind, Transaction


class DecodeFailureReason(StrEnum):
    """Why a classified transaction could not be decoded."""

    MALFORMED_HEX = "malformed_hex"
    MISSING_PAYLOAD = "missing_payload"
    NON_UTF8 = "non_utf8"
    EMPTY_NAME = "empty_name"


@dataclass(frozen=True, slots=True, kw_only=True)
class ClassifiedTransaction:
    transaction: Transaction
    kind: MethodKind


@dataclass(frozen=True, slots=True, kw_only=True)
class DecodeFailure:
    """A transaction dropped from reconciliation because its payload was unusable."""

    transaction: Transaction
    kind: MethodKind
    reason: DecodeFailureReason
    message: str
