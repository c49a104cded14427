"""Decode node names and claim targets from contract call data."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from .classify import SELECTOR_HEX_LENGTH
from .contracts import DecodeFailureReason

if TYPE_CHECKING:
    from nodeclaims.domain.model import Transaction

ABI_WORD_SIZE = 32

_HEX_PATTERN = re.compile(r"\A(?:[0-9a-fA-F]{2})*\Z")
_NON_WORD_PATTERN = re.compile(r"[^a-zA-Z0-9_]+")


class DecodeError(ValueError):
    """Raised when a transaction payload cannot be decoded."""

    def __init__(self, message: str, *, reason: DecodeFailureReason) -> None:
        super().__init__(message)
        self.reason = reason


def call_arguments(transaction: Transaction) -> bytes:
    """Return the raw call arguments following the 4-byte selector."""

    data = transaction.input
    hex_data = data[2:] if data[:2].lower() == "0x" else data
    arguments = hex_data[SELECTOR_HEX_LENGTH:]
    if not _HEX_PATTERN.match(arguments):
        raise DecodeError(
            f"Call data is not valid hex: {transaction.input[:24]}...",
            reason=DecodeFailureReason.MALFORMED_HEX,
        )
    if not arguments:
        raise DecodeError(
            "Call data carries no arguments",
            reason=DecodeFailureReason.MISSING_PAYLOAD,
        )
    return bytes.fromhex(arguments)


def _abi_string_bytes(arguments: bytes) -> bytes:
    # Head word is the offset of the string, followed there by its length word.
    if len(arguments) < 2 * ABI_WORD_SIZE:
        return arguments
    offset = int.from_bytes(arguments[:ABI_WORD_SIZE], "big")
    if offset % ABI_WORD_SIZE or offset + ABI_WORD_SIZE > len(arguments):
        return arguments
    length = int.from_bytes(arguments[offset : offset + ABI_WORD_SIZE], "big")
    start = offset + ABI_WORD_SIZE
    if start + length > len(arguments):
        return arguments
    return arguments[start : start + length]


def sanitize_node_name(text: str) -> str:
    """Collapse every run of non-word characters into one space and trim."""

    return _NON_WORD_PATTERN.sub(" ", text).strip()


def decode_node_name(transaction: Transaction) -> str:
    """Decode the human-chosen node name from a node-creation call."""

    raw = _abi_string_bytes(call_arguments(transaction))
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"Node name is not valid UTF-8: {exc.reason}",
            reason=DecodeFailureReason.NON_UTF8,
        ) from exc

    name = sanitize_node_name(text)
    if not name:
        raise DecodeError("Node name is empty", reason=DecodeFailureReason.EMPTY_NAME)
    return name


def decode_claim_target(transaction: Transaction) -> int:
    """Decode the creation timestamp of the node targeted by a single claim."""

    return int.from_bytes(call_arguments(transaction), "big")
