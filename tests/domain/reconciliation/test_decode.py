from __future__ import annotations

import pytest

from nodeclaims.domain.reconciliation import (
    DecodeError,
    DecodeFailureReason,
    decode_claim_target,
    decode_node_name,
)
from nodeclaims.domain.reconciliation.decode import sanitize_node_name
from tests.helpers.transactions import (
    CLAIM_SINGLE,
    NODE_CREATE,
    claim_single_tx,
    make_transaction,
    node_create_tx,
)


def test_decodes_abi_encoded_node_name() -> None:
    assert decode_node_name(node_create_tx("Moon-Base #1!")) == "Moon Base 1"


def test_decoding_is_idempotent() -> None:
    tx = node_create_tx("Alpha  Node")

    assert decode_node_name(tx) == decode_node_name(tx) == "Alpha Node"


def test_underscores_are_kept_in_names() -> None:
    assert decode_node_name(node_create_tx("__node_one__")) == "__node_one__"


def test_long_names_do_not_leak_the_length_word() -> None:
    name = "N" * 65

    assert decode_node_name(node_create_tx(name)) == name


def test_raw_text_payload_is_decoded_whole() -> None:
    tx = make_transaction(NODE_CREATE + b"\x00\x00hello world!".hex())

    assert decode_node_name(tx) == "hello world"


def test_non_utf8_name_raises_typed_error() -> None:
    tx = make_transaction(NODE_CREATE + "fffe")

    with pytest.raises(DecodeError) as exc:
        decode_node_name(tx)

    assert exc.value.reason is DecodeFailureReason.NON_UTF8


def test_name_of_only_symbols_is_empty() -> None:
    with pytest.raises(DecodeError) as exc:
        decode_node_name(node_create_tx("!!! ???"))

    assert exc.value.reason is DecodeFailureReason.EMPTY_NAME


def test_missing_arguments_raise() -> None:
    with pytest.raises(DecodeError) as exc:
        decode_node_name(make_transaction(NODE_CREATE))

    assert exc.value.reason is DecodeFailureReason.MISSING_PAYLOAD


@pytest.mark.parametrize("arguments", ["abc", "zz00", "00 11"])
def test_malformed_hex_raises(arguments: str) -> None:
    with pytest.raises(DecodeError) as exc:
        decode_claim_target(make_transaction(CLAIM_SINGLE + arguments))

    assert exc.value.reason is DecodeFailureReason.MALFORMED_HEX


def test_claim_target_is_big_endian_timestamp() -> None:
    assert decode_claim_target(claim_single_tx(1_650_000_000)) == 1_650_000_000


def test_claim_target_ignores_leading_zero_bytes() -> None:
    tx = make_transaction(CLAIM_SINGLE + "0000" + (100).to_bytes(2, "big").hex())

    assert decode_claim_target(tx) == 100


def test_claim_target_without_argument_raises() -> None:
    with pytest.raises(DecodeError) as exc:
        decode_claim_target(make_transaction(CLAIM_SINGLE))

    assert exc.value.reason is DecodeFailureReason.MISSING_PAYLOAD


def test_sanitize_collapses_runs_and_trims() -> None:
    assert sanitize_node_name("\x00\x00  a--b\n\tc  ") == "a b c"
