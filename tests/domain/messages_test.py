import json

import pytest

from domain.assets import NativeToken, Token
from domain.errors import MessageDecodeError
from domain.messages import (
    InstantiateMsg,
    ReverseSimulationQuery,
    SimulationQuery,
    Token1ForToken2PriceQuery,
    Token2ForToken1PriceQuery,
    decode_execute_msg,
    decode_query_msg,
    from_binary,
    to_binary,
)
from domain.simulation import SimulationResponse
from tests.constants import CW20_CONTRACT, NATIVE_DENOM, REFERENCE_DENOM


def test_decode_simulation_query() -> None:
    raw = json.dumps(
        {"simulation": {"offer_asset": {"info": {"native_token": {"denom": REFERENCE_DENOM}}, "amount": "1000000"}}}
    )

    msg = decode_query_msg(raw)

    assert isinstance(msg, SimulationQuery)
    assert msg.offer_asset.info == NativeToken(denom=REFERENCE_DENOM)
    assert msg.offer_asset.amount == 1_000_000


def test_decode_reverse_simulation_query_with_cw20() -> None:
    raw = json.dumps(
        {"reverse_simulation": {"ask_asset": {"info": {"token": {"contract_addr": CW20_CONTRACT}}, "amount": "3"}}}
    )

    msg = decode_query_msg(raw)

    assert isinstance(msg, ReverseSimulationQuery)
    assert msg.ask_asset.info == Token(contract_addr=CW20_CONTRACT)


def test_decode_triangulation_queries() -> None:
    token1 = decode_query_msg(b'{"token1_for_token2_price": {"token1_amount": "2000000"}}')
    token2 = decode_query_msg(b'{"token2_for_token1_price": {"token2_amount": 20000000}}')

    assert token1 == Token1ForToken2PriceQuery(token1_amount=2_000_000)
    assert token2 == Token2ForToken1PriceQuery(token2_amount=20_000_000)


@pytest.mark.parametrize(
    "raw",
    [
        b'{"pool": {}}',
        b'{"token1_for_token2_price": {"token2_amount": "1"}}',
        b'{"token1_for_token2_price": {"token1_amount": "-1"}}',
        b"not json",
    ],
)
def test_decode_query_rejects_malformed_messages(raw: bytes) -> None:
    with pytest.raises(MessageDecodeError, match="QueryMsg"):
        decode_query_msg(raw)


@pytest.mark.parametrize(
    "raw", [b'{"update_price": {"denom": "ujunox"}}', b"{}", b"[]", b"nope", b"\x80abc", b"\xff\xfe{"]
)
def test_execute_messages_never_decode(raw: bytes) -> None:
    with pytest.raises(MessageDecodeError, match="ExecuteMsg"):
        decode_execute_msg(raw)


def test_instantiate_msg_keeps_entries_verbatim() -> None:
    raw = json.dumps(
        {
            "asset_prices": [
                {"denom": NATIVE_DENOM, "price": "0"},
                {"denom": NATIVE_DENOM, "price": "157"},
            ]
        }
    )

    msg = from_binary(InstantiateMsg, raw)

    assert [(entry.denom, entry.price) for entry in msg.asset_prices] == [(NATIVE_DENOM, 0), (NATIVE_DENOM, 157)]


def test_from_binary_wraps_validation_errors() -> None:
    with pytest.raises(MessageDecodeError, match="InstantiateMsg"):
        from_binary(InstantiateMsg, b'{"asset_prices": [{"denom": "ujunox"}]}')


def test_to_binary_serializes_amounts_as_strings() -> None:
    response = SimulationResponse(commission_amount=300_000, return_amount=29_700_000, spread_amount=100)

    assert to_binary(response) == b'{"commission_amount":"300000","return_amount":"29700000","spread_amount":"100"}'


def test_query_round_trips_through_the_wire() -> None:
    msg = Token1ForToken2PriceQuery(token1_amount=5)

    assert to_binary(msg) == b'{"token1_for_token2_price":{"token1_amount":"5"}}'
    assert decode_query_msg(to_binary(msg)) == msg


@pytest.mark.parametrize(
    "raw",
    [
        b'{"token1_amount": "5"}',
        b'{"offer_asset": {"info": {"native_token": {"denom": "ujunox"}}, "amount": "1"}}',
        b'{"simulation": {"offer_asset": {"info": {"denom": "ujunox"}, "amount": "1"}}}',
    ],
)
def test_decode_query_requires_variant_tags(raw: bytes) -> None:
    with pytest.raises(MessageDecodeError, match="QueryMsg"):
        decode_query_msg(raw)


def test_from_binary_requires_asset_tags() -> None:
    with pytest.raises(MessageDecodeError, match="SimulationQuery"):
        from_binary(SimulationQuery, b'{"simulation": {"offer_asset": {"info": {"denom": "x"}, "amount": "1"}}}')


@pytest.mark.parametrize("amount", ["true", "false"])
def test_decode_query_rejects_boolean_amounts(amount: str) -> None:
    with pytest.raises(MessageDecodeError):
        decode_query_msg(f'{{"token1_for_token2_price": {{"token1_amount": {amount}}}}}')
