"""Unit tests for the closed tool input contracts."""

import pytest

from relay_mcp.errors import RelayValidationError
from relay_mcp.schemas import (
    GetChainsRequest,
    GetCurrenciesRequest,
    GetQuoteRequest,
    GetRequestsRequest,
    GetTokenPriceRequest,
    SwapMultiInputRequest,
    TransactionIndexRequest,
    validate_arguments,
)
from relay_mcp.tools import Operation, all_operations


def _quote_args(**overrides: object) -> dict[str, object]:
    args: dict[str, object] = {
        "user": "0x03508bb71268bba25ecacc8f620e01866650532c",
        "originChainId": 1,
        "destinationChainId": 10,
        "originCurrency": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
        "destinationCurrency": "0x0b2c639c533813f4aa9d7837caf62653d097ff85",
        "amount": "1000000",
    }
    args.update(overrides)
    return args


def _paths(exc: RelayValidationError) -> list[str]:
    return [err.path for err in exc.field_errors]


def test_valid_quote_applies_defaults() -> None:
    """Absent optional fields take their declared defaults."""
    payload = validate_arguments(GetQuoteRequest, _quote_args())

    assert payload.amount == "1000000"
    assert payload.recipient is None
    assert payload.trade_type is None
    assert payload.to_upstream() == _quote_args()


def test_get_requests_fetch_all_defaults_to_false_and_stays_local() -> None:
    payload = validate_arguments(GetRequestsRequest, {"user": "0xabc", "limit": 20})

    assert payload.fetch_all is False
    assert payload.to_upstream() == {"user": "0xabc", "limit": 20}


def test_none_arguments_validate_as_empty_object() -> None:
    payload = validate_arguments(GetChainsRequest, None)

    assert payload.include_chains is None
    assert payload.to_upstream() == {}


def test_missing_amount_reports_single_field() -> None:
    args = _quote_args()
    del args["amount"]

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetQuoteRequest, args)

    assert _paths(err.value) == ["amount"]
    assert err.value.field_errors[0].message == "Field required"


def test_every_violation_is_reported() -> None:
    """Missing and wrong-typed fields are all listed, not just the first one."""
    args = _quote_args(originChainId="1", tradeType="SOMETIMES")
    del args["user"]
    del args["amount"]

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetQuoteRequest, args)

    assert sorted(_paths(err.value)) == ["amount", "originChainId", "tradeType", "user"]


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetQuoteRequest, _quote_args(foo=1))

    assert _paths(err.value) == ["foo"]
    assert err.value.field_errors[0].message == "Unrecognized field"


def test_snake_case_names_are_unknown_fields() -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetTokenPriceRequest, {"chain_id": 1, "tokenAddress": "0xabc"})

    assert sorted(_paths(err.value)) == ["chainId", "chain_id"]


def test_numeric_amount_is_rejected() -> None:
    """Token amounts must be strings so large values never lose precision."""
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetQuoteRequest, _quote_args(amount=1000000))

    assert _paths(err.value) == ["amount"]


def test_big_integer_amount_is_kept_verbatim() -> None:
    amount = "115792089237316195423570985008687907853269984665640564039457584007913129639935"

    payload = validate_arguments(GetQuoteRequest, _quote_args(amount=amount))

    assert payload.to_upstream()["amount"] == amount


@pytest.mark.parametrize("value", [float("inf"), float("nan"), 1.5, True])
def test_chain_id_rejects_non_integers(value: object) -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetTokenPriceRequest, {"chainId": value, "tokenAddress": "0xabc"})

    assert _paths(err.value) == ["chainId"]


def test_limit_bounds() -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetCurrenciesRequest, {"limit": 101})
    assert _paths(err.value) == ["limit"]

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(GetRequestsRequest, {"limit": 51})
    assert _paths(err.value) == ["limit"]


def test_nested_origin_errors_use_dotted_paths() -> None:
    args = {
        "user": "0xabc",
        "origins": [
            {"chainId": 1, "currency": "0xa0b8", "amount": "10"},
            {"chainId": 10, "currency": "0x0b2c", "amount": 10, "extra": True},
        ],
        "destinationCurrency": "0x8335",
        "destinationChainId": 8453,
        "tradeType": "EXACT_INPUT",
    }

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(SwapMultiInputRequest, args)

    assert sorted(_paths(err.value)) == ["origins.1.amount", "origins.1.extra"]


def test_swap_rejects_expected_output_trade_type() -> None:
    args = {
        "user": "0xabc",
        "origins": [{"chainId": 1, "currency": "0xa0b8", "amount": "10"}],
        "destinationCurrency": "0x8335",
        "destinationChainId": 8453,
        "tradeType": "EXPECTED_OUTPUT",
    }

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(SwapMultiInputRequest, args)

    assert _paths(err.value) == ["tradeType"]


def test_swap_upstream_payload_is_camel_case() -> None:
    args = {
        "user": "0xabc",
        "origins": [{"chainId": 1, "currency": "0xa0b8", "amount": "10"}],
        "destinationCurrency": "0x8335",
        "destinationChainId": 8453,
        "tradeType": "EXACT_OUTPUT",
        "amount": "5",
        "txs": [{"to": "0xdef", "value": "0", "data": "0x"}],
        "gasLimitForDepositSpecifiedTxs": 250000,
    }

    payload = validate_arguments(SwapMultiInputRequest, args)

    assert payload.to_upstream() == args


def test_non_object_arguments_report_root_error() -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(TransactionIndexRequest, ["0xabc", 1])  # type: ignore[arg-type]

    assert _paths(err.value) == ["<root>"]


def test_validation_error_details_list_field_errors() -> None:
    with pytest.raises(RelayValidationError) as err:
        validate_arguments(TransactionIndexRequest, {"chainId": 1})

    assert err.value.message
    assert err.value.details() == {
        "fieldErrors": [{"path": "txHash", "message": "Field required"}]
    }


def test_input_schema_is_closed() -> None:
    schema = GetQuoteRequest.model_json_schema(by_alias=True)

    assert schema["additionalProperties"] is False
    assert set(schema["required"]) == {
        "user",
        "originChainId",
        "destinationChainId",
        "originCurrency",
        "destinationCurrency",
        "amount",
    }


MINIMAL_ARGUMENTS: dict[str, dict[str, object]] = {
    "relay_get_chains": {},
    "relay_get_token_price": {"chainId": 1, "tokenAddress": "0xa0b8"},
    "relay_get_currencies": {},
    "relay_get_quote": _quote_args(),
    "relay_swap_multi_input": {
        "user": "0xabc",
        "origins": [{"chainId": 1, "currency": "0xa0b8", "amount": "10"}],
        "destinationCurrency": "0x8335",
        "destinationChainId": 8453,
        "tradeType": "EXACT_INPUT",
    },
    "relay_get_execution_status": {"requestId": "0x1"},
    "relay_get_requests": {},
    "relay_transactions_index": {"txHash": "0xdef", "chainId": 1},
    "relay_transactions_single": {"requestId": "0x1", "chainId": 1, "tx": "0xdef"},
}


def test_minimal_arguments_cover_every_operation() -> None:
    assert sorted(op.name for op in all_operations()) == sorted(MINIMAL_ARGUMENTS)


@pytest.mark.parametrize("operation", all_operations(), ids=lambda op: op.name)
def test_every_operation_contract_is_closed(operation: Operation) -> None:
    minimal = MINIMAL_ARGUMENTS[operation.name]
    validate_arguments(operation.input_model, minimal)

    with pytest.raises(RelayValidationError) as err:
        validate_arguments(operation.input_model, {**minimal, "foo": 1})

    assert [(e.path, e.message) for e in err.value.field_errors] == [
        ("foo", "Unrecognized field")
    ]
    assert operation.input_schema()["additionalProperties"] is False
