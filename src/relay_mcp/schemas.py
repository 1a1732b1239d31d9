"""Closed input contracts for every Relay tool.

Fields are declared in snake_case and exposed to callers in camelCase, which
is also the shape sent to the Relay API. Every contract rejects unknown keys,
uses strict scalar types and treats token amounts as opaque strings so big
integer quantities never go through a float.
"""

from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from relay_mcp.errors import FieldError, RelayValidationError

TradeType = Literal["EXACT_INPUT", "EXACT_OUTPUT", "EXPECTED_OUTPUT"]
SwapTradeType = Literal["EXACT_INPUT", "EXACT_OUTPUT"]
SortBy = Literal["createdAt", "updatedAt"]
SortDirection = Literal["asc", "desc"]

ChainId = Annotated[StrictInt, Field(description="Chain ID (e.g. 1 for Ethereum, 10 for Optimism)")]
Amount = Annotated[
    StrictStr,
    Field(description="Amount in the token's smallest unit, as a string (e.g. wei)"),
]


class ToolInput(BaseModel):
    """Base contract: closed, camelCase on the wire, finite numbers only."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=False,
        allow_inf_nan=False,
        frozen=True,
    )

    # Flags consumed by the tool itself and never forwarded upstream.
    local_fields: ClassVar[frozenset[str]] = frozenset()

    def to_upstream(self) -> dict[str, Any]:
        """Return the payload for the Relay API, camelCase and without unset optionals."""
        return self.model_dump(
            by_alias=True,
            exclude_none=True,
            exclude=set(self.local_fields),
        )


class GetChainsRequest(ToolInput):
    include_chains: StrictStr | None = Field(
        default=None, description="Comma-separated list of chain IDs to include"
    )


class GetTokenPriceRequest(ToolInput):
    chain_id: ChainId
    token_address: StrictStr = Field(
        description=(
            "Token contract address "
            '(e.g. "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48" for USDC on Ethereum)'
        )
    )


class GetCurrenciesRequest(ToolInput):
    default_list: StrictBool | None = Field(
        default=None, description="Return default currencies from the curated list"
    )
    chain_ids: list[StrictInt] | None = Field(
        default=None, description="Chain IDs to search for currencies (e.g. [1, 10, 137])"
    )
    term: StrictStr | None = Field(
        default=None, description="Search term: symbol, name or partial match"
    )
    address: StrictStr | None = Field(default=None, description="Token contract address")
    currency_id: StrictStr | None = Field(default=None, description="Specific currency ID")
    tokens: list[StrictStr] | None = Field(
        default=None, description='Token identifiers formatted as "chainId:address"'
    )
    verified: StrictBool | None = Field(
        default=None, description="Only verified currencies (recommended to avoid scam tokens)"
    )
    limit: StrictInt | None = Field(
        default=None, ge=1, le=100, description="Maximum number of results (1-100)"
    )
    include_all_chains: StrictBool | None = Field(
        default=None,
        description="Include all chains for a currency when filtering by chainId and address",
    )
    use_external_search: StrictBool | None = Field(
        default=None, description="Use third party APIs to find tokens not indexed by Relay"
    )
    deposit_address_only: StrictBool | None = Field(
        default=None, description="Only currencies supported with deposit address bridging"
    )


class GetQuoteRequest(ToolInput):
    user: StrictStr = Field(description="User wallet address")
    recipient: StrictStr | None = Field(
        default=None, description="Recipient wallet address (defaults to user)"
    )
    origin_chain_id: ChainId
    destination_chain_id: ChainId
    origin_currency: StrictStr = Field(description="Source token contract address")
    destination_currency: StrictStr = Field(description="Destination token contract address")
    amount: Amount
    trade_type: TradeType | None = Field(
        default=None,
        description=(
            "EXACT_INPUT (specify input amount), EXACT_OUTPUT (specify exact output) "
            "or EXPECTED_OUTPUT"
        ),
    )


class SwapOrigin(ToolInput):
    chain_id: ChainId
    currency: StrictStr = Field(description="Origin currency address")
    amount: Amount
    user: StrictStr | None = Field(default=None, description="User address for this origin")


class SwapTransaction(ToolInput):
    to: StrictStr
    value: StrictStr
    data: StrictStr


class SwapMultiInputRequest(ToolInput):
    user: StrictStr = Field(description="User address making the deposits on origin chains")
    origins: list[SwapOrigin] = Field(
        description="Origin chains, currencies and amounts to swap from"
    )
    destination_currency: StrictStr = Field(description="Destination currency address")
    destination_chain_id: ChainId
    trade_type: SwapTradeType
    recipient: StrictStr | None = Field(
        default=None, description="Recipient address (defaults to user)"
    )
    refund_to: StrictStr | None = Field(default=None, description="Refund address")
    amount: Amount | None = None
    txs: list[SwapTransaction] | None = Field(
        default=None, description="Additional transactions to execute on the destination"
    )
    txs_gas_limit: StrictInt | None = Field(
        default=None, description="Gas limit for additional transactions"
    )
    partial: StrictBool | None = Field(default=None, description="Allow partial fills")
    referrer: StrictStr | None = Field(default=None, description="Referrer for fee sharing")
    gas_limit_for_deposit_specified_txs: StrictInt | None = Field(
        default=None, description="Gas limit for deposit-specified transactions"
    )


class GetExecutionStatusRequest(ToolInput):
    request_id: StrictStr = Field(description="ID of the cross-chain request")


class GetRequestsRequest(ToolInput):
    limit: StrictInt | None = Field(
        default=None, ge=1, le=50, description="Number of results per page (1-50)"
    )
    continuation: StrictStr | None = Field(
        default=None, description="Continuation token returned by a previous page"
    )
    user: StrictStr | None = Field(default=None, description="Filter by user address")
    hash: StrictStr | None = Field(default=None, description="Filter by transaction hash")
    origin_chain_id: StrictInt | None = Field(default=None, description="Origin chain ID")
    destination_chain_id: StrictInt | None = Field(
        default=None, description="Destination chain ID"
    )
    private_chains_to_include: StrictStr | None = Field(
        default=None, description="Private chains to include"
    )
    id: StrictStr | None = Field(default=None, description="Filter by request ID")
    start_timestamp: StrictInt | None = Field(default=None, description="Unix timestamp")
    end_timestamp: StrictInt | None = Field(default=None, description="Unix timestamp")
    start_block: StrictInt | None = None
    end_block: StrictInt | None = None
    chain_id: StrictStr | None = Field(
        default=None, description="Chain ID in either direction, overrides origin/destination"
    )
    referrer: StrictStr | None = Field(default=None, description="Filter by referrer")
    sort_by: SortBy | None = None
    sort_direction: SortDirection | None = None
    fetch_all: StrictBool = Field(
        default=False,
        description="Follow continuation tokens and return every matching request",
    )

    local_fields: ClassVar[frozenset[str]] = frozenset({"fetch_all"})


class TransactionIndexRequest(ToolInput):
    tx_hash: StrictStr = Field(description="Transaction hash to index")
    chain_id: ChainId
    request_id: StrictStr | None = Field(
        default=None, description="Request ID to associate with the transaction"
    )


class TransactionSingleRequest(ToolInput):
    request_id: StrictStr = Field(description="Request ID to associate with the transaction")
    chain_id: ChainId
    tx: StrictStr = Field(description="Transaction hash")


def validate_arguments[T: ToolInput](model: type[T], raw: Mapping[str, Any] | None) -> T:
    """Validate raw tool arguments, reporting every violation at once."""
    try:
        return model.model_validate({} if raw is None else raw)
    except ValidationError as exc:
        field_errors = [
            FieldError(path=_error_path(err["loc"]), message=_error_message(err))
            for err in exc.errors(include_url=False)
        ]
        raise RelayValidationError(
            f"Invalid arguments: {len(field_errors)} field error(s)",
            field_errors=field_errors,
        ) from exc


def _error_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _error_message(err: Mapping[str, Any]) -> str:
    if err["type"] == "extra_forbidden":
        return "Unrecognized field"
    return str(err["msg"])
