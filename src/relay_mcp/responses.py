"""Shapes of the JSON documents returned by the Relay API.

Responses are passed through untouched, so these are structural types only:
any field the API adds is kept and re-encoded as received.
"""

from typing import Any, Literal, NotRequired, TypedDict

ExecutionStatusValue = Literal["pending", "success", "failure", "refund", "delayed", "waiting"]


class ChainsResponse(TypedDict):
    chains: list[dict[str, Any]]


class TokenPrice(TypedDict):
    price: str
    currency: str
    timestamp: int


class CurrencyMetadata(TypedDict, total=False):
    logoURI: str
    verified: bool
    isNative: bool


class Currency(TypedDict):
    chainId: int
    address: str
    symbol: str
    name: str
    decimals: int
    vmType: str
    metadata: NotRequired[CurrencyMetadata]


class QuoteStep(TypedDict):
    id: str
    action: str
    description: str
    kind: Literal["transaction", "signature"]
    items: list[dict[str, Any]]


class Quote(TypedDict):
    steps: list[QuoteStep]
    fees: dict[str, Any]
    breakdown: Any
    balances: dict[str, Any]
    details: NotRequired[dict[str, Any]]


class ExecutionStatus(TypedDict):
    status: ExecutionStatusValue
    details: NotRequired[str]
    inTxHashes: list[str]
    txHashes: list[str]
    time: int
    originChainId: int
    destinationChainId: int


class RequestsPage(TypedDict):
    requests: list[dict[str, Any]]
    continuation: NotRequired[str]


class Acknowledgement(TypedDict):
    message: str
