"""Async client for the Relay Protocol REST API."""

import json
import logging
from collections.abc import Mapping
from typing import Any, NamedTuple, cast

import aiohttp
from yarl import URL

from relay_mcp.errors import RelayAPIError, RelayConnectionError, RelayError
from relay_mcp.responses import (
    Acknowledgement,
    ChainsResponse,
    Currency,
    ExecutionStatus,
    Quote,
    RequestsPage,
    TokenPrice,
)
from relay_mcp.schemas import (
    GetCurrenciesRequest,
    GetQuoteRequest,
    GetRequestsRequest,
    SwapMultiInputRequest,
    TransactionIndexRequest,
    TransactionSingleRequest,
)

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class Endpoint(NamedTuple):
    method: str
    path: str


ENDPOINTS: Mapping[str, Endpoint] = {
    "get_chains": Endpoint("GET", "/chains"),
    "get_token_price": Endpoint("GET", "/currencies/token/price"),
    "get_currencies": Endpoint("POST", "/currencies/v2"),
    "get_quote": Endpoint("POST", "/quote"),
    "swap_multi_input": Endpoint("POST", "/execute/swap/multi-input"),
    "get_execution_status": Endpoint("GET", "/intents/status/v2"),
    "get_requests": Endpoint("GET", "/requests/v2"),
    "index_transaction": Endpoint("POST", "/transactions/index"),
    "index_transaction_single": Endpoint("POST", "/transactions/single"),
}


class RelayClient:
    """One method per Relay API endpoint. Holds immutable configuration only."""

    def __init__(self, *, base_url: str, timeout_ms: int) -> None:
        url = URL(base_url)
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"Invalid Relay API base URL: {base_url!r}")
        if timeout_ms <= 0:
            raise ValueError(f"Timeout must be a positive number of milliseconds: {timeout_ms}")
        self._base_url = str(url).rstrip("/")
        self._timeout_ms = timeout_ms

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    async def get_chains(self, include_chains: str | None = None) -> ChainsResponse:
        """Get all supported chains."""
        payload = await self._call("get_chains", params={"includeChains": include_chains})
        return cast(ChainsResponse, payload)

    async def get_token_price(self, chain_id: int, address: str) -> TokenPrice:
        """Get the current price of a token by contract address."""
        payload = await self._call(
            "get_token_price", params={"chainId": chain_id, "address": address}
        )
        return cast(TokenPrice, payload)

    async def get_currencies(self, request: GetCurrenciesRequest) -> list[Currency]:
        """Search currencies metadata from the curated list."""
        payload = await self._call("get_currencies", body=request.to_upstream())
        return cast(list[Currency], payload)

    async def get_quote(self, request: GetQuoteRequest) -> Quote:
        """Get an executable quote for a bridge or swap."""
        payload = await self._call("get_quote", body=request.to_upstream())
        return cast(Quote, payload)

    async def swap_multi_input(self, request: SwapMultiInputRequest) -> Quote:
        """Get an executable quote swapping from several origin chains."""
        payload = await self._call("swap_multi_input", body=request.to_upstream())
        return cast(Quote, payload)

    async def get_execution_status(self, request_id: str) -> ExecutionStatus:
        """Get the execution status of a cross-chain request."""
        payload = await self._call("get_execution_status", params={"requestId": request_id})
        return cast(ExecutionStatus, payload)

    async def get_requests(self, request: GetRequestsRequest) -> RequestsPage:
        """Get one page of cross-chain requests matching the filters."""
        payload = await self._call("get_requests", params=request.to_upstream())
        return cast(RequestsPage, payload)

    async def index_transaction(self, request: TransactionIndexRequest) -> Acknowledgement:
        """Notify the Relay backend about a transaction."""
        payload = await self._call("index_transaction", body=request.to_upstream())
        return cast(Acknowledgement, payload)

    async def index_transaction_single(
        self, request: TransactionSingleRequest
    ) -> Acknowledgement:
        """Notify the Relay backend to index transfers, wraps and unwraps."""
        payload = await self._call("index_transaction_single", body=request.to_upstream())
        return cast(Acknowledgement, payload)

    async def _call(
        self,
        endpoint_name: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        """Issue a single request and classify every failure into a RelayError."""
        endpoint = ENDPOINTS[endpoint_name]
        url = f"{self._base_url}{endpoint.path}"
        timeout = aiohttp.ClientTimeout(total=self._timeout_ms / 1000)
        request_body = dict(body) if body is not None else None

        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=DEFAULT_HEADERS) as session:
                async with session.request(
                    endpoint.method,
                    url,
                    params=_query_params(params),
                    json=request_body,
                ) as response:
                    status = response.status
                    text = _decode_body(await response.read(), response.charset)
        except TimeoutError as exc:
            raise RelayConnectionError("Request timed out", cause=repr(exc)) from exc
        except aiohttp.ClientConnectionError as exc:
            raise RelayConnectionError(
                "Network error - no response received", cause=str(exc) or repr(exc)
            ) from exc
        except aiohttp.ClientError as exc:
            raise RelayError(f"HTTP client error calling {endpoint.path}: {exc!r}") from exc

        payload, is_json = _parse_body(text)
        if status >= 400:
            logger.debug(
                "relay_api_error",
                extra={"endpoint": endpoint_name, "status": status},
            )
            raise RelayAPIError(
                _error_message(status, payload),
                status_code=status,
                response_body=payload,
                request_body=request_body,
            )
        if not is_json:
            raise RelayError(f"Invalid JSON response from {endpoint.path}")
        return payload


def _decode_body(body: bytes, charset: str | None) -> str:
    """Decode a response body, replacing bytes that are invalid in its charset."""
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def _parse_body(text: str) -> tuple[Any, bool]:
    """Decode a response body, keeping the raw text when it is not JSON."""
    if not text:
        return None, True
    try:
        return json.loads(text), True
    except ValueError:
        return text, False


def _error_message(status: int, payload: Any) -> str:
    if isinstance(payload, Mapping):
        for key in ("message", "error"):
            value = payload.get(key)
            if isinstance(value, str) and value:
                return value
    return f"HTTP {status} error"


def _query_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Render query values the way the Relay API expects them."""
    query: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        elif isinstance(value, list | tuple):
            query[key] = ",".join(str(item) for item in value)
        else:
            query[key] = str(value)
    return query
