from typing import Any

import pytest


class FakeRelayClient:
    """Stands in for RelayClient: records calls and replays canned responses or errors."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.queued: dict[str, list[Any]] = {}
        self.calls: list[tuple[str, Any]] = []

    async def _reply(self, method: str, argument: Any) -> Any:
        self.calls.append((method, argument))
        if self.queued.get(method):
            response = self.queued[method].pop(0)
        else:
            response = self.responses.get(method)
        if isinstance(response, BaseException):
            raise response
        return response

    async def get_chains(self, include_chains: str | None = None) -> Any:
        return await self._reply("get_chains", include_chains)

    async def get_token_price(self, chain_id: int, address: str) -> Any:
        return await self._reply("get_token_price", (chain_id, address))

    async def get_currencies(self, request: Any) -> Any:
        return await self._reply("get_currencies", request)

    async def get_quote(self, request: Any) -> Any:
        return await self._reply("get_quote", request)

    async def swap_multi_input(self, request: Any) -> Any:
        return await self._reply("swap_multi_input", request)

    async def get_execution_status(self, request_id: str) -> Any:
        return await self._reply("get_execution_status", request_id)

    async def get_requests(self, request: Any) -> Any:
        return await self._reply("get_requests", request)

    async def index_transaction(self, request: Any) -> Any:
        return await self._reply("index_transaction", request)

    async def index_transaction_single(self, request: Any) -> Any:
        return await self._reply("index_transaction_single", request)


@pytest.fixture
def fake_client() -> FakeRelayClient:
    return FakeRelayClient()
