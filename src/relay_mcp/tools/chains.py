"""Chain discovery tool."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import ChainsResponse
from relay_mcp.schemas import GetChainsRequest
from relay_mcp.tools.api import Operation, tool_name


async def get_chains(client: RelayClient, payload: GetChainsRequest) -> ChainsResponse:
    """
    Get all chains supported for cross-chain operations.

    Returns chain metadata: RPC URLs, explorers, native currency, supported
    tokens and deployed Relay contracts.
    """
    return await client.get_chains(payload.include_chains)


OPERATIONS = [
    Operation(
        name=tool_name("get_chains"),
        title="Get supported chains",
        input_model=GetChainsRequest,
        handler=get_chains,
    ),
]
