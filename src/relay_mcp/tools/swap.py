"""Multi-input swap tool."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import Quote
from relay_mcp.schemas import SwapMultiInputRequest
from relay_mcp.tools.api import Operation, tool_name


async def swap_multi_input(client: RelayClient, payload: SwapMultiInputRequest) -> Quote:
    """
    Get an executable quote swapping tokens from multiple origin chains into one destination.

    Returns transaction steps and a detailed fee breakdown.
    """
    return await client.swap_multi_input(payload)


OPERATIONS = [
    Operation(
        name=tool_name("swap_multi_input"),
        title="Swap from multiple origins",
        input_model=SwapMultiInputRequest,
        handler=swap_multi_input,
    ),
]
