"""Bridge and swap quote tool."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import Quote
from relay_mcp.schemas import GetQuoteRequest
from relay_mcp.tools.api import Operation, tool_name

DESCRIPTION = """Get an executable quote to bridge tokens between chains or swap within a chain.

Always use token contract addresses, not symbols (see relay_get_currencies).
Amounts are strings in the token's smallest unit: "1000000" is 1 USDC, "1000000000000000000" is 1 ETH.

Examples:
- Bridge USDC Ethereum to Optimism: originChainId=1, destinationChainId=10,
  originCurrency="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
  destinationCurrency="0x0b2c639c533813f4aa9d7837caf62653d097ff85", amount="1000000"
- Same-chain swap: originChainId equals destinationChainId with different token addresses
"""


async def get_quote(client: RelayClient, payload: GetQuoteRequest) -> Quote:
    """Get an executable bridge or swap quote with steps, fees and balances."""
    return await client.get_quote(payload)


OPERATIONS = [
    Operation(
        name=tool_name("get_quote"),
        title="Get bridge or swap quote",
        description=DESCRIPTION,
        input_model=GetQuoteRequest,
        handler=get_quote,
    ),
]
