"""Token price tool."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import TokenPrice
from relay_mcp.schemas import GetTokenPriceRequest
from relay_mcp.tools.api import Operation, tool_name

DESCRIPTION = """Get the current price of a token on a specific chain.

Requires the token contract address, not the symbol. Use relay_get_currencies to find addresses.

Examples:
- USDC on Ethereum: chainId=1, tokenAddress="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"
- WETH on Optimism: chainId=10, tokenAddress="0x4200000000000000000000000000000000000006"
- USDC on Base: chainId=8453, tokenAddress="0x833589fcd6edb6e08f4c7c32d4f71b54bda02913"
"""


async def get_token_price(client: RelayClient, payload: GetTokenPriceRequest) -> TokenPrice:
    """Get the current price of a token by contract address."""
    return await client.get_token_price(payload.chain_id, payload.token_address)


OPERATIONS = [
    Operation(
        name=tool_name("get_token_price"),
        title="Get token price",
        description=DESCRIPTION,
        input_model=GetTokenPriceRequest,
        handler=get_token_price,
    ),
]
