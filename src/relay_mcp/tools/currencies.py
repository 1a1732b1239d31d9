"""Currency discovery tool."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import Currency
from relay_mcp.schemas import GetCurrenciesRequest
from relay_mcp.tools.api import Operation, tool_name

DESCRIPTION = """Get currencies metadata from the curated Relay list.

Filter by chain IDs, search term, contract address and verification status.

Examples:
- USDC on several chains: {"chainIds": [1, 10, 8453], "term": "usdc", "verified": true}
- Major tokens on Ethereum: {"chainIds": [1], "defaultList": true, "limit": 20}
- Lookup by address: {"address": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", "includeAllChains": true}
- Deposit address bridging support: {"depositAddressOnly": true}

Use verified=true to avoid scam tokens.
"""


async def get_currencies(client: RelayClient, payload: GetCurrenciesRequest) -> list[Currency]:
    """Search currencies metadata."""
    return await client.get_currencies(payload)


OPERATIONS = [
    Operation(
        name=tool_name("get_currencies"),
        title="Search currencies",
        description=DESCRIPTION,
        input_model=GetCurrenciesRequest,
        handler=get_currencies,
    ),
]
