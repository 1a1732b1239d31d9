"""Transaction indexing tools."""

from relay_mcp.client import RelayClient
from relay_mcp.responses import Acknowledgement
from relay_mcp.schemas import TransactionIndexRequest, TransactionSingleRequest
from relay_mcp.tools.api import Operation, tool_name


async def transactions_index(
    client: RelayClient, payload: TransactionIndexRequest
) -> Acknowledgement:
    """Notify the Relay backend about a transaction so it is indexed and tracked."""
    return await client.index_transaction(payload)


async def transactions_single(
    client: RelayClient, payload: TransactionSingleRequest
) -> Acknowledgement:
    """Notify the Relay backend to index transfers, wraps and unwraps of a transaction."""
    return await client.index_transaction_single(payload)


OPERATIONS = [
    Operation(
        name=tool_name("transactions_index"),
        input_model=TransactionIndexRequest,
        handler=transactions_index,
        read_only=False,
    ),
    Operation(
        name=tool_name("transactions_single"),
        input_model=TransactionSingleRequest,
        handler=transactions_single,
        read_only=False,
    ),
]
