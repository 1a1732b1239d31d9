"""Request monitoring tools: execution status and request history."""

from typing import Any

from relay_mcp.client import RelayClient
from relay_mcp.errors import RelayError
from relay_mcp.pagination import Page, fetch_all_pages
from relay_mcp.responses import ExecutionStatus, RequestsPage
from relay_mcp.schemas import GetExecutionStatusRequest, GetRequestsRequest
from relay_mcp.tools.api import Operation, tool_name

# Upper bound accepted by the requests listing for `limit`.
REQUESTS_PAGE_LIMIT = 50

EXECUTION_STATUS_DESCRIPTION = """Get the current execution status of a cross-chain request.

Use the requestId returned with a quote or swap to monitor progress.
Status values: pending, success, failure, refund, delayed, waiting.

Workflow: relay_get_quote -> execute steps -> relay_get_execution_status
"""

REQUESTS_DESCRIPTION = """Get cross-chain requests with filtering and pagination.

Filter by user, transaction hash, chain IDs, time or block range and referrer.
Paginate with limit (max 50) and the continuation token from the previous page,
or set fetchAll=true to follow continuation tokens and return every match
(capped at 10000 requests; `truncated` is true when the cap was reached).
Sort by createdAt or updatedAt, asc or desc.
"""


async def get_execution_status(
    client: RelayClient, payload: GetExecutionStatusRequest
) -> ExecutionStatus:
    """Get the execution status of a cross-chain request."""
    return await client.get_execution_status(payload.request_id)


async def get_requests(
    client: RelayClient, payload: GetRequestsRequest
) -> RequestsPage | dict[str, Any]:
    """Get cross-chain requests, one page or every page when fetchAll is set."""
    if not payload.fetch_all:
        return await client.get_requests(payload)

    continuation = payload.continuation

    async def fetch_page(page_number: int, page_size: int) -> Page[dict[str, Any]]:
        nonlocal continuation
        page_request = payload.model_copy(
            update={
                "limit": min(page_size, payload.limit or REQUESTS_PAGE_LIMIT),
                "continuation": continuation,
            }
        )
        response = await client.get_requests(page_request)
        if not isinstance(response, dict):
            raise RelayError(f"Empty or malformed requests response for page {page_number}")
        items = response.get("requests") or []
        continuation = response.get("continuation")
        return Page(
            items=items,
            page_number=page_number,
            page_size=page_size,
            has_more=bool(continuation),
        )

    fetched = await fetch_all_pages(fetch_page)
    return {
        "requests": fetched.items,
        "totalFetched": len(fetched.items),
        "truncated": fetched.truncated,
    }


OPERATIONS = [
    Operation(
        name=tool_name("get_execution_status"),
        title="Get execution status",
        description=EXECUTION_STATUS_DESCRIPTION,
        input_model=GetExecutionStatusRequest,
        handler=get_execution_status,
    ),
    Operation(
        name=tool_name("get_requests"),
        title="List cross-chain requests",
        description=REQUESTS_DESCRIPTION,
        input_model=GetRequestsRequest,
        handler=get_requests,
    ),
]
