"""Sequential fetch-all helper over paginated Relay listings."""

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_PAGE_SIZE = 100
DEFAULT_MAX_ITEMS = 10_000


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page returned by a paginated listing."""

    items: Sequence[T]
    page_number: int
    page_size: int
    has_more: bool
    total_count: int | None = None


@dataclass
class FetchedItems(Generic[T]):
    """Items gathered across pages; `truncated` is set when the cap stopped the fetch."""

    items: list[T] = field(default_factory=list)
    truncated: bool = False


type PageFetcher[U] = Callable[[int, int], Awaitable[Page[U]]]


async def fetch_all_pages(
    fetch_page: PageFetcher[T],
    *,
    max_items: int = DEFAULT_MAX_ITEMS,
    page_size: int = MAX_PAGE_SIZE,
) -> FetchedItems[T]:
    """
    Fetch pages one after another, starting at page 1, until the source reports
    no more pages, returns an empty page, or `max_items` have been accumulated.

    Errors raised by `fetch_page` propagate as-is: no partial result is returned.
    """
    if max_items < 1:
        raise ValueError(f"max_items must be positive, got {max_items}")
    batch_size = max(1, min(page_size, MAX_PAGE_SIZE))
    fetched: FetchedItems[T] = FetchedItems()
    page_number = 1

    while True:
        page = await fetch_page(page_number, batch_size)
        fetched.items.extend(page.items)
        if not page.has_more or not page.items:
            break
        if len(fetched.items) >= max_items:
            del fetched.items[max_items:]
            fetched.truncated = True
            logger.warning(
                "pagination_truncated",
                extra={"max_items": max_items, "fetched": len(fetched.items), "page": page_number},
            )
            break
        page_number += 1

    return fetched
