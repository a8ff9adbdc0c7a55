"""
Prefix search over id-ordered collections.

The listing endpoints only know "start after this id", so a prefix search
is a forward scan from the prefix plus a point lookup of the prefix itself.
The scan is trimmed client-side to ids that really start with the prefix
and the exact match, when it exists, is placed first.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from lakeview.exceptions import NotFoundError
from lakeview.logging import get_logger
from lakeview.types.common import Identified, Page, Pagination

# Size of the forward scan issued for a prefix search, whatever amount the
# caller asked for. Also reported as max_per_page.
FILTER_WINDOW = 1000

logger = get_logger("prefix")

ItemT = TypeVar("ItemT", bound=Identified)


def merge_prefix_page(
    prefix: str,
    listing: Page[ItemT],
    exact: ItemT | None,
    window: int = FILTER_WINDOW,
) -> Page[ItemT]:
    """
    Combine a forward scan and a point lookup into one prefix page.

    Args:
        prefix: The searched prefix
        listing: Page returned by listing after ``prefix``
        exact: Item whose id equals ``prefix``, or None when absent
        window: Amount requested for the listing

    Returns:
        Page holding the exact match (if any) followed by every listed item
        whose id starts with ``prefix``, in ascending id order
    """
    matched = [item for item in listing.results if item.id.startswith(prefix)]

    # Only a fully prefix-matching window can hide further matches.
    has_more = len(matched) == window and listing.pagination.has_more

    if exact is not None:
        results = [exact] + [item for item in matched if item.id != exact.id]
    else:
        results = matched

    return Page(
        results=results,
        pagination=Pagination(
            has_more=has_more,
            max_per_page=window,
            results=len(results),
        ),
    )


def _exact_or_none(outcome: object) -> object:
    if isinstance(outcome, NotFoundError):
        return None
    if isinstance(outcome, BaseException):
        raise outcome
    return outcome


def filter_by_prefix(
    prefix: str | None,
    amount: int | None,
    list_page: Callable[[str | None, int | None], Page[ItemT]],
    get_item: Callable[[str], ItemT],
) -> Page[ItemT]:
    """
    Prefix search using blocking list/get callables.

    An empty or missing prefix is a plain listing with the caller's
    arguments. Otherwise the listing error, if any, wins over the lookup
    error; a NotFoundError from the lookup only means there is no exact
    match.

    Args:
        prefix: Prefix typed by the user
        amount: Page size used when no prefix is given
        list_page: ``list(after, amount)`` of the collection
        get_item: ``get(id)`` of the collection

    Returns:
        Page of matching items
    """
    if not prefix:
        return list_page(prefix, amount)

    listing = list_page(prefix, FILTER_WINDOW)
    try:
        exact: ItemT | None = get_item(prefix)
    except NotFoundError:
        logger.debug("no exact match for prefix %r", prefix)
        exact = None
    return merge_prefix_page(prefix, listing, exact)


async def async_filter_by_prefix(
    prefix: str | None,
    amount: int | None,
    list_page: Callable[[str | None, int | None], Awaitable[Page[ItemT]]],
    get_item: Callable[[str], Awaitable[ItemT]],
) -> Page[ItemT]:
    """
    Prefix search using coroutine list/get callables.

    Both requests run concurrently; their outcomes are combined in a fixed
    order so completion order never changes the result.
    """
    if not prefix:
        return await list_page(prefix, amount)

    listing, lookup = await asyncio.gather(
        list_page(prefix, FILTER_WINDOW),
        get_item(prefix),
        return_exceptions=True,
    )
    if isinstance(listing, BaseException):
        raise listing
    exact = _exact_or_none(lookup)
    if exact is None:
        logger.debug("no exact match for prefix %r", prefix)
    return merge_prefix_page(prefix, listing, exact)  # type: ignore[arg-type]
