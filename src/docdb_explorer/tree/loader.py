"""
Incremental child loading for tree nodes backed by a paged server query.
"""

from collections.abc import Awaitable, Callable
from enum import Enum
import logging
from typing import Generic, Protocol, TypeVar

from docdb_explorer.models import DEFAULT_BATCH_SIZE, PageOptions

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT")
ItemT_co = TypeVar("ItemT_co", covariant=True)
ClientT = TypeVar("ClientT")
ChildT = TypeVar("ChildT")


class PageIterator(Protocol[ItemT_co]):
    """A pull-style server iterator yielding one page per call."""

    @property
    def has_more_results(self) -> bool: ...

    async def next_page(self) -> list[ItemT_co]: ...


class LoaderState(str, Enum):
    """Paging session state."""

    FRESH = "fresh"
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class PaginatedChildLoader(Generic[ClientT, ItemT, ChildT]):
    """
    Turns repeated "load more" requests into page pulls on a single
    server iterator.

    A session starts on the first ``load_more`` after construction or reset
    and owns exactly one iterator. Once the iterator is drained the loader
    stays exhausted, without further requests, until ``reset_cache``.

    The loader depends only on three callables:

    - ``get_client()``: a client for the owning account
    - ``get_iterator(client, page_options)``: a fresh page iterator
    - ``wrap_child(item)``: a tree node for one raw item

    Callers must not run two ``load_more`` calls on one loader concurrently.
    """

    def __init__(
        self,
        get_client: Callable[[], ClientT],
        get_iterator: Callable[[ClientT, PageOptions], PageIterator[ItemT]],
        wrap_child: Callable[[ItemT], ChildT],
        page_size: int = DEFAULT_BATCH_SIZE,
        name: str = "children",
    ):
        self._get_client = get_client
        self._get_iterator = get_iterator
        self._wrap_child = wrap_child
        self._page_options = PageOptions(max_item_count=page_size)
        self._name = name
        self._iterator: PageIterator[ItemT] | None = None
        self._state = LoaderState.FRESH

    @property
    def state(self) -> LoaderState:
        return self._state

    @property
    def page_size(self) -> int:
        return self._page_options.max_item_count

    def has_more_children(self) -> bool:
        return self._state is not LoaderState.EXHAUSTED

    def reset_cache(self) -> None:
        """Drop the live iterator; the next load starts from the beginning."""
        self._iterator = None
        self._state = LoaderState.FRESH

    async def load_more(self, clear_cache: bool = False) -> list[ChildT]:
        """
        Load the next page of children.

        Args:
            clear_cache: Discard the current session and restart enumeration

        Returns:
            Newly loaded children in iterator order (empty once exhausted)
        """
        if clear_cache:
            self.reset_cache()

        if self._state is LoaderState.EXHAUSTED:
            return []

        if self._iterator is None:
            client = self._get_client()
            self._iterator = self._get_iterator(client, self._page_options)
            self._state = LoaderState.ACTIVE
            logger.debug(f"Opened iterator for {self._name}")

        items = await self._iterator.next_page()
        if not items or not self._iterator.has_more_results:
            self._state = LoaderState.EXHAUSTED
            self._iterator = None

        logger.debug(
            f"Loaded {len(items)} {self._name} "
            f"({'more available' if self.has_more_children() else 'exhausted'})"
        )
        return [self._wrap_child(item) for item in items]


async def load_all(
    load_more: Callable[[bool], Awaitable[list[ChildT]]],
    has_more: Callable[[], bool],
    *,
    clear_cache: bool = True,
    max_pages: int | None = None,
) -> list[ChildT]:
    """
    Drain a loader page by page.

    Args:
        load_more: The node's ``load_more_children``
        has_more: The node's ``has_more_children``
        clear_cache: Restart enumeration before the first page
        max_pages: Stop after this many pages (None for all)
    """
    children: list[ChildT] = []
    pages = 0
    first = True
    while (first or has_more()) and (max_pages is None or pages < max_pages):
        children.extend(await load_more(clear_cache and first))
        first = False
        pages += 1
    return children
