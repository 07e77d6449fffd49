"""
Drives a paged REST API: makes the initial request, then keeps following the next link
each page returns until a page doesn't have one.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Generic,
    Optional,
    TypeVar,
)

P = TypeVar("P")


class PagerState(enum.Enum):
    START = "Start"
    HAS_PAGE = "HasPage"
    DONE = "Done"


@dataclasses.dataclass(frozen=True)
class PagerResult(Generic[P]):
    """continuation is None if this is the last page"""

    page: P
    continuation: Optional[str]


# Called with None for the initial request, otherwise with the continuation token
# returned by the previous page
MakeRequest = Callable[[Optional[str]], Awaitable[PagerResult[P]]]


def next_link_of(page: Any) -> Optional[str]:
    """An empty next link means the same thing as no next link"""
    next_link = getattr(page, "next_link", None)
    if next_link:
        return next_link
    return None


class Pager(Generic[P]):
    """
    An async iterator of pages. Pages are requested lazily, one request per page. The
    sequence is finite (it ends when a page has no continuation) and can't be
    restarted, create a new Pager to start over. If a request fails, the exception
    propagates out of the iteration and the pager is done.

    Typical usage:
        async for page in pager:
            for item in page.value:
                ...
    or, to resume from a page fetched elsewhere (e.g. in another process):
        pager.with_continuation_token(token)
    """

    def __init__(self, make_request: MakeRequest[P]):
        self._make_request = make_request
        self._state = PagerState.START
        self._continuation_token: Optional[str] = None

    @property
    def state(self) -> PagerState:
        return self._state

    @property
    def continuation_token(self) -> Optional[str]:
        """
        The continuation token (next link) of the most recently returned page, i.e.
        where iteration will continue from. None once the last page has been returned.
        """
        return self._continuation_token

    def with_continuation_token(self, continuation_token: str) -> Pager[P]:
        """Makes the next request fetch the page continuation_token points to"""
        if self._state != PagerState.START:
            raise ValueError(
                "with_continuation_token can only be used before iterating the pager"
            )
        self._state = PagerState.HAS_PAGE
        self._continuation_token = continuation_token
        return self

    def __aiter__(self) -> Pager[P]:
        return self

    async def __anext__(self) -> P:
        if self._state == PagerState.DONE:
            raise StopAsyncIteration

        if self._state == PagerState.START:
            continuation = None
        else:
            continuation = self._continuation_token

        try:
            result = await self._make_request(continuation)
        except BaseException:
            self._state = PagerState.DONE
            self._continuation_token = None
            raise

        if result.continuation:
            self._state = PagerState.HAS_PAGE
            self._continuation_token = result.continuation
        else:
            self._state = PagerState.DONE
            self._continuation_token = None

        return result.page

    async def items(self) -> AsyncIterator[Any]:
        """Iterates over the value list of every page"""
        async for page in self:
            for item in getattr(page, "value", None) or ():
                yield item
