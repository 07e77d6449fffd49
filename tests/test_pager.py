from __future__ import annotations

from typing import List, Optional

import pytest

from azmgmt.core.models import AzureModel
from azmgmt.core.pager import Pager, PagerResult, PagerState, next_link_of


class _FakePages:
    """Serves pages "0", "1", ..., the last one has no continuation"""

    def __init__(self, count: int, fail_on: Optional[int] = None):
        self.count = count
        self.fail_on = fail_on
        self.calls: List[Optional[str]] = []

    async def __call__(self, continuation: Optional[str]) -> PagerResult[str]:
        self.calls.append(continuation)
        i = 0 if continuation is None else int(continuation.split("=")[1])
        if i == self.fail_on:
            raise ConnectionError("network is down")
        next_link = f"next?page={i + 1}" if i + 1 < self.count else None
        return PagerResult(str(i), next_link)


@pytest.mark.asyncio
async def test_pager_follows_continuations() -> None:
    pages = _FakePages(3)
    pager = Pager(pages)
    assert pager.state == PagerState.START

    actual = [page async for page in pager]

    assert actual == ["0", "1", "2"], actual
    assert pages.calls == [None, "next?page=1", "next?page=2"], pages.calls
    assert pager.state == PagerState.DONE
    assert pager.continuation_token is None


@pytest.mark.asyncio
async def test_pager_is_lazy() -> None:
    pages = _FakePages(3)
    pager = Pager(pages)
    assert pages.calls == []

    assert await pager.__anext__() == "0"
    assert len(pages.calls) == 1
    assert pager.state == PagerState.HAS_PAGE
    assert pager.continuation_token == "next?page=1"


@pytest.mark.asyncio
async def test_pager_single_page() -> None:
    pages = _FakePages(1)
    actual = [page async for page in Pager(pages)]
    assert actual == ["0"]
    assert len(pages.calls) == 1


@pytest.mark.asyncio
async def test_pager_cannot_be_restarted() -> None:
    pages = _FakePages(2)
    pager = Pager(pages)
    assert [page async for page in pager] == ["0", "1"]

    assert [page async for page in pager] == []
    assert len(pages.calls) == 2

    with pytest.raises(ValueError):
        pager.with_continuation_token("next?page=0")


@pytest.mark.asyncio
async def test_pager_error_ends_iteration() -> None:
    pages = _FakePages(5, fail_on=1)
    pager = Pager(pages)
    received = []

    with pytest.raises(ConnectionError):
        async for page in pager:
            received.append(page)

    assert received == ["0"]
    assert pager.state == PagerState.DONE
    assert [page async for page in pager] == []
    assert len(pages.calls) == 2


@pytest.mark.asyncio
async def test_pager_with_continuation_token() -> None:
    pages = _FakePages(4)
    pager = Pager(pages).with_continuation_token("next?page=2")

    actual = [page async for page in pager]

    assert actual == ["2", "3"], actual
    assert pages.calls[0] == "next?page=2"


class _Page(AzureModel):
    value: Optional[List[int]] = None
    next_link: Optional[str] = None


def test_next_link_of() -> None:
    assert next_link_of(_Page(next_link="https://x/next")) == "https://x/next"
    assert next_link_of(_Page(next_link="")) is None
    assert next_link_of(_Page()) is None
    # a page type with no next link at all is a single page
    assert next_link_of([1, 2]) is None


@pytest.mark.asyncio
async def test_pager_items() -> None:
    async def make_request(continuation: Optional[str]) -> PagerResult[_Page]:
        if continuation is None:
            return PagerResult(_Page(value=[1, 2]), "2")
        elif continuation == "2":
            return PagerResult(_Page(), "3")
        else:
            return PagerResult(_Page(value=[3]), None)

    actual = [item async for item in Pager(make_request).items()]
    assert actual == [1, 2, 3], actual
