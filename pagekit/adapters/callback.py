"""Callback-style calling convention over the awaitable paginator.

``callback(error, value)`` is called exactly once: ``(None, value)`` on
success, ``(exc, None)`` when the round failed.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from pagekit.services.paginator import Paginator
from pagekit.services.result import PaginationResult
from pagekit.utils.pagination import PaginationArgs

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[BaseException], Any], None]

# the loop only keeps weak references to tasks
_pending: set[asyncio.Task] = set()


def _schedule(awaitable: Awaitable[Any], callback: Callback) -> asyncio.Task:
    task = asyncio.get_running_loop().create_task(awaitable)
    _pending.add(task)

    def _deliver(done: asyncio.Task) -> None:
        _pending.discard(done)
        if done.cancelled():
            error, value = asyncio.CancelledError(), None
        else:
            error = done.exception()
            value = None if error is not None else done.result()
        try:
            callback(error, value)
        except Exception:
            logger.exception("Pagination callback failed")

    task.add_done_callback(_deliver)
    return task


def paginate_with_callback(paginator: Paginator, query: Any, args: PaginationArgs, callback: Callback) -> asyncio.Task:
    return _schedule(paginator.paginate(query, args), callback)


def next_page_with_callback(result: PaginationResult, callback: Callback) -> asyncio.Task:
    return _schedule(result.next_page(), callback)
