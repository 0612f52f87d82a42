import asyncio
from functools import wraps
from typing import Any, Awaitable, Callable, Optional, TypeVar

T = TypeVar("T")


def cached(fn: Callable[[], Awaitable[T]]) -> Callable[[], Awaitable[T]]:
    """
    Caches the result of a no-argument coroutine function.

    The first caller creates the value; concurrent callers wait for it.
    """
    result: Optional[T] = None
    lock: asyncio.Lock = asyncio.Lock()

    @wraps(fn)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        nonlocal result
        if result is None:
            async with lock:
                if result is None:
                    result = await fn()
        return result

    return wrapper
