import asyncio
import inspect
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from asgiref.sync import async_to_sync
from flask import current_app, has_request_context, request

executor = ThreadPoolExecutor(max_workers=4)


def _has_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False

    return True


def sync_async_wrapper(func: Callable, *args: Any, **kwargs: Any) -> Any:
    if not inspect.iscoroutinefunction(func):
        return func(*args, **kwargs)

    if not _has_running_loop():
        return async_to_sync(func)(*args, **kwargs)

    # Already inside a running event loop.  Run on a separate thread with its
    # own loop, carrying the Flask app and request context along when there
    # is one.
    if not has_request_context():
        return executor.submit(asyncio.run, func(*args, **kwargs)).result()

    app = current_app._get_current_object()
    environ = request._get_current_object().environ

    def run_in_thread():
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:

            async def run_async_with_context():
                with app.app_context():
                    with app.request_context(environ):
                        return await func(*args, **kwargs)

            return loop.run_until_complete(run_async_with_context())
        finally:
            loop.close()

    return executor.submit(run_in_thread).result()
