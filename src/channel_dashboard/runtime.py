"""
Event-loop runtime for threaded hosts.

Flask serves requests from several threads, but dashboard state is
single-writer: every coroutine and every state read is handed to one
asyncio loop running in a dedicated thread.
"""
import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class DashboardRuntime:
    """
    Owns one background event loop.

    Usage:
        runtime = DashboardRuntime()
        runtime.start()
        runtime.submit(app.run_analysis("demo-channel"))   # fire and forget
        state = runtime.call(app.snapshot)                 # wait for result
    """

    def __init__(self, name: str = "dashboard-runtime"):
        self._name = name
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._started = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.is_running:
            return

        def _target():
            self._loop = asyncio.new_event_loop()
            asyncio.set_event_loop(self._loop)
            self._started.set()
            try:
                self._loop.run_forever()
            finally:
                self._loop.close()

        self._thread = threading.Thread(target=_target, daemon=True, name=self._name)
        self._thread.start()
        self._started.wait()
        logger.info(f"Runtime loop started in thread '{self._name}'")

    def stop(self, timeout: float = 5.0) -> None:
        if not self.is_running:
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout)
        self._started.clear()
        logger.info("Runtime loop stopped")

    def submit(self, coro: Awaitable[Any]) -> Future:
        """
        Schedule a coroutine on the loop without waiting for it.

        Failures are logged; nothing is retried.
        """
        if not self.is_running:
            raise RuntimeError("Runtime not started. Call start() first.")
        return asyncio.run_coroutine_threadsafe(self._logged(coro), self._loop)

    def run(self, coro: Awaitable[Any], timeout: Optional[float] = None) -> Any:
        """Run a coroutine on the loop and wait for its result."""
        return self.submit(coro).result(timeout)

    def call(self, func: Callable[..., Any], *args, timeout: Optional[float] = None, **kwargs) -> Any:
        """Run a plain function on the loop thread and wait for its result."""

        async def _invoke():
            return func(*args, **kwargs)

        return self.run(_invoke(), timeout=timeout)

    @staticmethod
    async def _logged(coro: Awaitable[Any]) -> Any:
        try:
            return await coro
        except Exception as e:
            logger.error(f"Dashboard task failed: {e}")
            raise
