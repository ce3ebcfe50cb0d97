"""Hosts an acquisition loop on a background thread for one dashboard session."""

from __future__ import annotations

import asyncio
import threading

from geotrack import AcquisitionLoop, LocationService, LoopTiming, PositionCell

from ..api_logging import get_logger, log_service_call


class LoopRunner:
    """Runs an :class:`AcquisitionLoop` in its own asyncio event loop.

    The loop itself has no stop operation; ``shutdown()`` cancels the hosting
    task when the session that owns it goes away.
    """

    def __init__(
        self,
        service: LocationService,
        cell: PositionCell,
        timing: LoopTiming | None = None,
    ) -> None:
        self.acquisition = AcquisitionLoop(service, cell, timing)
        self._thread: threading.Thread | None = None
        self._event_loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task | None = None
        self._ready = threading.Event()
        self.error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def log_state(self) -> str:
        return f"attempts={self.acquisition.attempts} state={self.acquisition.state.value}"

    @log_service_call
    def start(self) -> None:
        """Start polling. Calling again while running does nothing."""
        if self.is_running:
            return
        self._ready.clear()
        self._thread = threading.Thread(
            target=self._thread_main, name="geotrack-acquisition", daemon=True,
        )
        self._thread.start()
        self._ready.wait(timeout=5.0)

    @log_service_call
    def shutdown(self, timeout: float = 5.0) -> None:
        """Cancel the polling task and wait for the thread to exit."""
        if not self.is_running:
            return
        if self._event_loop is not None and self._task is not None:
            self._event_loop.call_soon_threadsafe(self._task.cancel)
        # a finalizer can fire on the polling thread itself, which cannot join itself
        if threading.current_thread() is not self._thread:
            self._thread.join(timeout=timeout)

    def _thread_main(self) -> None:
        asyncio.run(self._main())

    async def _main(self) -> None:
        self._event_loop = asyncio.get_running_loop()
        self._task = asyncio.create_task(self.acquisition.run())
        self._ready.set()
        try:
            await self._task
        except asyncio.CancelledError:
            get_logger().info("acquisition loop cancelled after %d attempts", self.acquisition.attempts)
        except Exception as exc:
            self.error = exc
            get_logger().exception("acquisition loop crashed: %s", exc)
        finally:
            await self.acquisition.service.close()
