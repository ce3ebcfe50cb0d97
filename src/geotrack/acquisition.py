"""Geolocation acquisition loop.

One attempt at a time: request a fix, let a successful fix settle, publish the
sample, then wait before the next attempt. Failures are published right away
and retried after the same wait, so the loop never stops on its own.

    IDLE -> REQUESTING -> SETTLING -> WAITING -> REQUESTING -> ...
                      \\-> (failure) ----^
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, NoReturn

from geotrack.cell import PositionCell
from geotrack.config import LoopTiming
from geotrack.exceptions import LocationError
from geotrack.location import LocationService
from geotrack.models.position import PositionSample

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]
Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LoopState(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SETTLING = "settling"
    WAITING = "waiting"


class AcquisitionLoop:
    """Self-rescheduling position poller feeding a :class:`PositionCell`."""

    def __init__(
        self,
        service: LocationService,
        cell: PositionCell,
        timing: LoopTiming | None = None,
        *,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = utcnow,
    ) -> None:
        self.service = service
        self.cell = cell
        self.timing = timing or LoopTiming()
        self._sleep = sleep
        self._clock = clock
        self.state = LoopState.IDLE
        self.attempts = 0

    async def _request(self) -> PositionSample:
        options = self.timing.options
        try:
            fix = await asyncio.wait_for(
                self.service.get_current_position(options),
                timeout=options.timeout,
            )
        except TimeoutError:
            logger.info("position request timed out after %.1fs", options.timeout)
            return PositionSample.failure(self._clock(), "timeout")
        except LocationError as exc:
            logger.info("position request failed: %s: %s", type(exc).__name__, exc)
            return PositionSample.failure(self._clock(), str(exc) or type(exc).__name__)
        return PositionSample.from_fix(fix, captured_at=self._clock())

    async def step(self) -> PositionSample:
        """Run one attempt through to the end of its wait and return its sample."""
        self.attempts += 1
        self.state = LoopState.REQUESTING
        sample = await self._request()

        if sample.success:
            self.state = LoopState.SETTLING
            await self._sleep(self.timing.settle_delay)

        self.cell.publish(sample)
        logger.debug("attempt %d -> success=%s", self.attempts, sample.success)

        self.state = LoopState.WAITING
        await self._sleep(self.timing.retry_delay)
        return sample

    async def run(self) -> NoReturn:
        """Poll until the enclosing task is cancelled."""
        try:
            while True:
                await self.step()
        finally:
            self.state = LoopState.IDLE
