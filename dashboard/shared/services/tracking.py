"""Per-session live tracking: loop, cell, map and handler wired together."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

from geotrack import (
    FoliumCanvas,
    LocationService,
    LoopTiming,
    MapUpdateHandler,
    PositionCell,
    PositionSample,
    build_base_map,
)

from ..api_logging import log_service_call
from ..constants import DEFAULT_CENTER, DEFAULT_ZOOM, POSITION_GROUP
from .runner import LoopRunner
from .trail import SampleTrail


@dataclass
class LiveView:
    """What the page needs to render one refresh."""

    sample: PositionSample | None
    last_fix: PositionSample | None
    redrawn: bool
    version: int


@dataclass
class TrackingSession:
    """Everything one browser session needs to follow the device position."""

    canvas: FoliumCanvas
    cell: PositionCell
    handler: MapUpdateHandler
    runner: LoopRunner
    trail: SampleTrail
    config_key: tuple = ()
    _unsubscribe: object = field(default=None, repr=False)
    _finalizer: object = field(default=None, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        service: LocationService,
        timing: LoopTiming | None = None,
        config_key: tuple = (),
    ) -> TrackingSession:
        canvas = build_base_map(center=DEFAULT_CENTER, zoom=DEFAULT_ZOOM, detached_groups=(POSITION_GROUP,))
        cell = PositionCell()
        trail = SampleTrail()
        session = cls(
            canvas=canvas,
            cell=cell,
            handler=MapUpdateHandler(canvas, group=POSITION_GROUP),
            runner=LoopRunner(service, cell, timing),
            trail=trail,
            config_key=config_key,
        )
        session._unsubscribe = cell.subscribe(trail)
        # Streamlit drops session_state when the browser session ends; the
        # polling thread only holds the runner, so the session can be collected.
        session._finalizer = weakref.finalize(session, session.runner.shutdown)
        return session

    def log_state(self) -> str:
        return f"{self.runner.log_state()} samples={len(self.trail)}"

    @log_service_call
    def start(self) -> None:
        self.runner.start()

    @log_service_call
    def stop(self) -> None:
        self.runner.shutdown()
        if callable(self._unsubscribe):
            self._unsubscribe()
            self._unsubscribe = None

    def refresh(self) -> LiveView:
        """Apply the newest cell value to the map. Safe to call on every rerun."""
        version, sample = self.cell.snapshot()
        redrawn = self.handler.handle(sample)
        return LiveView(
            sample=sample,
            last_fix=self.handler.last_drawn,
            redrawn=redrawn,
            version=version,
        )
