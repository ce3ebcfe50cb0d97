"""Follow this host's position for a while and save the map to HTML."""

import asyncio
import logging
import sys
from pathlib import Path

from geotrack import (
    AcquisitionLoop,
    IpLocationService,
    LoopTiming,
    MapUpdateHandler,
    PositionCell,
    ReplayLocationService,
    build_base_map,
)

SAMPLE_TRACK = Path(__file__).resolve().parent.parent / "dashboard" / "data" / "sample_track.csv"


async def follow(seconds: float, replay: bool) -> None:
    service = ReplayLocationService.from_csv(SAMPLE_TRACK) if replay else IpLocationService()
    canvas = build_base_map()
    cell = PositionCell()
    cell.subscribe(MapUpdateHandler(canvas))
    cell.subscribe(lambda s: print(
        f"  {s.timestamp:%H:%M:%S} "
        + (f"{s.latitude:.5f}, {s.longitude:.5f} ±{s.accuracy:.0f} m" if s.success else f"no fix ({s.error})")
    ))

    # Replay doesn't need the real-world pacing
    timing = LoopTiming(settle_delay=0.1, retry_delay=0.2) if replay else LoopTiming()
    loop = AcquisitionLoop(service, cell, timing)

    print(f"=== Following for {seconds:.0f}s ===")
    task = asyncio.create_task(loop.run())
    try:
        await asyncio.sleep(seconds)
    finally:
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        await service.close()

    out = Path("my_location.html")
    canvas.map.save(out)
    print(f"\n{loop.attempts} attempts, map saved to {out.resolve()}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    replay = "--replay" in sys.argv
    asyncio.run(follow(10.0 if replay else 20.0, replay))


if __name__ == "__main__":
    main()
