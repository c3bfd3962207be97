"""CLI entry point for star chart generation.

    nightdome-starchart --lat 35.16 --lng 129.05 --when "1995-01-15 00:00" --local
"""

import argparse
import logging
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from nightdome.compute import compute_sky
from nightdome.config import Settings
from nightdome.models import Observer, Viewport
from nightdome.renderers.static import save_static_chart
from nightdome.timebase import to_utc

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the sky disc for a place and time.")
    parser.add_argument("--lat", type=float, required=True, help="Latitude (degrees)")
    parser.add_argument("--lng", type=float, required=True, help="Longitude (degrees, east positive)")
    parser.add_argument(
        "--when", required=True, help='Time as "YYYY-MM-DD HH:MM" (UTC unless --local)'
    )
    parser.add_argument(
        "--local",
        action="store_true",
        help="Interpret --when as wall-clock time at the observer's location",
    )
    parser.add_argument("--rotation", type=float, default=0.0, help="Disc rotation (degrees)")
    parser.add_argument("--output", type=Path, default=None, help="PNG destination")
    return parser


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    args = _build_parser().parse_args(argv)
    observer = Observer(lat=args.lat, lng=args.lng)
    dt = datetime.strptime(args.when, "%Y-%m-%d %H:%M")
    when = to_utc(dt, observer.lat, observer.lng) if args.local else dt

    viewport = Viewport(width=settings.viewport_width, height=settings.viewport_height)
    snapshot = compute_sky(observer, when, viewport, rotation=args.rotation)
    path = save_static_chart(snapshot, args.output, results_dir=settings.results_dir)
    logger.info("twilight: %s", snapshot.twilight.value)
    print(f"Saved: {path}")


if __name__ == "__main__":
    main()
