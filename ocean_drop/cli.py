"""
Command-line interface for the ocean drop simulator.
"""

import argparse
import logging
import sys

from .config import SimulationConfig, load_config, speed_to_delay_ms
from .errors import OceanDropError
from .geometry import LandGeometry, load_geometry
from .simulator import OceanSimulator
from .statistics import summarize, zone_counts
from .terrain import GeometryTerrain


def progress_callback(every: int):
    """Return a tick callback printing progress every ``every`` days."""
    def report(drop, stats):
        if drop is not None and drop.day % every == 0:
            print(f"Day {drop.day}: avg temp {stats.avg_temp:.1f} °C, "
                  f"coastal hits {stats.coastal_count}, "
                  f"attempts {stats.total_attempts} ({stats.land_attempts} on land)")
    return report


def _fmt(value, fmt: str, unit: str = "") -> str:
    return "--" if value is None else f"{value:{fmt}}{unit}"


def build_config(args) -> SimulationConfig:
    """Merge the config file (if any) with command-line overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()
    if args.days is not None:
        config.total_days = args.days
    if args.seed is not None:
        config.seed = args.seed
    if args.speed is not None:
        config.delay_ms = speed_to_delay_ms(args.speed)
    if args.stride is not None:
        config.stride = args.stride
    return config.validate()


def main(argv=None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Monte Carlo ocean drop simulator"
    )

    parser.add_argument(
        "-g", "--geometry",
        type=str,
        help="Land ring file (JSON with a 'landPolygons' list)"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Configuration file (JSON)"
    )

    parser.add_argument(
        "--days",
        type=int,
        help="Number of days to simulate (default: 1825)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed"
    )

    parser.add_argument(
        "--speed",
        type=float,
        help="Speed control 1-100 (1 = 200 ms per day, 100 = 1 ms per day)"
    )

    parser.add_argument(
        "--stride",
        type=int,
        help="Coastline sampling stride (default: 10)"
    )

    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Run days back to back without waiting between ticks"
    )

    parser.add_argument(
        "--progress",
        type=int,
        default=100,
        help="Print progress every N days (default: 100, 0 to disable)"
    )

    parser.add_argument(
        "--log",
        dest="loglevel",
        default="INFO",
        help="Logging level (DEBUG/INFO/WARN)"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), logging.INFO),
                        format="%(asctime)s | %(levelname)s | %(message)s")

    try:
        config = build_config(args)
        if args.geometry:
            geometry = load_geometry(args.geometry)
        else:
            logging.warning("No land geometry given; only the polar cap counts as land")
            geometry = LandGeometry.empty()
    except (OSError, OceanDropError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    terrain = GeometryTerrain(geometry, thresholds=config.thresholds, stride=config.stride)
    on_tick = progress_callback(args.progress) if args.progress > 0 else None
    simulator = OceanSimulator(terrain, config=config, on_tick=on_tick)

    print("=" * 60)
    print("Ocean Drop Simulator")
    print("=" * 60)
    print(f"Geometry: {len(geometry)} rings, {geometry.point_count} coastline points")
    print(f"Days: {config.total_days}")
    print(f"Zones: coastal <= {config.thresholds.coastal_km} km, "
          f"shelf <= {config.thresholds.shelf_km} km, far <= {config.thresholds.far_km} km")
    print("=" * 60)

    print("\nRunning simulation...")
    if args.no_delay:
        simulator.run(sleep=lambda _: None)
    else:
        simulator.run()

    stats = simulator.get_statistics()
    summary = summarize(simulator.drops, simulator.stats, config.thresholds.coastal_km)

    print("\nSimulation complete!")
    print(f"Days: {stats['current_day']} / {stats['total_days']} ({stats['mode']})")
    print(f"Attempts: {stats['total_attempts']} ({stats['land_attempts']} on land, "
          f"{_fmt(summary.water_percent, '.1f', '% water')})")
    print(f"Coastal hits: {summary.coastal_count} ({_fmt(summary.coastal_percent, '.1f', '%')})")
    print(f"Closest: {_fmt(summary.closest_km, '.1f', ' km')}, "
          f"farthest: {_fmt(summary.farthest_km, '.1f', ' km')}, "
          f"mean: {_fmt(summary.mean_distance_km, '.0f', ' km')}")
    print(f"Mean temperature: {_fmt(summary.mean_temp, '.1f', ' °C')} "
          f"(cold {_fmt(summary.cold_percent, '.1f', '%')}, "
          f"warm {_fmt(summary.warm_percent, '.1f', '%')})")

    print("\nDrops by zone:")
    for zone, count in zone_counts(simulator.drops).items():
        print(f"  {zone.label:<13} {count}")


if __name__ == "__main__":
    main()
