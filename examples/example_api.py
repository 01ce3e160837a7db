"""
Example script demonstrating the Python API.
"""

from ocean_drop import GeometryTerrain, LandGeometry, OceanSimulator, SimulationConfig, summarize
from ocean_drop.drop import describe
from ocean_drop.statistics import zone_counts

# Two crude "continents" as rectangles of (lon, lat)
RINGS = [
    [(-120, -50), (-120, 60), (-40, 60), (-40, -50)],
    [(0, -35), (0, 70), (150, 70), (150, -35)],
]


def main():
    """Run example simulation."""
    print("Building land geometry...")
    geometry = LandGeometry(RINGS)
    terrain = GeometryTerrain(geometry, stride=1)

    print("Initializing simulator...")
    config = SimulationConfig(total_days=365, seed=42)

    def progress(drop, stats):
        if drop is not None and drop.day % 50 == 0:
            print(f"  {describe(drop)}")

    simulator = OceanSimulator(terrain, config=config, on_tick=progress)

    print("Running simulation...")
    simulator.run(sleep=lambda _: None)

    print("\nSimulation statistics:")
    for key, value in simulator.get_statistics().items():
        print(f"  {key}: {value}")

    print("\nSummary:")
    summary = summarize(simulator.drops, simulator.stats)
    for key, value in vars(summary).items():
        print(f"  {key}: {value}")

    print("\nDrops by zone:")
    for zone, count in zone_counts(simulator.drops).items():
        print(f"  {zone.label}: {count}")


if __name__ == "__main__":
    main()
