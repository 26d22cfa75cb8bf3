"""
Basic example of running the airspace simulator on generated data.
"""

from heliosim import AirspaceSimulator, Sampler, SimulationConfig
from heliosim.entities import EntityKind


def make_wind_samples():
    """Uniform easterly breeze over a patch of western Russia."""
    samples = []
    for lat in range(40, 65):
        for lon in range(25, 65):
            samples.append((3.0, 0.5, float(lat), float(lon)))
    return samples


HELIPADS = [
    (55.75, 37.62),  # Moscow
    (59.93, 30.33),  # Saint Petersburg
    (56.84, 60.60),  # Yekaterinburg
    (43.60, 39.73),  # Sochi
    (54.71, 20.51),  # Kaliningrad
]


def main():
    print("=" * 80)
    print("Airspace Simulator - Basic Example")
    print("=" * 80)

    config = SimulationConfig(flight_capacity=40, initial_flights=10)
    sim = AirspaceSimulator.from_providers(
        make_wind_samples(), HELIPADS, config=config, sampler=Sampler(seed=42)
    )
    print(f"Helipads: {len(sim.helipads)}, storms: {len(sim.storms)}, flights: {len(sim.flights)}")

    print("\n" + "-" * 80)
    print("Running 500 ticks...")
    summary = sim.run(500)
    for name, value in summary.get_summary().items():
        print(f"{name:>22}: {value}")

    print("\n" + "-" * 80)
    print(f"Multirotors aloft: {sim.registry.count(EntityKind.MULTIROTOR)}")
    print(f"Helicopters aloft: {len(sim.flights)}")

    print("\n" + "=" * 80)
    print("Example completed!")
    print("=" * 80)


if __name__ == "__main__":
    main()
