"""
BB Drift Calculator

Fixed-step integration along the flight path of a spinning 6 mm BB:
- Gravity drop
- Air resistance (drag) draining kinetic energy
- Magnus effect (hop-up backspin, simplified)

Each step covers the same distance; the time spent on it follows from the
current velocity. Works in any numeric domain the physics formulas accept:
floats, or bounded fractions (see the ratio package).

In a fraction domain the cross products of the energy update saturate after
a couple of steps and the kinetic energy drops to zero, so drift stops
growing beyond the first meters (about -1.1 mm vertical with Fraction64 and
the default setup). Use floats for realistic tables.
"""
import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

import numpy as np

from ratio import Fraction

from .physics import drag_force, from_int, magnus_force, pi, velocity_from_kinetic_energy

logger = logging.getLogger(__name__)

Number = Union[float, Fraction]

# Default firing configuration as exact ratios (numerator, denominator)
DEFAULTS = {
    "muzzle_energy": (19, 10),                  # J
    "bb_weight": (4, 10000),                    # kg (0.4 g)
    "magnus_effect_angular_velocity": (15, 1),  # rad/s
    "angle_of_elevation": (0, 1),               # rad
    "gravity": (981, 100),                      # m/s²
    "air_density": (18, 10),                    # kg/m³
    "drag_coefficient": (43, 100),              # typical for a spinning sphere
    "bb_diameter": (6, 1000),                   # m (6 mm)
    "simulation_step": (1, 1),                  # m
}


@dataclass(frozen=True)
class CalculatorConfiguration:
    """Replica and environment parameters, all in one numeric domain"""
    muzzle_energy: Number                   # Joules
    bb_weight: Number                       # kg
    magnus_effect_angular_velocity: Number  # rad/s
    angle_of_elevation: Number              # rad, not used by the integration
    gravity: Number                         # m/s²
    air_density: Number                     # kg/m³
    drag_coefficient: Number                # dimensionless
    bb_diameter: Number                     # m
    simulation_step: Number                 # m

    @classmethod
    def default(cls, number_type: type = float, **overrides) -> "CalculatorConfiguration":
        """
        Default 0.4 g / 1.9 J setup built in ``number_type``.

        ``number_type`` is ``float`` or a concrete fraction class such as
        ``Fraction64``; overrides must already be in that domain.
        """
        if isinstance(number_type, type) and issubclass(number_type, Fraction):
            values = {name: number_type(n, d) for name, (n, d) in DEFAULTS.items()}
        else:
            values = {name: number_type(n / d) for name, (n, d) in DEFAULTS.items()}
        values.update(overrides)
        return cls(**values)

    def replace(self, **changes) -> "CalculatorConfiguration":
        return dataclasses.replace(self, **changes)

    @property
    def number_type(self) -> type:
        return type(self.muzzle_energy)

    @property
    def radius(self) -> Number:
        return self.bb_diameter / 2

    @property
    def cross_section_area(self) -> Number:
        """Cross-sectional area in m²"""
        radius = self.radius
        return pi(radius) * radius * radius


@dataclass(frozen=True)
class BBDrift:
    """Displacement from the line of aim, in meters"""
    drift_x: Number  # lateral, positive with positive spin
    drift_y: Number  # vertical, negative = below

    @classmethod
    def zero(cls, like: Number = 0.0) -> "BBDrift":
        """Zero drift in the numeric domain of ``like``"""
        return cls(from_int(like, 0), from_int(like, 0))

    def as_floats(self) -> Tuple[float, float]:
        return float(self.drift_x), float(self.drift_y)


@dataclass(frozen=True)
class DriftStep:
    """Snapshot taken after one integration step"""
    step: int               # 1-based step count
    traveled: Number        # m
    time: Number            # s
    velocity: Number        # m/s at the start of the step
    kinetic_energy: Number  # J left after the step
    drift: BBDrift


@dataclass
class _StateVector:
    position: Number  # m
    time: Number      # s
    mass: Number      # kg
    kinetic_energy: Number
    rotation: Number  # rad/s

    def velocity(self) -> Number:
        return velocity_from_kinetic_energy(self.kinetic_energy, self.mass)


def simulate(config: CalculatorConfiguration, range_m: Number) -> Iterator[DriftStep]:
    """
    Integrate the flight up to ``range_m`` meters, one step per item.

    Stops early when the BB runs out of energy or velocity. Yields nothing
    for a non-positive range or muzzle energy.
    """
    zero = from_int(config.muzzle_energy, 0)
    state = _StateVector(
        position=zero,
        time=zero,
        mass=config.bb_weight,
        kinetic_energy=config.muzzle_energy,
        rotation=config.magnus_effect_angular_velocity,
    )

    drift_x = zero
    drift_y = zero

    step = config.simulation_step
    radius = config.radius
    area = config.cross_section_area
    traveled = zero
    steps = 0

    while traveled < range_m and state.kinetic_energy > zero:
        v = state.velocity()
        if v <= zero:
            logger.debug("BB stopped after %d steps at %s m", steps, traveled)
            break

        drag = drag_force(v, config.drag_coefficient, config.air_density, area)
        magnus = magnus_force(v, state.rotation, config.air_density, radius)

        # Time needed to cover one distance step at the current speed
        dt = abs(step / v)

        # Magnus acts sideways
        accel_x = magnus / state.mass
        drift_x = drift_x + (accel_x * dt * dt) / 2

        accel_y = -config.gravity
        drift_y = drift_y + (accel_y * dt * dt / 2)

        # Drag work drains kinetic energy, never below zero
        work_drag = drag * step
        state.kinetic_energy = max(state.kinetic_energy - work_drag, zero)

        state.position = state.position + step
        state.time = state.time + dt
        traveled = traveled + step
        steps += 1

        yield DriftStep(
            step=steps,
            traveled=traveled,
            time=state.time,
            velocity=v,
            kinetic_energy=state.kinetic_energy,
            drift=BBDrift(drift_x, drift_y),
        )

    logger.debug(
        "Simulation finished after %d steps: traveled=%s m, energy=%s J",
        steps, traveled, state.kinetic_energy,
    )


def calculate_drift(config: CalculatorConfiguration, range_m: Number) -> BBDrift:
    """Drift accumulated by the time the BB has covered ``range_m`` meters"""
    drift = BBDrift.zero(config.muzzle_energy)
    for point in simulate(config, range_m):
        drift = point.drift
    return drift


def drift_table(config: CalculatorConfiguration, ranges: Iterable[Number]) -> np.ndarray:
    """
    Drift for several ranges as a float64 array.

    Rows are (range_m, drift_x, drift_y).
    """
    rows = []
    for range_m in ranges:
        drift_x, drift_y = calculate_drift(config, range_m).as_floats()
        rows.append((float(range_m), drift_x, drift_y))
    return np.array(rows, dtype=np.float64).reshape(-1, 3)


def format_drift_table(table: np.ndarray, title: str) -> str:
    """Text rendering of a drift table, drift in millimeters"""
    lines = [
        f"Drift ({title}):",
        f"{'Range':>6} {'Lateral':>10} {'Vertical':>10}",
        f"{'(m)':>6} {'(mm)':>10} {'(mm)':>10}",
        "-" * 28,
    ]
    for range_m, drift_x, drift_y in table:
        lines.append(f"{range_m:>6.0f} {drift_x * 1000:>10.3f} {drift_y * 1000:>10.3f}")
    return "\n".join(lines)


if __name__ == "__main__":
    import config as app_config
    from logging_config import setup_logging

    setup_logging(app_config.LOG_LEVEL)

    ranges = list(range(5, app_config.MAX_RANGE_M + 1, 5))
    for number_type in (float, app_config.DEFAULT_FRACTION):
        table = drift_table(CalculatorConfiguration.default(number_type), ranges)
        print(format_drift_table(table, number_type.__name__))
        print()
