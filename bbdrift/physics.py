"""
Physics formulas for the drift calculator

Every function works on floats, numpy arrays and bounded fractions alike:
constants are built in the domain of the first argument.
"""
import numpy as np

from ratio import Fraction

# pi as used by the fraction domains
PI_RATIO = (22, 7)


def sqrt(value):
    """Square root in the value's own numeric domain"""
    if isinstance(value, Fraction):
        return value.sqrt()
    return np.sqrt(value)


def from_int(like, numerator: int, denominator: int = 1):
    """Small constant numerator/denominator in the domain of ``like``"""
    if isinstance(like, Fraction):
        return type(like)(numerator, denominator)
    return numerator / denominator


def pi(like):
    if isinstance(like, Fraction):
        return type(like)(*PI_RATIO)
    return np.pi


def velocity_from_kinetic_energy(energy, mass):
    # KE = 0.5 * m * v^2  =>  v = sqrt(2 * KE / m)
    return sqrt(from_int(energy, 2) * energy / mass)


def drag_force(velocity, drag_coefficient, air_density, area):
    """Fd = 0.5 * Cd * rho * A * v^2"""
    v_squared = velocity * velocity
    return from_int(velocity, 1, 2) * drag_coefficient * air_density * area * v_squared


def magnus_force(velocity, angular_velocity, air_density, radius):
    """
    Simplified Magnus force: Fm = 0.5 * rho * r^3 * v * w

    The lift coefficient and cross-section are folded into the r^3 term.
    """
    return (
        from_int(velocity, 1, 2)
        * air_density
        * (radius * radius * radius)
        * velocity
        * angular_velocity
    )
