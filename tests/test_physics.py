"""Tests for the physics formulas in both numeric domains."""

import math

import numpy as np
import pytest

from bbdrift.physics import (
    drag_force,
    from_int,
    magnus_force,
    pi,
    sqrt,
    velocity_from_kinetic_energy,
)
from ratio import Fraction16, Fraction32, Fraction64, NonPositiveDivisorError


def test_velocity_from_kinetic_energy_float():
    assert velocity_from_kinetic_energy(1.9, 0.0004) == pytest.approx(math.sqrt(9500))


def test_velocity_from_kinetic_energy_fraction_floors_the_root():
    # 2 * 19/10 / (4/10000) = 9500, floor(sqrt(9500)) = 97
    velocity = velocity_from_kinetic_energy(Fraction64(19, 10), Fraction64(4, 10000))
    assert velocity == Fraction64(97)


def test_velocity_vectorizes_over_numpy_arrays():
    velocities = velocity_from_kinetic_energy(np.array([1.9, 0.0]), 0.0004)
    assert velocities == pytest.approx([math.sqrt(9500), 0.0])


def test_drag_force_float():
    area = math.pi * 0.003 ** 2
    expected = 0.5 * 0.43 * 1.8 * area * 90.0 ** 2
    assert drag_force(90.0, 0.43, 1.8, area) == pytest.approx(expected)


def test_drag_force_fraction():
    force = drag_force(Fraction64(2), Fraction64(1, 2), Fraction64(1), Fraction64(1))
    assert force == Fraction64(1)


def test_magnus_force_float():
    expected = 0.5 * 1.8 * 0.003 ** 3 * 100.0 * 15.0
    assert magnus_force(100.0, 15.0, 1.8, 0.003) == pytest.approx(expected)


def test_magnus_force_fraction():
    force = magnus_force(Fraction64(10), Fraction64(2), Fraction64(2), Fraction64(1, 2))
    assert force == Fraction64(5, 2)


def test_magnus_force_follows_spin_sign():
    assert magnus_force(50.0, -15.0, 1.8, 0.003) < 0
    assert magnus_force(Fraction32(50), Fraction32(0), Fraction32(18, 10), Fraction32(3, 1000)) == 0


def test_helpers_build_constants_in_the_callers_domain():
    half = from_int(Fraction16(3), 1, 2)
    assert type(half) is Fraction16
    assert (half.numerator, half.denominator) == (1, 2)
    assert from_int(1.0, 1, 2) == 0.5
    assert pi(Fraction32(1)) == Fraction32(22, 7)
    assert pi(1.0) == math.pi
    assert sqrt(np.array([4.0, 9.0])) == pytest.approx([2.0, 3.0])
    assert sqrt(Fraction32(9, 4)) == Fraction32(3, 2)


def test_domain_errors_propagate():
    with pytest.raises(NonPositiveDivisorError):
        velocity_from_kinetic_energy(Fraction64(1), Fraction64(0))
