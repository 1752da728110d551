"""Tests for environment-driven configuration."""

import importlib
import logging

import pytest

import config
from ratio import Fraction64


@pytest.fixture()
def reload_config(monkeypatch):
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_defaults(monkeypatch, reload_config):
    monkeypatch.delenv("BBSIGHT_INTEGER_DOMAIN", raising=False)
    monkeypatch.delenv("BBSIGHT_LOG_LEVEL", raising=False)
    reload_config()
    assert config.DEFAULT_FRACTION is Fraction64
    assert config.LOG_LEVEL == logging.INFO
    assert (config.DISPLAY_WIDTH_PX, config.DISPLAY_HEIGHT_PX) == (128, 96)


def test_environment_overrides(monkeypatch, reload_config):
    monkeypatch.setenv("BBSIGHT_INTEGER_DOMAIN", "int64")
    monkeypatch.setenv("BBSIGHT_LOG_LEVEL", "debug")
    reload_config()
    assert config.DEFAULT_FRACTION is Fraction64
    assert config.LOG_LEVEL == logging.DEBUG


@pytest.mark.parametrize(
    "name, value",
    [
        ("BBSIGHT_INTEGER_DOMAIN", "int12"),
        ("BBSIGHT_INTEGER_DOMAIN", "int16"),
        ("BBSIGHT_INTEGER_DOMAIN", "int32"),
        ("BBSIGHT_LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_environment_is_rejected(monkeypatch, reload_config, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        reload_config()


def test_every_supported_domain_keeps_spin_monotonic(monkeypatch, reload_config):
    from bbdrift import CalculatorConfiguration, calculate_drift

    for name in config.SUPPORTED_INTEGER_DOMAINS:
        monkeypatch.setenv("BBSIGHT_INTEGER_DOMAIN", name)
        reload_config()
        number_type = config.DEFAULT_FRACTION
        base = CalculatorConfiguration.default(number_type)
        lateral = [
            float(calculate_drift(base.replace(magnus_effect_angular_velocity=number_type(spin)), 5).drift_x)
            for spin in (0, 5, 10, 15, 30)
        ]
        assert lateral == sorted(lateral)
        assert lateral[-1] > 0
