"""
Unit tests for temperature and pressure conversion.

Reference values:
    - 1 atm = 101325 Pa = 1.01325 bar = 760 mmHg
    - 0 °C = 273.15 K = 32 °F
"""

import pytest

from physkit.core.constants import P_ATM
from physkit.core.types import DomainError, PressureUnit, TemperatureUnit
from physkit.core.units import (
    atmosphere_to_bar,
    atmosphere_to_mmhg,
    bar_to_pascal,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    fahrenheit_to_kelvin,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
    mmhg_to_pascal,
    pascal_to_atmosphere,
    to_atmosphere,
    to_bar,
    to_celsius,
    to_fahrenheit,
    to_kelvin,
    to_millimeter_of_mercury,
    to_pascal,
)


# =============================================================================
# Pressure
# =============================================================================

class TestPressureConversion:
    """Test pairwise pressure conversions."""

    def test_bar_to_pascal(self):
        """1 bar should equal 100 kPa."""
        assert bar_to_pascal(1.0) == pytest.approx(100000.0)

    def test_atmosphere_to_bar(self):
        """1 atm should equal 1.01325 bar."""
        assert atmosphere_to_bar(1.0) == pytest.approx(1.01325)

    def test_atmosphere_to_mmhg(self):
        """1 atm should equal 760 mmHg."""
        assert atmosphere_to_mmhg(1.0) == pytest.approx(760.0, rel=1e-6)

    def test_mmhg_to_pascal(self):
        """760 mmHg should equal one standard atmosphere."""
        assert mmhg_to_pascal(760.0) == pytest.approx(P_ATM, rel=1e-6)

    def test_pascal_to_atmosphere(self):
        """Standard atmosphere in Pa should convert to 1 atm."""
        assert pascal_to_atmosphere(P_ATM) == pytest.approx(1.0)


class TestPressureDispatch:
    """Test unit-tagged pressure conversions."""

    def test_to_pascal_from_bar(self):
        """Tagged bar input should scale by 1e5."""
        assert to_pascal(2.0, PressureUnit.BAR) == pytest.approx(200000.0)

    def test_to_pascal_identity(self):
        """Pascal input should be returned unchanged."""
        assert to_pascal(123.4, PressureUnit.PASCAL) == 123.4

    def test_to_bar_from_atmosphere(self):
        """1 atm should route through Pa to 1.01325 bar."""
        assert to_bar(1.0, PressureUnit.ATMOSPHERE) == pytest.approx(1.01325)

    def test_to_atmosphere_from_mmhg(self):
        """760 mmHg should equal 1 atm."""
        assert to_atmosphere(760.0, PressureUnit.MILLIMETER_OF_MERCURY) == pytest.approx(1.0, rel=1e-6)

    def test_to_mmhg_identity(self):
        """Same-unit conversion should not change the value."""
        assert to_millimeter_of_mercury(42.0, PressureUnit.MILLIMETER_OF_MERCURY) == 42.0

    def test_unknown_unit_raises(self):
        """Unknown unit tag should raise DomainError."""
        with pytest.raises(DomainError, match="Unknown pressure unit"):
            to_pascal(1.0, "psi")


# =============================================================================
# Temperature
# =============================================================================

class TestTemperatureConversion:
    """Test pairwise temperature conversions and absolute-zero checks."""

    def test_celsius_to_kelvin(self):
        """0 °C should be 273.15 K."""
        assert celsius_to_kelvin(0.0) == pytest.approx(273.15)

    def test_kelvin_to_celsius(self):
        """373.15 K should be 100 °C."""
        assert kelvin_to_celsius(373.15) == pytest.approx(100.0)

    def test_fahrenheit_to_celsius(self):
        """212 °F should be 100 °C."""
        assert fahrenheit_to_celsius(212.0) == pytest.approx(100.0)

    def test_celsius_to_fahrenheit(self):
        """-40 is the same on both scales."""
        assert celsius_to_fahrenheit(-40.0) == pytest.approx(-40.0)

    def test_fahrenheit_to_kelvin(self):
        """32 °F should be 273.15 K."""
        assert fahrenheit_to_kelvin(32.0) == pytest.approx(273.15)

    def test_kelvin_to_fahrenheit(self):
        """0 K should be -459.67 °F."""
        assert kelvin_to_fahrenheit(0.0) == pytest.approx(-459.67)

    def test_negative_kelvin_rejected(self):
        """Kelvin below zero is below absolute zero."""
        with pytest.raises(DomainError, match="cannot be negative"):
            kelvin_to_celsius(-1.0)

    def test_zero_kelvin_accepted(self):
        """Absolute zero itself is a valid temperature."""
        assert kelvin_to_celsius(0.0) == pytest.approx(-273.15)

    def test_celsius_below_absolute_zero_rejected(self):
        """Celsius below -273.15 should raise."""
        with pytest.raises(DomainError, match="absolute zero"):
            celsius_to_kelvin(-300.0)

    def test_fahrenheit_below_absolute_zero_rejected(self):
        """Fahrenheit giving negative Kelvin should raise."""
        with pytest.raises(DomainError, match="cannot be negative"):
            fahrenheit_to_kelvin(-500.0)

    @pytest.mark.parametrize("kelvin", [0.0, 1.0, 77.0, 273.15, 300.0, 5778.0])
    def test_celsius_kelvin_round_trip(self, kelvin):
        """Kelvin -> Celsius -> Kelvin should reproduce the input."""
        assert celsius_to_kelvin(kelvin_to_celsius(kelvin)) == pytest.approx(kelvin)


class TestTemperatureDispatch:
    """Test unit-tagged temperature conversions."""

    def test_to_kelvin_from_fahrenheit(self):
        """212 °F should be 373.15 K."""
        assert to_kelvin(212.0, TemperatureUnit.FAHRENHEIT) == pytest.approx(373.15)

    def test_to_celsius_from_kelvin(self):
        """273.15 K should be 0 °C."""
        assert to_celsius(273.15, TemperatureUnit.KELVIN) == pytest.approx(0.0)

    def test_to_fahrenheit_from_celsius(self):
        """100 °C should be 212 °F."""
        assert to_fahrenheit(100.0, TemperatureUnit.CELSIUS) == pytest.approx(212.0)

    def test_identity(self):
        """Same-scale conversion should not change the value."""
        assert to_kelvin(300.0, TemperatureUnit.KELVIN) == 300.0
        assert to_celsius(25.0, TemperatureUnit.CELSIUS) == 25.0

    def test_unknown_unit_raises(self):
        """Unknown unit tag should raise DomainError."""
        with pytest.raises(DomainError, match="Unknown temperature unit"):
            to_kelvin(1.0, "R")
