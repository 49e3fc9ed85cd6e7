import datetime
import math

import pytest

from dimensional.core import measurable
from dimensional.core import si
from dimensional.core import units
from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import DimensionError


pytestmark = pytest.mark.quantity


def test_si_table(standard):
    """The default table should contain the full SI catalogue."""
    for unit in si.UNITS:
        assert unit['symbol'] in standard.units
    for prefix in si.PREFIXES + si.BINARY_PREFIXES:
        assert prefix['symbol'] in standard.prefixes
    assert si.table() is standard


@pytest.mark.parametrize('entry', si.UNITS, ids=lambda e: e['name'])
def test_named_units_match_table(entry: dict):
    """Each named quantity should equal the parsed symbol."""
    name = entry['name'].replace('electronvolt', 'electron_volt')
    named = getattr(units, name)
    parsed = measurable.parse(entry['symbol'])
    assert named.dims == parsed.dims
    assert named.magnitude == pytest.approx(parsed.magnitude)


def test_derived_units():
    """Derived units should combine the base units."""
    assert units.newton.dims == DimensionVector(L=1, M=1, T=-2)
    assert units.joule == units.newton * units.meter
    assert units.liter.magnitude == pytest.approx(1e-3)
    assert units.day.magnitude == 86400.0
    assert units.degree_of_angle.magnitude == pytest.approx(math.pi / 180)
    assert units.hectare.dims == DimensionVector(L=2)
    assert units.litre is units.liter


def test_prefix_helpers():
    """Prefix helpers should scale quantities."""
    assert units.kilo(units.meter) == measurable.parse('km')
    assert units.milli(units.gram).magnitude == pytest.approx(1e-6)
    assert units.micro(units.second).magnitude == pytest.approx(1e-6)
    assert units.yotta.factor == 1e24
    assert units.yocto.factor == 1e-24


def test_kinds():
    """Kinds should check and construct quantities."""
    speed = 90 * units.kilo(units.meter) / units.hour
    assert isinstance(speed, units.Speed)
    assert not isinstance(speed, units.Acceleration)
    assert f"{speed:.1f m/s}" == '25.0 m/s'
    assert units.Length(2.0) == 2 * units.meter
    assert units.MassicConcentration('2.5 g/l').value('kg/m^3') == (
        pytest.approx(2.5)
    )
    assert units.MassicConcentration == units.MassDensity
    assert units.Dimensionless(0.5).dimensionless
    assert units.Work is units.Energy
    with pytest.raises(DimensionError):
        units.Concentration('2.5 g/l')


def test_concentration_conversion():
    """A concentration in kg/l should convert to mg/cm^3."""
    c = units.MassicConcentration('1 kg/l')
    assert c.value('mg/cm^3') == pytest.approx(1e3)
    assert c.value(units.kilogram / units.liter) == pytest.approx(1.0)


@pytest.mark.parametrize(
    'delta',
    [
        datetime.timedelta(0),
        datetime.timedelta(seconds=1),
        datetime.timedelta(days=1, hours=1, minutes=1, seconds=1.5),
        datetime.timedelta(microseconds=7),
        datetime.timedelta(days=-2, microseconds=3),
    ],
)
def test_timedelta(delta: datetime.timedelta):
    """Durations should convert to time quantities and back."""
    q = units.from_timedelta(delta)
    assert isinstance(q, units.Time)
    assert q.magnitude == pytest.approx(delta.total_seconds())
    assert units.to_timedelta(q) == delta


def test_to_timedelta():
    """Only time quantities convert to durations."""
    assert units.to_timedelta(1.5 * units.minute) == datetime.timedelta(
        seconds=90
    )
    with pytest.raises(DimensionError):
        units.to_timedelta(units.meter)
