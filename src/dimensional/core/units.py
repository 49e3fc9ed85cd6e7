"""
Named SI units, prefixes, and kinds of quantity.

Units are `~measurable.Quantity` instances, so they combine arithmetically:

>>> speed = 90 * kilo(meter) / hour
>>> f"{speed:.1f m/s}"
'25.0 m/s'

Kinds are `~measurable.QuantityType` instances that construct, parse, and
check quantities of one dimension:

>>> isinstance(speed, Speed)
True
"""

import datetime
import math

from dimensional.core import dimension
from dimensional.core.errors import DimensionError
from dimensional.core.measurable import Quantity, QuantityType, prefix


meter = Quantity(1.0, dimension.LENGTH)
metre = meter
kilogram = Quantity(1.0, dimension.MASS)
second = Quantity(1.0, dimension.TIME)
ampere = Quantity(1.0, dimension.CURRENT)
kelvin = Quantity(1.0, dimension.TEMPERATURE)
mole = Quantity(1.0, dimension.AMOUNT)
candela = Quantity(1.0, dimension.LUMINOSITY)

radian = meter / meter
steradian = meter**2 / meter**2
hertz = 1 / second
newton = kilogram * meter / second**2
pascal = newton / meter**2
joule = newton * meter
watt = joule / second
coulomb = second * ampere
volt = watt / ampere
farad = coulomb / volt
ohm = volt / ampere
siemens = ampere / volt
weber = volt * second
tesla = weber / meter**2
henry = weber / ampere
celsius = kelvin
lumen = candela / steradian
lux = lumen / meter**2
becquerel = 1 / second
gray = joule / kilogram
sievert = joule / kilogram
katal = mole / second

gram = 1e-3 * kilogram
minute = 60 * second
hour = 60 * minute
day = 24 * hour
degree_of_angle = math.pi / 180 * radian
minute_of_angle = degree_of_angle / 60
second_of_angle = minute_of_angle / 60
hectare = 1e4 * meter**2
liter = 1e-3 * meter**3
litre = liter
ton = 1e3 * kilogram
electron_volt = 1.60217653e-19 * joule
dalton = 1.66053886e-27 * kilogram


Length = QuantityType(meter.dims, 'Length')
Mass = QuantityType(kilogram.dims, 'Mass')
Time = QuantityType(second.dims, 'Time')
ElectricCurrent = QuantityType(ampere.dims, 'ElectricCurrent')
Temperature = QuantityType(kelvin.dims, 'Temperature')
AmountOfSubstance = QuantityType(mole.dims, 'AmountOfSubstance')
LuminousIntensity = QuantityType(candela.dims, 'LuminousIntensity')

Area = QuantityType((meter**2).dims, 'Area')
Surface = Area
Volume = QuantityType((meter**3).dims, 'Volume')
Speed = QuantityType((meter / second).dims, 'Speed')
Acceleration = QuantityType((meter / second**2).dims, 'Acceleration')
MassDensity = QuantityType((kilogram / meter**3).dims, 'MassDensity')
CurrentDensity = QuantityType((ampere / meter**2).dims, 'CurrentDensity')
MagneticFieldStrength = QuantityType(
    (ampere / meter).dims, 'MagneticFieldStrength'
)
Concentration = QuantityType((mole / meter**3).dims, 'Concentration')
MolarConcentration = Concentration
MassicConcentration = QuantityType(
    (kilogram / meter**3).dims, 'MassicConcentration'
)
Luminance = QuantityType((candela / meter**2).dims, 'Luminance')

Angle = QuantityType(radian.dims, 'Angle')
SolidAngle = QuantityType(steradian.dims, 'SolidAngle')
Frequency = QuantityType(hertz.dims, 'Frequency')
Force = QuantityType(newton.dims, 'Force')
Pressure = QuantityType(pascal.dims, 'Pressure')
Energy = QuantityType(joule.dims, 'Energy')
Work = Energy
Heat = Energy
Power = QuantityType(watt.dims, 'Power')
ElectricCharge = QuantityType(coulomb.dims, 'ElectricCharge')
ElectricPotential = QuantityType(volt.dims, 'ElectricPotential')
Capacitance = QuantityType(farad.dims, 'Capacitance')
ElectricResistance = QuantityType(ohm.dims, 'ElectricResistance')
ElectricConductance = QuantityType(siemens.dims, 'ElectricConductance')
MagneticFlux = QuantityType(weber.dims, 'MagneticFlux')
MagneticFluxDensity = QuantityType(tesla.dims, 'MagneticFluxDensity')
Inductance = QuantityType(henry.dims, 'Inductance')
LuminousFlux = QuantityType(lumen.dims, 'LuminousFlux')
Illuminance = QuantityType(lux.dims, 'Illuminance')
CelsiusTemperature = QuantityType(celsius.dims, 'CelsiusTemperature')
Radioactivity = QuantityType(becquerel.dims, 'Radioactivity')
AbsorbedDose = QuantityType(gray.dims, 'AbsorbedDose')
DoseEquivalent = QuantityType(sievert.dims, 'DoseEquivalent')
CatalyticActivity = QuantityType(katal.dims, 'CatalyticActivity')

Dimensionless = QuantityType(radian.dims, 'Dimensionless')


yotta = prefix(1e24)
zetta = prefix(1e21)
exa = prefix(1e18)
peta = prefix(1e15)
tera = prefix(1e12)
giga = prefix(1e9)
mega = prefix(1e6)
kilo = prefix(1e3)
hecto = prefix(1e2)
deca = prefix(1e1)
deci = prefix(1e-1)
centi = prefix(1e-2)
milli = prefix(1e-3)
micro = prefix(1e-6)
nano = prefix(1e-9)
pico = prefix(1e-12)
femto = prefix(1e-15)
atto = prefix(1e-18)
zepto = prefix(1e-21)
yocto = prefix(1e-24)


_MICROSECOND = datetime.timedelta(microseconds=1)


def from_timedelta(delta: datetime.timedelta) -> Quantity:
    """Convert a `datetime.timedelta` to a time quantity."""
    return (delta // _MICROSECOND) * micro(second)


def to_timedelta(quantity: Quantity) -> datetime.timedelta:
    """Convert a time quantity to a `datetime.timedelta`.

    The result is rounded to the nearest microsecond.

    Raises
    ------
    DimensionError
        If `quantity` is not a time.
    """
    if not isinstance(quantity, Time):
        raise DimensionError(Time.dims, quantity.dims)
    microseconds = round(quantity.value(micro(second)))
    return datetime.timedelta(microseconds=microseconds)
