import pytest

from dimensional.core import parsing
from dimensional.core import si
from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import (
    DimensionError,
    LexError,
    ParsingError,
    UnknownSymbolError,
)


pytestmark = pytest.mark.parsing


@pytest.fixture
def cases():
    """Expressions with their expected value and dimension."""
    return {
        'm': (1.0, 'L'),
        'km': (1e3, 'L'),
        'm/s': (1.0, 'L T^-1'),
        'm s^-1': (1.0, 'L T^-1'),
        'm·s⁻¹': (1.0, 'L T^-1'),
        'km/h': (1e3 / 3600, 'L T^-1'),
        '2.5 g/l': (2.5, 'L^-3 M'),
        '2.5 g⋅L⁻¹': (2.5, 'L^-3 M'),
        'kg·m²·s⁻²': (1.0, 'L^2 M T^-2'),
        'kg m^2 s^-2': (1.0, 'L^2 M T^-2'),
        'J / kg / K': (1.0, 'L^2 T^-2 Θ^-1'),
        '1/s': (1.0, 'T^-1'),
        '3 / s': (3.0, 'T^-1'),
        '10 mm^2': (1e-5, 'L^2'),
        'cm^3': (1e-6, 'L^3'),
        '1.5 min': (90.0, 'T'),
        '1 d': (86400.0, 'T'),
        '4.2': (4.2, '1'),
        'm/m': (1.0, '1'),
        'mol·L^-1': (1e3, 'L^-3 N'),
        'μs': (1e-6, 'T'),
        '\u00b5s': (1e-6, 'T'),
    }


def test_evaluate(standard, cases: dict):
    """Expressions should evaluate to the expected value and dimension."""
    for text, expected in cases.items():
        value, dims = expected
        result = parsing.evaluate(text, standard)
        assert result.value == pytest.approx(value), text
        assert result.dims == DimensionVector.parse(dims), text


def test_equivalent_forms(standard):
    """Different spellings of one unit should have the same result."""
    a = parsing.evaluate('m/s', standard)
    b = parsing.evaluate('m s^-1', standard)
    c = parsing.evaluate('m⋅s⁻¹', standard)
    assert a == b == c


def test_prefix_scaling(standard):
    """A prefixed unit should be the prefix factor times the unit."""
    km = parsing.evaluate('km', standard)
    m = parsing.evaluate('m', standard)
    assert km.value == pytest.approx(1000 * m.value)
    assert km.dims == m.dims


def test_binary_prefix(binary):
    """Binary prefixes should scale by powers of 1024."""
    result = parsing.evaluate('1.0 MiB', binary)
    assert result.value == 1048576.0
    assert result.dims == DimensionVector(B=1)
    assert parsing.evaluate('KiB', binary).value == 1024.0


def test_registered_units(standard):
    """Every registered unit should evaluate to its scale."""
    for symbol, unit in standard.units.items():
        result = parsing.evaluate(symbol, standard, unit.dims)
        assert result.value == unit.scale, symbol
        assert result.dims == unit.dims, symbol


def test_target(standard):
    """A target dimension should constrain the result."""
    concentration = DimensionVector(L=-3, N=1)
    result = parsing.evaluate('2.5 mol·L^-1', standard, concentration)
    assert result.value == pytest.approx(2500.0)
    with pytest.raises(DimensionError) as exc:
        parsing.evaluate('2.5 mol·L^-1', standard, DimensionVector(L=1))
    assert exc.value.expected == DimensionVector(L=1)
    assert exc.value.actual == concentration


def test_unknown_symbol(standard):
    """An unresolvable symbol should raise an exception."""
    with pytest.raises(UnknownSymbolError) as exc:
        parsing.evaluate('10 qGz', standard)
    assert exc.value.symbol == 'qGz'


@pytest.mark.parametrize(
    'text',
    [
        '',
        '   ',
        '/s',
        'm/',
        'm//s',
        'm */ s',
        'm²s',
        'm^2s',
        '2^3',
        'm 2 s',
    ],
)
def test_grammar_errors(standard, text: str):
    """Malformed expressions should raise a lexical error."""
    with pytest.raises(LexError):
        parsing.evaluate(text, standard)


@pytest.mark.parametrize(
    'text, position',
    [
        ('km^400', 0),
        ('m / km^-400', 4),
        ('1e308 km', 6),
        ('Gm^20 Gm^20', 6),
    ],
)
def test_out_of_range(standard, text: str, position: int):
    """A value beyond the range of a float should raise a lexical error."""
    with pytest.raises(LexError) as exc:
        parsing.evaluate(text, standard)
    assert exc.value.position == position
    assert 'out of range' in exc.value.reason


def test_errors_share_base(standard):
    """Every parsing failure should be a `ParsingError`."""
    for text in ('m//s', 'qGz'):
        with pytest.raises(ParsingError):
            parsing.evaluate(text, standard)


def test_left_to_right():
    """Terms should combine in order, without precedence."""
    table = si.table()
    result = parsing.evaluate('m / s * s', table)
    assert result.dims == DimensionVector(L=1)
    result = parsing.evaluate('m / s s', table)
    assert result.dims == DimensionVector(L=1)


def test_parser_instance(standard):
    """A parser should be reusable."""
    parser = parsing.Parser(standard)
    assert parser.parse('km').value == pytest.approx(1e3)
    assert parser.parse('mm').value == pytest.approx(1e-3)
