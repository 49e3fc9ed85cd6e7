import pytest

from dimensional.core import dimension
from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import DimensionError, LexError


pytestmark = pytest.mark.dimension


@pytest.fixture
def vectors():
    """Named dimension vectors for testing."""
    return {
        'length': DimensionVector(L=1),
        'speed': DimensionVector(L=1, T=-1),
        'force': DimensionVector(L=1, M=1, T=-2),
        'area': DimensionVector(L=2),
        'euro': DimensionVector({'€': 1}),
        'none': DimensionVector(),
    }


def test_zero_exponents_removed():
    """Construction should drop identifiers with zero exponent."""
    v = DimensionVector(L=1, T=0)
    assert list(v) == ['L']
    assert len(v) == 1
    assert v.exponent('T') == 0
    assert DimensionVector(L=0).dimensionless


def test_repeated_identifiers_accumulate():
    """Pairs with the same identifier should add their exponents."""
    v = DimensionVector([('L', 1), ('T', -1), ('L', 2)])
    assert v == DimensionVector(L=3, T=-1)
    assert DimensionVector([('L', 1), ('L', -1)]).dimensionless


def test_canonical_order():
    """Iteration should follow the canonical order, then custom names."""
    v = DimensionVector({'€': 1, 'J': 2, 'T': -1, 'B': 1, 'L': 1, 'Θ': 1})
    assert list(v) == ['L', 'T', 'Θ', 'J', 'B', '€']


def test_invalid_input():
    """Construction should reject bad identifiers and exponents."""
    with pytest.raises(TypeError):
        DimensionVector(L=1.5)
    with pytest.raises(TypeError):
        DimensionVector({1: 1})
    with pytest.raises(ValueError):
        DimensionVector({'': 1})
    with pytest.raises(ValueError):
        DimensionVector({'a b': 1})
    assert DimensionVector(L=2.0) == DimensionVector(L=2)


def test_equality_and_hash(vectors: dict):
    """Equal vectors should compare and hash equally."""
    a = DimensionVector(L=1, T=-1)
    b = DimensionVector(T=-1, L=1)
    assert a == b
    assert hash(a) == hash(b)
    assert a == vectors['speed']
    assert a != vectors['length']
    assert a != {'L': 1, 'T': -1}
    assert len({a, b, vectors['length']}) == 2


def test_algebra(vectors: dict):
    """Test multiply, divide, and power."""
    length = vectors['length']
    speed = vectors['speed']
    assert dimension.multiply(length, length) == vectors['area']
    assert length * length == vectors['area']
    assert dimension.divide(length, speed) == DimensionVector(T=1)
    assert length / length == vectors['none']
    assert dimension.power(speed, 2) == DimensionVector(L=2, T=-2)
    assert speed ** -1 == DimensionVector(L=-1, T=1)
    assert dimension.power(speed, 0).dimensionless
    assert dimension.combine(length, speed, 2) == DimensionVector(L=3, T=-2)
    assert dimension.scale(vectors['force'], 3) == DimensionVector(
        L=3, M=3, T=-6
    )


@pytest.mark.parametrize('a', ['length', 'speed', 'force', 'euro', 'none'])
@pytest.mark.parametrize('b', ['length', 'speed', 'force', 'euro', 'none'])
def test_commutative_and_inverse(vectors: dict, a: str, b: str):
    """Multiplication should commute and division should invert it."""
    x, y = vectors[a], vectors[b]
    assert dimension.multiply(x, y) == dimension.multiply(y, x)
    assert dimension.divide(dimension.multiply(x, y), y) == x
    assert dimension.divide(x, x).dimensionless


def test_root(vectors: dict):
    """Roots should exist only for evenly divisible exponents."""
    assert dimension.root(vectors['area'], 2) == vectors['length']
    assert vectors['area'].root(2) == vectors['length']
    assert dimension.root(DimensionVector(L=3, T=-6), 3) == DimensionVector(
        L=1, T=-2
    )
    assert dimension.root(vectors['none'], 5).dimensionless
    with pytest.raises(DimensionError):
        dimension.root(vectors['length'], 2)
    with pytest.raises(DimensionError):
        dimension.root(vectors['area'], 0)


def test_predicates(vectors: dict):
    """Test the module-level predicates."""
    assert dimension.is_dimensionless(vectors['none'])
    assert not dimension.is_dimensionless(vectors['length'])
    assert dimension.equals(vectors['length'], DimensionVector(L=1))


def test_format(vectors: dict):
    """Test rendering with identifiers and with substituted symbols."""
    assert vectors['none'].format() == '1'
    assert str(vectors['force']) == 'L M T^-2'
    power = DimensionVector(L=2, M=1, T=-3)
    symbols = {'L': 'm', 'M': 'kg', 'T': 's'}
    assert power.format(symbols) == 'm^2 kg s^-3'
    assert vectors['euro'].format(symbols) == '€'


def test_parse(vectors: dict):
    """Rendered vectors should parse back to equal vectors."""
    for v in vectors.values():
        assert DimensionVector.parse(str(v)) == v
    assert DimensionVector.parse('') == vectors['none']
    assert DimensionVector.parse('1 L T^-1') == vectors['speed']
    with pytest.raises(LexError):
        DimensionVector.parse('L T^x')


def test_constants():
    """The predefined vectors should have one base dimension each."""
    assert dimension.LENGTH == DimensionVector(L=1)
    assert dimension.TEMPERATURE == DimensionVector({'Θ': 1})
    assert dimension.DIMENSIONLESS.dimensionless
    assert len(dimension.BASE) == 7
