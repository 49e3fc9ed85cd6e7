"""
Numeric values that carry a physical dimension.

A `~measurable.Quantity` stores its magnitude in coherent units (i.e., the
units whose scale is 1 in the symbol table that produced it) together with a
`~dimension.DimensionVector`. Arithmetic propagates dimensions and rejects
combinations that are physically meaningless, such as adding a length to a
time.
"""

import collections.abc
import numbers
import operator
import typing

import numpy

from dimensional.core import dimension
from dimensional.core import iterables
from dimensional.core import parsing
from dimensional.core import si
from dimensional.core import symbols
from dimensional.core.dimension import DIMENSIONLESS, DimensionVector
from dimensional.core.errors import DimensionError


Magnitude = typing.Union[numbers.Real, numpy.ndarray]


def _validate_magnitude(value) -> Magnitude:
    """Normalize `value` to a real number or a floating-point array."""
    if isinstance(value, numbers.Real):
        return value
    if isinstance(value, str):
        raise TypeError(
            f"Can't use string {value!r} as a magnitude. Use parse() instead."
        ) from None
    if isinstance(value, (numpy.ndarray, collections.abc.Sequence)):
        array = numpy.asarray(value, dtype=float)
        return array[()] if array.ndim == 0 else array
    raise TypeError(
        f"A quantity's magnitude must be real, not {type(value)}"
    ) from None


def _validate_dims(dims) -> DimensionVector:
    """Convert `dims` to a `~dimension.DimensionVector`."""
    if dims is None:
        return DIMENSIONLESS
    if isinstance(dims, DimensionVector):
        return dims
    if isinstance(dims, str):
        return DimensionVector.parse(dims)
    return DimensionVector(dims)


class Quantity(iterables.ReprStrMixin):
    """A magnitude in coherent units paired with its dimension.

    Instances are immutable. Operations follow these rules:

    - Addition, subtraction, and ordering comparisons require operands with
      equal dimensions. A plain number behaves as a dimensionless quantity.
    - Multiplication and division combine dimensions.
    - Raising to an integer power scales the dimension. Non-integer powers
      are only valid for dimensionless quantities.
    - Equality is false for quantities with different dimensions.
    """

    __array_ufunc__ = None

    def __init__(self, magnitude, dims=None) -> None:
        """
        Parameters
        ----------
        magnitude : real number or array-like
            The numerical value in coherent units.

        dims : `~dimension.DimensionVector`, mapping, or string, optional
            The dimension of this quantity. Strings must be in rendered form
            (e.g., 'L T^-1'). The default is dimensionless.
        """
        self._magnitude = _validate_magnitude(magnitude)
        self._dims = _validate_dims(dims)

    @property
    def magnitude(self) -> Magnitude:
        """The numerical value in coherent units."""
        return self._magnitude

    @property
    def dims(self) -> DimensionVector:
        """The dimension of this quantity."""
        return self._dims

    @property
    def dimensionless(self) -> bool:
        """True if this quantity has no dimension."""
        return self._dims.dimensionless

    def value(self, unit, table: symbols.SymbolTable=None) -> Magnitude:
        """The magnitude of this quantity in terms of `unit`.

        Parameters
        ----------
        unit : string or `~measurable.Quantity`
            The unit in which to express this quantity. A string must be a
            unit expression (e.g., 'km/h').

        table : `~symbols.SymbolTable`, optional
            The vocabulary for parsing a string `unit`. Defaults to SI.

        Raises
        ------
        DimensionError
            If `unit` does not have the dimension of this quantity.
        """
        reference = _as_quantity(unit, table)
        if reference.dims != self._dims:
            raise DimensionError(self._dims, reference.dims)
        return self._magnitude / reference.magnitude

    def _coerce(self, other) -> typing.Optional['Quantity']:
        """Interpret `other` as a quantity, if possible."""
        if isinstance(other, Quantity):
            return other
        if isinstance(other, (numbers.Real, numpy.ndarray)):
            return Quantity(other)

    def _same_dims(self, other: 'Quantity') -> None:
        """Raise an exception if `other` has a different dimension."""
        if other.dims != self._dims:
            raise DimensionError(self._dims, other.dims)

    def __add__(self, other):
        """Called for self + other."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        self._same_dims(that)
        return Quantity(self._magnitude + that.magnitude, self._dims)

    def __radd__(self, other):
        """Called for other + self."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        self._same_dims(that)
        return Quantity(that.magnitude + self._magnitude, self._dims)

    def __sub__(self, other):
        """Called for self - other."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        self._same_dims(that)
        return Quantity(self._magnitude - that.magnitude, self._dims)

    def __rsub__(self, other):
        """Called for other - self."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        self._same_dims(that)
        return Quantity(that.magnitude - self._magnitude, self._dims)

    def __mul__(self, other):
        """Called for self * other."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        return Quantity(
            self._magnitude * that.magnitude,
            dimension.multiply(self._dims, that.dims),
        )

    def __rmul__(self, other):
        """Called for other * self."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        return Quantity(
            that.magnitude * self._magnitude,
            dimension.multiply(that.dims, self._dims),
        )

    def __truediv__(self, other):
        """Called for self / other."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        return Quantity(
            self._magnitude / that.magnitude,
            dimension.divide(self._dims, that.dims),
        )

    def __rtruediv__(self, other):
        """Called for other / self."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        return Quantity(
            that.magnitude / self._magnitude,
            dimension.divide(that.dims, self._dims),
        )

    def __pow__(self, n):
        """Called for self ** n."""
        if not isinstance(n, numbers.Real):
            return NotImplemented
        if isinstance(n, numbers.Integral) or float(n).is_integer():
            return Quantity(
                self._magnitude ** int(n),
                dimension.power(self._dims, int(n)),
            )
        if self.dimensionless:
            return Quantity(self._magnitude ** n)
        raise DimensionError(
            message=f"Can't raise {self._dims} to non-integer power {n}"
        ) from None

    def __neg__(self):
        """Called for -self."""
        return Quantity(-self._magnitude, self._dims)

    def __pos__(self):
        """Called for +self."""
        return Quantity(+self._magnitude, self._dims)

    def __abs__(self):
        """Called for abs(self)."""
        return Quantity(abs(self._magnitude), self._dims)

    def _compare(self, other, method: typing.Callable):
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        self._same_dims(that)
        return method(self._magnitude, that.magnitude)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __eq__(self, other) -> bool:
        """True if `other` has the same dimension and magnitude."""
        that = self._coerce(other)
        if that is None:
            return NotImplemented
        if that.dims != self._dims:
            return False
        if isinstance(self._magnitude, numpy.ndarray):
            return bool(numpy.array_equal(self._magnitude, that.magnitude))
        if isinstance(that.magnitude, numpy.ndarray):
            return False
        return bool(self._magnitude == that.magnitude)

    def __hash__(self) -> int:
        if self.dimensionless:
            return hash(self._magnitude)
        return hash((self._magnitude, self._dims))

    def __float__(self) -> float:
        """Called for float(self). Only dimensionless quantities convert."""
        if not self.dimensionless:
            raise DimensionError(DIMENSIONLESS, self._dims)
        return float(self._magnitude)

    def __format__(self, format_spec: str) -> str:
        """Render this quantity, optionally in a particular unit.

        The format specification is a numeric format, optionally followed by
        a space and a unit expression. For example, ``f"{v:.1f km/h}"``
        renders a speed to one decimal place in kilometers per hour.
        """
        if not format_spec:
            return str(self)
        numeric, _, unit = format_spec.partition(' ')
        if unit.strip():
            magnitude = self.value(unit.strip())
            return f"{_format_magnitude(magnitude, numeric)} {unit.strip()}"
        return render(self, numeric=numeric)

    def __str__(self) -> str:
        return render(self)

    def _repr_args(self) -> str:
        return f"{self._magnitude!r}, {self._dims!r}"


def _as_quantity(unit, table: symbols.SymbolTable=None) -> Quantity:
    """Interpret `unit` as a reference quantity."""
    if isinstance(unit, Quantity):
        return unit
    if isinstance(unit, str):
        return parse(unit, table=table)
    raise TypeError(f"Can't interpret {unit!r} as a unit") from None


def _format_magnitude(value: Magnitude, numeric: str) -> str:
    """Apply a numeric format to a scalar or, element-wise, to an array."""
    if isinstance(value, numpy.ndarray):
        if not numeric:
            return str(value)
        return numpy.array2string(
            value,
            formatter={'all': lambda x: format(x, numeric)},
        )
    return format(value, numeric)


def render(
    quantity: Quantity,
    table: symbols.SymbolTable=None,
    numeric: str='',
) -> str:
    """Render `quantity` as ``'<magnitude> <units>'``.

    Each base dimension displays as the unit of `table` (SI by default) that
    has scale 1 and exactly that dimension, or as its identifier if there is
    no such unit. Dimensionless quantities display as the magnitude alone.
    """
    magnitude = _format_magnitude(quantity.magnitude, numeric)
    if quantity.dimensionless:
        return magnitude
    names = (table or si.table()).base_symbols()
    return f"{magnitude} {quantity.dims.format(names)}"


def unit(identifier: str) -> Quantity:
    """The base unit of the (possibly custom) base dimension `identifier`.

    >>> euro = unit('€')
    >>> str(3 * euro)
    '3.0 €'
    """
    return Quantity(1.0, DimensionVector({identifier: 1}))


def prefix(factor: numbers.Real) -> typing.Callable[[Quantity], Quantity]:
    """Create a function that scales a quantity by `factor`.

    For example, ``prefix(1e3)(meter)`` is one kilometer.
    """
    def apply(quantity: Quantity) -> Quantity:
        return quantity * factor
    apply.factor = factor
    return apply


def root(quantity: Quantity, n: int) -> Quantity:
    """The `n`th root of `quantity`.

    Raises
    ------
    DimensionError
        If any exponent of the dimension is not divisible by `n`.
    """
    dims = dimension.root(quantity.dims, n)
    if n == 2:
        magnitude = numpy.sqrt(quantity.magnitude)
    elif n == 3:
        magnitude = numpy.cbrt(quantity.magnitude)
    else:
        magnitude = numpy.power(quantity.magnitude, 1.0 / n)
    return Quantity(magnitude, dims)


def sqrt(quantity: Quantity) -> Quantity:
    """The square root of `quantity`."""
    return root(quantity, 2)


def cbrt(quantity: Quantity) -> Quantity:
    """The cube root of `quantity`."""
    return root(quantity, 3)


def isclose(
    a: Quantity,
    b: Quantity,
    rtol: float=1e-5,
    atol: float=0.0,
) -> typing.Union[bool, numpy.ndarray]:
    """True if `a` and `b` have equal dimensions and nearly equal magnitudes.

    Tolerances apply to magnitudes in coherent units, as in `numpy.isclose`.

    Raises
    ------
    DimensionError
        If `a` and `b` have different dimensions.
    """
    if a.dims != b.dims:
        raise DimensionError(a.dims, b.dims)
    result = numpy.isclose(a.magnitude, b.magnitude, rtol=rtol, atol=atol)
    return bool(result) if numpy.ndim(result) == 0 else result


def _target_dims(target) -> typing.Optional[DimensionVector]:
    """Extract the required dimension from `target`."""
    if target is None:
        return None
    if isinstance(target, DimensionVector):
        return target
    if isinstance(target, (QuantityType, Quantity)):
        return target.dims
    return _validate_dims(target)


def parse(
    text: str,
    target=None,
    table: symbols.SymbolTable=None,
) -> Quantity:
    """Create a quantity from a unit expression.

    Parameters
    ----------
    text : string
        The unit expression (e.g., '2.5 g/l').

    target : `~dimension.DimensionVector` or `~measurable.QuantityType`, optional
        The dimension that the result must have.

    table : `~symbols.SymbolTable`, optional
        The vocabulary of units and prefixes. Defaults to SI.

    Raises
    ------
    ParsingError
        If `text` is malformed or contains an unresolvable symbol.
    DimensionError
        If `target` is given and the result has a different dimension.
    """
    result = parsing.evaluate(
        text,
        table or si.table(),
        target=_target_dims(target),
    )
    return Quantity(result.value, result.dims)


def parse_variant(
    text: str,
    table: symbols.SymbolTable=None,
) -> parsing.Result:
    """Evaluate a unit expression into ``(value, dims)``."""
    return parsing.evaluate(text, table or si.table())


class QuantityType(iterables.ReprStrMixin):
    """A named kind of quantity with a fixed dimension.

    Instances act as constructors and as types: ``Length(2.0)`` creates a
    quantity of two meters, ``Length('2 km')`` parses one, and
    ``isinstance(q, Length)`` checks the dimension of ``q``.
    """

    def __init__(self, dims, name: str=None) -> None:
        self.dims = _validate_dims(dims)
        """The dimension of every quantity of this kind."""
        self.name = name

    def __call__(self, arg, table: symbols.SymbolTable=None) -> Quantity:
        """Create a quantity of this kind.

        A string argument is a unit expression, a quantity argument must
        already have the right dimension, and any other argument is a
        magnitude in coherent units.
        """
        if isinstance(arg, str):
            return self.parse(arg, table=table)
        if isinstance(arg, Quantity):
            return self.check(arg)
        return Quantity(arg, self.dims)

    def parse(self, text: str, table: symbols.SymbolTable=None) -> Quantity:
        """Parse `text` into a quantity of this kind."""
        return parse(text, target=self.dims, table=table)

    def check(self, quantity: Quantity) -> Quantity:
        """Return `quantity` if it is of this kind, else raise an error."""
        if quantity.dims != self.dims:
            raise DimensionError(self.dims, quantity.dims)
        return quantity

    def __instancecheck__(self, instance) -> bool:
        return isinstance(instance, Quantity) and instance.dims == self.dims

    def __eq__(self, other) -> bool:
        if isinstance(other, QuantityType):
            return self.dims == other.dims
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.dims)

    def __str__(self) -> str:
        return self.name or str(self.dims)

    def _repr_args(self) -> str:
        return f"{self.dims!r}, name={self.name!r}"
