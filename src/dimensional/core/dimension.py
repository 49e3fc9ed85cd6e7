"""
The algebra of physical dimensions.

A dimension vector maps base-dimension identifiers to integer exponents. The
seven canonical identifiers follow the International System of Quantities:

* 'L': length
* 'M': mass
* 'T': time
* 'I': electric current
* 'Θ': thermodynamic temperature
* 'N': amount of substance
* 'J': luminous intensity

Any other non-empty string without whitespace may serve as the identifier of
a custom base dimension (e.g., a currency). Custom identifiers follow the
canonical ones, in lexical order, whenever a vector is iterated or rendered.
"""

import collections.abc
import numbers
import re
import typing

from dimensional.core import iterables
from dimensional.core.errors import DimensionError, LexError


BASE = ('L', 'M', 'T', 'I', 'Θ', 'N', 'J')
"""Identifiers of the canonical base dimensions, in rendering order."""


def _order(identifier: str):
    """Sorting key that puts canonical identifiers first."""
    if identifier in BASE:
        return (BASE.index(identifier), '')
    return (len(BASE), identifier)


def _validate_identifier(identifier) -> str:
    """Raise an exception if `identifier` can't name a base dimension."""
    if not isinstance(identifier, str):
        raise TypeError(
            f"Base dimensions must be named by strings, not {type(identifier)}"
        ) from None
    if not identifier or re.search(r'[\s^]', identifier):
        raise ValueError(
            f"Can't use {identifier!r} as a base dimension"
        ) from None
    return identifier


def _validate_exponent(exponent) -> int:
    """Convert `exponent` to `int`, if it is integral."""
    if isinstance(exponent, numbers.Integral):
        return int(exponent)
    if isinstance(exponent, numbers.Real) and float(exponent).is_integer():
        return int(exponent)
    raise TypeError(
        f"Dimension exponents must be integers, not {exponent!r}"
    ) from None


Exponents = typing.Union[
    typing.Mapping[str, numbers.Integral],
    typing.Iterable[typing.Tuple[str, numbers.Integral]],
]


class DimensionVector(collections.abc.Mapping, iterables.ReprStrMixin):
    """An immutable mapping from base dimension to non-zero exponent."""

    __slots__ = ('_exponents', '_hash')

    def __init__(self, exponents: Exponents=None, **named: int) -> None:
        """
        Parameters
        ----------
        exponents : mapping or iterable of pairs, optional
            Base-dimension identifiers and their integer exponents. Repeated
            identifiers in an iterable accumulate.

        **named
            Additional exponents by keyword (e.g., ``L=1, T=-1``).
        """
        pairs = (
            exponents.items() if isinstance(exponents, collections.abc.Mapping)
            else exponents or ()
        )
        totals = {}
        for identifier, exponent in [*pairs, *named.items()]:
            key = _validate_identifier(identifier)
            totals[key] = totals.get(key, 0) + _validate_exponent(exponent)
        self._exponents = {
            k: totals[k] for k in sorted(totals, key=_order) if totals[k] != 0
        }
        self._hash = None

    @classmethod
    def parse(cls, text: str):
        """Create a vector from its rendered form (e.g., 'L M T^-2')."""
        stripped = text.strip()
        if stripped in {'', '1'}:
            return cls()
        pairs = []
        for part in re.finditer(r'\S+', text):
            match = re.fullmatch(r'([^\s^]+)(?:\^([-+]?\d+))?', part[0])
            if not match:
                raise LexError(text, part.start(), "Malformed dimension")
            base, exponent = match.groups()
            if base == '1':
                continue
            pairs.append((base, int(exponent or 1)))
        return cls(pairs)

    def __len__(self) -> int:
        return len(self._exponents)

    def __iter__(self) -> typing.Iterator[str]:
        return iter(self._exponents)

    def __getitem__(self, identifier: str) -> int:
        return self._exponents[identifier]

    def exponent(self, identifier: str) -> int:
        """The exponent of `identifier`, which is zero if absent."""
        return self._exponents.get(identifier, 0)

    @property
    def dimensionless(self) -> bool:
        """True if this vector has no base dimensions."""
        return not self._exponents

    def __eq__(self, other) -> bool:
        """True if both vectors have the same exponents."""
        if isinstance(other, DimensionVector):
            return self._exponents == other._exponents
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._exponents.items()))
        return self._hash

    def __mul__(self, other):
        """Called for self * other."""
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return multiply(self, other)

    def __truediv__(self, other):
        """Called for self / other."""
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return divide(self, other)

    def __pow__(self, n: int):
        """Called for self ** n."""
        return power(self, n)

    def root(self, n: int):
        """The `n`th root of this vector, if it exists."""
        return root(self, n)

    def format(self, symbols: typing.Mapping[str, str]=None) -> str:
        """Render this vector, optionally with symbols in place of bases.

        Parameters
        ----------
        symbols : mapping, optional
            Strings to display in place of the corresponding base identifier
            (e.g., ``{'L': 'm'}``). Identifiers without an entry display as
            themselves.
        """
        if not self._exponents:
            return '1'
        names = symbols or {}
        return ' '.join(
            names.get(k, k) if v == 1 else f"{names.get(k, k)}^{v}"
            for k, v in self._exponents.items()
        )

    def __str__(self) -> str:
        return self.format()

    def _repr_args(self) -> str:
        return repr(self._exponents)


def combine(a: DimensionVector, b: DimensionVector, k: int) -> DimensionVector:
    """Compute the vector with exponents ``a[i] + k * b[i]``."""
    pairs = [*a.items(), *((i, k * e) for i, e in b.items())]
    return DimensionVector(pairs)


def scale(a: DimensionVector, n: int) -> DimensionVector:
    """Multiply every exponent in `a` by the integer `n`."""
    factor = _validate_exponent(n)
    return DimensionVector({i: factor * e for i, e in a.items()})


def multiply(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    """The dimension of a product."""
    return combine(a, b, +1)


def divide(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    """The dimension of a ratio."""
    return combine(a, b, -1)


def power(a: DimensionVector, n: int) -> DimensionVector:
    """The dimension of a quantity raised to the integer `n`."""
    return scale(a, n)


def root(a: DimensionVector, n: int) -> DimensionVector:
    """The dimension of the `n`th root of a quantity.

    Raises
    ------
    DimensionError
        If `n` is not a non-zero integer or if any exponent of `a` is not
        evenly divisible by `n`.
    """
    if not isinstance(n, numbers.Integral) or n == 0:
        raise DimensionError(
            message=f"Can't take root of order {n!r}"
        ) from None
    if any(e % n for e in a.values()):
        raise DimensionError(
            message=f"Can't take root of order {n} of dimension {a}"
        ) from None
    return DimensionVector({i: e // n for i, e in a.items()})


def is_dimensionless(a: DimensionVector) -> bool:
    """True if `a` has no base dimensions."""
    return a.dimensionless


def equals(a: DimensionVector, b: DimensionVector) -> bool:
    """True if `a` and `b` are structurally equal."""
    return a == b


DIMENSIONLESS = DimensionVector()
LENGTH = DimensionVector(L=1)
MASS = DimensionVector(M=1)
TIME = DimensionVector(T=1)
CURRENT = DimensionVector(I=1)
TEMPERATURE = DimensionVector({'Θ': 1})
AMOUNT = DimensionVector(N=1)
LUMINOSITY = DimensionVector(J=1)
