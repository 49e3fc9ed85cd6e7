import logging
import math
import numbers
import types
import typing
import unicodedata

from dimensional.core import iterables
from dimensional.core import lexical
from dimensional.core.dimension import DIMENSIONLESS, DimensionVector
from dimensional.core.errors import (
    AmbiguousSymbolError,
    RegistrationError,
    UnknownSymbolError,
)


logger = logging.getLogger(__name__)


def normalize(symbol: str) -> str:
    """The compatibility-normalized form of `symbol`.

    This maps, for example, the micro sign (U+00B5) to the Greek letter mu
    (U+03BC) and the ohm sign (U+2126) to the Greek letter omega (U+03A9).
    """
    return unicodedata.normalize('NFKC', symbol)


class Prefix(typing.NamedTuple):
    """A multiplicative factor attachable to a unit symbol."""

    symbol: str
    factor: float


class Unit(typing.NamedTuple):
    """A unit symbol with its scale in coherent units and its dimension."""

    symbol: str
    scale: float
    dims: DimensionVector


class Resolution(typing.NamedTuple):
    """One reading of a symbol as an optional prefix and a unit."""

    symbol: str
    prefix: typing.Optional[Prefix]
    unit: Unit

    @property
    def scale(self) -> float:
        """The combined scale of the prefix and the unit."""
        if self.prefix is None:
            return self.unit.scale
        return self.prefix.factor * self.unit.scale

    @property
    def dims(self) -> DimensionVector:
        """The dimension of the unit."""
        return self.unit.dims

    def __str__(self) -> str:
        if self.prefix is None:
            return self.unit.symbol
        return f"{self.prefix.symbol}+{self.unit.symbol}"


class Conflict(typing.NamedTuple):
    """A registered symbol that has more than one reading."""

    symbol: str
    readings: typing.Tuple[typing.Union[Resolution, Prefix], ...]

    def __str__(self) -> str:
        others = ', '.join(str(r) for r in self.readings)
        return f"{self.symbol!r} also reads as {others}"


class SymbolTable(iterables.ReprStrMixin):
    """An immutable vocabulary of unit and prefix symbols.

    Create instances with `SymbolTable.builder()` or by extending an existing
    table with `extend()`.
    """

    def __init__(
        self,
        units: typing.Mapping[str, Unit]=None,
        prefixes: typing.Mapping[str, Prefix]=None,
        conflicts: typing.Iterable[Conflict]=(),
    ) -> None:
        self._units = types.MappingProxyType(dict(units or {}))
        self._prefixes = types.MappingProxyType(dict(prefixes or {}))
        self._unit_index = self._index(self._units)
        self._prefix_index = self._index(self._prefixes)
        self.conflicts = tuple(conflicts)
        """Registered symbols with more than one reading."""

    @staticmethod
    def _index(entries: typing.Mapping[str, typing.Any]):
        """Group entries by normalized symbol."""
        index = {}
        for symbol, entry in entries.items():
            index.setdefault(normalize(symbol), []).append(entry)
        return {k: tuple(v) for k, v in index.items()}

    @classmethod
    def builder(cls):
        """Create an empty table builder."""
        return Builder()

    def extend(self):
        """Create a builder seeded with the entries of this table."""
        return Builder(self._units, self._prefixes)

    @property
    def units(self) -> typing.Mapping[str, Unit]:
        """Read-only mapping of unit symbol to unit."""
        return self._units

    @property
    def prefixes(self) -> typing.Mapping[str, Prefix]:
        """Read-only mapping of prefix symbol to prefix."""
        return self._prefixes

    def lookup_unit(self, symbol: str) -> typing.Optional[Unit]:
        """The unit registered under exactly `symbol`, if any."""
        return self._units.get(symbol)

    def lookup_prefix(self, symbol: str) -> typing.Optional[Prefix]:
        """The prefix registered under exactly `symbol`, if any."""
        return self._prefixes.get(symbol)

    def matching_units(self, symbol: str) -> typing.Tuple[Unit, ...]:
        """All units whose normalized symbol equals that of `symbol`."""
        return self._unit_index.get(normalize(symbol), ())

    def matching_prefixes(self, symbol: str) -> typing.Tuple[Prefix, ...]:
        """All prefixes whose normalized symbol equals that of `symbol`."""
        return self._prefix_index.get(normalize(symbol), ())

    def prefix_keys(self) -> typing.List[str]:
        """Normalized prefix symbols, longest first."""
        return sorted(self._prefix_index, key=lambda k: (-len(k), k))

    def symbol_for(self, dims: DimensionVector) -> typing.Optional[str]:
        """The first unit symbol with unit scale and exactly `dims`."""
        for unit in self._units.values():
            if unit.scale == 1 and unit.dims == dims:
                return unit.symbol

    def base_symbols(self) -> typing.Dict[str, str]:
        """Unit symbols to display for each base dimension in this table."""
        identifiers = iterables.unique(
            *(i for unit in self._units.values() for i in unit.dims)
        )
        symbols = {}
        for identifier in identifiers:
            symbol = self.symbol_for(DimensionVector({identifier: 1}))
            if symbol is not None:
                symbols[identifier] = symbol
        return symbols

    def __contains__(self, symbol: str) -> bool:
        """True if `symbol` is a registered unit or prefix+unit reading."""
        try:
            resolve(symbol, self)
        except (UnknownSymbolError, AmbiguousSymbolError):
            return False
        return True

    def __len__(self) -> int:
        """The number of registered unit symbols."""
        return len(self._units)

    def __str__(self) -> str:
        return f"{len(self._units)} units, {len(self._prefixes)} prefixes"


def _validate_symbol(symbol, kind: str) -> str:
    """Raise an exception if `symbol` can't appear in a unit expression."""
    if not isinstance(symbol, str) or not symbol:
        raise RegistrationError(symbol, kind, "is not a non-empty string")
    if not all(lexical.is_symbol_character(c) for c in symbol):
        raise RegistrationError(
            symbol, kind, "contains characters that can't appear in a symbol"
        )
    return symbol


def _validate_factor(symbol: str, kind: str, value) -> float:
    """Raise an exception if `value` is not a finite, non-zero real."""
    if isinstance(value, numbers.Real) and value != 0 and math.isfinite(value):
        return float(value)
    raise RegistrationError(symbol, kind, f"has invalid scale {value!r}")


class Builder:
    """Accumulates registrations for a new `SymbolTable`.

    Registration methods return the builder itself so that calls may chain:

    >>> table = (
    ...     SymbolTable.builder()
    ...     .unit('B', 1.0, DimensionVector(B=1))
    ...     .prefix('Ki', 1024)
    ...     .build()
    ... )
    """

    def __init__(
        self,
        units: typing.Mapping[str, Unit]=None,
        prefixes: typing.Mapping[str, Prefix]=None,
    ) -> None:
        self._units = dict(units or {})
        self._prefixes = dict(prefixes or {})

    def unit(self, symbol: str, scale, dims: DimensionVector=None):
        """Register a unit symbol.

        Parameters
        ----------
        symbol : string
            The symbol to register. It must not already be registered.

        scale : real number or quantity
            The value of one of this unit in coherent units. If this is a
            quantity (any object with ``magnitude`` and ``dims`` attributes)
            and `dims` is absent, the unit takes both from it.

        dims : `~dimension.DimensionVector`, optional
            The dimension of this unit. Defaults to dimensionless.
        """
        _validate_symbol(symbol, 'unit')
        if symbol in self._units:
            raise RegistrationError(symbol, 'unit')
        if dims is None and hasattr(scale, 'dims'):
            dims = scale.dims
            scale = scale.magnitude
        value = _validate_factor(symbol, 'unit', scale)
        self._units[symbol] = Unit(symbol, value, dims or DIMENSIONLESS)
        return self

    def prefix(self, symbol: str, factor: numbers.Real):
        """Register a prefix symbol with its multiplicative factor."""
        _validate_symbol(symbol, 'prefix')
        if symbol in self._prefixes:
            raise RegistrationError(symbol, 'prefix')
        value = _validate_factor(symbol, 'prefix', factor)
        self._prefixes[symbol] = Prefix(symbol, value)
        return self

    def preview(self) -> SymbolTable:
        """A table of the current registrations, without conflict checks."""
        return SymbolTable(self._units, self._prefixes)

    def build(self, strict: bool=False) -> SymbolTable:
        """Create an immutable table from the current registrations.

        Parameters
        ----------
        strict : bool, default=false
            If true, raise `RegistrationError` when a symbol has more than one
            reading. The default behavior is to log a warning and record the
            symbol in the table's ``conflicts`` attribute. In either case,
            an exact unit match takes precedence over a prefixed reading
            during resolution.
        """
        table = self.preview()
        conflicts = self._find_conflicts(table)
        for conflict in conflicts:
            if strict:
                raise RegistrationError(
                    conflict.symbol,
                    'unit',
                    f"has more than one reading ({conflict})",
                )
            logger.warning("Symbol conflict: %s", conflict)
        logger.debug("Built symbol table with %s", table)
        if not conflicts:
            return table
        return SymbolTable(self._units, self._prefixes, conflicts)

    def _find_conflicts(self, table: SymbolTable) -> typing.List[Conflict]:
        """Find symbols with a second, different reading in `table`.

        A prefixed reading that is equivalent to the registered unit (e.g.,
        'kg' as kilo + 'g') is not a conflict.
        """
        resolver = Resolver(table)
        conflicts = []
        for symbol, unit in table.units.items():
            exact = Resolution(symbol, None, unit)
            readings = [
                Resolution(symbol, None, other)
                for other in table.matching_units(symbol)
                if other.symbol != symbol
            ] + [
                reading for reading in resolver.decompose(symbol)
                if not _equivalent(reading, exact)
            ]
            if readings:
                conflicts.append(Conflict(symbol, tuple(readings)))
        for symbol in table.prefixes:
            twins = tuple(
                p for p in table.matching_prefixes(symbol)
                if p.symbol != symbol
            )
            if twins:
                conflicts.append(Conflict(symbol, twins))
        return conflicts


def _equivalent(a: Resolution, b: Resolution) -> bool:
    """True if two readings denote the same scale and dimension."""
    return a.dims == b.dims and math.isclose(a.scale, b.scale)


class Resolver:
    """Find the prefix and unit that a symbol denotes.

    Resolution proceeds as follows:

    1. A unit registered under exactly the symbol wins.
    2. Otherwise, a unit whose normalized symbol equals the normalized
       symbol wins (e.g., the micro sign for the Greek letter mu).
    3. Otherwise, each registered prefix that is a proper prefix of the
       symbol, from longest to shortest, is tested for a registered unit in
       the remaining suffix. The longest prefix with a valid suffix wins,
       and a reading spelled exactly as the symbol wins over its
       normalized twins.
    4. More than one reading at the winning level is an error.
    """

    def __init__(self, table: SymbolTable) -> None:
        self.table = table

    def __call__(self, symbol: str) -> Resolution:
        """Resolve `symbol` into a prefix (possibly none) and a unit."""
        unit = self.table.lookup_unit(symbol)
        if unit is not None:
            return Resolution(symbol, None, unit)
        exact = [
            Resolution(symbol, None, unit)
            for unit in self.table.matching_units(symbol)
        ]
        if len(exact) == 1:
            return exact[0]
        if exact:
            raise AmbiguousSymbolError(symbol, exact)
        candidates = self.decompose(symbol)
        if not candidates:
            raise UnknownSymbolError(symbol)
        longest = len(normalize(candidates[0].prefix.symbol))
        best = [
            c for c in candidates
            if len(normalize(c.prefix.symbol)) == longest
        ]
        if len(best) > 1:
            raw = [
                c for c in best
                if c.prefix.symbol + c.unit.symbol == symbol
            ]
            if len(raw) == 1:
                return raw[0]
            raise AmbiguousSymbolError(symbol, best)
        return best[0]

    def decompose(self, symbol: str) -> typing.List[Resolution]:
        """All prefix+unit readings of `symbol`, longest prefix first."""
        key = normalize(symbol)
        readings = []
        for head in self.table.prefix_keys():
            if len(head) >= len(key) or not key.startswith(head):
                continue
            units = self.table.matching_units(key[len(head):])
            readings.extend(
                Resolution(symbol, prefix, unit)
                for prefix in self.table.matching_prefixes(head)
                for unit in units
            )
        return readings


def resolve(symbol: str, table: SymbolTable) -> Resolution:
    """Resolve `symbol` against `table`. See `~symbols.Resolver`."""
    return Resolver(table)(symbol)
