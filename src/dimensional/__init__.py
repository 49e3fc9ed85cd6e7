import logging

from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import (
    AmbiguousSymbolError,
    DimensionError,
    LexError,
    ParsingError,
    RegistrationError,
    UnknownSymbolError,
)
from dimensional.core.measurable import (
    Quantity,
    QuantityType,
    cbrt,
    isclose,
    parse,
    parse_variant,
    prefix,
    render,
    root,
    sqrt,
    unit,
)
from dimensional.core.symbols import SymbolTable


# read version from installed package
from importlib.metadata import version
__version__ = version("dimensional")


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    'AmbiguousSymbolError',
    'DimensionError',
    'DimensionVector',
    'LexError',
    'ParsingError',
    'Quantity',
    'QuantityType',
    'RegistrationError',
    'SymbolTable',
    'UnknownSymbolError',
    'cbrt',
    'isclose',
    'parse',
    'parse_variant',
    'prefix',
    'render',
    'root',
    'sqrt',
    'unit',
]
