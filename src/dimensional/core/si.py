"""
The default vocabulary of SI units and prefixes.

Every scale is the value of one unit in coherent SI base units (m, kg, s, A,
K, mol, cd). Dimensions use the identifiers of `~dimension.BASE`.
"""

import functools

from dimensional.core.dimension import DimensionVector
from dimensional.core.symbols import SymbolTable


PREFIXES = [
    {'symbol': 'Y', 'name': 'yotta', 'factor': 1e+24},
    {'symbol': 'Z', 'name': 'zetta', 'factor': 1e+21},
    {'symbol': 'E', 'name': 'exa', 'factor': 1e+18},
    {'symbol': 'P', 'name': 'peta', 'factor': 1e+15},
    {'symbol': 'T', 'name': 'tera', 'factor': 1e+12},
    {'symbol': 'G', 'name': 'giga', 'factor': 1e+9},
    {'symbol': 'M', 'name': 'mega', 'factor': 1e+6},
    {'symbol': 'k', 'name': 'kilo', 'factor': 1e+3},
    {'symbol': 'h', 'name': 'hecto', 'factor': 1e+2},
    {'symbol': 'da', 'name': 'deca', 'factor': 1e+1},
    {'symbol': 'd', 'name': 'deci', 'factor': 1e-1},
    {'symbol': 'c', 'name': 'centi', 'factor': 1e-2},
    {'symbol': 'm', 'name': 'milli', 'factor': 1e-3},
    {'symbol': 'μ', 'name': 'micro', 'factor': 1e-6},
    {'symbol': 'u', 'name': 'micro', 'factor': 1e-6},
    {'symbol': 'n', 'name': 'nano', 'factor': 1e-9},
    {'symbol': 'p', 'name': 'pico', 'factor': 1e-12},
    {'symbol': 'f', 'name': 'femto', 'factor': 1e-15},
    {'symbol': 'a', 'name': 'atto', 'factor': 1e-18},
    {'symbol': 'z', 'name': 'zepto', 'factor': 1e-21},
    {'symbol': 'y', 'name': 'yocto', 'factor': 1e-24},
]
"""Decimal prefixes. The micro sign (U+00B5) resolves to 'μ' (U+03BC)."""


BINARY_PREFIXES = [
    {'symbol': 'Ki', 'name': 'kibi', 'factor': 1024.0},
    {'symbol': 'Mi', 'name': 'mebi', 'factor': 1024.0**2},
    {'symbol': 'Gi', 'name': 'gibi', 'factor': 1024.0**3},
    {'symbol': 'Ti', 'name': 'tebi', 'factor': 1024.0**4},
    {'symbol': 'Pi', 'name': 'pebi', 'factor': 1024.0**5},
    {'symbol': 'Ei', 'name': 'exbi', 'factor': 1024.0**6},
    {'symbol': 'Zi', 'name': 'zebi', 'factor': 1024.0**7},
    {'symbol': 'Yi', 'name': 'yobi', 'factor': 1024.0**8},
]
"""Binary (IEC) prefixes."""


UNITS = [
    # Base units
    {'symbol': 'm', 'name': 'meter', 'scale': 1.0, 'dimensions': 'L'},
    {'symbol': 'kg', 'name': 'kilogram', 'scale': 1.0, 'dimensions': 'M'},
    {'symbol': 's', 'name': 'second', 'scale': 1.0, 'dimensions': 'T'},
    {'symbol': 'A', 'name': 'ampere', 'scale': 1.0, 'dimensions': 'I'},
    {'symbol': 'K', 'name': 'kelvin', 'scale': 1.0, 'dimensions': 'Θ'},
    {'symbol': 'mol', 'name': 'mole', 'scale': 1.0, 'dimensions': 'N'},
    {'symbol': 'cd', 'name': 'candela', 'scale': 1.0, 'dimensions': 'J'},
    # Derived units with special names
    {'symbol': 'rad', 'name': 'radian', 'scale': 1.0, 'dimensions': '1'},
    {'symbol': 'sr', 'name': 'steradian', 'scale': 1.0, 'dimensions': '1'},
    {'symbol': 'Hz', 'name': 'hertz', 'scale': 1.0, 'dimensions': 'T^-1'},
    {'symbol': 'N', 'name': 'newton', 'scale': 1.0, 'dimensions': 'L M T^-2'},
    {
        'symbol': 'Pa',
        'name': 'pascal',
        'scale': 1.0,
        'dimensions': 'L^-1 M T^-2',
    },
    {'symbol': 'J', 'name': 'joule', 'scale': 1.0, 'dimensions': 'L^2 M T^-2'},
    {'symbol': 'W', 'name': 'watt', 'scale': 1.0, 'dimensions': 'L^2 M T^-3'},
    {'symbol': 'C', 'name': 'coulomb', 'scale': 1.0, 'dimensions': 'T I'},
    {
        'symbol': 'V',
        'name': 'volt',
        'scale': 1.0,
        'dimensions': 'L^2 M T^-3 I^-1',
    },
    {
        'symbol': 'F',
        'name': 'farad',
        'scale': 1.0,
        'dimensions': 'L^-2 M^-1 T^4 I^2',
    },
    {
        'symbol': 'Ω',
        'name': 'ohm',
        'scale': 1.0,
        'dimensions': 'L^2 M T^-3 I^-2',
    },
    {
        'symbol': 'S',
        'name': 'siemens',
        'scale': 1.0,
        'dimensions': 'L^-2 M^-1 T^3 I^2',
    },
    {
        'symbol': 'Wb',
        'name': 'weber',
        'scale': 1.0,
        'dimensions': 'L^2 M T^-2 I^-1',
    },
    {'symbol': 'T', 'name': 'tesla', 'scale': 1.0, 'dimensions': 'M T^-2 I^-1'},
    {
        'symbol': 'H',
        'name': 'henry',
        'scale': 1.0,
        'dimensions': 'L^2 M T^-2 I^-2',
    },
    {'symbol': 'lm', 'name': 'lumen', 'scale': 1.0, 'dimensions': 'J'},
    {'symbol': 'lx', 'name': 'lux', 'scale': 1.0, 'dimensions': 'L^-2 J'},
    {'symbol': 'Bq', 'name': 'becquerel', 'scale': 1.0, 'dimensions': 'T^-1'},
    {'symbol': 'Gy', 'name': 'gray', 'scale': 1.0, 'dimensions': 'L^2 T^-2'},
    {'symbol': 'Sv', 'name': 'sievert', 'scale': 1.0, 'dimensions': 'L^2 T^-2'},
    {'symbol': 'kat', 'name': 'katal', 'scale': 1.0, 'dimensions': 'T^-1 N'},
    # Units accepted for use with the SI
    {'symbol': 'g', 'name': 'gram', 'scale': 1e-3, 'dimensions': 'M'},
    {'symbol': 'min', 'name': 'minute', 'scale': 60.0, 'dimensions': 'T'},
    {'symbol': 'h', 'name': 'hour', 'scale': 3600.0, 'dimensions': 'T'},
    {'symbol': 'd', 'name': 'day', 'scale': 86400.0, 'dimensions': 'T'},
    {'symbol': 'l', 'name': 'liter', 'scale': 1e-3, 'dimensions': 'L^3'},
    {'symbol': 'L', 'name': 'liter', 'scale': 1e-3, 'dimensions': 'L^3'},
    {'symbol': 't', 'name': 'ton', 'scale': 1e3, 'dimensions': 'M'},
    {
        'symbol': 'eV',
        'name': 'electronvolt',
        'scale': 1.60217653e-19,
        'dimensions': 'L^2 M T^-2',
    },
    {'symbol': 'Da', 'name': 'dalton', 'scale': 1.66053886e-27, 'dimensions': 'M'},
]
"""Units of the default vocabulary.

Note that 'cd' (candela) also reads as centi + 'd' (day). The exact unit wins
during resolution and the default table records the symbol as a conflict.
"""


@functools.lru_cache(maxsize=None)
def table() -> SymbolTable:
    """The default SI symbol table.

    The table is built on first use and shared thereafter. It is immutable, so
    callers that need a different vocabulary should call ``table().extend()``
    and build their own.
    """
    builder = SymbolTable.builder()
    for unit in UNITS:
        dims = DimensionVector.parse(unit['dimensions'])
        builder.unit(unit['symbol'], unit['scale'], dims)
    for prefix in PREFIXES + BINARY_PREFIXES:
        builder.prefix(prefix['symbol'], prefix['factor'])
    return builder.build()
