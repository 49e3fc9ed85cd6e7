import pytest

from dimensional.core import si
from dimensional.core.dimension import DimensionVector
from dimensional.core.symbols import SymbolTable


@pytest.fixture
def binary() -> SymbolTable:
    """A table of information units with binary prefixes."""
    builder = SymbolTable.builder().unit('B', 1.0, DimensionVector(B=1))
    for prefix in si.BINARY_PREFIXES:
        builder.prefix(prefix['symbol'], prefix['factor'])
    return builder.build()


@pytest.fixture
def standard() -> SymbolTable:
    """The default SI table."""
    return si.table()
