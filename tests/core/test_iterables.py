from dimensional.core import iterables
from dimensional.core import lexical
from dimensional.core import measurable
from dimensional.core import symbols
from dimensional.core.dimension import DimensionVector


def test_unique():
    """Test the function that extracts unique items while preserving order."""
    cases = {
        'L': ['L'],
        ('L', 'T'): ['L', 'T'],
        ('L', 'T', 'L'): ['L', 'T'],
        ('L', 'T', 'L', 'M'): ['L', 'T', 'M'],
        ('L', 'T', 'T', 'L', 'M'): ['L', 'T', 'M'],
    }
    for items, expected in cases.items():
        assert list(iterables.unique(*items)) == expected


def test_repr_str():
    """Objects should display a short module path and their arguments."""
    v = DimensionVector(L=1, T=-1)
    assert repr(v) == "core.dimension.DimensionVector({'L': 1, 'T': -1})"
    table = symbols.SymbolTable.builder().unit('m', 1.0).build()
    assert repr(table) == 'core.symbols.SymbolTable(1 units, 0 prefixes)'
    q = measurable.Quantity(2.0, v)
    assert repr(q).startswith('core.measurable.Quantity(2.0, ')
    assert repr(lexical.Tokenizer()) == "core.lexical.Tokenizer(raising='^')"
