import pytest

from dimensional.core import lexical
from dimensional.core.errors import LexError


pytestmark = pytest.mark.parsing


def kinds(text: str):
    """The kinds and values of the tokens in `text`."""
    return [(t.kind, t.value) for t in lexical.tokenize(text)]


@pytest.fixture
def expressions():
    """Expressions and their expected tokens."""
    return {
        'm': [('symbol', 'm')],
        '2.5 g/l': [
            ('number', 2.5),
            ('symbol', 'g'),
            ('operator', '/'),
            ('symbol', 'l'),
        ],
        'm s^-1': [('symbol', 'm'), ('symbol', 's'), ('exponent', -1)],
        'kg·m²·s⁻²': [
            ('symbol', 'kg'),
            ('operator', '*'),
            ('symbol', 'm'),
            ('exponent', 2),
            ('operator', '*'),
            ('symbol', 's'),
            ('exponent', -2),
        ],
        'N ⋅ m': [('symbol', 'N'), ('operator', '*'), ('symbol', 'm')],
        '-1.5e3 W': [('number', -1.5e3), ('symbol', 'W')],
        '.5 h': [('number', 0.5), ('symbol', 'h')],
        '1/s': [('number', 1.0), ('operator', '/'), ('symbol', 's')],
        '  km  ': [('symbol', 'km')],
        '°C': [('symbol', '°C')],
        '€/h': [('symbol', '€'), ('operator', '/'), ('symbol', 'h')],
        'm^+2': [('symbol', 'm'), ('exponent', 2)],
        '': [],
    }


def test_tokenize(expressions: dict):
    """Expressions should split into the expected tokens."""
    for text, expected in expressions.items():
        assert kinds(text) == expected, text


def test_token_positions():
    """Tokens should record the span of text they cover."""
    tokens = lexical.tokenize('2 km^2')
    assert [(t.start, t.end) for t in tokens] == [(0, 1), (2, 4), (4, 6)]
    assert [t.text for t in tokens] == ['2', 'km', '^2']


@pytest.mark.parametrize(
    'text, position',
    [
        ('1.2.3 m', 3),
        ('m 2', 2),
        ('m^', 1),
        ('m^x', 1),
        ('m # s', 2),
        ('² m', 0),
        ('m (s)', 2),
    ],
)
def test_lex_errors(text: str, position: int):
    """Malformed expressions should report the offending position."""
    with pytest.raises(LexError) as exc:
        lexical.tokenize(text)
    assert exc.value.position == position
    assert exc.value.text == text


def test_symbol_characters():
    """Test the characters that may appear in a symbol."""
    for c in ('m', 'Ω', 'μ', '_', '°', '%', '€', '$'):
        assert lexical.is_symbol_character(c), c
    for c in ('2', '^', '*', '/', ' ', '(', '²'):
        assert not lexical.is_symbol_character(c), c


def test_custom_raising():
    """A tokenizer may use a different exponent character."""
    tokenizer = lexical.Tokenizer(raising='**')
    tokens = tokenizer.tokenize('m**2')
    assert [t.kind for t in tokens] == ['symbol', 'exponent']
