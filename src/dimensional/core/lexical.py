import re
import typing
import unicodedata

from dimensional.core import iterables
from dimensional.core.errors import LexError


SUPERSCRIPTS = {
    '⁰': '0',
    '¹': '1',
    '²': '2',
    '³': '3',
    '⁴': '4',
    '⁵': '5',
    '⁶': '6',
    '⁷': '7',
    '⁸': '8',
    '⁹': '9',
    '⁺': '+',
    '⁻': '-',
}
"""Unicode superscript characters and their ASCII equivalents."""


OPERATORS = {
    '*': '*',
    '·': '*', # U+00B7 MIDDLE DOT
    '⋅': '*', # U+22C5 DOT OPERATOR
    '/': '/',
}
"""Operator characters and the operation each represents."""


_SYMBOL_EXTRAS = {'_', '°', '%', '‰'}


def is_symbol_character(c: str) -> bool:
    """True if `c` may appear in a unit symbol.

    Symbols comprise letters (in any script), the underscore, the degree sign,
    percent and per-mille signs, and currency signs.
    """
    return (
        c.isalpha()
        or c in _SYMBOL_EXTRAS
        or unicodedata.category(c) == 'Sc'
    )


class Token(typing.NamedTuple):
    """A lexical unit of a unit expression."""

    kind: str
    """One of 'number', 'symbol', 'operator', or 'exponent'."""
    text: str
    """The characters of the expression that this token spans."""
    value: typing.Union[float, int, str]
    """The interpreted value: a float, an int exponent, a symbol, or '*'/'/'."""
    start: int
    end: int


class Tokenizer(iterables.ReprStrMixin):
    """A tool for splitting unit expressions into tokens."""

    number = r""" # Modeled after `fractions._RATIONAL_FORMAT`
        [-+]?                 # an optional sign, ...
        (?=\d|\.\d)           # ... only if followed by <digit> or .<digit>
        \d*                   # and a possibly empty integral part
        (?:\.\d*)?            # followed by an optional fractional part,
        (?:[eE][-+]?\d+)?     # and an optional exponent
    """

    def __init__(self, raising: str='^') -> None:
        digits = ''.join(k for k, v in SUPERSCRIPTS.items() if v.isdigit())
        self.raising = raising
        self.patterns = {
            'number': re.compile(self.number, re.VERBOSE | re.ASCII),
            'exponent': re.compile(
                re.escape(raising) + r'(?P<value>[-+]?\d+)',
                re.ASCII,
            ),
            'superscript': re.compile(f'[⁺⁻]?[{digits}]+'),
        }
        """Compiled regular expressions for numbers and exponents."""

    def tokenize(self, text: str) -> typing.List[Token]:
        """Split `text` into a list of tokens.

        Raises
        ------
        LexError
            If `text` contains a malformed numeric literal or a character that
            can't start a token at its position.
        """
        tokens = []
        i = self._skip_space(text, 0)
        if number := self._match_number(text, i):
            tokens.append(number)
            i = number.end
        while i < len(text):
            c = text[i]
            if c.isspace():
                i += 1
            elif is_symbol_character(c):
                symbol = self._match_symbol(text, i)
                tokens.append(symbol)
                i = symbol.end
                if exponent := self._match_superscript(text, i):
                    tokens.append(exponent)
                    i = exponent.end
            elif text.startswith(self.raising, i):
                exponent = self._match_exponent(text, i)
                tokens.append(exponent)
                i = exponent.end
            elif c in OPERATORS:
                tokens.append(Token('operator', c, OPERATORS[c], i, i+1))
                i += 1
            elif c in SUPERSCRIPTS:
                raise LexError(text, i, "Superscript exponent without symbol")
            elif c in '0123456789.':
                raise LexError(text, i, "Unexpected numeric literal")
            else:
                raise LexError(text, i, f"Unrecognized character {c!r}")
        return tokens

    def _skip_space(self, text: str, i: int) -> int:
        """Return the index of the first non-space character at or after `i`."""
        while i < len(text) and text[i].isspace():
            i += 1
        return i

    def _match_number(self, text: str, i: int) -> typing.Optional[Token]:
        """Extract a numeric literal starting at `i`, if there is one."""
        match = self.patterns['number'].match(text, i)
        if not match:
            return
        end = match.end()
        if end < len(text) and text[end] in '0123456789.':
            raise LexError(text, end, "Malformed numeric literal")
        return Token('number', match[0], float(match[0]), i, end)

    def _match_symbol(self, text: str, i: int) -> Token:
        """Extract the maximal run of symbol characters starting at `i`."""
        end = i
        while end < len(text) and is_symbol_character(text[end]):
            end += 1
        symbol = text[i:end]
        return Token('symbol', symbol, symbol, i, end)

    def _match_exponent(self, text: str, i: int) -> Token:
        """Extract an ASCII exponent (e.g., '^-2') starting at `i`."""
        match = self.patterns['exponent'].match(text, i)
        if not match:
            raise LexError(
                text, i, f"Expected an integer after {self.raising!r}"
            )
        return Token('exponent', match[0], int(match['value']), i, match.end())

    def _match_superscript(self, text: str, i: int) -> typing.Optional[Token]:
        """Extract a superscript exponent (e.g., '⁻¹') starting at `i`."""
        if i >= len(text) or text[i] not in SUPERSCRIPTS:
            return
        match = self.patterns['superscript'].match(text, i)
        if not match:
            raise LexError(text, i, "Malformed superscript exponent")
        digits = ''.join(SUPERSCRIPTS[c] for c in match[0])
        return Token('exponent', match[0], int(digits), i, match.end())

    def __str__(self) -> str:
        return f"raising={self.raising!r}"


_TOKENIZER = Tokenizer()


def tokenize(text: str) -> typing.List[Token]:
    """Split `text` into tokens with the default tokenizer."""
    return _TOKENIZER.tokenize(text)
