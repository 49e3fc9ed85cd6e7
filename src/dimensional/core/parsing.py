"""
Evaluation of unit expressions.

A unit expression is an optional leading number followed by terms joined by
combinators::

    quantity   := number [combinator unitExpr] | [number] unitExpr
    unitExpr   := term (combinator term)*
    combinator := '*' | '/' | '·' | '⋅' | <whitespace>
    term       := symbol [exponent]
    exponent   := '^' signedInt | unicodeSuperscript

Terms combine strictly from left to right; there is no precedence and there
are no parentheses, so ``'J / kg / K'`` means ``((J / kg) / K)``.
"""

import logging
import math
import typing

from dimensional.core import dimension
from dimensional.core import iterables
from dimensional.core import lexical
from dimensional.core import symbols
from dimensional.core.dimension import DIMENSIONLESS, DimensionVector
from dimensional.core.errors import DimensionError, LexError


logger = logging.getLogger(__name__)


class Result(typing.NamedTuple):
    """The numerical value and dimension of a parsed expression."""

    value: float
    dims: DimensionVector


class Parser(iterables.ReprStrMixin):
    """A tool for evaluating unit expressions against a symbol table."""

    def __init__(
        self,
        table: symbols.SymbolTable,
        tokenizer: lexical.Tokenizer=None,
    ) -> None:
        self.table = table
        """The vocabulary of units and prefixes."""
        self.resolver = symbols.Resolver(table)
        self.tokenizer = tokenizer or lexical.Tokenizer()

    def parse(self, text: str, target: DimensionVector=None) -> Result:
        """Evaluate `text` into a value in coherent units and a dimension.

        Parameters
        ----------
        text : string
            The unit expression to evaluate (e.g., '2.5 g/l').

        target : `~dimension.DimensionVector`, optional
            The dimension that the result must have.

        Returns
        -------
        `~parsing.Result`

        Raises
        ------
        LexError
            If `text` is not a well-formed unit expression, or if its value
            is out of the range of a float.
        UnknownSymbolError, AmbiguousSymbolError
            If a symbol does not have exactly one reading in the table.
        DimensionError
            If `target` is given and the result has a different dimension.
        """
        tokens = self.tokenizer.tokenize(text)
        result = self._evaluate(text, tokens)
        logger.debug("Parsed %r as %s [%s]", text, result.value, result.dims)
        if target is not None and result.dims != target:
            raise DimensionError(target, result.dims)
        return result

    def _evaluate(self, text: str, tokens: typing.List[lexical.Token]):
        """Combine the terms of a tokenized expression."""
        if not tokens:
            raise LexError(text, 0, "Empty expression")
        value, dims = 1.0, DIMENSIONLESS
        previous = None
        operation = '*'
        stream = iter(enumerate(tokens))
        for i, token in stream:
            if token.kind == 'number' and previous is None:
                value = token.value
            elif token.kind == 'operator':
                self._check_operator(text, token, previous)
                operation = token.value
            elif token.kind == 'symbol':
                self._check_adjacent(text, token, previous)
                exponent = 1
                if i+1 < len(tokens) and tokens[i+1].kind == 'exponent':
                    _, token = next(stream)
                    exponent = token.value
                factor, term = self._term(text, tokens[i], exponent)
                if operation == '/':
                    value, dims = value / factor, dimension.divide(dims, term)
                else:
                    value, dims = value * factor, dimension.multiply(dims, term)
                if not math.isfinite(value):
                    raise LexError(text, tokens[i].start, "Value out of range")
                operation = '*'
            else:
                raise LexError(text, token.start, f"Unexpected {token.kind}")
            previous = token
        if previous.kind == 'operator':
            raise LexError(text, previous.start, "Operator without operand")
        return Result(value, dims)

    def _check_operator(
        self,
        text: str,
        token: lexical.Token,
        previous: typing.Optional[lexical.Token],
    ) -> None:
        """Raise an exception if an operator can't appear here."""
        if previous is None:
            raise LexError(text, token.start, "Operator without operand")
        if previous.kind == 'operator':
            raise LexError(text, token.start, "Consecutive operators")

    def _check_adjacent(
        self,
        text: str,
        token: lexical.Token,
        previous: typing.Optional[lexical.Token],
    ) -> None:
        """Raise an exception if two terms touch without a combinator."""
        if previous is None or previous.kind in {'number', 'operator'}:
            return
        if token.start == previous.end:
            raise LexError(text, token.start, "Missing operator or space")

    def _term(self, text: str, token: lexical.Token, exponent: int):
        """Compute the scale and dimension of a symbol raised to `exponent`.

        A scale that overflows or underflows a float is a `LexError` at the
        position of the symbol.
        """
        resolution = self.resolver(token.value)
        try:
            scale = math.pow(resolution.scale, exponent)
        except OverflowError as err:
            raise LexError(text, token.start, "Scale out of range") from err
        if scale == 0:
            raise LexError(text, token.start, "Scale out of range")
        return scale, dimension.power(resolution.dims, exponent)

    def __str__(self) -> str:
        return str(self.table)


def evaluate(
    text: str,
    table: symbols.SymbolTable,
    target: DimensionVector=None,
) -> Result:
    """Evaluate `text` against `table`. See `~parsing.Parser.parse`."""
    return Parser(table).parse(text, target=target)
