import typing


class DimensionError(Exception):
    """Incompatible physical dimensions."""

    def __init__(
        self,
        expected: typing.Any=None,
        actual: typing.Any=None,
        message: str=None,
    ) -> None:
        self.expected = expected
        """The dimension the operation required."""
        self.actual = actual
        """The dimension the operation received."""
        self.message = message

    def __str__(self) -> str:
        if self.message:
            return self.message
        return (
            f"Expected dimension {self.expected!s}"
            f" but got {self.actual!s}"
        )


class ParsingError(Exception):
    """Base class for exceptions encountered while parsing a unit expression."""

    def __init__(self, arg: typing.Any) -> None:
        self.arg = arg

    def __str__(self) -> str:
        return f"Could not parse {self.arg!r}"


class LexError(ParsingError):
    """The expression contains a malformed literal or an unexpected token."""

    def __init__(self, text: str, position: int, reason: str) -> None:
        super().__init__(text)
        self.text = text
        self.position = position
        self.reason = reason

    def __str__(self) -> str:
        pointer = ' ' * self.position + '^'
        return f"{self.reason} at position {self.position}\n{self.text}\n{pointer}"


class UnknownSymbolError(ParsingError):
    """The symbol matches no unit, with or without a prefix."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Unknown unit symbol {self.symbol!r}"


class AmbiguousSymbolError(ParsingError):
    """The symbol has more than one equally specific reading."""

    def __init__(self, symbol: str, candidates: typing.Sequence) -> None:
        super().__init__(symbol)
        self.symbol = symbol
        self.candidates = tuple(candidates)

    def __str__(self) -> str:
        readings = ', '.join(str(c) for c in self.candidates)
        return f"Ambiguous unit symbol {self.symbol!r}: {readings}"


class RegistrationError(Exception):
    """Error when adding a symbol to a table."""

    def __init__(self, symbol: str, kind: str, reason: str=None) -> None:
        self.symbol = symbol
        self.kind = kind
        self.reason = reason or 'is already registered'

    def __str__(self) -> str:
        return f"The {self.kind} symbol {self.symbol!r} {self.reason}"
