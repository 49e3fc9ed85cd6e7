import argparse
import logging
import sys
import typing

from dimensional.core import config
from dimensional.core import measurable
from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import (
    DimensionError,
    ParsingError,
    RegistrationError,
)
from dimensional.core.iotools import NonExistentPathError


def evaluate(
    expression: str,
    to: str=None,
    dimension: str=None,
    path: str=None,
) -> str:
    """Evaluate a unit expression and display the resulting quantity.

Examples:
    python -m dimensional '2.5 g/l'
    python -m dimensional '90 km/h' --to 'm/s'
    python -m dimensional '1.5 MiB' --config ./dimensional.ini
    """
    table = config.load(path)
    target = DimensionVector.parse(dimension) if dimension else None
    quantity = measurable.parse(expression, target=target, table=table)
    if to:
        return f"{quantity.value(to, table)} {to}"
    return measurable.render(quantity, table)


def main(argv: typing.Sequence[str]=None) -> int:
    """Run the command-line interface."""
    parser = argparse.ArgumentParser(
        prog='dimensional',
        description=evaluate.__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        'expression',
        help="The unit expression to evaluate (e.g., '2.5 g/l').",
    )
    parser.add_argument(
        '-t',
        '--to',
        help="Display the result in this unit (e.g., 'mg/cm^3').",
        metavar='UNIT',
    )
    parser.add_argument(
        '-d',
        '--dimension',
        help="Require the result to have this dimension (e.g., 'L T^-1').",
        metavar='DIMS',
    )
    parser.add_argument(
        '-c',
        '--config',
        help="Extend the SI vocabulary from this INI file.",
        metavar='PATH',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        help="Print debugging information.",
        action='store_true',
    )
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        result = evaluate(
            args.expression,
            to=args.to,
            dimension=args.dimension,
            path=args.config,
        )
    except (
        DimensionError,
        ParsingError,
        RegistrationError,
        NonExistentPathError,
    ) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
