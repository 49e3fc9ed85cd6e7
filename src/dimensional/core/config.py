"""
Symbol tables from configuration files.

A configuration file is an INI file with up to three sections::

    [base]
    B = B

    [prefixes]
    R = 1e27
    Q = 1e30

    [units]
    bit = 0.125 B
    kn = 1852 m/h

Each key in ``[base]`` registers a unit symbol of scale 1 for the custom base
dimension named by its value. Each key in ``[prefixes]`` registers a prefix
with a numerical factor. Each key in ``[units]`` registers a unit whose value
is a unit expression, evaluated against the seed table and every entry that
precedes it in the file. Keys are case-sensitive.
"""

import configparser
import logging
import os
import pathlib
import typing

from dimensional.core import iotools
from dimensional.core import parsing
from dimensional.core import si
from dimensional.core import symbols
from dimensional.core.dimension import DimensionVector
from dimensional.core.errors import RegistrationError


logger = logging.getLogger(__name__)


FILENAME = 'dimensional.ini'
"""The name of the file that `find` looks for."""

ENVVAR = 'DIMENSIONAL_INI'
"""An environment variable that names a directory to search."""

DEFAULT = 'si'
"""Placeholder for the default SI table as the seed of `load`."""


def search_paths() -> typing.List[typing.Optional[iotools.PathLike]]:
    """The directories to search for a configuration file, in order."""
    home = pathlib.Path('~').expanduser()
    return [
        pathlib.Path.cwd(), # The current working directory
        home, # The user's home directory
        home / '.config', # Linux standard (local)
        '/etc/dimensional', # Linux standard (global)
        os.environ.get(ENVVAR), # A known environment variable
        pathlib.Path(__file__).parent.parent, # The package top
    ]


def find() -> typing.Optional[pathlib.Path]:
    """Locate the first configuration file on the search path, if any."""
    return iotools.search(search_paths(), FILENAME)


def load(
    path: iotools.PathLike=None,
    seed: typing.Union[symbols.SymbolTable, str, None]=DEFAULT,
    strict: bool=False,
) -> symbols.SymbolTable:
    """Create a symbol table from a configuration file.

    Parameters
    ----------
    path : path-like, optional
        The file to read. If absent, use the first file that `find` locates.
        If there is no such file, return the seed table unchanged.

    seed : `~symbols.SymbolTable` or None, optional
        The table to extend. The default is the SI table. Pass ``None`` to
        start from an empty table.

    strict : bool, default=false
        Passed to `~symbols.Builder.build`.

    Raises
    ------
    NonExistentPathError
        If `path` is given but does not exist.
    RegistrationError
        If an entry is invalid or already registered.
    ParsingError
        If a unit expression can't be evaluated.
    """
    table = si.table() if seed == DEFAULT else seed
    if path is None:
        found = find()
        if found is None:
            logger.debug("No %s on search path", FILENAME)
            return table if table is not None else symbols.SymbolTable()
        path = found
    source = iotools.full_path(path)
    config = configparser.ConfigParser(interpolation=None)
    config.optionxform = str
    with source.open(encoding='utf-8') as fp:
        config.read_file(fp)
    builder = (
        table.extend() if table is not None
        else symbols.SymbolTable.builder()
    )
    _register(config, builder)
    logger.info("Loaded unit vocabulary from %s", source)
    return builder.build(strict=strict)


def _register(
    config: configparser.ConfigParser,
    builder: symbols.Builder,
) -> None:
    """Add the entries of each section to `builder`."""
    if config.has_section('base'):
        for symbol, identifier in config.items('base'):
            dims = DimensionVector({identifier.strip(): 1})
            builder.unit(symbol, 1.0, dims)
    if config.has_section('prefixes'):
        for symbol, factor in config.items('prefixes'):
            builder.prefix(symbol, _factor(symbol, factor))
    if config.has_section('units'):
        for symbol, expression in config.items('units'):
            result = parsing.evaluate(expression, builder.preview())
            builder.unit(symbol, result.value, result.dims)


def _factor(symbol: str, text: str) -> float:
    """Convert a prefix factor from its configured text."""
    try:
        return float(text)
    except ValueError as err:
        raise RegistrationError(
            symbol, 'prefix', f"has invalid scale {text!r}"
        ) from err
