import typing


class ReprStrMixin:
    """A mixin class that provides support for `__repr__` and `__str__`.

    Subclasses override `__str__` with a simplified representation and, if
    necessary, `_repr_args` with the arguments that recreate the instance.
    """

    def __str__(self) -> str:
        """A simplified representation of this object."""
        return object.__repr__(self)

    def __repr__(self) -> str:
        """An unambiguous representation of this object."""
        module = f"{self.__module__.replace('dimensional.', '')}."
        name = self.__class__.__qualname__
        return f"{module}{name}({self._repr_args()})"

    def _repr_args(self) -> str:
        """The string to display between parentheses in `__repr__`."""
        return str(self)


T = typing.TypeVar('T')


def unique(*items: T) -> typing.List[T]:
    """Remove repeated items while preserving order."""
    collection = []
    for item in items:
        if item not in collection:
            collection.append(item)
    return collection
