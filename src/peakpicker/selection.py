import operator
from collections.abc import Iterable, Iterator

from peakpicker.types import Index


def toggle(indices: Iterable[Index], index: Index) -> tuple[Index, ...]:
    """Toggle the index in a set of indices: remove it, if it is present, and insert it otherwise.

    Example:
        (2, 5), 3 -> (2, 3, 5)
        (2, 3, 5), 3 -> (2, 5)

    Raises `TypeError`, if an index is not an integer.
    """
    selected = set(operator.index(i) for i in indices)
    index = operator.index(index)

    if index in selected:
        selected.remove(index)
    else:
        selected.add(index)

    return tuple(sorted(selected))


class SelectionSet:
    """Set of selected indices of a dataset. Indices are kept sorted."""

    def __init__(self, indices: Iterable[Index] = ()) -> None:
        self._indices = tuple(sorted(set(operator.index(i) for i in indices)))
        self._frozen = False

    @property
    def indices(self) -> tuple[Index, ...]:
        return self._indices

    @property
    def frozen(self) -> bool:
        return self._frozen

    def toggle(self, index: Index) -> tuple[Index, ...]:
        if self._frozen:
            raise RuntimeError('Selection is frozen!')

        self._indices = toggle(self._indices, index)
        return self._indices

    def freeze(self) -> tuple[Index, ...]:
        self._frozen = True
        return self._indices

    def __contains__(self, __index: Index) -> bool:
        return __index in self._indices

    def __iter__(self) -> Iterator[Index]:
        return iter(self._indices)

    def __len__(self) -> int:
        return len(self._indices)

    def __repr__(self) -> str:
        cls = self.__class__

        return f'{cls.__name__}({list(self._indices)})'
