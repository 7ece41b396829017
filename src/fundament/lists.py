"""List: an immutable sequence whose lookups answer with Option.

Each method returns a new List and leaves the receiver alone. The helpers
in `fundament.arrays` do the work; List only carries them as methods so
calls can be chained.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from functools import reduce
from typing import Any, overload

import msgspec

from fundament import arrays
from fundament.types.option import Option

__all__ = ['List']


class List[T](msgspec.Struct, frozen=True):
    """Immutable list of ``items``.

    Examples:
        >>> List.from_iter([3, 1, 2]).sort().take(2)
        List(items=(1, 2))
        >>> List.empty().first()
        NothingType()
    """

    items: tuple[T, ...] = ()

    @classmethod
    def empty(cls) -> List[Any]:
        return cls()

    @classmethod
    def from_iter(cls, items: Iterable[T] | None = None) -> List[T]:
        return cls(tuple(arrays.into(items)))

    @classmethod
    def range(cls, start: int, stop: int, step: int = 1) -> List[int]:
        """Integers from ``start`` up to, not including, ``stop``.

        Raises:
            ValueError: If ``step`` is zero.
        """
        return cls(tuple(range(start, stop, step)))  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: int | slice) -> T | List[T]:
        if isinstance(index, slice):
            return List(self.items[index])
        return self.items[index]

    def __str__(self) -> str:
        return ','.join(map(str, self.items))

    @property
    def length(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def to_list(self) -> list[T]:
        return list(self.items)

    # --- lookup ---

    def at(self, index: int) -> Option[T]:
        return arrays.at(self.items, index)

    def first(self) -> Option[T]:
        return arrays.first(self.items)

    def last(self) -> Option[T]:
        return arrays.last(self.items)

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        return arrays.find(self.items, predicate)

    def find_index(self, predicate: Callable[[T], bool]) -> Option[int]:
        return arrays.find_index(self.items, predicate)

    # --- transforming ---

    def map[U](self, fn: Callable[[T], U]) -> List[U]:
        return List(tuple(map(fn, self.items)))

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        return List(tuple(item for item in self.items if predicate(item)))

    def each(self, fn: Callable[[T], Any]) -> List[T]:
        """Call ``fn`` on every item for its side effect; return self."""
        for item in self.items:
            fn(item)
        return self

    def reduce[U](self, fn: Callable[[U, T], U], initial: U) -> U:
        return reduce(fn, self.items, initial)

    def compact(self) -> List[Any]:
        return List(tuple(arrays.compact(self.items)))

    def append(self, *values: T) -> List[T]:
        return List((*self.items, *values))

    def prepend(self, *values: T) -> List[T]:
        return List((*values, *self.items))

    def take(self, n: int) -> List[T]:
        return List(tuple(arrays.take(self.items, n)))

    def drop(self, n: int) -> List[T]:
        return List(tuple(arrays.drop(self.items, n)))

    def take_while(self, predicate: Callable[[T], bool]) -> List[T]:
        return List(tuple(arrays.take_while(self.items, predicate)))

    def drop_while(self, predicate: Callable[[T], bool]) -> List[T]:
        return List(tuple(arrays.drop_while(self.items, predicate)))

    def uniq(self) -> List[T]:
        return List(tuple(arrays.uniq(self.items)))  # type: ignore[type-var]

    def reverse(self) -> List[T]:
        return List(self.items[::-1])

    def sort(self, *, key: Callable[[T], Any] | None = None, descending: bool = False) -> List[T]:
        return List(tuple(arrays.sort(self.items, key=key, descending=descending)))

    def shuffle(self) -> List[T]:
        return List(tuple(arrays.shuffle(self.items)))

    def insert(self, value: T, index: int) -> List[T]:
        return List(tuple(arrays.insert(self.items, value, index)))

    def remove(self, index: int) -> List[T]:
        return List(tuple(arrays.remove(self.items, index)))

    def move(self, source: int, target: int) -> List[T]:
        return List(tuple(arrays.move(self.items, source, target)))

    def swap(self, a: int, b: int) -> List[T]:
        return List(tuple(arrays.swap(self.items, a, b)))

    # --- grouping ---

    def group[K: Hashable](self, key: Callable[[T], K]) -> dict[K, List[T]]:
        return {k: List(tuple(v)) for k, v in arrays.group(self.items, key).items()}

    def group_by(self, field: str) -> dict[Any, List[T]]:
        return {k: List(tuple(v)) for k, v in arrays.group_by(self.items, field).items()}
