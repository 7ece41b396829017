"""Sequence helpers that report absence with Option instead of None or IndexError.

Every helper leaves its input untouched and returns a new list. Negative
positions count from the end, as with ordinary indexing.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any

from fundament.types.option import Nothing, Option, Some, from_nullable

__all__ = [
    'append',
    'at',
    'chunk',
    'compact',
    'difference',
    'drop',
    'drop_while',
    'find',
    'find_index',
    'first',
    'group',
    'group_by',
    'insert',
    'into',
    'last',
    'move',
    'prepend',
    'remove',
    'reverse',
    'shuffle',
    'sort',
    'swap',
    'take',
    'take_while',
    'union',
    'uniq',
    'without',
    'zip_',
]


def _position(length: int, index: int) -> int:
    return length + index if index < 0 else index


def _in_range(length: int, index: int) -> bool:
    return 0 <= index < length


# --- lookup ---


def at[T](seq: Sequence[T], index: int) -> Option[T]:
    """Return the item at ``index``; negative indexes count from the end.

    A ``None`` item reads as absent.

    Examples:
        >>> at([1, 2, 3], -1)
        Some(value=3)
        >>> at([1, 2, 3], 3)
        NothingType()
        >>> at([None], 0)
        NothingType()
    """
    if -len(seq) <= index < len(seq):
        return from_nullable(seq[index])
    return Nothing


def first[T](seq: Sequence[T]) -> Option[T]:
    return at(seq, 0)


def last[T](seq: Sequence[T]) -> Option[T]:
    return at(seq, -1)


def find[T](items: Iterable[T], predicate: Callable[[T], bool]) -> Option[T]:
    """Return the first item satisfying ``predicate``; a matching ``None`` reads as absent."""
    for item in items:
        if predicate(item):
            return from_nullable(item)
    return Nothing


def find_index[T](items: Iterable[T], predicate: Callable[[T], bool]) -> Option[int]:
    """Return the position of the first item satisfying ``predicate``."""
    for index, item in enumerate(items):
        if predicate(item):
            return Some(index)
    return Nothing


# --- building ---


def into[T](items: Iterable[T] | None = None) -> list[T]:
    """Materialise ``items`` as a list; ``None`` gives an empty one."""
    return [] if items is None else list(items)


def append[T](items: Sequence[T], *values: T) -> list[T]:
    return [*items, *values]


def prepend[T](items: Sequence[T], *values: T) -> list[T]:
    return [*values, *items]


def compact[T](items: Iterable[T | None]) -> list[T]:
    """Drop ``None`` values, keeping everything else (including falsy values)."""
    return [item for item in items if item is not None]


# --- slicing ---


def take[T](items: Sequence[T], n: int) -> list[T]:
    """Return the first ``n`` items; a negative ``n`` gives an empty list."""
    if n < 0:
        return []
    return list(items[:n])


def drop[T](items: Sequence[T], n: int) -> list[T]:
    """Return everything after the first ``n`` items; a negative ``n`` gives an empty list."""
    if n < 0:
        return []
    return list(items[n:])


def take_while[T](items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    out: list[T] = []
    for item in items:
        if not predicate(item):
            break
        out.append(item)
    return out


def drop_while[T](items: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    start = 0
    for item in items:
        if not predicate(item):
            break
        start += 1
    return list(items[start:])


def chunk[T](items: Sequence[T], size: int) -> list[list[T]]:
    """Split ``items`` into runs of ``size``; the last run may be shorter.

    Examples:
        >>> chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        >>> chunk([1, 2], 0)
        []
    """
    if size <= 0:
        return []
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


# --- reordering ---


def reverse[T](items: Sequence[T]) -> list[T]:
    return list(reversed(items))


def sort[T](items: Iterable[T], *, key: Callable[[T], Any] | None = None, descending: bool = False) -> list[T]:
    """Return a sorted copy; the sort is stable."""
    return sorted(items, key=key, reverse=descending)  # type: ignore[type-var, arg-type]


def shuffle[T](items: Sequence[T]) -> list[T]:
    """Return the items in random order."""
    return random.sample(list(items), k=len(items))


def insert[T](items: Sequence[T], value: T, index: int) -> list[T]:
    """Insert ``value`` before ``index``; positions past either end clamp to it."""
    out = list(items)
    out.insert(max(0, _position(len(out), index)), value)
    return out


def remove[T](items: Sequence[T], index: int) -> list[T]:
    """Drop the item at ``index``; an out-of-range index leaves the items as they are."""
    out = list(items)
    position = _position(len(out), index)
    if _in_range(len(out), position):
        del out[position]
    return out


def move[T](items: Sequence[T], source: int, target: int) -> list[T]:
    """Move the item at ``source`` so that it ends up at ``target``.

    Examples:
        >>> move(['a', 'b', 'c'], 0, -1)
        ['b', 'c', 'a']
    """
    out = list(items)
    source = _position(len(out), source)
    target = _position(len(out), target)
    if not _in_range(len(out), source):
        return out
    item = out.pop(source)
    out.insert(max(0, target), item)
    return out


def swap[T](items: Sequence[T], a: int, b: int) -> list[T]:
    """Exchange the items at ``a`` and ``b``; out-of-range positions leave the items as they are."""
    out = list(items)
    a = _position(len(out), a)
    b = _position(len(out), b)
    if _in_range(len(out), a) and _in_range(len(out), b):
        out[a], out[b] = out[b], out[a]
    return out


# --- set-like ---


def uniq[T: Hashable](items: Iterable[T]) -> list[T]:
    """Drop repeats, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


def union[T: Hashable](*seqs: Iterable[T]) -> list[T]:
    """Every distinct item across ``seqs``, in order of first appearance."""
    return list(dict.fromkeys(item for seq in seqs for item in seq))


def difference[T: Hashable](items: Iterable[T], other: Iterable[T]) -> list[T]:
    """Items of ``items`` that do not occur in ``other``."""
    excluded = set(other)
    return [item for item in items if item not in excluded]


def without[T](items: Iterable[T], *values: T) -> list[T]:
    """Items not equal to any of ``values``; unhashable items are fine here."""
    return [item for item in items if item not in values]


def zip_[T](*seqs: Iterable[T]) -> list[list[T]]:
    """Rows of same-position items, as long as the shortest input.

    Examples:
        >>> zip_([1, 2, 3], ['a', 'b'])
        [[1, 'a'], [2, 'b']]
    """
    return [list(row) for row in zip(*seqs, strict=False)]


# --- grouping ---


def group[T, K: Hashable](items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Bucket items by ``key(item)``; buckets and their contents keep input order.

    Examples:
        >>> group([1, 2, 3, 4], lambda n: n % 2 == 0)
        {False: [1, 3], True: [2, 4]}
    """
    buckets: dict[K, list[T]] = {}
    for item in items:
        buckets.setdefault(key(item), []).append(item)
    return buckets


def group_by[T](items: Iterable[T], field: str) -> dict[Any, list[T]]:
    """Bucket mappings by ``item[field]``, or other objects by their ``field`` attribute."""
    return group(items, lambda item: item[field] if isinstance(item, Mapping) else getattr(item, field))
