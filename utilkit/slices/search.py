"""Membership, lookup and aggregate operations on lists."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)
N = TypeVar("N", int, float)

EqualFunc = Callable[[T, T], bool]
MatchFunc = Callable[[T], bool]


def contains(src: Iterable[T], dst: T) -> bool:
    """Return whether dst is an element of src."""
    return contains_func(src, lambda value: value == dst)


def contains_func(src: Iterable[T], equal: Callable[[T], bool]) -> bool:
    """Return whether any element of src satisfies equal."""
    return any(equal(value) for value in src)


def contains_any(src: Iterable[H], dst: Iterable[H]) -> bool:
    """Return whether src holds at least one element of dst."""
    present = set(src)
    return any(value in present for value in dst)


def contains_any_func(src: Sequence[T], dst: Iterable[T], equal: EqualFunc) -> bool:
    """Return whether src holds at least one element of dst, compared with equal."""
    return any(equal(value_src, value_dst) for value_dst in dst for value_src in src)


def contains_all(src: Iterable[H], dst: Iterable[H]) -> bool:
    """Return whether src holds every element of dst."""
    present = set(src)
    return all(value in present for value in dst)


def contains_all_func(src: Sequence[T], dst: Iterable[T], equal: EqualFunc) -> bool:
    """Return whether src holds every element of dst, compared with equal."""
    return all(
        contains_func(src, lambda value, target=value_dst: equal(value, target))
        for value_dst in dst
    )


def find(src: Iterable[T], match: MatchFunc, default: T | None = None) -> tuple[T | None, bool]:
    """Return (first matching element, True), or (default, False) if none matches."""
    for value in src:
        if match(value):
            return value, True
    return default, False


def find_all(src: Iterable[T], match: MatchFunc) -> list[T]:
    """Return every element that satisfies match, in order."""
    return [value for value in src if match(value)]


def index(src: Iterable[T], dst: T) -> int:
    """Return the index of the first element equal to dst, or -1."""
    return index_func(src, lambda value: value == dst)


def index_func(src: Iterable[T], match: MatchFunc) -> int:
    """Return the index of the first element satisfying match, or -1."""
    return next((idx for idx, value in enumerate(src) if match(value)), -1)


def last_index(src: Sequence[T], dst: T) -> int:
    """Return the index of the last element equal to dst, or -1."""
    return last_index_func(src, lambda value: value == dst)


def last_index_func(src: Sequence[T], match: MatchFunc) -> int:
    """Return the index of the last element satisfying match, or -1."""
    indexed = list(enumerate(src))
    return next((idx for idx, value in reversed(indexed) if match(value)), -1)


def index_all(src: Iterable[T], dst: T) -> list[int]:
    """Return the indexes of every element equal to dst."""
    return index_all_func(src, lambda value: value == dst)


def index_all_func(src: Iterable[T], match: MatchFunc) -> list[int]:
    """Return the indexes of every element satisfying match."""
    return [idx for idx, value in enumerate(src) if match(value)]


def max_of(ts: Sequence[N]) -> N:
    """Return the largest element; raise ValueError if ts is empty."""
    if not ts:
        raise ValueError("max_of() needs at least one value")
    return max(ts)


def min_of(ts: Sequence[N]) -> N:
    """Return the smallest element; raise ValueError if ts is empty."""
    if not ts:
        raise ValueError("min_of() needs at least one value")
    return min(ts)


def sum_of(ts: Iterable[N] | None) -> N | int:
    """Return the sum of the elements; 0 for an empty or missing sequence."""
    return sum(ts or ())