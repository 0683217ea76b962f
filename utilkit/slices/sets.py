"""Set operations on lists, for hashable elements or with an equality function."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from utilkit.slices.search import contains_func

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

EqualFunc = Callable[[T, T], bool]


def _deduplicate_func(data: Sequence[T], equal: EqualFunc) -> list[T]:
    """Keep each element only if no later element is equal to it."""
    return [
        value
        for pos, value in enumerate(data)
        if not contains_func(data[pos + 1 :], lambda other, target=value: equal(other, target))
    ]


def _in(collection: Sequence[T], value: T, equal: EqualFunc) -> bool:
    return contains_func(collection, lambda other: equal(other, value))


def diff_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements of src that are not in dst."""
    removed = set(dst)
    return [value for value in dict.fromkeys(src) if value not in removed]


def diff_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    """Return the distinct elements of src that are not in dst, compared with equal."""
    return _deduplicate_func([value for value in src if not _in(dst, value, equal)], equal)


def intersect_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements present in both src and dst."""
    present = set(src)
    return [value for value in dict.fromkeys(dst) if value in present]


def intersect_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    """Return the distinct elements present in both, compared with equal."""
    return _deduplicate_func([value for value in dst if _in(src, value, equal)], equal)


def symmetric_diff_set(src: Iterable[H] | None, dst: Iterable[H] | None) -> list[H]:
    """Return the distinct elements present in exactly one of src and dst."""
    left = dict.fromkeys(src or ())
    right = dict.fromkeys(dst or ())
    return [value for value in left if value not in right] + [
        value for value in right if value not in left
    ]


def symmetric_diff_set_func(
    src: Sequence[T] | None, dst: Sequence[T] | None, equal: EqualFunc
) -> list[T]:
    """Return the distinct elements present in exactly one side, compared with equal."""
    left = list(src or ())
    right = list(dst or ())
    only_left = [value for value in left if not _in(right, value, equal)]
    only_right = [value for value in right if not _in(left, value, equal)]
    return _deduplicate_func(only_left + only_right, equal)


def union_set(src: Iterable[H], dst: Iterable[H]) -> list[H]:
    """Return the distinct elements present in src or dst."""
    return list(dict.fromkeys([*dst, *src]))


def union_set_func(src: Sequence[T], dst: Sequence[T], equal: EqualFunc) -> list[T]:
    """Return the distinct elements present in src or dst, compared with equal."""
    return _deduplicate_func([*dst, *src], equal)