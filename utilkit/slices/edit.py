"""Editing and mapping operations on lists."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class IndexOutOfRangeError(IndexError):
    """Raised when an index lies outside the valid range of a list."""

    def __init__(self, length: int, index: int) -> None:
        super().__init__(f"index out of range, length {length}, index {index}")
        self.length = length
        self.index = index


def add(src: Sequence[T], element: T, index: int) -> list[T]:
    """Return a new list with element inserted at index (0 <= index <= len)."""
    length = len(src)
    if index < 0 or index > length:
        raise IndexOutOfRangeError(length, index)
    return [*src[:index], element, *src[index:]]


def delete(src: Sequence[T], index: int) -> list[T]:
    """Return a new list without the element at index."""
    length = len(src)
    if index < 0 or index >= length:
        raise IndexOutOfRangeError(length, index)
    return [*src[:index], *src[index + 1 :]]


def filter_delete(src: list[T], match: Callable[[int, T], bool]) -> list[T]:
    """Remove, in place, every element for which match(index, value) is true."""
    src[:] = [value for idx, value in enumerate(src) if not match(idx, value)]
    return src


def reverse(src: Iterable[T]) -> list[T]:
    """Return a new list holding the elements in reverse order."""
    return list(src)[::-1]


def reverse_self(src: list[T]) -> None:
    """Reverse the list in place."""
    src.reverse()


def map_indexed(src: Iterable[T], fn: Callable[[int, T], U]) -> list[U]:
    """Return [fn(index, value)] for every element."""
    return [fn(idx, value) for idx, value in enumerate(src)]


def filter_map(src: Iterable[T], fn: Callable[[int, T], tuple[U, bool]]) -> list[U]:
    """Map every element with fn and keep the results whose flag is true."""
    result: list[U] = []
    for idx, value in enumerate(src):
        mapped, keep = fn(idx, value)
        if keep:
            result.append(mapped)
    return result