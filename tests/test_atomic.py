import threading
from dataclasses import dataclass

import pytest

from utilkit.syncx.atomic import AtomicValue


@dataclass
class User:
    name: str


@pytest.mark.parametrize("initial", [None, User(name="Tom")])
def test_new_value_of(initial):
    val = AtomicValue(initial)
    assert val.load() == initial


CASES = [
    (None, None),
    (None, User(name="Tom")),
    (User(name="Tom"), None),
    (User(name="Jerry"), User(name="Tom")),
]


@pytest.mark.parametrize("old,new", CASES)
def test_compare_and_swap(old, new):
    val = AtomicValue(old)
    assert val.compare_and_swap(old, new) is True
    assert val.load() == new


@pytest.mark.parametrize("old,new", CASES)
def test_swap(old, new):
    val = AtomicValue(old)
    assert val.swap(new) == old
    assert val.load() == new


@pytest.mark.parametrize("stored", [None, User(name="Tom")])
def test_store_load(stored):
    val = AtomicValue()
    val.store(stored)
    assert val.load() == stored


def test_default_value_is_none():
    assert AtomicValue().load() is None


def test_store_then_load_ints():
    val = AtomicValue(123)
    assert val.load() == 123
    val.store(456)
    assert val.load() == 456


def test_swap_ints():
    val = AtomicValue(123)
    assert val.swap(456) == 123
    assert val.load() == 456


def test_compare_and_swap_ints():
    val = AtomicValue(123)
    assert val.compare_and_swap(123, 456) is True
    assert val.compare_and_swap(455, 459) is False
    assert val.load() == 456


def test_concurrent_increments_via_cas():
    val = AtomicValue(0)

    def bump():
        for _ in range(200):
            while True:
                current = val.load()
                if val.compare_and_swap(current, current + 1):
                    break

    threads = [threading.Thread(target=bump) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert val.load() == 1600