# utilkit

Small helpers that tend to get rewritten in every project: list operations,
database column types, thread synchronisation primitives and a wrapper for
values of unknown type.

## Installation

```
pip install utilkit
```

The only runtime dependency is `cryptography`, used by `EncryptColumn`.

## Modules

### `utilkit.value`

- `AnyValue(val=None, err=None)` is a frozen dataclass holding a value of any
  type, or the exception met while producing it.
  - `as_int()`, `as_uint()`, `as_int32()`, `as_uint32()`, `as_int64()`,
    `as_uint64()`, `as_float32()`, `as_float64()`, `as_str()`, `as_bytes()`
    and `as_bool()` return the value when it has the requested type. The
    integer accessors also check the value's range: `as_uint32()` accepts
    `0 <= v <= 2**32 - 1`, for example. `as_float32()` accepts floats within
    the float32 range. `as_bytes()` accepts `bytes` and `bytearray`. `bool` is
    never accepted as an integer.
  - If `err` is set, the accessor raises that exception. If the type is wrong,
    it raises `InvalidTypeError`, a `TypeError` with `want` and `got`
    attributes.
  - Each accessor has an `*_or_default(default)` variant that returns
    `default` instead of raising.
- `compare_real_number(src, dst)` returns -1, 0 or 1.

```python
from utilkit.value import AnyValue, InvalidTypeError

AnyValue(val=1).as_int()                  # 1
AnyValue(val="").as_int_or_default(7)     # 7
try:
    AnyValue(val="x").as_int()
except InvalidTypeError as exc:
    print(exc.want, exc.got)              # int str
```

### `utilkit.slices.edit`

- `add(src, element, index)` returns a new list with `element` inserted at
  `index`, where `0 <= index <= len(src)`.
- `delete(src, index)` returns a new list without the element at `index`.
- Both raise `IndexOutOfRangeError` (an `IndexError` with `length` and
  `index` attributes) for an index outside that range.
- `filter_delete(src, match)` removes, in place, every element for which
  `match(index, value)` is true, and returns the same list.
- `reverse(src)` returns a reversed copy. `reverse_self(src)` reverses the
  list in place.
- `map_indexed(src, fn)` returns `[fn(index, value), ...]`.
- `filter_map(src, fn)` calls `fn(index, value)`, which returns
  `(mapped, keep)`, and collects the `mapped` values whose `keep` is true.

### `utilkit.slices.search`

- `contains(src, dst)`, `contains_func(src, match)`
- `contains_any(src, dst)`, `contains_all(src, dst)`: these need hashable
  elements.
- `contains_any_func(src, dst, equal)`, `contains_all_func(src, dst, equal)`:
  these compare with `equal(a, b)`.
- `find(src, match, default=None)` returns `(element, True)` for the first
  match, or `(default, False)`. `find_all(src, match)` returns every match.
- `index`, `index_func`, `last_index`, `last_index_func` return an index, or
  -1 when nothing matches. `index_all` and `index_all_func` return every
  matching index.
- `max_of(ts)` and `min_of(ts)` raise `ValueError` on an empty sequence.
  `sum_of(ts)` returns 0 for an empty sequence or `None`.

### `utilkit.slices.sets`

These return lists without duplicates.

- `diff_set(src, dst)`, `intersect_set(src, dst)`,
  `symmetric_diff_set(src, dst)` and `union_set(src, dst)` need hashable
  elements.
- Each has a `*_func(src, dst, equal)` variant that compares with
  `equal(a, b)`, for elements that cannot be hashed.

Compare results as sets, or sort them, rather than relying on element order.

```python
from utilkit.slices.edit import add, delete, reverse
from utilkit.slices.search import contains, index, max_of
from utilkit.slices.sets import diff_set, union_set

add([1, 2, 3, 4], 233, 2)                         # [1, 2, 233, 3, 4]
delete([1, 2, 3, 4], 2)                           # [1, 2, 4]
reverse([1, 3, 2, 2, 4])                          # [4, 2, 2, 3, 1]
contains([1, 2, 3], 3)                            # True
index([1, 2, 3], 4)                               # -1
max_of([2, 3, 1])                                 # 3
sorted(diff_set([1, 3, 2, 2, 4], [3, 4, 5, 6]))   # [1, 2]
sorted(union_set([1, 3, 4, 5], [1, 4, 7]))        # [1, 3, 4, 5, 7]
```

### `utilkit.sqlx`

- `JsonColumn(val=None, valid=False, kind=None)` is in `utilkit.sqlx.json_column`.
  - `value()` returns the compact UTF-8 JSON encoding of `val` as `bytes`, or
    `None` when `valid` is false. Dataclass instances are encoded as objects.
  - `scan(src)` accepts `bytes` or `str`, decodes the JSON into `val` and sets
    `valid`. When `src` is `None`, it does nothing. Any other type raises
    `TypeError`.
  - If `kind` is a dataclass, a scanned JSON object is built into an instance
    of it.
- `EncryptColumn(val=None, valid=False, key="", kind=None)` is in
  `utilkit.sqlx.encrypt`.
  - `value()` returns a random 12-byte nonce followed by the AES-GCM sealed
    encoding of `val`.
  - It raises `InvalidColumnError` when `valid` is false, and
    `KeyLengthError` unless the key is 16, 24 or 32 bytes long.
  - `kind` selects the encoding:
    - `str`: UTF-8.
    - `bytes`: raw bytes.
    - `int`, `float` or a name such as `"int8"`, `"uint32"` or `"float32"`:
      big-endian binary.
    - Anything else: JSON, rebuilding a dataclass `kind` on scanning.
  - Without `kind`, the encoding is inferred from `val`.
  - `scan(src)` decrypts and decodes into `val`. A `str` that cannot be
    decrypted is ignored.
- `RowsScanner(cursor)` is in `utilkit.sqlx.scanner` and reads rows from any
  DB-API cursor that offers `description` and `fetchone()`.
  - It raises `InvalidArgumentError` for `None` or a cursor without column
    information.
  - `columns` lists the column names.
  - `scan()` returns the next row as a list and raises `NoMoreRowsError` when
    none is left.
  - `scan_all()` returns every remaining row. The scanner is also iterable.
  - It never closes the cursor.

```python
import os
import sqlite3
from utilkit.sqlx.encrypt import EncryptColumn
from utilkit.sqlx.scanner import RowsScanner

key = os.urandom(16)
stored = EncryptColumn(val="hello", valid=True, key=key).value()
column = EncryptColumn(key=key, kind=str)
column.scan(stored)
column.val                                        # 'hello'

conn = sqlite3.connect(":memory:")
cursor = conn.execute("SELECT 1 AS id, 'Tom' AS name")
RowsScanner(cursor).scan_all()                    # [[1, 'Tom']]
```

### `utilkit.syncx`

- `Cond(lock=None)` is in `utilkit.syncx.cond`. It is a condition variable
  tied to `lock`, a new `threading.Lock` by default, and can be used as a
  context manager that holds the lock.
  - `wait(timeout=None)` releases the lock and waits for a signal. If no
    signal comes within `timeout` seconds, it raises `TimeoutError`. The lock
    is held again in either case.
  - `signal()` wakes the longest-waiting thread. `broadcast()` wakes all of
    them.
- `SyncMap` is in `utilkit.syncx.syncmap`. It is a lock-guarded map.
  - `load(key)` returns `(value, found)`.
  - The other methods are `store`, `load_or_store`, `load_or_store_func`
    (which calls the factory only when the key is absent), `load_and_delete`
    and `delete`.
  - `range(fn)` stops when `fn` returns `False`.
  - It also supports `len()` and `in`.
- `Pool(factory)` is in `utilkit.syncx.pool`. `get()` returns a pooled object,
  or calls `factory()` when the pool is empty. `put(item)` returns an object
  to the pool.
- `AtomicValue(value=None)` is in `utilkit.syncx.atomic`. It provides `load`,
  `store`, `swap` (which returns the old value) and
  `compare_and_swap(old, new)`. The swap happens when the current value is
  `old` or equals it.

```python
import threading
from utilkit.syncx.cond import Cond

cond = Cond()
with cond:
    threading.Timer(0.1, cond.signal).start()
    cond.wait(timeout=1.0)
```

## What it does not do

The `utilkit.sqlx` types only encode, decode and read values. Opening
connections, running queries and creating tables are left to your database
driver.

## Running the tests

```
pip install "utilkit[test]"
pytest
```