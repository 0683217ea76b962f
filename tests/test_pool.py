from utilkit.syncx.pool import Pool


def test_pool_reuses_put_item():
    calls = []

    def factory():
        calls.append(1)
        return bytearray(b"A")

    pool = Pool(factory)
    res = pool.get()
    assert bytes(res) == b"A"
    res.extend(b"B")
    pool.put(res)
    again = pool.get()
    assert len(calls) == 1
    assert bytes(again) == b"AB"
    assert again is res


def test_pool_creates_when_empty():
    counter = iter(range(100))
    pool = Pool(lambda: next(counter))
    assert pool.get() == 0
    assert pool.get() == 1
    pool.put(42)
    assert pool.get() == 42
    assert pool.get() == 2