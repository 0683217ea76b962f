import sqlite3
from dataclasses import dataclass

import pytest
from cryptography.exceptions import InvalidTag

from utilkit.sqlx.encrypt import EncryptColumn, InvalidColumnError, KeyLengthError

KEY16 = "password" * 2
KEY24 = "password" * 3
KEY32 = "password" * 4


@dataclass
class Simple:
    name: str
    age: int


ROUND_TRIPS = [
    (123, "int8"),
    (330, "int16"),
    (65550, "int32"),
    (4294967300, "int64"),
    (123, "uint8"),
    (330, "uint16"),
    (65550, "uint32"),
    (4294967300, "uint64"),
    (123, int),
    ((1 << 16) + 1, int),
    (123, "uint"),
    ((1 << 16) + 1, "uint"),
    (1212321412321323.12222221322, float),
    ({"A": "B", "C": "D"}, dict),
    (["B", "D", "E"], list),
    (b"hello", bytes),
    (True, bool),
    (Simple("大明", 99), Simple),
    ("adsnfjkenfjkndjsknfjenjfknsadnfkjejfn", str),
]


def test_wrong_key_length():
    column = EncryptColumn(val="abc", valid=True, key="secret")
    with pytest.raises(KeyLengthError):
        column.value()


def test_invalid_column():
    with pytest.raises(InvalidColumnError):
        EncryptColumn(val="abc", key=KEY16).value()


@pytest.mark.parametrize("val,kind", ROUND_TRIPS)
def test_round_trip(val, kind):
    encrypted = EncryptColumn(val=val, valid=True, key=KEY16, kind=kind).value()
    restored = EncryptColumn(key=KEY16, kind=kind)
    restored.scan(encrypted)
    assert restored.valid is True
    assert restored.val == val


def test_round_trip_with_32_byte_key_and_inferred_kind():
    encrypted = EncryptColumn(val=123, valid=True, key=KEY32).value()
    restored = EncryptColumn(key=KEY32, kind=int)
    restored.scan(encrypted)
    assert restored.val == 123


def test_float32_round_trip_loses_precision_only():
    encrypted = EncryptColumn(val=123.12, valid=True, key=KEY16, kind="float32").value()
    restored = EncryptColumn(key=KEY16, kind="float32")
    restored.scan(encrypted)
    assert restored.val == pytest.approx(123.12, rel=1e-6)


@pytest.mark.parametrize("val", [complex(1, 2)])
def test_unsupported_type(val):
    with pytest.raises(TypeError):
        EncryptColumn(val=val, valid=True, key=KEY16).value()


def test_out_of_range_binary_value():
    with pytest.raises(ValueError):
        EncryptColumn(val=300, valid=True, key=KEY16, kind="int8").value()


@pytest.mark.parametrize(
    "val,kind,size",
    [(123, "int32", 4), (123, "int", 8), ("abc", str, 3), (1.5, "float64", 8)],
)
def test_ciphertext_length(val, kind, size):
    encrypted = EncryptColumn(val=val, valid=True, key=KEY16, kind=kind).value()
    assert len(encrypted) == 12 + size + 16


def test_nonce_differs_between_encryptions():
    column = EncryptColumn(val="abc", valid=True, key=KEY16)
    first = column.value()
    second = column.value()
    assert len(first) == len(second) == 12 + 3 + 16
    assert first[:12] != second[:12]
    for encrypted in (first, second):
        restored = EncryptColumn(key=KEY16, kind=str)
        restored.scan(encrypted)
        assert restored.val == "abc"


def test_wrong_key_fails_to_decrypt():
    encrypted = EncryptColumn(val="abc", valid=True, key=KEY16).value()
    restored = EncryptColumn(key=KEY24, kind=str)
    with pytest.raises(InvalidTag):
        restored.scan(encrypted)
    assert restored.valid is False


def test_scan_undecryptable_str_is_ignored():
    restored = EncryptColumn(key=KEY16, kind=str)
    restored.scan("13adfdf")
    assert restored.valid is False
    assert restored.val is None


def test_scan_unsupported_type():
    with pytest.raises(TypeError, match="123"):
        EncryptColumn(key=KEY16, kind=int).scan(123)


def test_scan_too_short_plaintext_for_kind():
    encrypted = EncryptColumn(val=7, valid=True, key=KEY16, kind="int8").value()
    restored = EncryptColumn(key=KEY16, kind="int64")
    with pytest.raises(ValueError):
        restored.scan(encrypted)
    assert restored.valid is False


@pytest.fixture
def product_db():
    conn = sqlite3.connect(":memory:")
    conn.execute(
        "CREATE TABLE product(id INTEGER PRIMARY KEY AUTOINCREMENT, encrypt BLOB NOT NULL)"
    )
    conn.execute("INSERT INTO product (id, encrypt) VALUES (1, '13adfdf')")
    yield conn
    conn.close()


@pytest.mark.parametrize("val,kind", ROUND_TRIPS)
def test_store_and_load_through_sqlite(product_db, val, kind):
    stored = EncryptColumn(val=val, valid=True, key=KEY16, kind=kind)
    product_db.execute("UPDATE product SET encrypt = ? WHERE id = 1", (stored.value(),))
    (raw,) = product_db.execute("SELECT encrypt FROM product WHERE id = 1").fetchone()
    loaded = EncryptColumn(key=KEY16, kind=kind)
    loaded.scan(raw)
    assert loaded == stored