"""A column value stored encrypted with AES-GCM."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from utilkit.sqlx.json_column import JsonColumn

_NONCE_SIZE = 12
_KEY_SIZES = (16, 24, 32)

_BINARY_FORMATS: dict[Any, str] = {
    "int8": ">b",
    "int16": ">h",
    "int32": ">i",
    "int64": ">q",
    "uint8": ">B",
    "uint16": ">H",
    "uint32": ">I",
    "uint64": ">Q",
    "float32": ">f",
    "float64": ">d",
    "int": ">q",
    "uint": ">Q",
    int: ">q",
    float: ">d",
}


class InvalidColumnError(ValueError):
    """Raised when encrypting a column that is not marked valid."""


class KeyLengthError(ValueError):
    """Raised when the key is not 16, 24 or 32 bytes long."""


def _infer_kind(val: Any) -> Any:
    if isinstance(val, str):
        return str
    if isinstance(val, (bytes, bytearray, memoryview)):
        return bytes
    if isinstance(val, bool):
        return None
    if isinstance(val, int):
        return int
    if isinstance(val, float):
        return float
    return None


@dataclass
class EncryptColumn:
    """A value encrypted with AES-GCM before it is stored.

    ``kind`` selects the plain encoding: ``str`` (UTF-8), ``bytes`` (raw),
    ``int``/``float`` or a fixed-width name such as ``"int32"`` or
    ``"float32"`` (big-endian binary), or anything else for JSON, where a
    dataclass type is rebuilt on scanning. Without ``kind`` the encoding is
    inferred from ``val``.
    """

    val: Any = None
    valid: bool = False
    key: str | bytes = ""
    kind: Any = None

    def value(self) -> bytes:
        """Return nonce followed by the sealed encoding of ``val``."""
        if not self.valid:
            raise InvalidColumnError("EncryptColumn is not valid")
        key = self._key_bytes()
        if len(key) not in _KEY_SIZES:
            raise KeyLengthError("EncryptColumn only supports 16, 24 or 32 byte keys")
        nonce = os.urandom(_NONCE_SIZE)
        return nonce + AESGCM(key).encrypt(nonce, self._encode(), None)

    def scan(self, src: Any) -> None:
        """Decrypt ``src`` and decode it into ``val``.

        A str that cannot be decrypted is ignored without error.
        """
        if isinstance(src, (bytes, bytearray, memoryview)):
            plain = self._decrypt(bytes(src))
        elif isinstance(src, str):
            try:
                plain = self._decrypt(src.encode("utf-8"))
            except (InvalidTag, ValueError):
                return
        else:
            raise TypeError(f"EncryptColumn.scan does not support src type {src!r}")
        try:
            self.val = self._decode(plain)
        except Exception:
            self.valid = False
            raise
        self.valid = True

    def _key_bytes(self) -> bytes:
        key = self.key
        return key.encode("utf-8") if isinstance(key, str) else bytes(key)

    def _kind(self) -> Any:
        return self.kind if self.kind is not None else _infer_kind(self.val)

    def _encode(self) -> bytes:
        kind = self._kind()
        if kind is str:
            return self.val.encode("utf-8")
        if kind is bytes:
            return bytes(self.val)
        fmt = _BINARY_FORMATS.get(kind)
        if fmt is not None:
            try:
                return struct.pack(fmt, self.val)
            except struct.error as exc:
                raise ValueError(f"cannot encode {self.val!r} as {kind}: {exc}") from exc
        encoded = JsonColumn(val=self.val, valid=True).value()
        assert encoded is not None
        return encoded

    def _decode(self, plain: bytes) -> Any:
        kind = self._kind()
        if kind is str:
            return plain.decode("utf-8", "surrogateescape")
        if kind is bytes:
            return plain
        fmt = _BINARY_FORMATS.get(kind)
        if fmt is not None:
            try:
                return struct.unpack_from(fmt, plain)[0]
            except struct.error as exc:
                raise ValueError(f"cannot decode {kind} from {len(plain)} bytes") from exc
        column = JsonColumn(kind=kind if isinstance(kind, type) else None)
        column.scan(plain)
        return column.val

    def _decrypt(self, data: bytes) -> bytes:
        aead = AESGCM(self._key_bytes())
        return aead.decrypt(data[:_NONCE_SIZE], data[_NONCE_SIZE:], None)