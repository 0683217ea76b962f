"""A column value stored in the database as a JSON document."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any


def _to_jsonable(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


@dataclass
class JsonColumn:
    """A value written to and read from a column as JSON.

    ``kind`` optionally names a dataclass that scanned JSON objects are built
    into; without it, scanned values are plain JSON data.
    """

    val: Any = None
    valid: bool = False
    kind: type | None = None

    def value(self) -> bytes | None:
        """Return the JSON encoding of ``val``, or None when not valid."""
        if not self.valid:
            return None
        text = json.dumps(
            self.val, default=_to_jsonable, separators=(",", ":"), ensure_ascii=False
        )
        return text.encode("utf-8")

    def scan(self, src: Any) -> None:
        """Decode ``src`` (bytes, str or None) into ``val``.

        None leaves the column untouched; any other type raises TypeError.
        """
        if src is None:
            return
        if isinstance(src, (bytes, bytearray, memoryview)):
            document: str | bytes = bytes(src)
        elif isinstance(src, str):
            document = src
        else:
            raise TypeError(f"JsonColumn.scan does not support src type {src!r}")
        self.val = self._build(json.loads(document))
        self.valid = True

    def _build(self, data: Any) -> Any:
        kind = self.kind
        if kind is not None and dataclasses.is_dataclass(kind) and isinstance(data, dict):
            names = {field.name for field in dataclasses.fields(kind)}
            return kind(**{name: item for name, item in data.items() if name in names})
        return data