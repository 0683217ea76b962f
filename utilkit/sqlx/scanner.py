"""Reading rows from a DB-API cursor as plain lists of values."""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Sequence


class NoMoreRowsError(LookupError):
    """Raised when every row has already been read."""


class InvalidArgumentError(ValueError):
    """Raised when a scanner cannot be built from the given rows."""


class Rows(Protocol):
    """The part of a DB-API cursor that a scanner reads from."""

    @property
    def description(self) -> Sequence[Sequence[Any]] | None: ...

    def fetchone(self) -> Sequence[Any] | None: ...


class RowsScanner:
    """Reads rows one by one from a cursor. It never closes the cursor."""

    def __init__(self, rows: Rows | None) -> None:
        if rows is None:
            raise InvalidArgumentError("invalid argument: rows must not be None")
        try:
            description = rows.description
        except Exception as exc:
            raise InvalidArgumentError(
                f"invalid argument: cannot read column information: {exc}"
            ) from exc
        if not description:
            raise InvalidArgumentError(
                "invalid argument: cannot read column information: no columns"
            )
        self._rows = rows
        self.columns = [column[0] for column in description]

    def scan(self) -> list[Any]:
        """Return the next row; raise NoMoreRowsError when none is left."""
        row = self._rows.fetchone()
        if row is None:
            raise NoMoreRowsError("no more rows")
        return list(row)

    def scan_all(self) -> list[list[Any]]:
        """Return every remaining row."""
        return list(self)

    def __iter__(self) -> Iterator[list[Any]]:
        while True:
            try:
                yield self.scan()
            except NoMoreRowsError:
                return