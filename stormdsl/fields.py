"""Field kinds and their column types for each supported database."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .directive import Directive, DirectiveKind


class FieldKind(Enum):
    """The kinds of value a schema field can hold."""

    INT = 0
    FLOAT = 1
    DECIMAL = 2
    BIG_INT = 3
    STRING = 4
    TEXT = 5
    CHAR = 6
    BOOLEAN = 7
    DATE_TIME = 8
    DATE = 9
    TIME = 10
    TIMESTAMP = 11
    BINARY = 12
    JSON = 13
    UUID = 14
    CUID = 15
    POINT = 16
    CUSTOM = 17

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    FieldKind.INT: "Int",
    FieldKind.FLOAT: "Float",
    FieldKind.DECIMAL: "Decimal",
    FieldKind.BIG_INT: "BigInt",
    FieldKind.STRING: "String",
    FieldKind.TEXT: "Text",
    FieldKind.CHAR: "Char",
    FieldKind.BOOLEAN: "Boolean",
    FieldKind.DATE_TIME: "DateTime",
    FieldKind.DATE: "Date",
    FieldKind.TIME: "Time",
    FieldKind.TIMESTAMP: "Timestamp",
    FieldKind.BINARY: "Binary",
    FieldKind.JSON: "JSON",
    FieldKind.UUID: "UUID",
    FieldKind.CUID: "CUID",
    FieldKind.POINT: "Point",
    FieldKind.CUSTOM: "Custom",
}

_DEFAULT_LENGTH = "255"
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _atoi(text: str) -> int | None:
    """Parse a signed decimal integer in 64-bit range, or return None."""
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


_MYSQL = {
    FieldKind.INT: "INT",
    FieldKind.FLOAT: "DOUBLE",
    FieldKind.BIG_INT: "BIGINT",
    FieldKind.TEXT: "TEXT",
    FieldKind.BOOLEAN: "TINYINT(1)",
    FieldKind.DATE_TIME: "DATETIME",
    FieldKind.DATE: "DATE",
    FieldKind.TIME: "TIME",
    FieldKind.TIMESTAMP: "TIMESTAMP",
    FieldKind.JSON: "JSON",
    FieldKind.UUID: "CHAR(36)",
    FieldKind.CUID: "CHAR(25)",
    FieldKind.POINT: "POINT",
    FieldKind.CUSTOM: "VARCHAR(255)",
}

_POSTGRES = {
    FieldKind.INT: "INTEGER",
    FieldKind.FLOAT: "DOUBLE PRECISION",
    FieldKind.BIG_INT: "BIGINT",
    FieldKind.TEXT: "TEXT",
    FieldKind.BOOLEAN: "BOOLEAN",
    FieldKind.DATE_TIME: "TIMESTAMP",
    FieldKind.DATE: "DATE",
    FieldKind.TIME: "TIME",
    FieldKind.TIMESTAMP: "TIMESTAMP",
    FieldKind.BINARY: "BYTEA",
    FieldKind.JSON: "JSONB",
    FieldKind.UUID: "UUID",
    FieldKind.CUID: "VARCHAR(25)",
    FieldKind.POINT: "POINT",
    FieldKind.CUSTOM: "VARCHAR(255)",
}

_SQLITE = {
    FieldKind.INT: "INTEGER",
    FieldKind.FLOAT: "REAL",
    FieldKind.DECIMAL: "NUMERIC",
    FieldKind.BIG_INT: "INTEGER",
    FieldKind.BOOLEAN: "INTEGER",
    FieldKind.BINARY: "BLOB",
}


@dataclass(frozen=True)
class FieldType:
    """A field's kind, the model it refers to if any, and its directives."""

    kind: FieldKind
    model_name: str = ""
    directives: tuple[Directive, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", tuple(self.directives))

    def get_directive(self, kind: DirectiveKind) -> tuple[str, ...] | None:
        """Arguments of the first directive of ``kind``, or None if absent."""
        for directive in self.directives:
            if directive.kind is kind:
                return directive.args
        return None

    def length(self) -> str:
        """The ``@length`` argument if it is a positive integer, else "255"."""
        args = self.get_directive(DirectiveKind.LENGTH)
        if args:
            value = _atoi(args[0])
            if value is not None and value > 0:
                return args[0]
        return _DEFAULT_LENGTH

    def precision_scale(self) -> tuple[str, str] | None:
        """The valid ``@precision`` pair as text, or None."""
        args = self.get_directive(DirectiveKind.PRECISION)
        if args is None or len(args) < 2:
            return None
        precision, scale = args[0], args[1]
        p = _atoi(precision)
        if p is None or p <= 0:
            return None
        s = _atoi(scale)
        if s is None or not 0 <= s <= p:
            return None
        return precision, scale

    def _numeric(self, fallback: str) -> str:
        pair = self.precision_scale()
        if pair is None:
            return fallback
        return f"NUMERIC({pair[0]},{pair[1]})"

    def mysql_type(self) -> str:
        """The MySQL column type."""
        if self.kind is FieldKind.DECIMAL:
            return self._numeric("DECIMAL(10,2)")
        if self.kind is FieldKind.STRING:
            return f"VARCHAR({self.length()})"
        if self.kind is FieldKind.CHAR:
            return f"CHAR({self.length()})"
        if self.kind is FieldKind.BINARY:
            return f"BINARY({self.length()})"
        return _MYSQL.get(self.kind, "VARCHAR(255)")

    def postgres_type(self) -> str:
        """The PostgreSQL column type."""
        if self.kind is FieldKind.DECIMAL:
            return self._numeric("NUMERIC(10,2)")
        if self.kind is FieldKind.STRING:
            return f"VARCHAR({self.length()})"
        if self.kind is FieldKind.CHAR:
            return f"CHAR({self.length()})"
        return _POSTGRES.get(self.kind, "VARCHAR(255)")

    def sqlite_type(self) -> str:
        """The SQLite column type."""
        return _SQLITE.get(self.kind, "TEXT")

    def __str__(self) -> str:
        if self.kind is FieldKind.CUSTOM and self.model_name:
            return self.model_name
        return str(self.kind)