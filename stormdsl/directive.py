"""Field directives such as ``@id`` or ``@length(100)``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DirectiveKind(Enum):
    """The directives a schema field may carry."""

    ID = 0
    AUTO = 1
    DEFAULT = 2
    UNIQUE = 3
    NULLABLE = 4
    HAS_MANY = 5
    BELONGS_TO = 6
    HAS_ONE = 7
    INDEX = 8
    ENUM = 9
    UPDATED_AT = 10
    CREATED_AT = 11
    LENGTH = 12
    MIN = 13
    MAX = 14
    PRECISION = 15
    DEFAULT_NOW = 16
    MAP = 17
    RELATION = 18

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    DirectiveKind.ID: "id",
    DirectiveKind.AUTO: "auto",
    DirectiveKind.DEFAULT: "default",
    DirectiveKind.UNIQUE: "unique",
    DirectiveKind.NULLABLE: "nullable",
    DirectiveKind.HAS_MANY: "hasmany",
    DirectiveKind.BELONGS_TO: "belongsto",
    DirectiveKind.HAS_ONE: "hasone",
    DirectiveKind.INDEX: "index",
    DirectiveKind.ENUM: "enum",
    DirectiveKind.UPDATED_AT: "updatedat",
    DirectiveKind.CREATED_AT: "createdat",
    DirectiveKind.LENGTH: "length",
    DirectiveKind.MIN: "min",
    DirectiveKind.MAX: "max",
    DirectiveKind.PRECISION: "precision",
    DirectiveKind.DEFAULT_NOW: "defaultnow",
    DirectiveKind.MAP: "map",
    DirectiveKind.RELATION: "relation",
}


@dataclass(frozen=True)
class Directive:
    """A directive attached to a field, with its arguments as text."""

    kind: DirectiveKind
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))