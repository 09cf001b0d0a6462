"""Intermediate representation built from a parsed schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .directive import Directive, DirectiveKind
from .fields import FieldKind, FieldType
from .parser import DSLFile

_FIELD_KINDS = {
    "int": FieldKind.INT,
    "integer": FieldKind.INT,
    "bigint": FieldKind.BIG_INT,
    "float": FieldKind.FLOAT,
    "double": FieldKind.FLOAT,
    "real": FieldKind.FLOAT,
    "decimal": FieldKind.DECIMAL,
    "numeric": FieldKind.DECIMAL,
    "string": FieldKind.STRING,
    "varchar": FieldKind.STRING,
    "text": FieldKind.TEXT,
    "char": FieldKind.CHAR,
    "bool": FieldKind.BOOLEAN,
    "boolean": FieldKind.BOOLEAN,
    "datetime": FieldKind.DATE_TIME,
    "date": FieldKind.DATE,
    "time": FieldKind.TIME,
    "timestamp": FieldKind.TIMESTAMP,
    "binary": FieldKind.BINARY,
    "blob": FieldKind.BINARY,
    "json": FieldKind.JSON,
    "point": FieldKind.POINT,
}

_DIRECTIVE_KINDS = {
    "id": DirectiveKind.ID,
    "auto": DirectiveKind.AUTO,
    "default": DirectiveKind.DEFAULT,
    "unique": DirectiveKind.UNIQUE,
    "nullable": DirectiveKind.NULLABLE,
    "hasmany": DirectiveKind.HAS_MANY,
    "belongsto": DirectiveKind.BELONGS_TO,
    "hasone": DirectiveKind.HAS_ONE,
    "index": DirectiveKind.INDEX,
    "enum": DirectiveKind.ENUM,
    "updatedat": DirectiveKind.UPDATED_AT,
    "createdat": DirectiveKind.CREATED_AT,
    "length": DirectiveKind.LENGTH,
    "min": DirectiveKind.MIN,
    "max": DirectiveKind.MAX,
    "precision": DirectiveKind.PRECISION,
    "defaultnow": DirectiveKind.DEFAULT_NOW,
    "map": DirectiveKind.MAP,
    "relation": DirectiveKind.RELATION,
}


@dataclass(frozen=True)
class IRField:
    """A model field with its resolved type."""

    name: str
    type: FieldType
    is_array: bool = False

    def has_directive(self, kind: DirectiveKind) -> bool:
        """Whether the field carries a directive of ``kind``."""
        return any(directive.kind is kind for directive in self.type.directives)


@dataclass(frozen=True)
class IRModel:
    """A model and its fields."""

    name: str
    fields: tuple[IRField, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class IR:
    """The whole schema in resolved form."""

    database_driver: str
    database_url: str
    models: tuple[IRModel, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "models", tuple(self.models))


def map_field_type(name: str) -> FieldKind:
    """The field kind named by ``name``; unknown names are custom types."""
    return _FIELD_KINDS.get(name.strip().lower(), FieldKind.CUSTOM)


def map_directive(name: str, args: Sequence[str]) -> Directive | None:
    """The directive named by ``name``, or None if the name is unknown."""
    kind = _DIRECTIVE_KINDS.get(name.strip().lower())
    if kind is None:
        return None
    return Directive(kind, tuple(args))


def _arg_text(arg: object) -> str:
    if isinstance(arg, float):
        return f"{arg:f}"
    return str(arg)


def to_ir(ast: DSLFile) -> IR:
    """Resolve a parsed schema into its intermediate representation."""
    models = []
    for model in ast.models:
        fields = []
        for decl in model.fields:
            kind = map_field_type(decl.type.name)
            model_name = decl.type.name if kind is FieldKind.CUSTOM else ""
            directives = [
                directive
                for raw in decl.directives
                if (directive := map_directive(raw.name, [_arg_text(a) for a in raw.args]))
                is not None
            ]
            fields.append(
                IRField(decl.name, FieldType(kind, model_name, directives), decl.type.is_array)
            )
        models.append(IRModel(model.name, fields))
    return IR(ast.database_driver, ast.database_url, models)


def _field_lines(field: IRField) -> list[str]:
    type_str = str(field.type) + ("[]" if field.is_array else "")
    lines = [
        f"│  {field.name:<15} : {type_str:<10} │",
        f"│    ├─ MySQL    : {field.type.mysql_type():<15} │",
        f"│    ├─ Postgres : {field.type.postgres_type():<15} │",
        f"│    └─ SQLite   : {field.type.sqlite_type():<15} │",
    ]
    directives = field.type.directives
    if directives:
        lines.append("│    ┌─ Directives:            │")
        for position, directive in enumerate(directives, start=1):
            prefix = "│    └─" if position == len(directives) else "│    ├─"
            label = str(directive.kind)
            if directive.args:
                lines.append(f"{prefix} @{label:<10}({', '.join(directive.args)}) │")
            else:
                lines.append(f"{prefix} @{label:<10}       │")
    lines.append("│                               │")
    return lines


def format_ir(ir_data: IR) -> str:
    """Render the schema with each field's column type per database."""
    lines = [
        "=============== IR Models ===============",
        f"Database Driver: {ir_data.database_driver}",
        f"Database URL: {ir_data.database_url}",
    ]
    for model in ir_data.models:
        lines.append("")
        lines.append(f"┌─── Model: {model.name} ───┐")
        if not model.fields:
            lines.append("│  No fields defined                │")
        for field in model.fields:
            lines.extend(_field_lines(field))
        lines.append("└───────────────────────────────┘")
    lines.append("")
    lines.append("=========== End of IR Models ===========")
    return "\n".join(lines) + "\n"


def print_ir(ir_data: IR) -> None:
    """Print the rendering produced by :func:`format_ir`."""
    print(format_ir(ir_data), end="")