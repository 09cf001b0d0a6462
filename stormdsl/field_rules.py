"""Checks on a single field: its name, type, directives and relations."""

from __future__ import annotations

import re
from collections.abc import Collection

from .arg_rules import validate_directive_args
from .directive import Directive, DirectiveKind
from .errors import ValidationError
from .fields import FieldKind
from .ir import IRField, IRModel

_IDENTIFIER_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")
_RESERVED_KEYWORDS = frozenset({"type", "model", "select", "package"})

_STRING_KINDS = frozenset({FieldKind.STRING, FieldKind.CHAR, FieldKind.TEXT})
_ENUM_KINDS = frozenset({FieldKind.STRING, FieldKind.TEXT})
_PRECISION_KINDS = frozenset({FieldKind.DECIMAL, FieldKind.FLOAT})
_NUMERIC_KINDS = frozenset(
    {FieldKind.INT, FieldKind.FLOAT, FieldKind.DECIMAL, FieldKind.BIG_INT}
)
_DATE_TIME_KINDS = frozenset(
    {FieldKind.DATE_TIME, FieldKind.DATE, FieldKind.TIME, FieldKind.TIMESTAMP}
)
_AUDIT_KINDS = frozenset({FieldKind.DATE_TIME, FieldKind.TIMESTAMP})


def _compatibility_problem(field: IRField, directive: Directive) -> str | None:
    kind = directive.kind
    field_kind = field.type.kind
    if kind is DirectiveKind.LENGTH and field_kind not in _STRING_KINDS:
        return "@length directive can only be used with string types"
    if kind is DirectiveKind.PRECISION and field_kind not in _PRECISION_KINDS:
        return "@precision directive can only be used with decimal or float types"
    if kind in (DirectiveKind.MIN, DirectiveKind.MAX) and field_kind not in _NUMERIC_KINDS:
        return f"@{kind} directive can only be used with numeric types"
    if kind is DirectiveKind.HAS_MANY and not field.is_array:
        return "@hasMany directive can only be used with array fields"
    if kind is DirectiveKind.BELONGS_TO and field.is_array:
        return "@belongsTo directive cannot be used with array fields"
    if kind is DirectiveKind.ID and field_kind is not FieldKind.INT:
        return "@id directive is recommended to be used with Int fields"
    if kind is DirectiveKind.DEFAULT_NOW and field_kind not in _DATE_TIME_KINDS:
        return "@defaultNow directive can only be used with date/time types"
    if (
        kind in (DirectiveKind.UPDATED_AT, DirectiveKind.CREATED_AT)
        and field_kind not in _AUDIT_KINDS
    ):
        return f"@{kind} directive can only be used with DateTime or Timestamp types"
    if kind is DirectiveKind.HAS_ONE and field.is_array:
        return "@hasOne directive cannot be used with array fields"
    if kind is DirectiveKind.ENUM and field_kind not in _ENUM_KINDS:
        return "@enum directive can only be used with string types"
    return None


def validate_directive_compatibility(field: IRField, directive: Directive) -> None:
    """Check that ``directive`` suits the field's type and array-ness."""
    problem = _compatibility_problem(field, directive)
    if problem is not None:
        raise ValidationError([problem])


def validate_directives(field: IRField) -> None:
    """Check every directive of the field: its arguments, then its fit."""
    problems: list[ValidationError] = []
    for directive in field.type.directives:
        try:
            validate_directive_args(directive)
        except ValidationError as error:
            problems.append(error)
        try:
            validate_directive_compatibility(field, directive)
        except ValidationError as error:
            problems.append(error)
    if problems:
        raise ValidationError(problems)


def validate_field_type(field: IRField) -> None:
    """Check that the field's kind is a known field kind."""
    kind = field.type.kind
    if not isinstance(kind, FieldKind):
        raise ValidationError([f"unknown field type: {kind}"])


def _id_problems(field: IRField) -> list[str]:
    problems = []
    if field.type.kind is not FieldKind.INT:
        problems.append("@id field must be of type Int")
    if field.is_array:
        problems.append("@id field cannot be an array")
    if field.has_directive(DirectiveKind.HAS_MANY):
        problems.append("@id field cannot be combined with @hasMany")
    if field.has_directive(DirectiveKind.BELONGS_TO):
        problems.append("@id field cannot be combined with @belongsTo")
    return problems


def validate_field(field: IRField, model: IRModel, model_names: Collection[str]) -> None:
    """Check a field of ``model``; ``model_names`` holds every model's name."""
    problems: list[str | ValidationError] = []
    if not field.name:
        problems.append("field name cannot be empty")
    if not _IDENTIFIER_RE.fullmatch(field.name):
        problems.append(f"invalid field name: {field.name}")
    if field.name in _RESERVED_KEYWORDS:
        problems.append(f"field name '{field.name}' is reserved")

    for check in (validate_field_type, validate_directives):
        try:
            check(field)
        except ValidationError as error:
            problems.append(error)

    related = str(field.type)
    if related in model_names and related != model.name:
        has_single = field.has_directive(DirectiveKind.BELONGS_TO) or field.has_directive(
            DirectiveKind.HAS_ONE
        )
        if not field.is_array and not has_single:
            problems.append("relation field must have @belongsTo or @hasOne directive")
        if field.is_array and not field.has_directive(DirectiveKind.HAS_MANY):
            problems.append("array relation field must have @hasMany directive")

    is_id = field.has_directive(DirectiveKind.ID)
    if is_id:
        problems.extend(_id_problems(field))
    if field.has_directive(DirectiveKind.AUTO) and not is_id:
        problems.append("@auto can only be used with @id fields")

    if problems:
        raise ValidationError(problems)