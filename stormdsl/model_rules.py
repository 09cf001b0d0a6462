"""Checks on a single model and its fields."""

from __future__ import annotations

import re
from collections.abc import Collection

from .directive import DirectiveKind
from .errors import ValidationError
from .field_rules import validate_field
from .ir import IRModel

_IDENTIFIER_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9_]*")


def validate_model(model: IRModel, model_names: Collection[str]) -> None:
    """Check a model's name, its fields, and that it has at most one ``@id``."""
    problems: list[str] = []
    if not model.name:
        problems.append("model name cannot be empty")
    if not _IDENTIFIER_RE.fullmatch(model.name):
        problems.append(f"invalid model name: {model.name}")
    if not model.fields:
        problems.append("model must have at least one field")

    seen: set[str] = set()
    id_count = 0
    for field in model.fields:
        if field.name in seen:
            problems.append(f"duplicate field name: {field.name}")
        else:
            seen.add(field.name)
        if field.has_directive(DirectiveKind.ID):
            id_count += 1
        try:
            validate_field(field, model, model_names)
        except ValidationError as error:
            problems.append(f"field {field.name}: {error}")

    if id_count > 1:
        problems.append("model must have at most one @id directive field")

    if problems:
        raise ValidationError(problems)