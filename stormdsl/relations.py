"""Checks that relation directives between models agree with each other."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .directive import DirectiveKind
from .errors import ValidationError
from .ir import IRField, IRModel


def _warn(message: str) -> None:
    print(f"Warning: {message}")


def has_back_reference(
    model: IRModel, target_model_name: str, kind: DirectiveKind, should_be_array: bool
) -> bool:
    """Whether ``model`` has a ``kind`` field pointing at ``target_model_name``."""
    return any(
        field.has_directive(kind)
        and field.is_array == should_be_array
        and str(field.type) == target_model_name
        for field in model.fields
    )


def _missing(model: IRModel, field: IRField) -> str:
    return (
        f"model {model.name}: field {field.name} references "
        f"non-existent model {field.type}"
    )


def _has_many_problem(
    model: IRModel, field: IRField, lookup: Mapping[str, IRModel]
) -> str | None:
    if not field.is_array:
        return f"model {model.name}: field {field.name} with @hasMany must be an array"
    related = lookup.get(str(field.type))
    if related is None:
        return _missing(model, field)
    if not has_back_reference(
        related, model.name, DirectiveKind.BELONGS_TO, False
    ) and not has_back_reference(related, model.name, DirectiveKind.HAS_MANY, True):
        _warn(
            f"model {model.name}: field {field.name} has @hasMany but no corresponding "
            f"@belongsTo or @hasMany in model {related.name} (unidirectional relation)"
        )
    return None


def _belongs_to_problem(
    model: IRModel, field: IRField, lookup: Mapping[str, IRModel]
) -> str | None:
    if field.is_array:
        return f"model {model.name}: field {field.name} with @belongsTo cannot be an array"
    related = lookup.get(str(field.type))
    if related is None:
        return _missing(model, field)
    if has_back_reference(related, model.name, DirectiveKind.BELONGS_TO, False):
        return (
            f"circular @belongsTo relation detected: both model {model.name} and "
            f"model {related.name} have @belongsTo pointing to each other"
        )
    if not has_back_reference(
        related, model.name, DirectiveKind.HAS_MANY, True
    ) and not has_back_reference(related, model.name, DirectiveKind.HAS_ONE, False):
        _warn(
            f"model {model.name}: field {field.name} has @belongsTo but no corresponding "
            f"@hasMany or @hasOne in model {related.name} (unidirectional relation)"
        )
    return None


def _has_one_problem(
    model: IRModel, field: IRField, lookup: Mapping[str, IRModel]
) -> str | None:
    if field.is_array:
        return f"model {model.name}: field {field.name} with @hasOne cannot be an array"
    related = lookup.get(str(field.type))
    if related is None:
        return _missing(model, field)
    if not has_back_reference(related, model.name, DirectiveKind.BELONGS_TO, False):
        _warn(
            f"model {model.name}: field {field.name} has @hasOne but no corresponding "
            f"@belongsTo in model {related.name} (unidirectional relation)"
        )
    return None


_CHECKS = (
    (DirectiveKind.HAS_MANY, _has_many_problem),
    (DirectiveKind.BELONGS_TO, _belongs_to_problem),
    (DirectiveKind.HAS_ONE, _has_one_problem),
)


def _field_problem(
    model: IRModel, field: IRField, lookup: Mapping[str, IRModel]
) -> str | None:
    for kind, check in _CHECKS:
        if field.has_directive(kind):
            return check(model, field, lookup)
    return None


def validate_relational_consistency(models: Iterable[IRModel]) -> None:
    """Check every relation field; one-sided relations only print a warning."""
    models = list(models)
    lookup = {model.name: model for model in models}
    problems = [
        problem
        for model in models
        for field in model.fields
        if (problem := _field_problem(model, field, lookup)) is not None
    ]
    if problems:
        raise ValidationError(problems)