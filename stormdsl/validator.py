"""Validation of a whole schema."""

from __future__ import annotations

from .arg_rules import validate_database_config
from .errors import ValidationError
from .ir import IR
from .model_rules import validate_model
from .relations import validate_relational_consistency


def collect_ir_errors(ir_data: IR) -> list[str]:
    """Every validation problem in the schema, in the order found."""
    problems: list[str] = []
    try:
        validate_database_config(ir_data)
    except ValidationError as error:
        problems.extend(error.errors)

    model_names: set[str] = set()
    for model in ir_data.models:
        if model.name in model_names:
            problems.append(f"duplicate model name: {model.name}")
        else:
            model_names.add(model.name)

    for model in ir_data.models:
        try:
            validate_model(model, model_names)
        except ValidationError as error:
            problems.append(f"model {model.name}: {error}")

    try:
        validate_relational_consistency(ir_data.models)
    except ValidationError as error:
        problems.extend(error.errors)
    return problems


def validate_ir(ir_data: IR) -> None:
    """Raise :class:`ValidationError` listing every problem in the schema."""
    problems = collect_ir_errors(ir_data)
    if problems:
        raise ValidationError(problems)