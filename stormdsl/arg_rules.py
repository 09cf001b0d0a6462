"""Checks on database settings and on directive arguments."""

from __future__ import annotations

import math
import re

from .directive import Directive, DirectiveKind
from .errors import ValidationError
from .ir import IR

_SUPPORTED_DRIVERS = frozenset({"mysql", "postgres", "postgresql", "sqlite", "sqlite3"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DEC_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_NO_ARGS = frozenset(
    {
        DirectiveKind.HAS_MANY,
        DirectiveKind.BELONGS_TO,
        DirectiveKind.ID,
        DirectiveKind.AUTO,
        DirectiveKind.UNIQUE,
        DirectiveKind.INDEX,
        DirectiveKind.UPDATED_AT,
        DirectiveKind.CREATED_AT,
        DirectiveKind.NULLABLE,
        DirectiveKind.DEFAULT_NOW,
        DirectiveKind.HAS_ONE,
    }
)


def _atoi(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    return value if _INT64_MIN <= value <= _INT64_MAX else None


def _is_number(text: str) -> bool:
    if _SPECIAL_FLOAT_RE.fullmatch(text):
        return True
    if _DEC_FLOAT_RE.fullmatch(text):
        return not math.isinf(float(text))
    if _HEX_FLOAT_RE.fullmatch(text):
        try:
            return not math.isinf(float.fromhex(text))
        except OverflowError:
            return False
    return False


def validate_database_config(ir_data: IR) -> None:
    """Check the driver is supported and the URL looks like one."""
    problems = []
    if not ir_data.database_driver:
        problems.append("database driver is required")
    else:
        driver = ir_data.database_driver.strip("\"'")
        if driver not in _SUPPORTED_DRIVERS:
            problems.append(f"unsupported database driver: {driver}")
    if not ir_data.database_url:
        problems.append("database URL is required")
    elif "://" not in ir_data.database_url:
        problems.append(f"invalid database URL format: {ir_data.database_url}")
    if problems:
        raise ValidationError(problems)


def _precision_problem(args: tuple[str, ...]) -> str | None:
    if len(args) != 2:
        return "@precision directive requires exactly two integer arguments"
    precision, scale = _atoi(args[0]), _atoi(args[1])
    if precision is None or scale is None:
        return "@precision directive arguments must be integers"
    if precision <= 0:
        return "@precision first argument (precision) must be positive"
    if not 0 <= scale <= precision:
        return "@precision second argument (scale) must be between 0 and precision"
    return None


def _args_problem(directive: Directive) -> str | None:
    kind, args = directive.kind, directive.args
    if kind is DirectiveKind.LENGTH:
        if len(args) != 1:
            return "@length directive requires exactly one integer argument"
        if _atoi(args[0]) is None:
            return "@length directive argument must be an integer"
        return None
    if kind is DirectiveKind.PRECISION:
        return _precision_problem(args)
    if kind in (DirectiveKind.MIN, DirectiveKind.MAX):
        if len(args) != 1:
            return f"@{kind} directive requires exactly one numeric argument"
        if not _is_number(args[0]):
            return f"@{kind} directive argument must be a number"
        return None
    if kind is DirectiveKind.DEFAULT:
        return None if len(args) == 1 else "@default directive requires exactly one argument"
    if kind in _NO_ARGS:
        return f"@{kind} directive does not accept arguments" if args else None
    if kind is DirectiveKind.ENUM:
        return None if args else "@enum directive requires at least one argument"
    if kind is DirectiveKind.MAP:
        return None if len(args) == 1 else "@map directive requires exactly one argument"
    if kind is DirectiveKind.RELATION:
        return "@relation directive accepts at most two arguments" if len(args) > 2 else None
    return f"unknown directive: @{kind}"


def validate_directive_args(directive: Directive) -> None:
    """Check that a directive has the number and kind of arguments it takes."""
    problem = _args_problem(directive)
    if problem is not None:
        raise ValidationError([problem])