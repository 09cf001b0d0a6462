"""Lexer and parser for the schema language."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from typing import NamedTuple, Union

ArgValue = Union[str, int, float]

_RULES = [
    ("Comment", re.compile(r"//.*|/\*(?:.|\n)*?\*/", re.ASCII)),
    ("Whitespace", re.compile(r"[\t\n\f\r ]+")),
    ("String", re.compile(r'"[^"]*"')),
    ("Float", re.compile(r"[-+]?\d*\.\d+(?:[eE][-+]?\d+)?", re.ASCII)),
    ("Int", re.compile(r"[-+]?\d+", re.ASCII)),
    ("Ident", re.compile(r"[a-zA-Z_]\w*", re.ASCII)),
    ("Punct", re.compile(r"[@=(){}\[\],]")),
]
_ELIDED = {"Comment", "Whitespace"}
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ParseError(ValueError):
    """Raised when schema text cannot be tokenized or parsed."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class _Token(NamedTuple):
    kind: str
    value: str
    line: int
    column: int


@dataclass(frozen=True)
class TypeRef:
    """A field's declared type name and whether it is an array."""

    name: str
    is_array: bool = False


@dataclass(frozen=True)
class DirectiveDecl:
    """A directive as written, with arguments as parsed values."""

    name: str
    args: tuple[ArgValue, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def __str__(self) -> str:
        if not self.args:
            return f"@{self.name}"
        return f"@{self.name}({', '.join(str(arg) for arg in self.args)})"


@dataclass(frozen=True)
class FieldDecl:
    """A field declaration inside a model."""

    name: str
    type: TypeRef
    directives: tuple[DirectiveDecl, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "directives", tuple(self.directives))


@dataclass(frozen=True)
class ModelDecl:
    """A model block."""

    name: str
    fields: tuple[FieldDecl, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", tuple(self.fields))


@dataclass(frozen=True)
class DSLFile:
    """A whole schema: database settings and models."""

    database_driver: str
    database_url: str
    models: tuple[ModelDecl, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "models", tuple(self.models))


def tokenize(text: str) -> list[_Token]:
    """Split ``text`` into tokens, dropping comments and whitespace."""
    tokens: list[_Token] = []
    pos = 0
    line = 1
    line_start = 0
    while pos < len(text):
        for kind, pattern in _RULES:
            match = pattern.match(text, pos)
            if match and match.end() > pos:
                break
        else:
            snippet = text[pos:pos + 10]
            raise ParseError(
                f"invalid input text {snippet!r}", line, pos - line_start + 1
            )
        value = match.group()
        if kind not in _ELIDED:
            tokens.append(_Token(kind, value, line, pos - line_start + 1))
        newlines = value.count("\n")
        if newlines:
            line += newlines
            line_start = pos + value.rindex("\n") + 1
        pos = match.end()
    return tokens


def _to_int(token: _Token) -> int:
    text = token.value
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    try:
        if len(digits) > 1 and digits.startswith("0"):
            value = sign * int(digits[1:], 8)
        else:
            value = sign * int(digits)
    except ValueError:
        raise ParseError(
            f"invalid integer {text!r}", token.line, token.column
        ) from None
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ParseError(f"integer out of range {text!r}", token.line, token.column)
    return value


def _to_float(token: _Token) -> float:
    value = float(token.value)
    if math.isinf(value):
        raise ParseError(f"float out of range {token.value!r}", token.line, token.column)
    return value


class _Parser:
    def __init__(self, tokens: list[_Token]) -> None:
        if tokens:
            last = tokens[-1]
            end = _Token("EOF", "", last.line, last.column + len(last.value))
        else:
            end = _Token("EOF", "", 1, 1)
        self._tokens = [*tokens, end]
        self._pos = 0

    def _peek(self) -> _Token:
        return self._tokens[self._pos]

    def _advance(self) -> _Token:
        token = self._peek()
        if token.kind != "EOF":
            self._pos += 1
        return token

    @staticmethod
    def _fail(token: _Token, expected: str) -> ParseError:
        found = "end of input" if token.kind == "EOF" else f"token {token.value!r}"
        return ParseError(f"unexpected {found} (expected {expected})", token.line, token.column)

    def _at(self, literal: str) -> bool:
        token = self._peek()
        return token.kind != "EOF" and token.value == literal

    def _literal(self, literal: str) -> _Token:
        if not self._at(literal):
            raise self._fail(self._peek(), f'"{literal}"')
        return self._advance()

    def _kind(self, kind: str) -> _Token:
        if self._peek().kind != kind:
            raise self._fail(self._peek(), f"<{kind.lower()}>")
        return self._advance()

    def parse_file(self) -> DSLFile:
        settings = []
        for key in ("driver", "url"):
            self._literal("database")
            self._literal(key)
            self._literal("=")
            settings.append(self._kind("String").value)
        models = []
        while self._at("model"):
            models.append(self._model())
        if self._peek().kind != "EOF":
            raise self._fail(self._peek(), '"model" or end of input')
        return DSLFile(settings[0], settings[1], models)

    def _model(self) -> ModelDecl:
        self._literal("model")
        name = self._kind("Ident").value
        self._literal("{")
        fields = []
        while self._peek().kind == "Ident":
            fields.append(self._field())
        self._literal("}")
        return ModelDecl(name, fields)

    def _field(self) -> FieldDecl:
        name = self._kind("Ident").value
        type_name = self._kind("Ident").value
        is_array = False
        if self._at("["):
            self._advance()
            self._literal("]")
            is_array = True
        directives = []
        while self._at("@"):
            directives.append(self._directive())
        return FieldDecl(name, TypeRef(type_name, is_array), directives)

    def _directive(self) -> DirectiveDecl:
        self._literal("@")
        name = self._kind("Ident").value
        args: list[ArgValue] = []
        if self._at("("):
            self._advance()
            args.append(self._arg())
            while self._at(","):
                self._advance()
                args.append(self._arg())
            self._literal(")")
        return DirectiveDecl(name, args)

    def _arg(self) -> ArgValue:
        token = self._peek()
        if token.kind in ("String", "Ident"):
            return self._advance().value
        if token.kind == "Int":
            return _to_int(self._advance())
        if token.kind == "Float":
            return _to_float(self._advance())
        raise self._fail(token, "<string> | <ident> | <int> | <float>")


def parse_string(text: str) -> DSLFile:
    """Parse schema text. String values keep their quotation marks."""
    return _Parser(tokenize(text)).parse_file()


def parse_dsl(path: str | os.PathLike[str]) -> DSLFile:
    """Read and parse a schema file."""
    with open(path, encoding="utf-8") as handle:
        return parse_string(handle.read())


def debug_print(ast: DSLFile) -> None:
    """Print the parsed schema in a plain outline."""
    print(f"Database Driver: {ast.database_driver}")
    print(f"Database URL: {ast.database_url}")
    for model in ast.models:
        print(f"Model: {model.name}")
        for field in model.fields:
            type_str = field.type.name + ("[]" if field.type.is_array else "")
            line = f"  - {field.name}: {type_str}"
            if field.directives:
                rendered = " ".join(str(d) for d in field.directives)
                line += f" (directives: [{rendered}])"
            print(line)