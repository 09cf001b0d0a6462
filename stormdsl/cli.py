"""Command that parses, validates and prints a schema file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .errors import ValidationError
from .ir import print_ir, to_ir
from .parser import ParseError, parse_dsl
from .validator import validate_ir

DEFAULT_SCHEMA = "examples/schema.storm"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Parse and validate a schema file, then print its models."
    )
    parser.add_argument("schema", nargs="?", default=DEFAULT_SCHEMA, help="schema file")
    args = parser.parse_args(argv)

    try:
        ast = parse_dsl(args.schema)
    except (OSError, ParseError) as error:
        print(f"Failed to parse DSL: {error}", file=sys.stderr)
        return 1

    ir_data = to_ir(ast)
    try:
        validate_ir(ir_data)
    except ValidationError as error:
        print(f"Validation error: {error}", file=sys.stderr)
        return 1

    print_ir(ir_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())