"""CLI entry point for the minilang evaluator.

Usage:
    python -m minilang [-v|-vv|-vvv] [--keep-going] [--max-exponent N] [--json] <ast_json_file>

Options:
  -v              Increase debug verbosity (can be repeated)
  --keep-going    Report a failing statement and continue with the next one
  --max-exponent  Largest exponent `^` will loop over (0 disables the limit)
  --json          Print each result as a JSON object instead of plain text

The program must already be parsed into AST JSON (see minilang.ast_json).
Each statement's value is printed on its own line. Debug information is
written to `debug.txt` in the current directory when verbosity is greater
than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from .ast_json import ast_from_obj, value_to_obj
from .errors import EvalError, format_error
from .evaluator import Evaluator, DEFAULT_MAX_EXPONENT
from .types import to_string


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="minilang expression evaluator")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--keep-going', action='store_true', help='skip failing statements instead of stopping')
    parser.add_argument('--max-exponent', type=int, default=DEFAULT_MAX_EXPONENT,
                        help='largest exponent accepted by ^ (0 or less disables the limit)')
    parser.add_argument('--json', action='store_true', help='print results as JSON objects')
    parser.add_argument('program', help='AST JSON file to evaluate')
    args = parser.parse_args(argv)

    ast_path = Path(args.program)
    if not ast_path.exists():
        print(f"Error: file {ast_path} not found", file=sys.stderr)
        sys.exit(1)
    try:
        with open(ast_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        program = ast_from_obj(data)
    except (KeyError, TypeError, ValueError) as e:
        # ValueError covers JSONDecodeError and UnicodeDecodeError
        print(f"Error: invalid AST in {ast_path}: {e}", file=sys.stderr)
        sys.exit(1)

    def show(index, value) -> bool:
        try:
            text = json.dumps(value_to_obj(value)) if args.json else to_string(value)
        except ValueError:
            print(f"Output error: {value!r} is too large to print (statement {index})", file=sys.stderr)
            return False
        print(text)
        return True

    max_exponent = args.max_exponent if args.max_exponent > 0 else None
    with Evaluator(debug_level=args.v, max_exponent=max_exponent) as evaluator:
        if args.keep_going:
            failed = False
            for outcome in evaluator.evaluate_each(program, keep_going=True):
                if outcome.ok:
                    failed = not show(outcome.index, outcome.value) or failed
                else:
                    failed = True
                    print(f"Runtime error: {format_error(outcome.error)}", file=sys.stderr)
            if failed:
                sys.exit(1)
            return
        try:
            results = evaluator.evaluate(program)
        except EvalError as e:
            print(f"Runtime error: {e}", file=sys.stderr)
            sys.exit(1)
    for index, value in enumerate(results):
        if not show(index, value):
            sys.exit(1)

if __name__ == '__main__':
    main()
