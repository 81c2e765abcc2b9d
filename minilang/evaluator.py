"""Tree-walking evaluator for minilang.

An `Evaluator` owns one environment and reduces a `Program` to a list of
values, one per top-level statement, in source order. Assignments are
visible to every later statement and to later calls on the same
instance.

Any error aborts `evaluate` by raising `EvalError`; the error record
names the statement that failed. `evaluate_each` reports per-statement
outcomes instead, so a caller can stop at the first failure or skip
failed statements and carry on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .ast import Program, Assign, ExprStmt, BinaryOp, Literal, Ident, Node
from .environment import Environment
from .errors import (
    EvalError, format_error, UNSUPPORTED_OPERATOR, TYPE_MISMATCH, ARITHMETIC_ERROR, RESOURCE_LIMIT,
)
from .types import (
    ErrorVal, Value, IntVal, FloatVal, StrVal,
    apply_arith, exponent_of, power,
)

ARITH_OPS = ('+', '-', '*', '/', '%')
DEFAULT_MAX_EXPONENT = 10_000


@dataclass
class Outcome:
    """Result of one top-level statement: a value or an error, never both."""
    index: int
    value: Optional[Value] = None
    error: Optional[ErrorVal] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Evaluator:
    """Evaluates minilang programs against a persistent environment."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = 'debug.txt',
                 max_exponent: Optional[int] = DEFAULT_MAX_EXPONENT):
        self.env = Environment()
        self.debug_level = debug_level
        self.max_exponent = max_exponent
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 and debug_file else None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def __enter__(self) -> 'Evaluator':
        return self

    def __exit__(self, *exc_info):
        self.close()

    # Public API
    def evaluate(self, program: Program) -> List[Value]:
        results: List[Value] = []
        for index, stmt in enumerate(program.body):
            results.append(self._run_statement(index, stmt))
        return results

    def evaluate_each(self, program: Program, keep_going: bool = False) -> List[Outcome]:
        outcomes: List[Outcome] = []
        for index, stmt in enumerate(program.body):
            try:
                value = self._run_statement(index, stmt)
            except EvalError as ex:
                outcomes.append(Outcome(index, error=ex.err))
                if not keep_going:
                    break
                continue
            outcomes.append(Outcome(index, value=value))
        return outcomes

    def bindings(self) -> Dict[str, Value]:
        return self.env.snapshot()

    def _run_statement(self, index: int, stmt: Node) -> Value:
        try:
            value = self.execute(stmt)
        except EvalError as ex:
            if ex.err.statement_index is None:
                ex.err.statement_index = index
                # refresh the message so str(ex) names the statement
                ex.args = (format_error(ex.err),)
            if self.debug_level >= 1:
                self.debug(f"[{index}] error {ex.err.kind}: {ex.err.message}")
            raise
        if self.debug_level >= 1:
            self.debug(f"[{index}] -> {value!r}")
        return value

    def execute(self, node: Node) -> Value:
        if isinstance(node, Assign):
            value = self.evaluate_expr(node.value)
            self.env.set(node.target, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.target} = {value!r}")
            return value
        if isinstance(node, ExprStmt):
            return self.evaluate_expr(node.expr)
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate_expr(self, node: Node) -> Value:
        if isinstance(node, Ident):
            return self.env.get(node.name)
        if isinstance(node, Literal):
            return self.evaluate_literal(node)
        if isinstance(node, BinaryOp):
            left = self.evaluate_expr(node.left)
            right = self.evaluate_expr(node.right)
            result = self.apply_binary_op(node.op, left, right)
            if self.debug_level >= 3:
                self.debug(f"{left!r} {node.op} {right!r} -> {result!r}")
            return result
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def evaluate_literal(self, node: Literal) -> Value:
        kind = node.literal_type
        if kind == 'Int':
            return IntVal(node.value)
        if kind == 'Float':
            return FloatVal(node.value)
        if kind == 'String':
            return StrVal(node.value)
        raise EvalError(ErrorVal(TYPE_MISMATCH, f'unknown literal type {kind}'))

    def apply_binary_op(self, op: str, a: Value, b: Value) -> Value:
        if op in ARITH_OPS:
            try:
                return apply_arith(op, a, b)
            except TypeError as e:
                raise EvalError(ErrorVal(TYPE_MISMATCH, str(e)))
            except ZeroDivisionError as e:
                raise EvalError(ErrorVal(ARITHMETIC_ERROR, str(e)))
            except OverflowError:
                # an Int too large to promote to Float
                raise EvalError(ErrorVal(
                    ARITHMETIC_ERROR, f'integer too large to convert to Float in {op}'))
        if op == '^':
            try:
                exponent = exponent_of(b)
            except TypeError as e:
                raise EvalError(ErrorVal(TYPE_MISMATCH, str(e)))
            if self.max_exponent is not None and exponent > self.max_exponent:
                raise EvalError(ErrorVal(
                    RESOURCE_LIMIT, f'exponent {exponent} exceeds limit {self.max_exponent}'))
            try:
                return power(a, exponent)
            except TypeError as e:
                raise EvalError(ErrorVal(TYPE_MISMATCH, str(e)))
        raise EvalError(ErrorVal(UNSUPPORTED_OPERATOR, f'unexpected operator {op}'))


def evaluate_program(program: Program, debug_level: int = 0) -> List[Value]:
    """Convenience function to evaluate a program with a fresh evaluator."""
    with Evaluator(debug_level=debug_level) as evaluator:
        return evaluator.evaluate(program)
