"""Abstract Syntax Tree (AST) definitions for minilang.

The evaluator does not parse source text. A parser or builder living
outside this package constructs these nodes and hands a `Program` over.
A program is a flat list of statements; each statement is either an
assignment or a bare expression.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass
class Program(Node):
    body: List[Node]


@dataclass
class Assign(Node):
    target: str  # identifier name
    value: Node


@dataclass
class ExprStmt(Node):
    expr: Node


@dataclass
class BinaryOp(Node):
    op: str
    left: Node
    right: Node


@dataclass
class Literal(Node):
    value: Union[int, float, str]
    literal_type: str  # 'Int', 'Float', 'String'

    @staticmethod
    def integer(value: int) -> 'Literal':
        return Literal(value, 'Int')

    @staticmethod
    def floating(value: float) -> 'Literal':
        return Literal(value, 'Float')

    @staticmethod
    def string(value: str) -> 'Literal':
        return Literal(value, 'String')


@dataclass
class Ident(Node):
    name: str
