"""JSON serialization/deserialization for minilang AST and values.

This module converts between minilang AST dataclasses and plain Python
dict/list structures suitable for JSON encoding. An external parser can
emit a program in this shape and hand it to the command line entry
point. Evaluation results go the other way through `value_to_obj`.
"""

from __future__ import annotations

import math
from typing import Any, Dict

from .ast import Program, Assign, ExprStmt, BinaryOp, Literal, Ident
from .types import Value, VoidVal, IntVal, FloatVal, StrVal

LITERAL_TYPES = ('Int', 'Float', 'String')


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, Assign):
        return {"type": "Assign", "target": node.target, "value": ast_to_obj(node.value)}
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, BinaryOp):
        return {"type": "BinaryOp", "op": node.op, "left": ast_to_obj(node.left), "right": ast_to_obj(node.right)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": node.value, "literal_type": node.literal_type}
    if isinstance(node, Ident):
        return {"type": "Ident", "name": node.name}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def literal_value_from_obj(value: Any, literal_type: str) -> Any:
    """Check a literal's JSON value against its declared type.

    bool is rejected everywhere even though it subclasses int. A Float
    literal also accepts a JSON integer, since 2.0 may be written as 2.
    """
    if isinstance(value, bool):
        raise ValueError(f"{literal_type} literal cannot hold a boolean")
    if literal_type == 'Int':
        if not isinstance(value, int):
            raise ValueError(f"Int literal must hold an integer, got {value!r}")
        return value
    if literal_type == 'Float':
        if not isinstance(value, (int, float)):
            raise ValueError(f"Float literal must hold a number, got {value!r}")
        try:
            return float(value)
        except OverflowError:
            raise ValueError("Float literal out of range")
    if not isinstance(value, str):
        raise ValueError(f"String literal must hold a string, got {value!r}")
    return value


def ast_from_obj(obj: Any) -> Any:
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    if t == "Program":
        return Program(body=[ast_from_obj(n) for n in obj["body"]])
    if t == "Assign":
        return Assign(target=obj["target"], value=ast_from_obj(obj["value"]))
    if t == "ExprStmt":
        return ExprStmt(expr=ast_from_obj(obj["expr"]))
    if t == "BinaryOp":
        return BinaryOp(op=obj["op"], left=ast_from_obj(obj["left"]), right=ast_from_obj(obj["right"]))
    if t == "Literal":
        literal_type = obj["literal_type"]
        if literal_type not in LITERAL_TYPES:
            raise ValueError(f"Unknown literal type: {literal_type}")
        return Literal(value=literal_value_from_obj(obj["value"], literal_type), literal_type=literal_type)
    if t == "Ident":
        return Ident(name=obj["name"])

    raise ValueError(f"Unknown AST node type: {t}")


def value_to_obj(value: Value) -> Dict[str, Any]:
    if isinstance(value, VoidVal):
        return {"type": "Void"}
    if isinstance(value, IntVal):
        return {"type": "Int", "value": value.value}
    if isinstance(value, FloatVal):
        v = value.value
        if math.isnan(v):
            return {"type": "Float", "value": "nan"}
        if math.isinf(v):
            return {"type": "Float", "value": "inf" if v > 0 else "-inf"}
        return {"type": "Float", "value": v}
    if isinstance(value, StrVal):
        return {"type": "String", "value": value.value}

    raise TypeError(f"Unsupported value for serialization: {type(value).__name__}")
