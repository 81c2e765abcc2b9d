import json
import math

import pytest
from minilang.ast import Program, Assign, ExprStmt, BinaryOp, Literal, Ident
from minilang.ast_json import ast_to_obj, ast_from_obj, value_to_obj
from minilang.types import IntVal, FloatVal, StrVal, VOID


def test_program_survives_json():
    program = Program([
        Assign('x', Literal.floating(2.5)),
        ExprStmt(BinaryOp('^', Ident('x'), Literal.integer(2))),
        ExprStmt(Literal.string('ok')),
    ])
    text = json.dumps(ast_to_obj(program))
    assert ast_from_obj(json.loads(text)) == program


def test_float_literal_written_as_integer():
    obj = {"type": "Literal", "value": 2, "literal_type": "Float"}
    node = ast_from_obj(obj)
    assert node == Literal(2.0, 'Float')
    assert isinstance(node.value, float)


def test_unknown_node_type():
    with pytest.raises(ValueError):
        ast_from_obj({"type": "WhileStmt"})


def test_unknown_literal_type():
    with pytest.raises(ValueError):
        ast_from_obj({"type": "Literal", "value": 1, "literal_type": "Bool"})


def test_non_dict_rejected():
    with pytest.raises(TypeError):
        ast_from_obj([1, 2])


def test_value_to_obj():
    assert value_to_obj(IntVal(5)) == {"type": "Int", "value": 5}
    assert value_to_obj(FloatVal(0.5)) == {"type": "Float", "value": 0.5}
    assert value_to_obj(StrVal('s')) == {"type": "String", "value": "s"}
    assert value_to_obj(VOID) == {"type": "Void"}
    assert value_to_obj(FloatVal(-math.inf)) == {"type": "Float", "value": "-inf"}
    assert value_to_obj(FloatVal(math.nan)) == {"type": "Float", "value": "nan"}


@pytest.mark.parametrize('value,literal_type', [
    ("abc", "Int"),
    (True, "Int"),
    (2.5, "Int"),
    (False, "Float"),
    ("1.0", "Float"),
    (10 ** 400, "Float"),
    (3, "String"),
    (None, "String"),
])
def test_literal_value_must_match_type(value, literal_type):
    with pytest.raises(ValueError):
        ast_from_obj({"type": "Literal", "value": value, "literal_type": literal_type})


def test_literal_values_accepted():
    assert ast_from_obj({"type": "Literal", "value": -4, "literal_type": "Int"}) == Literal(-4, 'Int')
    assert ast_from_obj({"type": "Literal", "value": 0.25, "literal_type": "Float"}) == Literal(0.25, 'Float')
    assert ast_from_obj({"type": "Literal", "value": "", "literal_type": "String"}) == Literal('', 'String')
