"""Value arithmetic rules.

Int with Int stays integral, any Float operand promotes the other side,
and Strings or Void never take part in arithmetic.
"""

import math

import pytest
from minilang.types import IntVal, FloatVal, StrVal, VOID, apply_arith, to_string, type_name


@pytest.mark.parametrize('op,a,b,expected', [
    ('+', 2, 3, 5),
    ('-', 2, 3, -1),
    ('*', 4, -3, -12),
    ('/', 7, 2, 3),
    ('/', -7, 2, -3),
    ('/', 7, -2, -3),
    ('%', 7, 3, 1),
    ('%', -7, 3, -1),
    ('%', 7, -3, 1),
])
def test_int_int(op, a, b, expected):
    assert apply_arith(op, IntVal(a), IntVal(b)) == IntVal(expected)


def test_int_arithmetic_does_not_overflow():
    big = 2 ** 63 - 1
    assert apply_arith('+', IntVal(big), IntVal(1)) == IntVal(2 ** 63)


def test_float_float():
    assert apply_arith('+', FloatVal(0.5), FloatVal(0.25)) == FloatVal(0.75)
    assert apply_arith('/', FloatVal(7.0), FloatVal(2.0)) == FloatVal(3.5)
    assert apply_arith('%', FloatVal(-7.5), FloatVal(2.0)) == FloatVal(-1.5)


def test_int_float_promotes_to_float():
    assert apply_arith('+', IntVal(1), FloatVal(0.5)) == FloatVal(1.5)
    assert apply_arith('*', FloatVal(2.5), IntVal(2)) == FloatVal(5.0)
    assert apply_arith('/', IntVal(7), FloatVal(2.0)) == FloatVal(3.5)


def test_promoted_result_is_float_even_when_whole():
    result = apply_arith('-', FloatVal(3.0), IntVal(1))
    assert isinstance(result, FloatVal)
    assert result.value == 2.0


@pytest.mark.parametrize('op', ['/', '%'])
def test_int_division_by_zero(op):
    with pytest.raises(ZeroDivisionError):
        apply_arith(op, IntVal(1), IntVal(0))


def test_float_division_by_zero_follows_ieee():
    assert apply_arith('/', FloatVal(1.0), FloatVal(0.0)) == FloatVal(math.inf)
    assert apply_arith('/', FloatVal(-1.0), FloatVal(0.0)) == FloatVal(-math.inf)
    assert apply_arith('/', IntVal(1), FloatVal(-0.0)) == FloatVal(-math.inf)
    assert math.isnan(apply_arith('/', FloatVal(0.0), FloatVal(0.0)).value)
    assert math.isnan(apply_arith('%', FloatVal(1.0), IntVal(0)).value)
    assert math.isnan(apply_arith('%', FloatVal(math.inf), FloatVal(2.0)).value)


@pytest.mark.parametrize('a,b', [
    (StrVal('a'), StrVal('b')),
    (StrVal('a'), IntVal(1)),
    (FloatVal(1.0), StrVal('x')),
    (VOID, IntVal(1)),
    (IntVal(1), VOID),
])
@pytest.mark.parametrize('op', ['+', '-', '*', '/', '%'])
def test_non_numeric_operands(op, a, b):
    with pytest.raises(TypeError):
        apply_arith(op, a, b)


def test_type_names_and_strings():
    assert [type_name(v) for v in (IntVal(1), FloatVal(1.0), StrVal(''), VOID)] == ['Int', 'Float', 'String', 'Void']
    assert to_string(IntVal(-3)) == '-3'
    assert to_string(FloatVal(12.0)) == '12.0'
    assert to_string(StrVal('hi')) == 'hi'
    assert to_string(VOID) == 'void'
