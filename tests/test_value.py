import math
from typing import Callable

import pytest

from filecalc.arithmetic import CalcRuntimeError, DivisionByZero, add, divide, multiply, negate, power, real_pow, subtract
from filecalc.utils import INT64_MAX, INT64_MIN, wrap_int64
from filecalc.value import Float, Integer, Value, is_zero


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param(Integer(0), True),
        pytest.param(Integer(1), False),
        pytest.param(Float(0.0), True),
        pytest.param(Float(-0.0), True),
        pytest.param(Float(1e-300), False),
    ],
)
def test_is_zero(value: Value, expected: bool) -> None:
    assert is_zero(value) is expected


@pytest.mark.parametrize(
    "n, expected",
    [
        pytest.param(0, 0),
        pytest.param(INT64_MAX, INT64_MAX),
        pytest.param(INT64_MAX + 1, INT64_MIN),
        pytest.param(INT64_MIN - 1, INT64_MAX),
        pytest.param(2**64 + 5, 5),
    ],
)
def test_wrap_int64(n: int, expected: int) -> None:
    assert wrap_int64(n) == expected
    assert Integer(n).v == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        pytest.param(Integer(2), Integer(3), Integer(5)),
        pytest.param(Integer(2), Float(0.5), Float(2.5)),
        pytest.param(Float(0.5), Integer(2), Float(2.5)),
        pytest.param(Integer(INT64_MAX), Integer(1), Integer(INT64_MIN)),
    ],
)
def test_add(a: Value, b: Value, expected: Value) -> None:
    assert add(a, b) == expected


def test_subtract_and_multiply_keep_integers() -> None:
    assert subtract(Integer(2), Integer(5)) == Integer(-3)
    assert multiply(Integer(-4), Integer(5)) == Integer(-20)
    assert multiply(Integer(2**62), Integer(4)) == Integer(0)
    assert multiply(Integer(3), Float(1.5)) == Float(4.5)


def test_divide_always_gives_float() -> None:
    assert divide(Integer(6), Integer(3)) == Float(2.0)
    assert divide(Integer(1), Integer(4)) == Float(0.25)
    assert divide(Float(1.0), Integer(-2)) == Float(-0.5)


@pytest.mark.parametrize("divisor", [Integer(0), Float(0.0), Float(-0.0)])
def test_divide_by_zero(divisor: Value) -> None:
    with pytest.raises(DivisionByZero) as exc_info:
        divide(Integer(1), divisor)
    assert str(exc_info.value) == "Division by zero"


def test_power_always_gives_float() -> None:
    assert power(Integer(2), Integer(10)) == Float(1024.0)
    assert power(Float(4.0), Float(0.5)) == Float(2.0)
    assert power(Integer(0), Integer(0)) == Float(1.0)


@pytest.mark.parametrize(
    "base, exp, expected",
    [
        pytest.param(0.0, -1.0, math.inf),
        pytest.param(-0.0, -1.0, -math.inf),
        pytest.param(-0.0, -2.0, math.inf),
        pytest.param(10.0, 400.0, math.inf),
        pytest.param(-10.0, 401.0, -math.inf),
        pytest.param(-10.0, 400.0, math.inf),
    ],
)
def test_real_pow_edge_cases(base: float, exp: float, expected: float) -> None:
    assert real_pow(base, exp) == expected


def test_real_pow_domain_error_gives_nan() -> None:
    assert math.isnan(real_pow(-8.0, 1 / 3))


def test_negate_keeps_kind() -> None:
    assert negate(Integer(5)) == Integer(-5)
    assert negate(Float(2.5)) == Float(-2.5)
    assert negate(Integer(INT64_MIN)) == Integer(INT64_MIN)


class Opaque(Value):
    @classmethod
    def type_name(cls) -> str:
        return "Opaque"

    def as_float(self) -> float:
        return 1.0


@pytest.mark.parametrize("operation", [add, subtract, multiply, divide, power])
def test_binary_operation_rejects_unknown_value_kind(operation: Callable[[Value, Value], Value]) -> None:
    with pytest.raises(CalcRuntimeError) as exc_info:
        operation(Integer(1), Opaque())
    assert str(exc_info.value).endswith("is not defined for Integer and Opaque")


def test_negate_rejects_unknown_value_kind() -> None:
    with pytest.raises(CalcRuntimeError, match="Negation is not defined for Opaque"):
        negate(Opaque())


def test_is_zero_rejects_unknown_value_kind() -> None:
    with pytest.raises(TypeError, match="Opaque"):
        is_zero(Opaque())
